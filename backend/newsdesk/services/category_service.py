from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError

from newsdesk.extensions import db
from newsdesk.models.article import Article
from newsdesk.models.category import Category
from newsdesk.schemas.article_schemas import ArticleListSchema
from newsdesk.schemas.category_schemas import CategorySchema
from newsdesk.utils.errors import ApiError
from newsdesk.utils.responses import paginate_args, pagination_block
from newsdesk.utils.slugs import slugify

category_schema = CategorySchema()
category_list_schema = CategorySchema(many=True)
article_list_schema = ArticleListSchema(many=True)


def _published_counts(category_ids: list[int]) -> dict[int, int]:
    if not category_ids:
        return {}
    rows = (
        db.session.query(Article.category_id, func.count(Article.id))
        .filter(Article.category_id.in_(category_ids), Article.status == "PUBLISHED")
        .group_by(Article.category_id)
        .all()
    )
    return {cid: int(n) for cid, n in rows}


def _published_articles(category_id: int):
    return (
        Article.query
        .filter(Article.category_id == category_id, Article.status == "PUBLISHED")
        .order_by(Article.published_at.desc())
    )


def _get_or_404(category_id: int) -> Category:
    category = db.session.get(Category, category_id)
    if not category:
        raise ApiError("Category not found", 404)
    return category


def list_categories() -> list[dict]:
    categories = (
        Category.query
        .filter(Category.is_active.is_(True))
        .order_by(Category.sort_order.asc(), Category.name.asc())
        .all()
    )
    counts = _published_counts([c.id for c in categories])
    for c in categories:
        c.article_count = counts.get(c.id, 0)
    return category_list_schema.dump(categories)


def get_category(category_id: int) -> dict:
    category = _get_or_404(category_id)
    articles = _published_articles(category.id).limit(10).all()
    category.article_count = _published_counts([category.id]).get(category.id, 0)

    data = category_schema.dump(category)
    data["articles"] = article_list_schema.dump(articles)
    return data


def get_category_by_slug(slug: str, page=1, limit=12) -> dict:
    category = Category.query.filter_by(slug=(slug or "").strip().lower()).first()
    if not category:
        raise ApiError("Category not found", 404)

    page_int, limit_int = paginate_args(page, limit, default_limit=12, max_limit=100)
    query = _published_articles(category.id)
    total = query.count()
    articles = query.offset((page_int - 1) * limit_int).limit(limit_int).all()
    category.article_count = total

    data = category_schema.dump(category)
    data["articles"] = article_list_schema.dump(articles)
    return {
        "category": data,
        "pagination": pagination_block(page_int, limit_int, total),
    }


def _ensure_unique(name: str | None, slug: str | None, exclude_id: int | None = None) -> None:
    conditions = []
    if name:
        conditions.append(Category.name == name)
    if slug:
        conditions.append(Category.slug == slug)
    if not conditions:
        return
    query = Category.query.filter(or_(*conditions))
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first() is not None:
        raise ApiError("Category with this name or slug already exists", 400)


def create_category(data: dict) -> dict:
    name = data["name"].strip()
    slug = slugify(name)
    if not slug:
        raise ApiError("Category name must contain letters or digits", 400)
    _ensure_unique(name, slug)

    category = Category(
        name=name,
        slug=slug,
        description=data.get("description"),
        color=data.get("color"),
        icon=data.get("icon"),
        is_active=data.get("is_active", True),
        sort_order=data.get("sort_order", 0),
    )
    db.session.add(category)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ApiError("Category with this name or slug already exists", 400)

    category.article_count = 0
    return category_schema.dump(category)


def update_category(category_id: int, data: dict) -> dict:
    category = _get_or_404(category_id)

    if "name" in data:
        name = data["name"].strip()
        if name != category.name:
            slug = slugify(name)
            if not slug:
                raise ApiError("Category name must contain letters or digits", 400)
            _ensure_unique(name, slug, exclude_id=category.id)
            category.name = name
            category.slug = slug

    for key in ("description", "color", "icon", "is_active", "sort_order"):
        if key in data:
            setattr(category, key, data[key])

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ApiError("Category with this name or slug already exists", 400)

    category.article_count = _published_counts([category.id]).get(category.id, 0)
    return category_schema.dump(category)


def delete_category(category_id: int) -> None:
    category = _get_or_404(category_id)

    in_use = db.session.query(func.count(Article.id)).filter(Article.category_id == category.id).scalar() or 0
    if in_use:
        raise ApiError(
            "Cannot delete category with articles. Please reassign or delete articles first.",
            400,
        )

    db.session.delete(category)
    db.session.commit()
