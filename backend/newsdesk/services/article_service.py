from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from newsdesk.extensions import db
from newsdesk.models.article import Article
from newsdesk.models.author import Author
from newsdesk.models.category import Category
from newsdesk.schemas.article_schemas import (
    ArticleListSchema,
    ArticleDetailSchema,
    ArticleBreakingSchema,
    ArticleSidebarSchema,
)
from newsdesk.utils.errors import ApiError
from newsdesk.utils.responses import paginate_args, pagination_block
from newsdesk.utils.slugs import slugify

article_list_schema = ArticleListSchema(many=True)
article_detail_schema = ArticleDetailSchema()
article_breaking_schema = ArticleBreakingSchema(many=True)
article_sidebar_schema = ArticleSidebarSchema(many=True)

SIDEBAR_LIMIT = 5

# Columns copied verbatim from the validated payload
_SIMPLE_FIELDS = (
    "excerpt",
    "content",
    "featured_image",
    "is_featured",
    "is_breaking",
    "seo_title",
    "seo_description",
    "scheduled_for",
)


def _search_filter(term: str):
    s = f"%{term.strip()}%"
    return or_(Article.title.ilike(s), Article.excerpt.ilike(s), Article.content.ilike(s))


def _published():
    return Article.query.filter(Article.status == "PUBLISHED")


def _get_or_404(article_id: int) -> Article:
    article = db.session.get(Article, article_id)
    if not article:
        raise ApiError("Article not found", 404)
    return article


def list_articles(filters: Dict[str, Any], staff: bool) -> dict:
    page, limit = paginate_args(filters.get("page", 1), filters.get("limit", 12), default_limit=12, max_limit=100)

    query = Article.query
    if staff:
        if filters.get("status"):
            query = query.filter(Article.status == filters["status"])
    else:
        query = query.filter(Article.status == "PUBLISHED")

    if filters.get("category"):
        query = query.filter(Article.category_id == filters["category"])
    if filters.get("author"):
        query = query.filter(Article.author_id == filters["author"])
    if filters.get("featured"):
        query = query.filter(Article.is_featured.is_(True))
    if filters.get("breaking"):
        query = query.filter(Article.is_breaking.is_(True))
    if filters.get("search"):
        query = query.filter(_search_filter(filters["search"]))

    total = query.count()
    articles = (
        query.order_by(Article.is_breaking.desc(), Article.published_at.desc(), Article.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "articles": article_list_schema.dump(articles),
        "pagination": pagination_block(page, limit, total),
    }


def get_article_by_slug(slug: str, staff: bool) -> dict:
    article = Article.query.filter_by(slug=(slug or "").strip().lower()).first()
    if not article:
        raise ApiError("Article not found", 404)

    if not article.is_published:
        if not staff:
            raise ApiError("Article not found", 404)
        return article_detail_schema.dump(article)

    # Atomic increment in SQL
    Article.query.filter_by(id=article.id).update(
        {Article.views: Article.views + 1},
        synchronize_session=False,
    )
    db.session.commit()
    db.session.refresh(article)
    return article_detail_schema.dump(article)


def featured_articles(limit=5) -> list[dict]:
    _, limit_int = paginate_args(1, limit, default_limit=5, max_limit=50)
    articles = (
        _published()
        .filter(Article.is_featured.is_(True))
        .order_by(Article.published_at.desc())
        .limit(limit_int)
        .all()
    )
    return article_list_schema.dump(articles)


def breaking_articles(limit=10) -> list[dict]:
    _, limit_int = paginate_args(1, limit, default_limit=10, max_limit=50)
    articles = (
        _published()
        .filter(Article.is_breaking.is_(True))
        .order_by(Article.published_at.desc())
        .limit(limit_int)
        .all()
    )
    return article_breaking_schema.dump(articles)


def trending_articles(limit=5) -> list[dict]:
    _, limit_int = paginate_args(1, limit, default_limit=5, max_limit=50)
    articles = (
        _published()
        .order_by(Article.views.desc(), Article.published_at.desc())
        .limit(limit_int)
        .all()
    )
    return article_list_schema.dump(articles)


def most_read_articles(limit=5) -> list[dict]:
    _, limit_int = paginate_args(1, limit, default_limit=5, max_limit=50)
    articles = _published().order_by(Article.views.desc()).limit(limit_int).all()
    return article_list_schema.dump(articles)


def sidebar() -> dict:
    """Trending and most-read blocks for the site sidebar."""

    trending = (
        _published()
        .order_by(Article.views.desc(), Article.published_at.desc())
        .limit(SIDEBAR_LIMIT)
        .all()
    )
    most_read = _published().order_by(Article.views.desc()).limit(SIDEBAR_LIMIT).all()
    return {
        "trending_articles": article_sidebar_schema.dump(trending),
        "most_read_articles": article_sidebar_schema.dump(most_read),
    }


def search_articles(term: str, page=1, limit=20) -> dict:
    page_int, limit_int = paginate_args(page, limit, default_limit=20, max_limit=50)
    query = _published().filter(_search_filter(term))

    total = query.count()
    articles = (
        query.order_by(Article.published_at.desc())
        .offset((page_int - 1) * limit_int)
        .limit(limit_int)
        .all()
    )
    return {
        "articles": article_list_schema.dump(articles),
        "pagination": pagination_block(page_int, limit_int, total),
    }


def _check_references(category_id: Optional[int], author_id: Optional[int]) -> None:
    if category_id is not None and db.session.get(Category, category_id) is None:
        raise ApiError("Invalid category", 400)
    if author_id is not None and db.session.get(Author, author_id) is None:
        raise ApiError("Invalid author", 400)


def _slug_taken(slug: str, exclude_id: Optional[int] = None) -> bool:
    query = Article.query.filter(Article.slug == slug)
    if exclude_id is not None:
        query = query.filter(Article.id != exclude_id)
    return query.first() is not None


def create_article(data: Dict[str, Any], user_id: Optional[int]) -> dict:
    title = data["title"].strip()
    slug = slugify(title)
    if not slug:
        raise ApiError("Title must contain letters or digits", 400)
    if _slug_taken(slug):
        raise ApiError("Article with similar title already exists", 400)

    _check_references(data["category_id"], data["author_id"])

    status = data.get("status") or "DRAFT"
    published_at = None
    if status == "PUBLISHED":
        published_at = data.get("published_at") or datetime.utcnow()

    article = Article(
        title=title,
        slug=slug,
        category_id=data["category_id"],
        author_id=data["author_id"],
        user_id=user_id,
        status=status,
        published_at=published_at,
        seo_keywords=",".join(k.strip() for k in data.get("seo_keywords") or [] if k.strip()),
    )
    for key in _SIMPLE_FIELDS:
        if key in data:
            setattr(article, key, data[key])

    db.session.add(article)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ApiError("Article with similar title already exists", 400)

    current_app.logger.info("[articles] created id=%s slug=%s status=%s", article.id, article.slug, article.status)
    return article_detail_schema.dump(article)


def update_article(article_id: int, data: Dict[str, Any], user_id: int, role: str) -> dict:
    article = _get_or_404(article_id)

    if role == "AUTHOR" and article.user_id != user_id:
        raise ApiError("Not authorized to update this article", 403)

    if "title" in data:
        title = data["title"].strip()
        if title != article.title:
            slug = slugify(title)
            if not slug:
                raise ApiError("Title must contain letters or digits", 400)
            if _slug_taken(slug, exclude_id=article.id):
                raise ApiError("Article with similar title already exists", 400)
            article.title = title
            article.slug = slug

    _check_references(data.get("category_id"), data.get("author_id"))
    if data.get("category_id") is not None:
        article.category_id = data["category_id"]
    if data.get("author_id") is not None:
        article.author_id = data["author_id"]

    for key in _SIMPLE_FIELDS:
        if key in data:
            setattr(article, key, data[key])

    if "seo_keywords" in data:
        article.seo_keywords = ",".join(k.strip() for k in data["seo_keywords"] or [] if k.strip())

    if data.get("published_at"):
        article.published_at = data["published_at"]

    if "status" in data:
        article.status = data["status"]
        # First publication stamps the date
        if data["status"] == "PUBLISHED" and article.published_at is None:
            article.published_at = datetime.utcnow()

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ApiError("Article with similar title already exists", 400)

    current_app.logger.info("[articles] updated id=%s", article.id)
    return article_detail_schema.dump(article)


def delete_article(article_id: int) -> None:
    article = _get_or_404(article_id)
    db.session.delete(article)
    db.session.commit()
    current_app.logger.info("[articles] deleted id=%s", article_id)
