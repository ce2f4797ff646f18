from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError
from newsdesk.extensions import ma

from newsdesk.models.article import Article, ARTICLE_STATUSES


class ArticleListSchema(ma.SQLAlchemyAutoSchema):
    """
    Listing payload: article columns plus a short category and author block.
    The full body is left out to keep listings light.
    """

    class Meta:
        model = Article
        load_instance = False
        include_fk = True
        exclude = ("content", "updated_at")

    seo_keywords = fields.Method("get_seo_keywords")
    category = fields.Method("get_category")
    author = fields.Method("get_author")

    def get_seo_keywords(self, obj):
        return obj.seo_keywords_list

    def get_category(self, obj):
        c = getattr(obj, "category", None)
        if c is None:
            return None
        return {"id": c.id, "name": c.name, "slug": c.slug, "color": c.color}

    def get_author(self, obj):
        a = getattr(obj, "author", None)
        if a is None:
            return None
        return {"id": a.id, "name": a.name, "bio": a.bio, "avatar": a.avatar}


class ArticleDetailSchema(ArticleListSchema):
    class Meta(ArticleListSchema.Meta):
        exclude = ("updated_at",)


class ArticleBreakingSchema(ma.Schema):
    id = fields.Integer()
    title = fields.String()
    slug = fields.String()
    excerpt = fields.String()
    published_at = fields.DateTime()


class ArticleCreateSchema(ma.Schema):
    title = fields.String(required=True, validate=validate.Length(min=5, max=200))
    excerpt = fields.String(required=True, validate=validate.Length(min=10, max=500))
    content = fields.String(required=True, validate=validate.Length(min=50))
    category_id = fields.Integer(required=True)
    author_id = fields.Integer(required=True)
    featured_image = fields.String(required=False, allow_none=True)
    status = fields.String(required=False, load_default="DRAFT", validate=validate.OneOf(ARTICLE_STATUSES))
    is_featured = fields.Boolean(required=False, load_default=False)
    is_breaking = fields.Boolean(required=False, load_default=False)
    seo_title = fields.String(required=False, allow_none=True, validate=validate.Length(max=200))
    seo_description = fields.String(required=False, allow_none=True, validate=validate.Length(max=500))
    seo_keywords = fields.List(fields.String(), required=False)
    published_at = fields.DateTime(required=False, allow_none=True)
    scheduled_for = fields.DateTime(required=False, allow_none=True)


class ArticleUpdateSchema(ma.Schema):
    title = fields.String(required=False, validate=validate.Length(min=5, max=200))
    excerpt = fields.String(required=False, validate=validate.Length(min=10, max=500))
    content = fields.String(required=False, validate=validate.Length(min=50))
    category_id = fields.Integer(required=False)
    author_id = fields.Integer(required=False)
    featured_image = fields.String(required=False, allow_none=True)
    status = fields.String(required=False, validate=validate.OneOf(ARTICLE_STATUSES))
    is_featured = fields.Boolean(required=False)
    is_breaking = fields.Boolean(required=False)
    seo_title = fields.String(required=False, allow_none=True, validate=validate.Length(max=200))
    seo_description = fields.String(required=False, allow_none=True, validate=validate.Length(max=500))
    seo_keywords = fields.List(fields.String(), required=False)
    published_at = fields.DateTime(required=False, allow_none=True)
    scheduled_for = fields.DateTime(required=False, allow_none=True)

    @validates_schema
    def validate_not_empty(self, data, **kwargs):
        if not data:
            raise ValidationError("Nothing to update.")


class ArticleListQuerySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    page = fields.Integer(required=False, validate=validate.Range(min=1))
    limit = fields.Integer(required=False, validate=validate.Range(min=1, max=100))
    status = fields.String(required=False, validate=validate.OneOf(ARTICLE_STATUSES))
    category = fields.Integer(required=False)
    author = fields.Integer(required=False)
    featured = fields.Boolean(required=False)
    breaking = fields.Boolean(required=False)
    search = fields.String(required=False)


class ArticleSearchQuerySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    q = fields.String(required=True, validate=validate.Length(min=1))
    page = fields.Integer(required=False, validate=validate.Range(min=1))
    limit = fields.Integer(required=False, validate=validate.Range(min=1, max=50))


class ArticleSidebarSchema(ArticleBreakingSchema):
    views = fields.Integer()
