from marshmallow import fields, validate
from newsdesk.extensions import ma

from newsdesk.models.category import Category

HEX_COLOR = validate.Regexp(r"^#[0-9A-Fa-f]{6}$", error="Color must be a hex value like #0A1F44.")


class CategorySchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Category
        load_instance = False
        exclude = ("created_at", "updated_at")

    article_count = fields.Method("get_article_count")

    def get_article_count(self, obj):
        # Filled in by the service (published articles only)
        return getattr(obj, "article_count", None)


class CategoryCreateSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=2, max=100))
    description = fields.String(required=False, allow_none=True, validate=validate.Length(max=500))
    color = fields.String(required=False, allow_none=True, validate=HEX_COLOR)
    icon = fields.String(required=False, allow_none=True)
    is_active = fields.Boolean(required=False, load_default=True)
    sort_order = fields.Integer(required=False, load_default=0, validate=validate.Range(min=0))


class CategoryUpdateSchema(ma.Schema):
    name = fields.String(required=False, validate=validate.Length(min=2, max=100))
    description = fields.String(required=False, allow_none=True, validate=validate.Length(max=500))
    color = fields.String(required=False, allow_none=True, validate=HEX_COLOR)
    icon = fields.String(required=False, allow_none=True)
    is_active = fields.Boolean(required=False)
    sort_order = fields.Integer(required=False, validate=validate.Range(min=0))
