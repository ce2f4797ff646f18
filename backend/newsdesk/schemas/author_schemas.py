from marshmallow import fields, validate, validates, ValidationError
from newsdesk.extensions import ma

from newsdesk.models.author import Author, AUTHOR_ROLES, AUTHOR_STATUSES


class AuthorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Author
        load_instance = False
        exclude = ("updated_at",)

    specialties = fields.Method("get_specialties")
    social_links = fields.Method("get_social_links")
    article_count = fields.Method("get_article_count")

    def get_specialties(self, obj):
        return obj.specialties_list

    def get_social_links(self, obj):
        return obj.social_links_dict

    def get_article_count(self, obj):
        return getattr(obj, "article_count", None)


class AuthorCreateSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=2))
    email = fields.Email(required=True)
    phone = fields.String(required=False, allow_none=True)
    bio = fields.String(required=True, validate=validate.Length(min=10, max=1000))
    avatar = fields.String(required=False, allow_none=True)
    role = fields.String(required=False, load_default="AUTHOR", validate=validate.OneOf(AUTHOR_ROLES))
    specialties = fields.List(fields.String(), required=False, load_default=list)
    social_links = fields.Dict(keys=fields.String(), values=fields.String(), required=False, allow_none=True)
    location = fields.String(required=False, allow_none=True)
    verified = fields.Boolean(required=False, load_default=False)

    @validates("specialties")
    def validate_specialties(self, value, **kwargs):
        if any("," in s for s in value or []):
            raise ValidationError("Specialties cannot contain commas.")


class AuthorUpdateSchema(AuthorCreateSchema):
    name = fields.String(required=False, validate=validate.Length(min=2))
    email = fields.Email(required=False)
    bio = fields.String(required=False, validate=validate.Length(min=10, max=1000))
    role = fields.String(required=False, validate=validate.OneOf(AUTHOR_ROLES))
    specialties = fields.List(fields.String(), required=False)
    verified = fields.Boolean(required=False)
    status = fields.String(required=False, validate=validate.OneOf(AUTHOR_STATUSES))
