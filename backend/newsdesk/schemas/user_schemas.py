from marshmallow import fields, validate, validates_schema, ValidationError
from newsdesk.extensions import ma

from newsdesk.models.user import USER_ROLES, USER_STATUSES


class UserAdminUpdateSchema(ma.Schema):
    role = fields.String(required=False, validate=validate.OneOf(USER_ROLES))
    status = fields.String(required=False, validate=validate.OneOf(USER_STATUSES))

    @validates_schema
    def validate_role_or_status(self, data, **kwargs):
        if not data.get("role") and not data.get("status"):
            raise ValidationError("At least one field (role or status) is required.")
