from marshmallow import Schema, fields, validate


class ContactMessageSchema(Schema):
	name = fields.String(required=True, validate=validate.Length(min=1, max=120))
	email = fields.Email(required=True)
	subject = fields.String(required=True, validate=validate.Length(min=1, max=200))
	message = fields.String(required=True, validate=validate.Length(min=1, max=5000))
