from marshmallow import Schema, fields

from models.schemas.common import RequestBodySchema, UTCDateTime


class UserCredentialsSchema(RequestBodySchema):
    """Body of POST /api/users, PUT /api/users and POST /api/login."""

    email = fields.String(load_default="")
    password = fields.String(load_default="", load_only=True)


class UserOutSchema(Schema):
    id = fields.String()
    created_at = UTCDateTime()
    updated_at = UTCDateTime()
    email = fields.String()


class LoginOutSchema(UserOutSchema):
    token = fields.String()
    refresh_token = fields.String()


class TokenOutSchema(Schema):
    token = fields.String()
