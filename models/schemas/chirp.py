from marshmallow import Schema, fields

from models.schemas.common import RequestBodySchema, UTCDateTime, clean_body


class ChirpCreateSchema(RequestBodySchema):
    # Length is checked by the handler after authentication
    body = fields.String(load_default="")


class ChirpOutSchema(Schema):
    id = fields.String()
    created_at = UTCDateTime()
    updated_at = UTCDateTime()
    body = fields.Method("get_body")
    user_id = fields.String()

    def get_body(self, obj):
        return clean_body(obj.body)
