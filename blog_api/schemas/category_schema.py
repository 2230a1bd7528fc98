from marshmallow import validate

from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import RequestSchema


class CategoryCreateSchema(RequestSchema):
    name = ma.String(required=True, validate=validate.Length(min=1, max=255))


class CategoryResponseSchema(ma.Schema):
    id = ma.Integer()
    name = ma.String()
    created_at = ma.DateTime(data_key="createdAt")
    updated_at = ma.DateTime(data_key="updatedAt")
