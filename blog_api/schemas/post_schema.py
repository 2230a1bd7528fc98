from marshmallow import validate

from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import CreateRequestSchema, RequestSchema
from blog_api.schemas.category_schema import CategoryResponseSchema
from blog_api.schemas.comment_schema import NestedCommentSchema
from blog_api.schemas.user_schema import UserResponseSchema


class PostCreateSchema(CreateRequestSchema):
    user_id = ma.Integer(
        data_key="userId", strict=True, required=True, validate=validate.Range(min=1)
    )
    title = ma.String(required=True, validate=validate.Length(min=1, max=255))
    content = ma.String(required=True, validate=validate.Length(min=1, max=255))


class PostUpdateSchema(RequestSchema):
    title = ma.String(required=True, validate=validate.Length(min=1, max=255))
    content = ma.String(required=True, validate=validate.Length(min=1, max=255))


class PostResponseSchema(ma.Schema):
    id = ma.Integer()
    title = ma.String()
    content = ma.String()
    created_at = ma.DateTime(data_key="createdAt")
    updated_at = ma.DateTime(data_key="updatedAt")
    user = ma.Nested(UserResponseSchema, allow_none=True)
    categories = ma.List(ma.Nested(CategoryResponseSchema))
    comments = ma.List(ma.Nested(NestedCommentSchema))
