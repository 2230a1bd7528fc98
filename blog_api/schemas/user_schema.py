from marshmallow import validate

from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import CreateRequestSchema, RequestSchema


class UserCreateSchema(CreateRequestSchema):
    user_name = ma.String(
        data_key="userName", required=True, validate=validate.Length(min=1, max=20)
    )
    password = ma.String(required=True, validate=validate.Length(min=8, max=20))
    email = ma.Email(required=True, validate=validate.Length(max=255))


class UserUpdateSchema(RequestSchema):
    user_name = ma.String(
        data_key="userName", required=True, validate=validate.Length(min=1, max=20)
    )
    password = ma.String(required=True, validate=validate.Length(min=8, max=20))
    email = ma.Email(required=True, validate=validate.Length(max=255))


class LoginSchema(RequestSchema):
    password = ma.String(required=True, validate=validate.Length(min=8, max=20))
    email = ma.Email(required=True, validate=validate.Length(max=255))


class UserResponseSchema(ma.Schema):
    id = ma.Integer()
    user_name = ma.String(data_key="userName")
    email = ma.String()
    created_at = ma.DateTime(data_key="createdAt")
    updated_at = ma.DateTime(data_key="updatedAt")
