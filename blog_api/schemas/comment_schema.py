from marshmallow import validate

from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import CreateRequestSchema


class CommentCreateSchema(CreateRequestSchema):
    content = ma.String(required=True, validate=validate.Length(min=1, max=255))


class CommentResponseSchema(ma.Schema):
    id = ma.Integer()
    user_id = ma.Integer(data_key="userId")
    post_id = ma.Integer(data_key="postId")
    content = ma.String()
    created_at = ma.DateTime(data_key="createdAt")
    updated_at = ma.DateTime(data_key="updatedAt")


class NestedCommentSchema(CommentResponseSchema):
    """A comment embedded in its post; the ids are implied by the parent."""

    class Meta:
        exclude = ("user_id", "post_id")
