from sqlalchemy.exc import IntegrityError

from blog_api.db import db
from blog_api.errors import ConflictError
from blog_api.repositories import comment_repository
from blog_api.schemas.base_schema import load_or_raise
from blog_api.schemas.comment_schema import CommentCreateSchema, CommentResponseSchema
from blog_api.schemas.identity import ExplicitId
from blog_api.services.category_service import POST_MISSING, POST_MISSING_MESSAGE
from blog_api.services.post_service import require_post


def _comment_exists():
    return ConflictError(
        "Comment already exists",
        "the comment that you are trying to create already exists",
    )


def add_comment(post_id: int, payload):
    post = require_post(post_id, POST_MISSING, POST_MISSING_MESSAGE)
    data = load_or_raise(CommentCreateSchema(), payload)

    identity = data["identity"]
    if isinstance(identity, ExplicitId) and comment_repository.get_by_id(identity.value):
        raise _comment_exists()

    # Comments are attributed to the post's owner, not to the caller.
    try:
        comment = comment_repository.create_comment(
            user_id=post.user_id,
            post_id=post.id,
            content=data["content"],
            identity=identity,
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise _comment_exists() from e

    return CommentResponseSchema().dump(comment)


def list_comments(post_id: int):
    require_post(post_id, POST_MISSING, POST_MISSING_MESSAGE)
    comments = comment_repository.get_comments_by_post(post_id)
    return CommentResponseSchema(many=True).dump(comments)
