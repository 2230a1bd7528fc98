from collections import defaultdict

from sqlalchemy.exc import IntegrityError

from blog_api.db import db
from blog_api.errors import ConflictError, NotFoundError
from blog_api.repositories import (
    comment_repository,
    post_category_repository,
    post_repository,
    user_repository,
)
from blog_api.schemas.base_schema import load_or_raise
from blog_api.schemas.identity import ExplicitId
from blog_api.schemas.post_schema import (
    PostCreateSchema,
    PostResponseSchema,
    PostUpdateSchema,
)


def _build_author_map(author_ids: set[int]):
    return {user.id: user for user in user_repository.get_by_ids(author_ids)}


def _serialize_posts(posts):
    post_ids = [post.id for post in posts]
    user_by_id = _build_author_map({post.user_id for post in posts})

    categories_by_post = defaultdict(list)
    for post_id, category in post_category_repository.get_categories_for_posts(post_ids):
        categories_by_post[post_id].append(category)

    comments_by_post = defaultdict(list)
    for comment in comment_repository.get_comments_by_posts(post_ids):
        comments_by_post[comment.post_id].append(comment)

    return PostResponseSchema(many=True).dump([
        {
            "id": post.id,
            "title": post.title,
            "content": post.content,
            "created_at": post.created_at,
            "updated_at": post.updated_at,
            "user": user_by_id.get(post.user_id),
            "categories": categories_by_post[post.id],
            "comments": comments_by_post[post.id],
        }
        for post in posts
    ])


def _serialize_post(post):
    return _serialize_posts([post])[0]


def require_post(post_id: int, error="Post not found", message=None):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError(error, message or "the post you are trying to fetch does not exist")
    return post


def create_post(payload):
    data = load_or_raise(PostCreateSchema(), payload)

    identity = data["identity"]
    if isinstance(identity, ExplicitId) and post_repository.get_by_id(identity.value):
        raise ConflictError(
            "Post already exists",
            "the post that you are trying to create already exists",
        )

    if not user_repository.get_by_id(data["user_id"]):
        raise NotFoundError(
            "User not found",
            "the user you are trying to associate with this post does not exist",
        )

    try:
        post = post_repository.create_post(
            user_id=data["user_id"],
            title=data["title"],
            content=data["content"],
            identity=identity,
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise ConflictError(
            "Post already exists",
            "the post that you are trying to create already exists",
        ) from e

    return _serialize_post(post)


def list_posts():
    return _serialize_posts(post_repository.get_all())


def get_post(post_id: int):
    return _serialize_post(require_post(post_id))


def update_post(post_id: int, payload):
    post = require_post(
        post_id,
        message="the post that you are trying to update their information does not exist",
    )
    data = load_or_raise(PostUpdateSchema(), payload)

    post_repository.update_post(post, title=data["title"], content=data["content"])
    db.session.commit()
    return _serialize_post(post)


def delete_post(post_id: int):
    deleted = post_repository.delete_by_id(post_id)
    if not deleted:
        raise NotFoundError(
            "Post not found",
            "the post you are trying to delete does not exist",
        )
    db.session.commit()
