import logging

from sqlalchemy.exc import IntegrityError

from blog_api.db import db, is_unique_violation
from blog_api.errors import ConflictError
from blog_api.repositories import category_repository, post_category_repository
from blog_api.schemas.base_schema import load_or_raise
from blog_api.schemas.category_schema import CategoryCreateSchema, CategoryResponseSchema
from blog_api.services.post_service import require_post


logger = logging.getLogger(__name__)

POST_MISSING = "Post does not exist"
POST_MISSING_MESSAGE = "the post you're trying to work on does not exist"


def _already_assigned():
    return ConflictError(
        "Category already assigned",
        "the category that you are trying to assign to the post is already assigned",
    )


def _create_or_fetch_category(name: str):
    try:
        category = category_repository.create_category(name)
    except IntegrityError:
        # another request created the same name since our lookup
        db.session.rollback()
        category = category_repository.get_by_name(name)
        if not category:
            raise
        return category

    logger.info("Created category %r", name)
    return category


def assign_category(post_id: int, payload):
    """Attach the named category to a post, creating the category on first use.

    Reusing a name never creates a second category row; assigning a category
    the post already has is a conflict. The lookup and the inserts are not one
    transaction: losing the race to create a name falls back to the winner's
    row, and the ``(post_id, category_id)`` unique constraint settles duplicate
    assignments.
    """
    require_post(post_id, POST_MISSING, POST_MISSING_MESSAGE)
    data = load_or_raise(CategoryCreateSchema(), payload)
    name = data["name"]

    category = category_repository.get_by_name(name)
    if not category:
        category = _create_or_fetch_category(name)

    if post_category_repository.is_assigned(post_id, category.id):
        raise _already_assigned()

    try:
        post_category_repository.create_assignment(post_id, category.id)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if is_unique_violation(
            e, "unique_post_category_pair", "post_categories", "post_id", "category_id"
        ):
            raise _already_assigned() from e
        raise

    return CategoryResponseSchema().dump(category)


def list_categories(post_id: int):
    require_post(post_id, POST_MISSING, POST_MISSING_MESSAGE)
    categories = post_category_repository.get_categories_for_post(post_id)
    return CategoryResponseSchema(many=True).dump(categories)
