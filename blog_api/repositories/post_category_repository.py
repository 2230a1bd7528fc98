from blog_api.db import db
from blog_api.models.category_model import Category
from blog_api.models.post_category_model import PostCategory


def get_assignment(post_id: int, category_id: int):
    return PostCategory.query.filter_by(
        post_id=post_id,
        category_id=category_id,
    ).first()


def is_assigned(post_id: int, category_id: int) -> bool:
    return get_assignment(post_id, category_id) is not None


def create_assignment(post_id: int, category_id: int):
    assignment = PostCategory(post_id=post_id, category_id=category_id)
    db.session.add(assignment)
    db.session.flush()
    return assignment


def get_categories_for_post(post_id: int):
    return (
        db.session.query(Category)
        .join(PostCategory, PostCategory.category_id == Category.id)
        .filter(PostCategory.post_id == post_id)
        .order_by(PostCategory.id.asc())
        .all()
    )


def get_categories_for_posts(post_ids):
    """Return ``(post_id, category)`` pairs in assignment order."""
    if not post_ids:
        return []
    return (
        db.session.query(PostCategory.post_id, Category)
        .join(Category, PostCategory.category_id == Category.id)
        .filter(PostCategory.post_id.in_(post_ids))
        .order_by(PostCategory.id.asc())
        .all()
    )
