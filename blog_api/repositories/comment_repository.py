from blog_api.db import db
from blog_api.models.comment_model import Comment
from blog_api.schemas.identity import AutoAssignedId, assign_identity


def get_by_id(comment_id: int):
    return db.session.get(Comment, comment_id)


def create_comment(user_id, post_id, content, identity=AutoAssignedId()):
    comment = Comment(
        user_id=user_id,
        post_id=post_id,
        content=content,
    )
    assign_identity(comment, identity)
    db.session.add(comment)
    db.session.flush()
    return comment


def get_comments_by_post(post_id: int):
    return (
        Comment.query
        .filter(Comment.post_id == post_id)
        .order_by(Comment.id.asc())
        .all()
    )


def get_comments_by_posts(post_ids):
    if not post_ids:
        return []
    return (
        Comment.query
        .filter(Comment.post_id.in_(post_ids))
        .order_by(Comment.id.asc())
        .all()
    )
