from blog_api.db import db
from blog_api.models.post_model import Post
from blog_api.schemas.identity import AutoAssignedId, assign_identity


def get_by_id(post_id: int):
    return db.session.get(Post, post_id)


def get_all():
    return Post.query.order_by(Post.id.asc()).all()


def create_post(user_id, title, content, identity=AutoAssignedId()):
    post = Post(
        user_id=user_id,
        title=title,
        content=content,
    )
    assign_identity(post, identity)
    db.session.add(post)
    db.session.flush()
    return post


def update_post(post, title, content):
    post.title = title
    post.content = content
    db.session.flush()
    return post


def delete_by_id(post_id: int) -> int:
    return Post.query.filter_by(id=post_id).delete()
