from blog_api.db import db
from blog_api.models.user_model import User
from blog_api.schemas.identity import AutoAssignedId, assign_identity


def get_by_id(user_id: int):
    return db.session.get(User, user_id)


def get_by_email(email: str):
    return User.query.filter_by(email=email).first()


def get_all():
    return User.query.order_by(User.id.asc()).all()


def create_user(user_name, email, password_hash, identity=AutoAssignedId()):
    user = User(
        user_name=user_name,
        email=email,
        password_hash=password_hash,
    )
    assign_identity(user, identity)
    db.session.add(user)
    db.session.flush()
    return user


def update_user(user, user_name, email, password_hash):
    user.user_name = user_name
    user.email = email
    user.password_hash = password_hash
    db.session.flush()
    return user


def delete_by_id(user_id: int) -> int:
    return User.query.filter_by(id=user_id).delete()


def get_by_ids(user_ids):
    if not user_ids:
        return []
    return User.query.filter(User.id.in_(user_ids)).all()
