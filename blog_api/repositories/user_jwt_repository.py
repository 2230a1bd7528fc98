from blog_api.db import db
from blog_api.models.user_jwt_model import UserJWT


def get_token_by_user_id(user_id: int):
    row = UserJWT.query.filter_by(user_id=user_id).first()
    if row:
        return row.token
    return None


def is_token_exist(token: str) -> bool:
    if not token:
        return False
    return UserJWT.query.filter_by(token=token).first() is not None


def add_user_with_token(user_id: int, token: str):
    row = UserJWT(user_id=user_id, token=token)
    db.session.add(row)
    db.session.flush()
    return row


def remove_token(token: str) -> int:
    return UserJWT.query.filter_by(token=token).delete()
