import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from blog_api.db import db, is_unique_violation
from blog_api.errors import ConflictError, InvalidRequestError, NotFoundError
from blog_api.repositories import user_repository
from blog_api.schemas.base_schema import INVALID_BODY, load_or_raise
from blog_api.schemas.identity import ExplicitId
from blog_api.schemas.user_schema import (
    UserCreateSchema,
    UserResponseSchema,
    UserUpdateSchema,
)
from blog_api.services import auth_service


logger = logging.getLogger(__name__)


def serialize_user(user):
    return UserResponseSchema().dump(user)


def _require_user(user_id: int, message: str):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found", message)
    return user


def _user_exists():
    return ConflictError(
        "User already exists",
        "the user that you are trying to create already exists",
    )


def _email_taken():
    return InvalidRequestError(
        INVALID_BODY,
        "the email you are trying to use is already associated with another user",
    )


def _is_email_violation(error):
    return is_unique_violation(error, "unique_user_email", "users", "email")


def register(payload):
    data = load_or_raise(UserCreateSchema(), payload)

    identity = data["identity"]
    if isinstance(identity, ExplicitId) and user_repository.get_by_id(identity.value):
        raise _user_exists()

    if user_repository.get_by_email(data["email"]):
        raise _email_taken()

    try:
        user = user_repository.create_user(
            user_name=data["user_name"],
            email=data["email"],
            password_hash=generate_password_hash(data["password"]),
            identity=identity,
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if _is_email_violation(e):
            raise _email_taken() from e
        raise _user_exists() from e

    logger.info("Created user %s", user.id)
    return serialize_user(user)


def list_users():
    return [serialize_user(user) for user in user_repository.get_all()]


def get_user(user_id: int):
    user = _require_user(user_id, "the user you are trying to fetch does not exist")
    return serialize_user(user)


def update_user(user_id: int, payload, current_token=None):
    user = _require_user(
        user_id,
        "the user that you are trying to update their information does not exist",
    )
    data = load_or_raise(UserUpdateSchema(), payload)

    email_in_use = InvalidRequestError(
        INVALID_BODY,
        "there is a user already has the new email",
    )
    other = user_repository.get_by_email(data["email"])
    if other and other.id != user.id:
        raise email_in_use

    try:
        user_repository.update_user(
            user,
            user_name=data["user_name"],
            email=data["email"],
            password_hash=generate_password_hash(data["password"]),
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        if _is_email_violation(e):
            raise email_in_use from e
        raise

    logger.info("Updated user %s", user.id)

    if current_token:
        auth_service.invalidate_token(current_token)

    return serialize_user(user)


def delete_user(user_id: int):
    deleted = user_repository.delete_by_id(user_id)
    if not deleted:
        raise NotFoundError(
            "User not found",
            "the user you are trying to delete does not exist",
        )

    db.session.commit()
    logger.info("Deleted user %s", user_id)
