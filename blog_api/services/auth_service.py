import logging

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from werkzeug.security import check_password_hash

from blog_api.db import db
from blog_api.errors import AuthenticationError
from blog_api.repositories import user_jwt_repository, user_repository
from blog_api.schemas.base_schema import load_or_raise
from blog_api.schemas.user_schema import LoginSchema


logger = logging.getLogger(__name__)


def _mint_token(user):
    return create_access_token(
        identity=str(user.id),
        additional_claims={"email": user.email},
    )


def is_token_expired(token: str) -> bool:
    """True when the token no longer verifies (expired, tampered or malformed)."""
    try:
        decode_token(token)
    except (PyJWTError, JWTExtendedException):
        return True
    return False


def is_token_known(token: str) -> bool:
    return user_jwt_repository.is_token_exist(token)


def login(payload):
    data = load_or_raise(LoginSchema(), payload)

    user = user_repository.get_by_email(data["email"])
    if not user or not check_password_hash(user.password_hash, data["password"]):
        logger.warning("Failed login attempt for %s", data["email"])
        raise AuthenticationError("Invalid credentials", "Invalid email or password")

    existing = user_jwt_repository.get_token_by_user_id(user.id)
    if existing:
        if not is_token_expired(existing):
            logger.info("Reusing active token for user %s", user.id)
            return existing

        user_jwt_repository.remove_token(existing)
        logger.info("Rotating stale token for user %s", user.id)

    token = _mint_token(user)
    user_jwt_repository.add_user_with_token(user.id, token)
    db.session.commit()
    logger.info("Issued token for user %s", user.id)
    return token


def invalidate_token(token: str):
    removed = user_jwt_repository.remove_token(token)
    db.session.commit()
    return removed
