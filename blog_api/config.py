import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()

# Credentialed CORS cannot use a wildcard origin.
_DEFAULT_CORS_ORIGINS = [
    r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
]


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if not raw:
        return list(_DEFAULT_CORS_ORIGINS)

    env_origins = [
        item.strip() for item in raw.split(",")
        if item.strip() and item.strip() != "*"
    ]
    return env_origins + [
        origin for origin in _DEFAULT_CORS_ORIGINS
        if origin not in env_origins
    ]


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        minutes=_env_int("JWT_ACCESS_TOKEN_MINUTES", 15)
    )
    JWT_TOKEN_LOCATION = ["headers"]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = _env_int("PORT", 5000)

    CORS_ALLOWED_ORIGINS = _cors_origins()
