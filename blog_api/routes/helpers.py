import re

from flask import jsonify

from blog_api.errors import InvalidRequestError


_POSITIVE_INT = re.compile(r"^[1-9]\d*$")


def parse_positive_id(raw: str, resource: str) -> int:
    if not _POSITIVE_INT.match(raw or ""):
        raise InvalidRequestError(
            f"Invalid {resource} ID",
            f"{resource} ID must be a positive integer",
        )
    return int(raw)


def error_response(error):
    return jsonify(error.to_dict()), error.status_code
