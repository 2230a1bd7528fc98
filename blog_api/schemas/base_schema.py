from marshmallow import ValidationError, post_load, validate

from blog_api.errors import InvalidRequestError
from blog_api.extensions.extensions import ma
from blog_api.schemas.identity import identity_from


INVALID_BODY = "Invalid body request"
INVALID_JSON = "Invalid JSON body"


def _first_error(messages):
    if isinstance(messages, dict):
        field, inner = next(iter(messages.items()))
        if field == "_schema":
            return _first_error(inner)
        return f"'{field}' {_first_error(inner)}"
    if isinstance(messages, list) and messages:
        return _first_error(messages[0])
    return str(messages)


def load_or_raise(schema, payload):
    if not isinstance(payload, dict):
        raise InvalidRequestError(INVALID_JSON, "request body must be a JSON object")
    try:
        return schema.load(payload)
    except ValidationError as e:
        raise InvalidRequestError(INVALID_BODY, _first_error(e.messages)) from e


class RequestSchema(ma.Schema):
    pass


class CreateRequestSchema(RequestSchema):
    """Create payloads may carry an optional explicit primary key."""

    id = ma.Integer(strict=True, load_default=None, validate=validate.Range(min=1))

    @post_load
    def _tag_identity(self, data, **kwargs):
        data["identity"] = identity_from(data.pop("id", None))
        return data
