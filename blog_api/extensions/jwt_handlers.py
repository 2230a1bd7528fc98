from flask import jsonify, request

from blog_api.repositories import user_jwt_repository


def extract_bearer_token():
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return None


def _invalid_token(message="Invalid or expired token"):
    return jsonify({"error": "Invalid token", "message": message}), 400


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        # a token after any scheme word counts as presented, e.g. "Token <jwt>"
        parts = request.headers.get("Authorization", "").split(" ")
        if len(parts) > 1 and parts[1]:
            return _invalid_token()
        return jsonify({
            "error": "Access denied",
            "message": "Access denied, no token provided",
        }), 403

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _invalid_token()

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        # The stale row stays in user_jwts until the user logs in again.
        return _invalid_token()

    @jwt.token_in_blocklist_loader
    def is_token_unknown(jwt_header, jwt_payload):
        return not user_jwt_repository.is_token_exist(extract_bearer_token())

    @jwt.revoked_token_loader
    def unknown_token(jwt_header, jwt_payload):
        return _invalid_token("the token you provided is not recognized")
