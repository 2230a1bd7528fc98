import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from blog_api.config import Config
from blog_api.db import db
from blog_api.extensions.extensions import cors, jwt, ma
from blog_api.extensions.jwt_handlers import register_jwt_handlers
from blog_api.logging_config import configure_logging


logger = logging.getLogger(__name__)

_HTTP_ERRORS = {
    400: ("Invalid JSON body", "the request body could not be parsed"),
    404: ("Route not found", "the route you are trying to reach does not exist"),
    405: ("Method not allowed", "the method is not allowed for this route"),
}


def _register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        error, message = _HTTP_ERRORS.get(e.code, (e.name, e.description))
        return jsonify({"error": error, "message": message}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return jsonify({
            "error": "Internal server error",
            "message": "something went wrong while processing the request",
        }), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    configure_logging(app)

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ALLOWED_ORIGINS"],
        supports_credentials=True,
    )
    register_jwt_handlers(jwt)
    _register_error_handlers(app)

    from blog_api.routes.user_routes import user_bp
    from blog_api.routes.post_routes import post_bp
    from blog_api.routes.category_routes import category_bp
    from blog_api.routes.comment_routes import comment_bp

    app.register_blueprint(user_bp, url_prefix="/users")
    app.register_blueprint(post_bp, url_prefix="/posts")
    app.register_blueprint(category_bp)
    app.register_blueprint(comment_bp)

    from blog_api.models import (  # noqa: F401
        category_model,
        comment_model,
        post_category_model,
        post_model,
        user_jwt_model,
        user_model,
    )

    with app.app_context():
        db.create_all()

    return app
