from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from blog_api.errors import BlogApiError
from blog_api.routes.helpers import error_response, parse_positive_id
from blog_api.services import comment_service


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/posts/<post_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    try:
        comment = comment_service.add_comment(
            parse_positive_id(post_id, "post"),
            request.get_json(silent=True),
        )
        return jsonify({
            "message": "Comment created successfully",
            "comment": comment,
        }), 201
    except BlogApiError as e:
        return error_response(e)


@comment_bp.route("/posts/<post_id>/comments", methods=["GET"])
@jwt_required()
def list_comments(post_id):
    try:
        comments = comment_service.list_comments(parse_positive_id(post_id, "post"))
        return jsonify(comments), 200
    except BlogApiError as e:
        return error_response(e)
