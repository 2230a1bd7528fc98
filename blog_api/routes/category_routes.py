from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from blog_api.errors import BlogApiError
from blog_api.routes.helpers import error_response, parse_positive_id
from blog_api.services import category_service

category_bp = Blueprint("categories", __name__)


@category_bp.route("/posts/<post_id>/categories", methods=["POST"])
@jwt_required()
def create_category(post_id):
    try:
        category = category_service.assign_category(
            parse_positive_id(post_id, "post"),
            request.get_json(silent=True),
        )
        return jsonify({
            "message": "Category created successfully",
            "category": category,
        }), 201
    except BlogApiError as e:
        return error_response(e)


@category_bp.route("/posts/<post_id>/categories", methods=["GET"])
@jwt_required()
def list_categories(post_id):
    try:
        categories = category_service.list_categories(parse_positive_id(post_id, "post"))
        return jsonify(categories), 200
    except BlogApiError as e:
        return error_response(e)
