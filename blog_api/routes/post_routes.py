from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from blog_api.errors import BlogApiError
from blog_api.routes.helpers import error_response, parse_positive_id
from blog_api.services import post_service

post_bp = Blueprint("posts", __name__)


@post_bp.route("", methods=["POST"])
@jwt_required()
def create_post():
    try:
        post = post_service.create_post(request.get_json(silent=True))
        return jsonify({"message": "Post created successfully", "post": post}), 201
    except BlogApiError as e:
        return error_response(e)


@post_bp.route("", methods=["GET"])
def list_posts():
    return jsonify(post_service.list_posts()), 200


@post_bp.route("/<post_id>", methods=["GET"])
@jwt_required()
def get_post(post_id):
    try:
        return jsonify(post_service.get_post(parse_positive_id(post_id, "post"))), 200
    except BlogApiError as e:
        return error_response(e)


@post_bp.route("/<post_id>", methods=["PUT"])
@jwt_required()
def update_post(post_id):
    try:
        post = post_service.update_post(
            parse_positive_id(post_id, "post"),
            request.get_json(silent=True),
        )
        return jsonify({"message": "Post updated successfully", "post": post}), 200
    except BlogApiError as e:
        return error_response(e)


@post_bp.route("/<post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    try:
        post_service.delete_post(parse_positive_id(post_id, "post"))
        return jsonify({"message": "Post deleted successfully"}), 200
    except BlogApiError as e:
        return error_response(e)
