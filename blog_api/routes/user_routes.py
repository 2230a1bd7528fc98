from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from blog_api.errors import BlogApiError
from blog_api.extensions.jwt_handlers import extract_bearer_token
from blog_api.routes.helpers import error_response, parse_positive_id
from blog_api.services import auth_service, user_service


user_bp = Blueprint("users", __name__)


@user_bp.route("", methods=["POST"])
def create_user():
    try:
        user = user_service.register(request.get_json(silent=True))
        return jsonify({"message": "User created successfully", "user": user}), 201
    except BlogApiError as e:
        return error_response(e)


@user_bp.route("/login", methods=["POST"])
def login():
    try:
        token = auth_service.login(request.get_json(silent=True))
        return jsonify({"message": "Login successful", "token": token}), 200
    except BlogApiError as e:
        return error_response(e)


@user_bp.route("", methods=["GET"])
def list_users():
    return jsonify(user_service.list_users()), 200


@user_bp.route("/<user_id>", methods=["GET"])
@jwt_required()
def get_user(user_id):
    try:
        return jsonify(user_service.get_user(parse_positive_id(user_id, "user"))), 200
    except BlogApiError as e:
        return error_response(e)


@user_bp.route("/<user_id>", methods=["PUT"])
@jwt_required()
def update_user(user_id):
    try:
        user = user_service.update_user(
            parse_positive_id(user_id, "user"),
            request.get_json(silent=True),
            current_token=extract_bearer_token(),
        )
        return jsonify({"message": "User updated successfully", "user": user}), 200
    except BlogApiError as e:
        return error_response(e)


@user_bp.route("/<user_id>", methods=["DELETE"])
@jwt_required()
def delete_user(user_id):
    try:
        user_service.delete_user(parse_positive_id(user_id, "user"))
        return jsonify({"message": "User deleted successfully"}), 200
    except BlogApiError as e:
        return error_response(e)
