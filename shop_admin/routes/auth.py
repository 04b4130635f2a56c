from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token
from shop_admin.services.auth_service import AuthService
from shop_admin.schemas import LoginSchema
from shop_admin.utils.validators import validate_schema

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
@validate_schema(LoginSchema)
def login():
    """Admin login"""
    data = request.validated_data
    result = AuthService.login_admin(**data)
    return jsonify(result), 200


@auth_bp.route("/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    """Refresh access token"""
    user_id = get_jwt_identity()
    AuthService.get_user_by_id(user_id)
    access_token = create_access_token(identity=user_id)
    return jsonify({"access_token": access_token}), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def get_me():
    """Get current user info"""
    user = AuthService.get_user_by_id(get_jwt_identity())
    return jsonify({"user": user.to_dict()}), 200
