from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from shop_admin.utils.decorators import role_required
from shop_admin.utils.validators import validate_schema
from shop_admin.enums import UserRole
from shop_admin.schemas import CategorySchema
from shop_admin.services.category_service import CategoryService

category_admin_bp = Blueprint("categories", __name__)


@category_admin_bp.route("", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_categories(current_user):
    """All categories with their parent slug"""
    categories = CategoryService.get_all()
    return jsonify([c.to_list_item() for c in categories]), 200


@category_admin_bp.route("/main", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_main_categories(current_user):
    categories = CategoryService.get_main()
    return jsonify([c.to_dict() for c in categories]), 200


@category_admin_bp.route("/<parent_slug>/subcategories", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_subcategories(parent_slug, current_user):
    categories = CategoryService.get_children(parent_slug)
    return jsonify([c.to_dict() for c in categories]), 200


@category_admin_bp.route("/<int:category_id>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_category(category_id, current_user):
    """Category detail with parent, children and product count"""
    category = CategoryService.get_by_id(category_id)
    return jsonify(category.to_detail()), 200


@category_admin_bp.route("", methods=["POST"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(CategorySchema)
def create_category(current_user):
    data = request.validated_data
    category = CategoryService.create(
        name=data["name"],
        slug=data.get("slug"),
        parent_id=data.get("parent_id"),
    )
    return jsonify(category.to_list_item()), 201


@category_admin_bp.route("/<int:category_id>", methods=["PUT"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(CategorySchema)
def update_category(category_id, current_user):
    data = request.validated_data
    category = CategoryService.update(
        category_id,
        name=data["name"],
        slug=data.get("slug"),
        parent_id=data.get("parent_id"),
    )
    return jsonify(category.to_list_item()), 200


@category_admin_bp.route("/<int:category_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_category(category_id, current_user):
    CategoryService.delete(category_id)
    return jsonify({"message": "Category deleted successfully"}), 200
