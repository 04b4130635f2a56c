from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from shop_admin.utils.decorators import role_required
from shop_admin.utils.validators import validate_pagination, validate_schema
from shop_admin.enums import UserRole
from shop_admin.schemas import ProductSchema
from shop_admin.services.category_service import CategoryService
from shop_admin.services.product_service import ProductService

product_admin_bp = Blueprint("products", __name__)


def _product_page(products, total, limit, skip):
    return jsonify(
        {
            "products": [p.to_dict() for p in products],
            "total": total,
            "limit": limit,
            "skip": skip,
        }
    )


@product_admin_bp.route("", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_products(current_user):
    """Get all products"""
    limit, skip = validate_pagination()
    products, total = ProductService.list_products(limit=limit, skip=skip)
    return _product_page(products, total, limit, skip), 200


@product_admin_bp.route("/search", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def search_products(current_user):
    limit, skip = validate_pagination()
    products, total = ProductService.search_products(
        search=request.args.get("q", ""), limit=limit, skip=skip
    )
    return _product_page(products, total, limit, skip), 200


@product_admin_bp.route("/category-list", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_category_list(current_user):
    """Slugs of every category, for the product filter dropdown"""
    return jsonify(CategoryService.list_slugs()), 200


@product_admin_bp.route("/category/<category_slug>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_products_by_category(category_slug, current_user):
    limit, skip = validate_pagination()
    products, total = ProductService.get_products_by_category(
        category_slug, limit=limit, skip=skip
    )
    return _product_page(products, total, limit, skip), 200


@product_admin_bp.route("/<int:product_id>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_product(product_id, current_user):
    """Get product detail"""
    product = ProductService.get_product_by_id(product_id)
    return jsonify({"product": product.to_dict()}), 200


@product_admin_bp.route("/add", methods=["POST"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(ProductSchema)
def create_product(current_user):
    product = ProductService.create_product(**request.validated_data)
    return jsonify({"product": product.to_dict()}), 201


@product_admin_bp.route("/<int:product_id>", methods=["PUT"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(ProductSchema)
def update_product(product_id, current_user):
    product = ProductService.update_product(product_id, **request.validated_data)
    return jsonify({"product": product.to_dict()}), 200


@product_admin_bp.route("/<int:product_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_product(product_id, current_user):
    ProductService.delete_product(product_id)
    return jsonify({"message": "Product deleted"}), 200
