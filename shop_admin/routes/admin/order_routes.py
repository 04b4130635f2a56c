from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from shop_admin.utils.decorators import role_required
from shop_admin.utils.validators import validate_pagination, validate_schema
from shop_admin.enums import UserRole
from shop_admin.schemas import OrderUpdateSchema
from shop_admin.services.order_service import OrderService

order_admin_bp = Blueprint("orders", __name__)


@order_admin_bp.route("", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_orders(current_user):
    """Get all orders"""
    limit, skip = validate_pagination()
    orders, total = OrderService.list_orders(
        status=request.args.get("status"), limit=limit, skip=skip
    )

    return (
        jsonify(
            {
                "orders": [o.to_dict(include_items=True) for o in orders],
                "total": total,
                "limit": limit,
                "skip": skip,
            }
        ),
        200,
    )


@order_admin_bp.route("/<int:order_id>", methods=["GET"])
@jwt_required()
@role_required(UserRole.ADMIN)
def get_order(order_id, current_user):
    """Get order detail"""
    order = OrderService.get_order_by_id(order_id)
    return jsonify({"order": order.to_dict(include_items=True)}), 200


@order_admin_bp.route("/<int:order_id>", methods=["PUT"])
@jwt_required()
@role_required(UserRole.ADMIN)
@validate_schema(OrderUpdateSchema)
def update_order(order_id, current_user):
    order = OrderService.update_order(order_id, **request.validated_data)
    return jsonify({"order": order.to_dict(include_items=True)}), 200


@order_admin_bp.route("/<int:order_id>", methods=["DELETE"])
@jwt_required()
@role_required(UserRole.ADMIN)
def delete_order(order_id, current_user):
    OrderService.delete_order(order_id)
    return jsonify({"message": "Order deleted"}), 200
