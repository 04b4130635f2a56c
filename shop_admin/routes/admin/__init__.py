from flask import Blueprint
from .category_routes import category_admin_bp
from .product_routes import product_admin_bp
from .order_routes import order_admin_bp

# Every dashboard resource lives under this blueprint
admin_bp = Blueprint("admin", __name__)

admin_bp.register_blueprint(category_admin_bp, url_prefix="/categories")
admin_bp.register_blueprint(product_admin_bp, url_prefix="/products")
admin_bp.register_blueprint(order_admin_bp, url_prefix="/orders")
