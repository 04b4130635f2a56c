from shop_admin.routes.auth import auth_bp
from shop_admin.routes.admin import admin_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api')
