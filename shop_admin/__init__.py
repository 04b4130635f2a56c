from flask import Flask, jsonify
from .extensions import db, migrate, jwt
from .config import Config
from shop_admin.utils.error_handlers import register_error_handlers
from shop_admin.routes import register_blueprints
from shop_admin.commands import register_commands


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"message": "Invalid token"}), 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return jsonify({"message": "Missing authorization header"}), 401

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
