from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from flask_jwt_extended.exceptions import JWTDecodeError, NoAuthorizationError, InvalidHeaderError
from shop_admin.exceptions import ServiceError
from shop_admin.extensions import db


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        app.logger.warning(f"Integrity error: {error.orig}")
        return jsonify({"message": "Database integrity error"}), 409

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        db.session.rollback()
        app.logger.error(f"Database error: {error}")
        return jsonify({"message": "Database error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"message": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Internal error: {error}")
        return jsonify({"message": "Internal server error"}), 500

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.exception(f"Unhandled exception: {error}")
        return jsonify({"message": "An unexpected error occurred"}), 500

    # JWT Error Handlers
    @app.errorhandler(NoAuthorizationError)
    def handle_no_authorization(error):
        return jsonify({"message": "Missing authorization header"}), 401

    @app.errorhandler(JWTDecodeError)
    def handle_jwt_decode_error(error):
        return jsonify({"message": "Invalid token"}), 401

    @app.errorhandler(InvalidHeaderError)
    def handle_invalid_header(error):
        return jsonify({"message": "Invalid authorization header"}), 401
