import logging
from functools import wraps
from flask import jsonify
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from shop_admin.extensions import db
from shop_admin.models.user import User

logger = logging.getLogger(__name__)


def role_required(*roles):
    """Decorator to check if user has required role"""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            user_id = get_jwt_identity()
            user = db.session.get(User, int(user_id))

            if not user or not user.is_active:
                return jsonify({'message': 'User not found or inactive'}), 403

            if not user.has_role(*roles):
                logger.warning(f"User {user.id} with role {user.role.value} denied access")
                return jsonify({'message': 'Unauthorized. Admin access required.'}), 403

            # Pass user to route handler
            kwargs['current_user'] = user
            return fn(*args, **kwargs)
        return wrapper
    return decorator
