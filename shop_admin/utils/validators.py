from functools import wraps
from flask import current_app, request
from marshmallow import ValidationError as SchemaValidationError
from shop_admin.exceptions import ValidationError


def validate_schema(schema_class):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            schema = schema_class()
            try:
                validated_data = schema.load(request.get_json(silent=True) or {})
            except SchemaValidationError as err:
                raise ValidationError("Validation error", errors=err.messages)
            request.validated_data = validated_data
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def validate_pagination():
    """Read ``limit``/``skip`` query parameters, clamped to sane bounds"""
    default_limit = current_app.config["DEFAULT_PAGE_LIMIT"]
    max_limit = current_app.config["MAX_PAGE_LIMIT"]

    limit = request.args.get('limit', default_limit, type=int)
    skip = request.args.get('skip', 0, type=int)

    if limit < 1 or limit > max_limit:
        limit = default_limit
    if skip < 0:
        skip = 0

    return limit, skip
