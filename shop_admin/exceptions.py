"""Errors raised by the service layer.

Routes let these propagate; ``register_error_handlers`` turns each one into a
JSON body of ``{"message": ..., **payload}`` with the matching status code.
"""


class ServiceError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None, **payload):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        data = {"message": self.message}
        data.update(self.payload)
        return data


class ValidationError(ServiceError):
    """Malformed or missing input"""

    status_code = 422


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    """The write collides with data already in the store"""

    status_code = 409


class DeleteBlocked(Conflict):
    """Dependent rows still reference the record"""

    status_code = 422


class AuthenticationError(ServiceError):
    status_code = 401
