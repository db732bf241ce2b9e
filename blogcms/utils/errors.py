"""Typed errors raised by the service layer.

Each carries the error code and HTTP status the API reports for it; the
handler registered in ``blogcms.utils.http`` renders them.
"""


class ServiceError(Exception):
    code = "UNKNOWN_ERROR"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status = 400


class UnauthorizedError(ServiceError):
    code = "UNAUTHORIZED"
    status = 401


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ConflictError(ServiceError):
    code = "CONFLICT"
    status = 409


__all__ = ["ServiceError", "ValidationError", "UnauthorizedError", "NotFoundError", "ConflictError"]
