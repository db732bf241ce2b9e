from typing import Any, Dict, Optional
from flask import request, jsonify, current_app
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException
from blogcms.extensions import db
from blogcms.utils.errors import ServiceError


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"code": code, "message": message}
    if extra:
        body.update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True accepts bodies sent without a JSON Content-Type
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = (request.args.get(name) or "").strip()
    return val or default


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def arg_optional_int(name: str) -> Optional[int]:
    try:
        return int(request.args[name])
    except (KeyError, TypeError, ValueError):
        return None


def arg_bool(name: str) -> Optional[bool]:
    val = (request.args.get(name) or "").strip().lower()
    if val in ("true", "1", "yes"):
        return True
    if val in ("false", "0", "no"):
        return False
    return None


def paginated(items, pagination, page: int, limit: int) -> Dict[str, Any]:
    """Wrap a Flask-SQLAlchemy pagination into the list response shape."""
    return {
        "data": items,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": pagination.total,
            "totalPages": pagination.pages,
        },
    }


def validate_schema(schema_cls, data: Dict[str, Any], **kwargs):
    """Load ``data`` through a marshmallow schema, returning (result, errors)."""
    try:
        return schema_cls(**kwargs).load(data), None
    except SchemaValidationError as e:
        return None, e.messages


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e: ServiceError):
        db.session.rollback()
        return error(e.code, e.message, e.status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        code = (e.name or "HTTP_ERROR").upper().replace(" ", "_")
        return error(code, e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        db.session.rollback()
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error("UNKNOWN_ERROR", "Internal server error", 500)


__all__ = [
    "ok", "error", "json_body", "arg_str", "arg_int", "arg_optional_int", "arg_bool",
    "paginated", "validate_schema", "register_error_handlers",
]
