from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import DomainError, NoRecordsFound, NotFound, PreconditionFailed, StoreUnavailable

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (PreconditionFailed, 400),
    (NotFound, 404),
    (NoRecordsFound, 404),
    (StoreUnavailable, 503),
)


def status_code_for(error: DomainError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return 400


def error_response(message: str, category: str, code: int):
    return jsonify({"message": message, "category": category}), code


def login_required(view):
    """Require an identity placed in the session by the auth layer."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Authentication required", "unauthorized", 401)
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Authentication required", "unauthorized", 401)
        if session.get("role") != Role.MANAGER.value:
            return error_response("Manager access required", "forbidden", 403)
        return view(*args, **kwargs)

    return wrapper


def current_employee_ref() -> int:
    return int(session["user_id"])


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        code = status_code_for(error)
        if code >= 500:
            logger.error("%s: %s", error.category, error.message)
        return error_response(error.message, error.category, code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return error_response(error.description or error.name, "http_error", error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("Unhandled error")
        return error_response("Server error", "server_error", 500)
