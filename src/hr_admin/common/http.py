from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def fails_with(message: str):
    """Turn any unexpected error in the view into a 500 ``{"message": message}``.

    Validation and not-found errors pass through to ``register_error_handlers``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except (ValidationError, NotFoundError, HTTPException):
                raise
            except Exception:
                logger.exception("%s (%s %s)", message, request.method, request.path)
                return jsonify({"message": message}), 500

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"message": str(e), "errors": e.errors}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"message": str(e)}), 404

    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        logger.error("Unhandled domain error: %s", e)
        return jsonify({"message": str(e)}), 500

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code or 500
