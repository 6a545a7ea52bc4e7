"""Translate domain errors into HTTP responses."""

import logging

from flask import Flask, current_app, request
from werkzeug.exceptions import HTTPException

from champions.exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from champions.routes import responses

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Install the handlers mapping service errors to status codes."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return responses.bad_request(err.message)

    @app.errorhandler(NotFoundError)
    def handle_not_found(err: NotFoundError):
        return responses.not_found(err.message)

    @app.errorhandler(ConflictError)
    def handle_conflict(err: ConflictError):
        return responses.conflict(err.message)

    @app.errorhandler(InternalError)
    def handle_internal_error(err: InternalError):
        return responses.server_error(_detail(err.message))

    @app.errorhandler(404)
    def handle_unknown_route(err: HTTPException):
        return responses.not_found(f"Route {request.path} does not exist")

    @app.errorhandler(405)
    def handle_method_not_allowed(err: HTTPException):
        return responses.error_response(
            405, "Method Not Allowed", f"Method {request.method} is not allowed for {request.path}"
        )

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if isinstance(err, HTTPException):
            return responses.error_response(err.code, err.name, err.description)
        logger.exception("Unhandled error on %s %s: %s", request.method, request.path, err)
        return responses.server_error(_detail(str(err)))


def _detail(text: str) -> str:
    """Expose error text only outside production."""
    if current_app.config.get("ENVIRONMENT") == "production":
        return "Something went wrong"
    return text
