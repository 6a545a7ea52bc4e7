"""Helpers building consistent JSON responses."""

from typing import Any, Optional

from flask import jsonify


def ok(data: Any):
    return jsonify(data), 200


def created(data: Any = None):
    return jsonify(data if data is not None else {"message": "Created successfully"}), 201


def no_content():
    return "", 204


def message(text: str):
    return jsonify({"message": text}), 200


def error_response(status_code: int, error: str, message: str, details: Optional[Any] = None):
    body = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status_code


def bad_request(message: Optional[str] = None, details: Optional[Any] = None):
    return error_response(400, "Bad Request", message or "Invalid request", details)


def not_found(message: Optional[str] = None):
    return error_response(404, "Not Found", message or "Resource not found")


def conflict(message: Optional[str] = None):
    return error_response(409, "Conflict", message or "Request conflicts with current state")


def server_error(message: Optional[str] = None):
    return error_response(500, "Internal Server Error", message or "Internal server error")


def listing(items):
    """200 with the items, or 204 with no body when there are none."""
    if not items:
        return no_content()
    return ok(items)
