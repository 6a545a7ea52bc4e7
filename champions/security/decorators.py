"""Request decorators for API endpoints.

Provides validation, request logging and response hardening decorators.
"""

import logging
import time
from functools import wraps
from typing import Callable
from flask import request, jsonify, g, current_app
from marshmallow import Schema, ValidationError

from champions.exceptions import ServiceError

logger = logging.getLogger(__name__)


def _validation_failed(err: ValidationError):
    logger.warning(
        f"Validation error from {request.remote_addr}: {err.messages}",
        extra={
            "endpoint": request.endpoint,
            "method": request.method,
            "ip": request.remote_addr,
            "validation_errors": err.messages
        }
    )

    return jsonify({
        "error": "Bad Request",
        "message": "Validation failed",
        "details": err.messages
    }), 400


def validate_json(schema: Schema):
    """Decorator for validating JSON request data using Marshmallow schema.

    Args:
        schema: Marshmallow schema for validation

    Returns:
        Decorated function with validated data in g.validated_data
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            # Check if request has JSON data
            if not request.is_json:
                return jsonify({
                    "error": "Bad Request",
                    "message": "Content-Type must be application/json"
                }), 400

            json_data = request.get_json(silent=True)
            if not isinstance(json_data, dict):
                return jsonify({
                    "error": "Bad Request",
                    "message": "Request body must be a JSON object"
                }), 400

            try:
                # Store validated data in g for use in the endpoint
                g.validated_data = schema.load(json_data)
            except ValidationError as err:
                return _validation_failed(err)

            return f(*args, **kwargs)

        return decorated_function
    return decorator


def validate_query(schema: Schema):
    """Decorator validating the query string; result goes to g.validated_query."""
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                g.validated_query = schema.load(request.args.to_dict())
            except ValidationError as err:
                return _validation_failed(err)

            return f(*args, **kwargs)

        return decorated_function
    return decorator


def log_api_request(include_response_time: bool = True):
    """Decorator for comprehensive API request logging.

    Args:
        include_response_time: Whether to log response time

    Returns:
        Decorated function with request/response logging
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            start_time = time.time() if include_response_time else None

            # Log incoming request
            logger.info(
                f"API Request: {request.method} {request.path}",
                extra={
                    "method": request.method,
                    "path": request.path,
                    "endpoint": request.endpoint,
                    "ip": request.remote_addr,
                    "user_agent": request.headers.get('User-Agent'),
                    "content_length": request.content_length,
                    "query_params": dict(request.args)
                }
            )

            try:
                # Execute the function
                response = f(*args, **kwargs)

                # Log successful response
                if include_response_time:
                    duration = time.time() - start_time
                    logger.info(
                        f"API Response: {request.method} {request.path} - {duration:.3f}s",
                        extra={
                            "method": request.method,
                            "path": request.path,
                            "endpoint": request.endpoint,
                            "ip": request.remote_addr,
                            "response_time": duration
                        }
                    )

                return response

            except ServiceError as err:
                # Expected business outcome, answered by the error handlers
                logger.warning(
                    f"API Rejected: {request.method} {request.path} - {type(err).__name__}: {err.message}",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "endpoint": request.endpoint,
                        "ip": request.remote_addr,
                        "error": err.message
                    }
                )
                raise

            except Exception as err:
                # Log errors
                logger.error(
                    f"API Error: {request.method} {request.path} - {err}",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "endpoint": request.endpoint,
                        "ip": request.remote_addr,
                        "error": str(err)
                    },
                    exc_info=True
                )
                raise

        return decorated_function
    return decorator


def security_headers():
    """Decorator to add security headers to responses."""
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            response = f(*args, **kwargs)

            # Ensure response is a Flask response object
            if not hasattr(response, 'headers'):
                response = current_app.make_response(response)

            # Add security headers
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['X-XSS-Protection'] = '1; mode=block'
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
            response.headers['Content-Security-Policy'] = "default-src 'self'"
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

            return response

        return decorated_function
    return decorator
