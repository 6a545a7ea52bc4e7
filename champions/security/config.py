"""Security configuration for cross-origin access."""

from flask import Flask, request


class SecurityConfig:
    """Security configuration constants."""

    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS']
    CORS_HEADERS = ['Content-Type', 'Authorization']


def init_security(app: Flask) -> None:
    """Initialize security components.

    Adds CORS headers for the origins listed in ``CORS_ORIGINS``.

    Args:
        app: Flask application instance
    """
    allowed_origins = set(app.config.get('CORS_ORIGINS') or [])

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get('Origin')
        if origin and origin in allowed_origins:
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Credentials'] = 'true'
            response.headers['Access-Control-Allow-Methods'] = ', '.join(SecurityConfig.CORS_METHODS)
            response.headers['Access-Control-Allow-Headers'] = ', '.join(SecurityConfig.CORS_HEADERS)
            response.headers.add('Vary', 'Origin')
        return response
