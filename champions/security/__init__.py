"""Security and request-handling helpers for the API."""

from .config import SecurityConfig, init_security
from .decorators import (
    validate_json,
    validate_query,
    log_api_request,
    security_headers,
)

__all__ = [
    'SecurityConfig',
    'init_security',
    'validate_json',
    'validate_query',
    'log_api_request',
    'security_headers',
]
