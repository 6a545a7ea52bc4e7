"""API information and health routes."""

import datetime
import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from champions import __version__
from champions.database import get_db_session
from champions.security import log_api_request, security_headers

bp = Blueprint("api", __name__, url_prefix="/api")
logger = logging.getLogger(__name__)


@bp.route("/")
@security_headers()
def index():
    """Describe the API and its entry points."""
    return jsonify({
        "name": "Champions API",
        "description": "RESTful API for managing football clubs and players",
        "version": __version__,
        "documentation": "/api/docs/",
        "endpoints": {
            "health": "/api/health",
            "clubs": "/api/clubs",
            "players": "/api/players"
        }
    })


@bp.route("/health")
@security_headers()
@log_api_request()
def health():
    """Health check endpoint."""
    try:
        # Test database connectivity
        with next(get_db_session()) as db:
            db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        database = "disconnected"

    return jsonify({
        "status": "OK" if database == "connected" else "DEGRADED",
        "message": "Champions API is running",
        "database": database,
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "version": __version__,
        "documentation": "/api/docs/"
    }), 200 if database == "connected" else 503
