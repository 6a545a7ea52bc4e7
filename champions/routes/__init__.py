"""Flask routes using the Repository Pattern.

Routes parse requests, call the domain services and serialise the results;
error translation lives in ``errors``.
"""

from .api_routes import bp as api_bp
from .club_routes import bp as club_bp
from .player_routes import bp as player_bp
from .errors import register_error_handlers

__all__ = ['api_bp', 'club_bp', 'player_bp', 'register_error_handlers']
