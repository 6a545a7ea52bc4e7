"""Player routes using the Repository Pattern and the player service."""

import logging

from flask import Blueprint, g

from champions.database import RepositoryContainer, with_repositories
from champions.routes import responses
from champions.security import log_api_request, security_headers, validate_json, validate_query
from champions.serializers import player_schema, players_schema
from champions.services import PlayerService
from champions.validation import (
    player_create_schema,
    player_filter_schema,
    player_update_schema,
    statistics_update_schema,
)

bp = Blueprint("players", __name__, url_prefix="/api/players")
logger = logging.getLogger(__name__)


@bp.route("", methods=["GET"])
@security_headers()
@log_api_request()
@validate_query(player_filter_schema)
@with_repositories
def list_players(repos: RepositoryContainer):
    """List players, optionally filtered by club, position, nationality or overall."""
    players = PlayerService(repos).list_players_with_filters(**g.validated_query)
    return responses.listing(players_schema.dump(players))


@bp.route("/statistics", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def players_statistics(repos: RepositoryContainer):
    """Aggregate figures over all players."""
    return responses.ok(PlayerService(repos).get_players_statistics())


@bp.route("/position/<position>", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def list_players_by_position(repos: RepositoryContainer, position: str):
    players = PlayerService(repos).list_players_by_position(position)
    return responses.listing(players_schema.dump(players))


@bp.route("/nationality/<nationality>", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def list_players_by_nationality(repos: RepositoryContainer, nationality: str):
    players = PlayerService(repos).list_players_by_nationality(nationality)
    return responses.listing(players_schema.dump(players))


@bp.route("/<player_id>", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def get_player(repos: RepositoryContainer, player_id: str):
    """Get player by ID."""
    player = PlayerService(repos).get_player(player_id)
    return responses.ok(player_schema.dump(player))


@bp.route("", methods=["POST"])
@security_headers()
@log_api_request()
@validate_json(player_create_schema)
@with_repositories
def create_player(repos: RepositoryContainer):
    """Create a new player, optionally with statistics."""
    data = g.validated_data
    player = PlayerService(repos).create_player(
        name=data["name"],
        nationality=data["nationality"],
        position=data["position"],
        club_id=data["club_id"],
        statistics=data.get("statistics"),
    )
    return responses.created(player_schema.dump(player))


@bp.route("/<player_id>", methods=["PUT"])
@security_headers()
@log_api_request()
@validate_json(player_update_schema)
@with_repositories
def update_player(repos: RepositoryContainer, player_id: str):
    """Update an existing player."""
    player = PlayerService(repos).update_player(player_id, **g.validated_data)
    return responses.ok(player_schema.dump(player))


@bp.route("/<player_id>/statistics", methods=["PUT"])
@security_headers()
@log_api_request()
@validate_json(statistics_update_schema)
@with_repositories
def update_player_statistics(repos: RepositoryContainer, player_id: str):
    """Update some or all statistics of a player."""
    service = PlayerService(repos)
    if not service.update_player_statistics(player_id, **g.validated_data):
        return responses.not_found("Player statistics not found")
    return responses.ok(player_schema.dump(service.get_player(player_id)))


@bp.route("/<player_id>", methods=["DELETE"])
@security_headers()
@log_api_request()
@with_repositories
def delete_player(repos: RepositoryContainer, player_id: str):
    """Delete a player and its statistics."""
    if not PlayerService(repos).delete_player(player_id):
        return responses.not_found("Player not found")
    return responses.message("Player deleted successfully")
