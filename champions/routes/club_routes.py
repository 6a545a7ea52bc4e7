"""Club routes using the Repository Pattern and the club service."""

import logging

from flask import Blueprint, g

from champions.database import RepositoryContainer, with_repositories
from champions.routes import responses
from champions.security import log_api_request, security_headers, validate_json
from champions.serializers import club_schema, clubs_schema, players_schema
from champions.services import ClubService, PlayerService
from champions.validation import club_create_schema, club_update_schema

bp = Blueprint("clubs", __name__, url_prefix="/api/clubs")
logger = logging.getLogger(__name__)


@bp.route("", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def list_clubs(repos: RepositoryContainer):
    """List all clubs with their players."""
    clubs = ClubService(repos).list_clubs()
    return responses.listing(clubs_schema.dump(clubs))


@bp.route("/statistics", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def clubs_statistics(repos: RepositoryContainer):
    """Club counts and average squad size."""
    return responses.ok(ClubService(repos).get_clubs_statistics())


@bp.route("/name/<path:name>", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def get_club_by_name(repos: RepositoryContainer, name: str):
    """Look a club up by its exact name."""
    club = ClubService(repos).get_club_by_name(name)
    if club is None:
        return responses.not_found("Club not found")
    return responses.ok(club_schema.dump(club))


@bp.route("/<club_id>", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def get_club(repos: RepositoryContainer, club_id: str):
    """Get club by ID."""
    club = ClubService(repos).get_club(club_id)
    return responses.ok(club_schema.dump(club))


@bp.route("/<club_id>/players", methods=["GET"])
@security_headers()
@log_api_request()
@with_repositories
def get_club_players(repos: RepositoryContainer, club_id: str):
    """Get all players for a specific club."""
    players = PlayerService(repos).list_players_by_club(club_id)
    return responses.listing(players_schema.dump(players))


@bp.route("", methods=["POST"])
@security_headers()
@log_api_request()
@validate_json(club_create_schema)
@with_repositories
def create_club(repos: RepositoryContainer):
    """Create a new club."""
    club = ClubService(repos).create_club(g.validated_data["name"])
    return responses.created(club_schema.dump(club))


@bp.route("/<club_id>", methods=["PUT"])
@security_headers()
@log_api_request()
@validate_json(club_update_schema)
@with_repositories
def update_club(repos: RepositoryContainer, club_id: str):
    """Rename an existing club."""
    club = ClubService(repos).update_club(club_id, name=g.validated_data.get("name"))
    return responses.ok(club_schema.dump(club))


@bp.route("/<club_id>", methods=["DELETE"])
@security_headers()
@log_api_request()
@with_repositories
def delete_club(repos: RepositoryContainer, club_id: str):
    """Delete a club without players."""
    ClubService(repos).delete_club(club_id)
    return responses.message("Club deleted successfully")
