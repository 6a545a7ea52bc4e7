"""Club business rules on top of the club repository."""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from champions.database import RepositoryContainer
from champions.exceptions import ConflictError, InternalError, NotFoundError
from champions.models import Club
from champions.services.validators import require_text, validate_id

logger = logging.getLogger(__name__)


class ClubService:
    """Service enforcing club naming and deletion rules.

    Receives the shared repository container so every service working on a
    request uses the same session.
    """

    def __init__(self, repos: RepositoryContainer):
        self._repos = repos

    @property
    def _clubs(self):
        return self._repos.clubs

    def list_clubs(self) -> List[Club]:
        """Return every club with its players attached."""
        try:
            return self._clubs.get_all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing clubs: {e}")
            raise InternalError("Failed to fetch clubs") from e

    def get_club(self, club_id: Any) -> Club:
        club_id = validate_id(club_id, "club ID")
        club = self._clubs.get_by_id(club_id)
        if club is None:
            raise NotFoundError("Club not found")
        return club

    def get_club_by_name(self, name: Any) -> Optional[Club]:
        name = require_text(name, "Club name")
        return self._clubs.get_by_name(name)

    def create_club(self, name: Any) -> Club:
        """Create a club after checking its trimmed name is free.

        Raises:
            ValidationError: name missing or blank
            ConflictError: another club already uses the name
        """
        name = require_text(name, "Club name")

        if self._clubs.get_by_name(name) is not None:
            raise ConflictError("A club with this name already exists")

        try:
            club = self._clubs.create(name=name)
        except IntegrityError as e:
            # another writer took the name after the check above
            raise ConflictError("A club with this name already exists") from e

        logger.info(f"Club created: {club.name} (id={club.id})")
        return club

    def update_club(self, club_id: Any, name: Any = None) -> Club:
        """Rename a club.

        Raises:
            InvalidArgumentError: bad id
            ValidationError: supplied name is blank
            NotFoundError: no club with that id
            ConflictError: another club already uses the new name
        """
        club_id = validate_id(club_id, "club ID")
        if name is not None:
            name = require_text(name, "Club name")

        club = self._clubs.get_by_id(club_id)
        if club is None:
            raise NotFoundError("Club not found")

        if name is None:
            return club

        if name != club.name and self._clubs.get_by_name_excluding(name, club_id) is not None:
            raise ConflictError("A club with this name already exists")

        try:
            return self._clubs.update(club_id, name=name)
        except IntegrityError as e:
            raise ConflictError("A club with this name already exists") from e

    def delete_club(self, club_id: Any) -> bool:
        """Delete a club that owns no players.

        Raises:
            InvalidArgumentError: bad id
            NotFoundError: no club with that id
            ConflictError: the club still owns players
        """
        club_id = validate_id(club_id, "club ID")

        if self._clubs.get_by_id(club_id) is None:
            raise NotFoundError("Club not found")

        if self._clubs.count_players(club_id) > 0:
            raise ConflictError("Cannot delete a club that has players")

        return self._clubs.delete(club_id)

    def get_clubs_statistics(self) -> Dict[str, Any]:
        """Summarise clubs and how many players they hold."""
        clubs = self.list_clubs()
        total_clubs = len(clubs)
        clubs_with_players = sum(1 for club in clubs if club.players)
        total_players = sum(len(club.players) for club in clubs)
        average = total_players / total_clubs if total_clubs else 0

        return {
            'totalClubs': total_clubs,
            'clubsWithPlayers': clubs_with_players,
            'averagePlayersPerClub': round(average, 2),
        }
