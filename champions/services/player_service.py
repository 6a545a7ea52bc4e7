"""Player and statistics business rules on top of the player repository."""

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from champions.database import RepositoryContainer
from champions.exceptions import InternalError, NotFoundError, ValidationError
from champions.models import Player
from champions.services.validators import (
    require_text,
    validate_id,
    validate_overall_bound,
    validate_statistics,
)

logger = logging.getLogger(__name__)

TOP_LIMIT = 5


class PlayerService:
    """Service validating player writes and building player summaries."""

    def __init__(self, repos: RepositoryContainer):
        self._repos = repos

    @property
    def _players(self):
        return self._repos.players

    def list_players(self) -> List[Player]:
        try:
            return self._players.get_all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing players: {e}")
            raise InternalError("Failed to fetch players") from e

    def get_player(self, player_id: Any) -> Player:
        player_id = validate_id(player_id, "player ID")
        player = self._players.get_by_id(player_id)
        if player is None:
            raise NotFoundError("Player not found")
        return player

    def list_players_by_club(self, club_id: Any) -> List[Player]:
        club_id = validate_id(club_id, "club ID")
        return self._players.get_by_club(club_id)

    def list_players_by_position(self, position: Any) -> List[Player]:
        position = require_text(position, "Position")
        return self._players.get_by_position(position)

    def list_players_by_nationality(self, nationality: Any) -> List[Player]:
        nationality = require_text(nationality, "Nationality")
        return self._players.get_by_nationality(nationality)

    def list_players_with_filters(self, club_id: Any = None, position: Any = None,
                                  nationality: Any = None, min_overall: Any = None,
                                  max_overall: Any = None) -> List[Player]:
        """Return players matching all supplied filters (AND).

        Without any filter this is the same as ``list_players``. Overall bounds
        only match players that have statistics.
        """
        if all(value is None for value in (club_id, position, nationality, min_overall, max_overall)):
            return self.list_players()

        if club_id is not None:
            club_id = validate_id(club_id, "club ID")
        if position is not None:
            position = require_text(position, "Position")
        if nationality is not None:
            nationality = require_text(nationality, "Nationality")

        min_overall = validate_overall_bound(min_overall, "minOverall")
        max_overall = validate_overall_bound(max_overall, "maxOverall")
        if min_overall is not None and max_overall is not None and min_overall > max_overall:
            raise ValidationError("minOverall cannot be greater than maxOverall")

        return self._players.find_with_filters(
            club_id=club_id,
            position=position,
            nationality=nationality,
            min_overall=min_overall,
            max_overall=max_overall,
        )

    def create_player(self, name: Any, nationality: Any, position: Any, club_id: Any,
                      statistics: Optional[Mapping[str, Any]] = None) -> Player:
        """Create a player, with statistics when given, as one unit.

        Every field is validated before anything is written.

        Raises:
            ValidationError: a field is blank, a score is out of range, or the
                club does not exist
        """
        name = require_text(name, "Player name")
        nationality = require_text(nationality, "Nationality")
        position = require_text(position, "Position")
        club_id = validate_id(club_id, "club ID")

        scores = validate_statistics(statistics) if statistics is not None else None

        if not self._repos.clubs.exists(id=club_id):
            raise ValidationError(f"Club with id {club_id} does not exist")

        try:
            player = self._players.create_player(
                name=name,
                nationality=nationality,
                position=position,
                club_id=club_id,
                statistics=scores,
            )
        except IntegrityError as e:
            # club removed between the check and the insert
            raise ValidationError(f"Club with id {club_id} does not exist") from e

        logger.info(f"Player created: {player.name} (id={player.id}, club={club_id})")
        return player

    def update_player(self, player_id: Any, name: Any = None, nationality: Any = None,
                      position: Any = None, club_id: Any = None) -> Player:
        """Change only the supplied player fields.

        Raises:
            InvalidArgumentError: bad player id or club id
            ValidationError: a supplied string is blank or the club does not exist
            NotFoundError: no player with that id
        """
        player_id = validate_id(player_id, "player ID")

        changes: Dict[str, Any] = {}
        if name is not None:
            changes['name'] = require_text(name, "Player name")
        if nationality is not None:
            changes['nationality'] = require_text(nationality, "Nationality")
        if position is not None:
            changes['position'] = require_text(position, "Position")
        if club_id is not None:
            changes['club_id'] = validate_id(club_id, "club ID")

        if not self._players.exists(id=player_id):
            raise NotFoundError("Player not found")

        if 'club_id' in changes and not self._repos.clubs.exists(id=changes['club_id']):
            raise ValidationError(f"Club with id {changes['club_id']} does not exist")

        try:
            return self._players.update(player_id, **changes)
        except IntegrityError as e:
            raise ValidationError(f"Club with id {changes.get('club_id')} does not exist") from e

    def update_player_statistics(self, player_id: Any, **scores) -> bool:
        """Partially update a player's statistics.

        Returns:
            True if the statistics record existed and was updated, False otherwise

        Raises:
            InvalidArgumentError: bad player id
            ValidationError: any supplied score is out of range (nothing is written)
        """
        player_id = validate_id(player_id, "player ID")
        supplied = {field: value for field, value in scores.items() if value is not None}
        changes = validate_statistics(supplied, partial=True)

        return self._players.update_statistics(player_id, **changes) is not None

    def delete_player(self, player_id: Any) -> bool:
        player_id = validate_id(player_id, "player ID")
        return self._players.delete(player_id)

    def get_players_statistics(self) -> Dict[str, Any]:
        """Aggregate figures over every player, computed on each call."""
        try:
            rows = self._players.get_summary_rows()
        except SQLAlchemyError as e:
            logger.error(f"Error computing player statistics: {e}")
            raise InternalError("Failed to compute player statistics") from e

        overalls = [row['overall'] for row in rows if row['overall'] is not None]
        average = sum(overalls) / len(overalls) if overalls else 0

        # Counter keeps first-seen order, most_common sorts stably
        positions = Counter(row['position'] for row in rows)
        nationalities = Counter(row['nationality'] for row in rows)

        return {
            'totalPlayers': len(rows),
            'averageOverall': round(average, 2),
            'topPositions': [
                {'position': position, 'count': count}
                for position, count in positions.most_common(TOP_LIMIT)
            ],
            'topNationalities': [
                {'nationality': nationality, 'count': count}
                for nationality, count in nationalities.most_common(TOP_LIMIT)
            ],
        }
