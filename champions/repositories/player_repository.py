"""Player repository implementation.

Handles all database operations for Player model including the owning club
and the player's statistics record.
"""

from typing import Optional, List, Dict, Any
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from .base import BaseRepository, storable_id
from champions.models import Player, Statistics
import logging

logger = logging.getLogger(__name__)


class PlayerRepository(BaseRepository[Player]):
    """Repository for Player model with club and statistics relationships."""

    def __init__(self, db_session: Session):
        """Initialize player repository.

        Args:
            db_session: SQLAlchemy database session
        """
        super().__init__(db_session, Player)

    def _query(self):
        return self.db.query(Player).options(
            joinedload(Player.club),
            joinedload(Player.statistics)
        )

    def get_by_club(self, club_id: int) -> List[Player]:
        """Get all players in a club.

        Args:
            club_id: Club ID

        Returns:
            List of players in the club
        """
        if not storable_id(club_id):
            return []
        return self._query().filter(Player.club_id == club_id).order_by(Player.id).all()

    def get_by_position(self, position: str) -> List[Player]:
        """Get players by position.

        Args:
            position: Player position (e.g. ST, GK)

        Returns:
            List of players with the specified position
        """
        return self._query().filter(Player.position == position).order_by(Player.id).all()

    def get_by_nationality(self, nationality: str) -> List[Player]:
        """Get players by nationality.

        Args:
            nationality: Player nationality

        Returns:
            List of players with the specified nationality
        """
        return self._query().filter(Player.nationality == nationality).order_by(Player.id).all()

    def find_with_filters(self, club_id: int = None, position: str = None,
                          nationality: str = None, min_overall: int = None,
                          max_overall: int = None) -> List[Player]:
        """Get players matching every supplied filter.

        Args:
            club_id: Club ID to filter by (optional)
            position: Position to filter by (optional)
            nationality: Nationality to filter by (optional)
            min_overall: Lowest overall rating, inclusive (optional)
            max_overall: Highest overall rating, inclusive (optional)

        Returns:
            List of players matching all filters
        """
        query = self._query()

        if club_id is not None:
            if not storable_id(club_id):
                return []
            query = query.filter(Player.club_id == club_id)

        if position is not None:
            query = query.filter(Player.position == position)

        if nationality is not None:
            query = query.filter(Player.nationality == nationality)

        if min_overall is not None or max_overall is not None:
            query = query.join(Player.statistics)
            if min_overall is not None:
                query = query.filter(Statistics.overall >= min_overall)
            if max_overall is not None:
                query = query.filter(Statistics.overall <= max_overall)

        return query.order_by(Player.id).all()

    def create_player(self, name: str, nationality: str, position: str, club_id: int,
                      statistics: Optional[Dict[str, int]] = None) -> Player:
        """Create a player and, optionally, its statistics in one transaction.

        Args:
            name: Player name
            nationality: Player nationality
            position: Player position
            club_id: Owning club ID
            statistics: Score values keyed by field name (optional)

        Returns:
            Created player instance

        Raises:
            IntegrityError: If database constraints are violated; nothing is persisted
        """
        player = Player(name=name, nationality=nationality, position=position, club_id=club_id)
        if statistics is not None:
            player.statistics = Statistics(**statistics)

        try:
            self.db.add(player)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to create player {name}: {e}")
            raise

        logger.info(
            f"Created player {player.id} in club {club_id}"
            f"{' with statistics' if statistics is not None else ''}"
        )
        return self.get_by_id(player.id)

    def update_statistics(self, player_id: int, **scores) -> Optional[Statistics]:
        """Update some or all statistic fields of a player.

        Args:
            player_id: Owning player ID
            **scores: Score fields to change

        Returns:
            Updated statistics, None if the player has no statistics record
        """
        if not storable_id(player_id):
            return None
        stats = self.db.query(Statistics).filter(Statistics.player_id == player_id).first()
        if not stats:
            return None

        for field, value in scores.items():
            setattr(stats, field, value)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to update statistics of player {player_id}: {e}")
            raise

        self.db.refresh(stats)
        logger.info(f"Updated statistics of player {player_id}: {sorted(scores)}")
        return stats

    def get_summary_rows(self) -> List[Dict[str, Any]]:
        """Get the position, nationality and overall of every player in id order."""
        rows = (
            self.db.query(Player.position, Player.nationality, Statistics.overall)
            .outerjoin(Statistics, Statistics.player_id == Player.id)
            .order_by(Player.id)
            .all()
        )
        return [
            {'position': position, 'nationality': nationality, 'overall': overall}
            for position, nationality, overall in rows
        ]
