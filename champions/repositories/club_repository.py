"""Club repository implementation.

Handles all database operations for the Club model, always loading the
club's players (and their statistics) alongside it.
"""

from typing import Optional
from sqlalchemy.orm import Session, selectinload

from .base import BaseRepository, storable_id
from champions.models import Club, Player


class ClubRepository(BaseRepository[Club]):
    """Repository for Club model with player relationships."""

    def __init__(self, db_session: Session):
        """Initialize club repository.

        Args:
            db_session: SQLAlchemy database session
        """
        super().__init__(db_session, Club)

    def _query(self):
        return self.db.query(Club).options(
            selectinload(Club.players).selectinload(Player.statistics)
        )

    def get_by_name(self, name: str) -> Optional[Club]:
        """Get club by exact (case-sensitive) name.

        Args:
            name: Club name to search for

        Returns:
            Club instance if found, None otherwise
        """
        return self._query().filter(Club.name == name).first()

    def get_by_name_excluding(self, name: str, club_id: int) -> Optional[Club]:
        """Get another club carrying the given name.

        Args:
            name: Club name to search for
            club_id: ID of the club to ignore

        Returns:
            Club instance if a different club has the name, None otherwise
        """
        return self._query().filter(Club.name == name, Club.id != club_id).first()

    def count_players(self, club_id: int) -> int:
        """Count players owned by a club.

        Args:
            club_id: Club ID

        Returns:
            Number of players in the club
        """
        if not storable_id(club_id):
            return 0
        return self.db.query(Player).filter(Player.club_id == club_id).count()
