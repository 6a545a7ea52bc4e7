"""Repository pattern implementation.

This module provides data access layer abstractions following the Repository pattern
for clean separation of concerns and improved testability.
"""

from .base import BaseRepository
from .club_repository import ClubRepository
from .player_repository import PlayerRepository

__all__ = [
    'BaseRepository',
    'ClubRepository',
    'PlayerRepository'
]
