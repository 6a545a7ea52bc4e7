"""Service layer implementations.

This module provides business logic services that orchestrate repository operations
and implement the club, player and statistics rules.
"""

from .club_service import ClubService
from .player_service import PlayerService

__all__ = [
    'ClubService',
    'PlayerService'
]
