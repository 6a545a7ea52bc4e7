"""Validation module for API input validation.

Provides Marshmallow schemas for all API endpoints.
"""

from .schemas import (
    ClubCreateSchema, ClubUpdateSchema,
    PlayerCreateSchema, PlayerUpdateSchema,
    StatisticsCreateSchema, StatisticsUpdateSchema,
    PlayerFilterSchema,
    club_create_schema, club_update_schema,
    player_create_schema, player_update_schema,
    statistics_update_schema, player_filter_schema
)

__all__ = [
    'ClubCreateSchema', 'ClubUpdateSchema',
    'PlayerCreateSchema', 'PlayerUpdateSchema',
    'StatisticsCreateSchema', 'StatisticsUpdateSchema',
    'PlayerFilterSchema',
    'club_create_schema', 'club_update_schema',
    'player_create_schema', 'player_update_schema',
    'statistics_update_schema', 'player_filter_schema'
]
