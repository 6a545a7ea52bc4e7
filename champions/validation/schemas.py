"""Validation schemas for API requests using Marshmallow.

The schemas check shapes and types of request bodies and query strings.
Business rules (blank strings, score ranges, uniqueness) stay in the services.
"""

from typing import Any, Dict

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validates_schema

from champions.models import STAT_FIELDS


class RequestSchema(Schema):
    """Ignore keys the API does not know about."""

    class Meta:
        unknown = EXCLUDE


class ClubCreateSchema(RequestSchema):
    """Schema for validating club creation requests."""

    name = fields.Str(
        required=True,
        error_messages={'required': 'Club name is required'}
    )


class ClubUpdateSchema(RequestSchema):
    """Schema for validating club update requests."""

    name = fields.Str()


class StatisticsCreateSchema(RequestSchema):
    """Schema for the statistics embedded in a player creation request.

    Completeness and ranges are checked by the player service.
    """

    overall = fields.Int(strict=True)
    pace = fields.Int(strict=True)
    shooting = fields.Int(strict=True)
    passing = fields.Int(strict=True)
    dribbling = fields.Int(strict=True)
    defending = fields.Int(strict=True)
    physical = fields.Int(strict=True)


class StatisticsUpdateSchema(RequestSchema):
    """Schema for validating partial statistics updates."""

    overall = fields.Int(strict=True)
    pace = fields.Int(strict=True)
    shooting = fields.Int(strict=True)
    passing = fields.Int(strict=True)
    dribbling = fields.Int(strict=True)
    defending = fields.Int(strict=True)
    physical = fields.Int(strict=True)

    @validates_schema
    def validate_not_empty(self, data: Dict[str, Any], **kwargs):
        """Require at least one score."""
        if not any(field in data for field in STAT_FIELDS):
            raise ValidationError('At least one statistic field is required')


class PlayerCreateSchema(RequestSchema):
    """Schema for validating player creation requests."""

    name = fields.Str(
        required=True,
        error_messages={'required': 'Player name is required'}
    )

    nationality = fields.Str(
        required=True,
        error_messages={'required': 'Player nationality is required'}
    )

    position = fields.Str(
        required=True,
        error_messages={'required': 'Player position is required'}
    )

    club_id = fields.Int(
        strict=True,
        required=True,
        data_key='clubId',
        error_messages={'required': 'Club ID is required'}
    )

    statistics = fields.Nested(StatisticsCreateSchema, load_default=None, allow_none=True)


class PlayerUpdateSchema(RequestSchema):
    """Schema for validating player update requests."""

    name = fields.Str()
    nationality = fields.Str()
    position = fields.Str()
    club_id = fields.Int(strict=True, data_key='clubId')


class PlayerFilterSchema(RequestSchema):
    """Schema for the query string of the player listing."""

    club_id = fields.Int(data_key='clubId')
    position = fields.Str()
    nationality = fields.Str()
    min_overall = fields.Int(data_key='minOverall')
    max_overall = fields.Int(data_key='maxOverall')


# Schema instances for reuse
club_create_schema = ClubCreateSchema()
club_update_schema = ClubUpdateSchema()
player_create_schema = PlayerCreateSchema()
player_update_schema = PlayerUpdateSchema()
statistics_update_schema = StatisticsUpdateSchema()
player_filter_schema = PlayerFilterSchema()
