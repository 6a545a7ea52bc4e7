"""Marshmallow schemas turning ORM objects into API JSON (camelCase keys)."""

from marshmallow import Schema, fields


class StatisticsSchema(Schema):
    id = fields.Int()
    overall = fields.Int()
    pace = fields.Int()
    shooting = fields.Int()
    passing = fields.Int()
    dribbling = fields.Int()
    defending = fields.Int()
    physical = fields.Int()
    player_id = fields.Int(data_key='playerId')


class ClubSummarySchema(Schema):
    id = fields.Int()
    name = fields.Str()


class PlayerSchema(Schema):
    id = fields.Int()
    name = fields.Str()
    nationality = fields.Str()
    position = fields.Str()
    club_id = fields.Int(data_key='clubId')
    club = fields.Nested(ClubSummarySchema, allow_none=True)
    statistics = fields.Nested(StatisticsSchema, allow_none=True)


class ClubSchema(Schema):
    id = fields.Int()
    name = fields.Str()
    players = fields.List(fields.Nested(PlayerSchema(exclude=('club',))))


club_schema = ClubSchema()
clubs_schema = ClubSchema(many=True)
player_schema = PlayerSchema()
players_schema = PlayerSchema(many=True)
