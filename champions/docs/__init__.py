"""OpenAPI/Swagger documentation setup for the Champions API.

This module configures Flask-RESTX for API documentation generation.
Provides interactive Swagger UI at /api/docs/ and the OpenAPI document at
/api/docs/swagger.json.
"""

from flask import Blueprint
from flask_restx import Api, Resource, fields
from flask_restx.namespace import Namespace

from champions import __version__

# Create blueprint for API documentation
doc_bp = Blueprint('docs', __name__, url_prefix='/api/docs')


class DocsApi(Api):
    """Documents the routes served under /api rather than under the docs blueprint."""

    @property
    def base_path(self):
        return '/api'


api = DocsApi(
    doc_bp,
    version=__version__,
    title='Champions API',
    description='''
    ## REST API for managing football clubs, players and player statistics

    ### Features:
    - **Clubs**: CRUD operations; names are unique and clubs with players cannot be deleted
    - **Players**: CRUD operations with optional statistics, filters and aggregates
    - **Statistics**: seven scores between 0 and 100 per player

    ### Status codes:
    - `200` success, `201` created, `204` empty listing
    - `400` invalid input, `404` unknown record, `409` name or dependency conflict
    - `500` unexpected failure

    ### Error Responses:
    ```json
    {
        "error": "Bad Request",
        "message": "Statistics must be between 0 and 100"
    }
    ```

    ### Base URL:
    All API endpoints are prefixed with `/api/`
    ''',
    doc='/',
    contact='Champions API Team',
)

# Define namespaces for organization
health_ns = Namespace('health', description='API status')
clubs_ns = Namespace('clubs', description='Club management operations')
players_ns = Namespace('players', description='Player and statistics operations')

# Add namespaces to API
api.add_namespace(health_ns, path='/health')
api.add_namespace(clubs_ns, path='/clubs')
api.add_namespace(players_ns, path='/players')

# =======================
# API Models (Schemas)
# =======================

error_model = api.model('Error', {
    'error': fields.String(description='Error category'),
    'message': fields.String(description='Error message'),
    'details': fields.Raw(description='Field-specific validation errors')
})

message_model = api.model('Message', {
    'message': fields.String(description='Confirmation message')
})

health_model = api.model('Health', {
    'status': fields.String(description='OK or DEGRADED'),
    'message': fields.String(description='Status message'),
    'database': fields.String(description='connected or disconnected'),
    'timestamp': fields.String(description='Server time (ISO 8601)'),
    'version': fields.String(description='API version'),
    'documentation': fields.String(description='Documentation URL')
})

statistics_fields = {
    'overall': fields.Integer(description='Overall rating', min=0, max=100),
    'pace': fields.Integer(description='Pace', min=0, max=100),
    'shooting': fields.Integer(description='Shooting', min=0, max=100),
    'passing': fields.Integer(description='Passing', min=0, max=100),
    'dribbling': fields.Integer(description='Dribbling', min=0, max=100),
    'defending': fields.Integer(description='Defending', min=0, max=100),
    'physical': fields.Integer(description='Physical', min=0, max=100),
}

statistics_model = api.model('Statistics', {
    'id': fields.Integer(readonly=True, description='Statistics unique identifier'),
    **statistics_fields,
    'playerId': fields.Integer(readonly=True, description='Owning player ID')
})

statistics_create_model = api.model('StatisticsCreate', {
    name: fields.Integer(required=True, description=field.description, min=0, max=100)
    for name, field in statistics_fields.items()
})

statistics_update_model = api.model('StatisticsUpdate', statistics_fields)

club_summary_model = api.model('ClubSummary', {
    'id': fields.Integer(readonly=True, description='Club unique identifier'),
    'name': fields.String(description='Club name')
})

player_model = api.model('Player', {
    'id': fields.Integer(readonly=True, description='Player unique identifier'),
    'name': fields.String(required=True, description='Player full name'),
    'nationality': fields.String(required=True, description='Player nationality'),
    'position': fields.String(required=True, description='Position on the pitch, e.g. ST, GK'),
    'clubId': fields.Integer(required=True, description='Owning club ID'),
    'club': fields.Nested(club_summary_model, readonly=True),
    'statistics': fields.Nested(statistics_model, allow_null=True)
})

player_create_model = api.model('PlayerCreate', {
    'name': fields.String(required=True, description='Player full name'),
    'nationality': fields.String(required=True, description='Player nationality'),
    'position': fields.String(required=True, description='Position on the pitch'),
    'clubId': fields.Integer(required=True, description='Owning club ID'),
    'statistics': fields.Nested(statistics_create_model, description='Optional statistics')
})

player_update_model = api.model('PlayerUpdate', {
    'name': fields.String(description='Player full name'),
    'nationality': fields.String(description='Player nationality'),
    'position': fields.String(description='Position on the pitch'),
    'clubId': fields.Integer(description='Owning club ID')
})

players_statistics_model = api.model('PlayersStatistics', {
    'totalPlayers': fields.Integer(description='Number of players'),
    'averageOverall': fields.Float(description='Mean overall of players with statistics'),
    'topPositions': fields.Raw(description='Five most common positions with counts'),
    'topNationalities': fields.Raw(description='Five most common nationalities with counts')
})

club_model = api.model('Club', {
    'id': fields.Integer(readonly=True, description='Club unique identifier'),
    'name': fields.String(required=True, description='Unique club name'),
    'players': fields.List(fields.Nested(player_model), readonly=True)
})

club_write_model = api.model('ClubWrite', {
    'name': fields.String(required=True, description='Unique club name')
})

clubs_statistics_model = api.model('ClubsStatistics', {
    'totalClubs': fields.Integer(description='Number of clubs'),
    'clubsWithPlayers': fields.Integer(description='Clubs owning at least one player'),
    'averagePlayersPerClub': fields.Float(description='Mean squad size')
})

player_filter_parser = api.parser()
player_filter_parser.add_argument('clubId', type=int, location='args', help='Filter by club')
player_filter_parser.add_argument('position', type=str, location='args', help='Filter by position')
player_filter_parser.add_argument('nationality', type=str, location='args', help='Filter by nationality')
player_filter_parser.add_argument('minOverall', type=int, location='args', help='Lowest overall (0-100)')
player_filter_parser.add_argument('maxOverall', type=int, location='args', help='Highest overall (0-100)')

# =======================
# API Documentation Resources
# =======================

@health_ns.route('')
class HealthCheck(Resource):
    @api.doc(id='health_check')
    @api.response(200, 'API and database available', health_model)
    @api.response(503, 'Database unreachable', health_model)
    def get(self):
        """System health check endpoint

        Returns API status, version and database connectivity.
        """


# Clubs Namespace Documentation
@clubs_ns.route('')
class ClubsCollection(Resource):
    @api.doc(id='list_clubs')
    @api.response(200, 'Clubs with their players', [club_model])
    @api.response(204, 'No clubs')
    def get(self):
        """List clubs

        Returns every club with its players.
        """

    @api.doc(id='create_club')
    @api.expect(club_write_model)
    @api.response(201, 'Club created', club_model)
    @api.response(400, 'Validation Error', error_model)
    @api.response(409, 'Club name already exists', error_model)
    def post(self):
        """Create club

        The trimmed name must not be in use by another club.
        """


@clubs_ns.route('/statistics')
class ClubsStatistics(Resource):
    @api.doc(id='clubs_statistics')
    @api.response(200, 'Club statistics', clubs_statistics_model)
    def get(self):
        """Club statistics"""


@clubs_ns.route('/name/<string:name>')
class ClubByName(Resource):
    @api.doc(id='get_club_by_name')
    @api.response(200, 'Club found', club_model)
    @api.response(404, 'Club not found', error_model)
    def get(self, name):
        """Find club by exact name"""


@clubs_ns.route('/<int:club_id>')
class ClubResource(Resource):
    @api.doc(id='get_club')
    @api.response(200, 'Club found', club_model)
    @api.response(400, 'Invalid club ID', error_model)
    @api.response(404, 'Club not found', error_model)
    def get(self, club_id):
        """Get club by ID"""

    @api.doc(id='update_club')
    @api.expect(club_write_model)
    @api.response(200, 'Club updated', club_model)
    @api.response(404, 'Club not found', error_model)
    @api.response(409, 'Club name already exists', error_model)
    def put(self, club_id):
        """Rename club"""

    @api.doc(id='delete_club')
    @api.response(200, 'Club deleted', message_model)
    @api.response(404, 'Club not found', error_model)
    @api.response(409, 'Club has players', error_model)
    def delete(self, club_id):
        """Delete club

        Clubs that still own players cannot be deleted.
        """


@clubs_ns.route('/<int:club_id>/players')
class ClubPlayers(Resource):
    @api.doc(id='get_club_players')
    @api.response(200, 'Players of the club', [player_model])
    @api.response(204, 'Club has no players')
    def get(self, club_id):
        """List the players of a club"""


# Players Namespace Documentation
@players_ns.route('')
class PlayersCollection(Resource):
    @api.doc(id='list_players')
    @api.expect(player_filter_parser)
    @api.response(200, 'Matching players', [player_model])
    @api.response(204, 'No matching players')
    @api.response(400, 'Invalid filter', error_model)
    def get(self):
        """List players

        All filters are optional and combine with AND.
        """

    @api.doc(id='create_player')
    @api.expect(player_create_model)
    @api.response(201, 'Player created', player_model)
    @api.response(400, 'Validation Error', error_model)
    def post(self):
        """Create player

        Statistics, when given, are stored together with the player.
        """


@players_ns.route('/statistics')
class PlayersStatistics(Resource):
    @api.doc(id='players_statistics')
    @api.response(200, 'Player statistics', players_statistics_model)
    def get(self):
        """Player statistics"""


@players_ns.route('/position/<string:position>')
class PlayersByPosition(Resource):
    @api.doc(id='players_by_position')
    @api.response(200, 'Players in the position', [player_model])
    @api.response(204, 'No players in the position')
    def get(self, position):
        """List players by position"""


@players_ns.route('/nationality/<string:nationality>')
class PlayersByNationality(Resource):
    @api.doc(id='players_by_nationality')
    @api.response(200, 'Players of the nationality', [player_model])
    @api.response(204, 'No players of the nationality')
    def get(self, nationality):
        """List players by nationality"""


@players_ns.route('/<int:player_id>')
class PlayerResource(Resource):
    @api.doc(id='get_player')
    @api.response(200, 'Player found', player_model)
    @api.response(404, 'Player not found', error_model)
    def get(self, player_id):
        """Get player by ID"""

    @api.doc(id='update_player')
    @api.expect(player_update_model)
    @api.response(200, 'Player updated', player_model)
    @api.response(404, 'Player not found', error_model)
    def put(self, player_id):
        """Update player

        Only the supplied fields change.
        """

    @api.doc(id='delete_player')
    @api.response(200, 'Player deleted', message_model)
    @api.response(404, 'Player not found', error_model)
    def delete(self, player_id):
        """Delete player and statistics"""


@players_ns.route('/<int:player_id>/statistics')
class PlayerStatistics(Resource):
    @api.doc(id='update_player_statistics')
    @api.expect(statistics_update_model)
    @api.response(200, 'Statistics updated', player_model)
    @api.response(400, 'Statistics out of range', error_model)
    @api.response(404, 'Player statistics not found', error_model)
    def put(self, player_id):
        """Update player statistics

        Only the supplied scores change; any out-of-range score rejects the request.
        """


def init_api_docs(app):
    """Initialize API documentation in Flask app."""
    # Register the docs blueprint if not already registered (idempotent)
    if doc_bp.name not in app.blueprints:
        app.register_blueprint(doc_bp)

    return api
