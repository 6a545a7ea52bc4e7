import logging

from flask import Flask
from sqlalchemy.orm import sessionmaker

__version__ = "1.0.0"

from .config import settings
from .database import build_engine
from .security.config import init_security


def create_app(test_config=None):
    app = Flask(__name__)

    # Load configuration from settings
    app.config.from_mapping(
        DATABASE_URL=settings.DATABASE_URL,
        DEBUG=settings.DEBUG,
        ENVIRONMENT=settings.ENVIRONMENT,
        CORS_ORIGINS=settings.CORS_ORIGINS,
        LOG_LEVEL=settings.LOG_LEVEL,
        SEED_DATA=settings.SEED_DATA,
        SQL_ECHO=False,
    )

    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Configure SQLAlchemy engine/session using DATABASE_URL
    engine = build_engine(app.config["DATABASE_URL"], echo=app.config["SQL_ECHO"])
    SessionLocal = sessionmaker(bind=engine)

    # attach to app for other modules to use
    app.extensions["db_engine"] = engine
    app.extensions["db_session_factory"] = SessionLocal

    # Keep payload keys in the order the serializers emit them
    app.json.sort_keys = False

    # Initialize security (CORS)
    init_security(app)

    # register blueprints
    from .docs import init_api_docs
    from .routes import api_bp, club_bp, player_bp, register_error_handlers

    app.register_blueprint(api_bp)
    app.register_blueprint(club_bp)
    app.register_blueprint(player_bp)
    init_api_docs(app)
    register_error_handlers(app)

    # helper to create DB tables based on SQLAlchemy models
    def init_db():
        try:
            from .models import Base

            Base.metadata.create_all(bind=engine)
        except Exception as e:
            logging.exception("init_db failed: %s", e)
            # re-raise so callers (tests) can handle or log as needed
            raise

    app.init_db = init_db

    # helper to load the bundled clubs and players into empty tables
    def seed_db():
        from .seed import seed_database

        with SessionLocal() as db:
            return seed_database(db)

    app.seed_db = seed_db

    if app.config["SEED_DATA"]:
        try:
            init_db()
            seed_db()
        except Exception as e:
            # the API still serves whatever the database holds
            logging.exception("Startup seed failed: %s", e)

    return app
