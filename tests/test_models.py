import sqlite3

import pytest
from sqlalchemy import Text
from sqlalchemy.exc import IntegrityError

from champions import create_app
from champions.models import Club, Player, Statistics


def test_init_db_creates_tables(tmp_path):
    db_file = tmp_path / "test_champions.db"
    cfg = {"DATABASE_URL": f"sqlite:///{db_file}", "SEED_DATA": False, "TESTING": True}
    app = create_app(cfg)

    # should create SQLAlchemy tables without raising
    app.init_db()

    # check sqlite_master to ensure tables exist
    conn = sqlite3.connect(str(db_file))
    cur = conn.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
    tables = {r[0] for r in cur.fetchall()}
    conn.close()
    app.extensions["db_engine"].dispose()

    assert {"clubs", "players", "statistics"} <= tables


def test_club_name_is_unique(in_memory_session):
    in_memory_session.add(Club(name="Real Madrid"))
    in_memory_session.commit()

    in_memory_session.add(Club(name="Real Madrid"))
    with pytest.raises(IntegrityError):
        in_memory_session.commit()
    in_memory_session.rollback()


def test_player_requires_existing_club(in_memory_session):
    in_memory_session.add(Player(name="Ghost", nationality="Nowhere", position="ST", club_id=999))
    with pytest.raises(IntegrityError):
        in_memory_session.commit()
    in_memory_session.rollback()


def test_statistics_range_is_enforced_by_database(in_memory_session, full_stats):
    club = Club(name="Inter Milan")
    player = Player(name="Lautaro Martinez", nationality="Argentina", position="ST", club=club)
    player.statistics = Statistics(**dict(full_stats, pace=101))
    in_memory_session.add(player)

    with pytest.raises(IntegrityError):
        in_memory_session.commit()
    in_memory_session.rollback()


def test_player_has_at_most_one_statistics_row(in_memory_session, full_stats):
    club = Club(name="Arsenal")
    player = Player(name="Bukayo Saka", nationality="England", position="RW", club=club)
    in_memory_session.add(player)
    in_memory_session.commit()

    in_memory_session.add(Statistics(player_id=player.id, **full_stats))
    in_memory_session.add(Statistics(player_id=player.id, **full_stats))
    with pytest.raises(IntegrityError):
        in_memory_session.commit()
    in_memory_session.rollback()


def test_deleting_club_row_cascades_to_players_and_statistics(in_memory_session, full_stats):
    club = Club(name="Liverpool")
    player = Player(name="Mohamed Salah", nationality="Egypt", position="RW", club=club)
    player.statistics = Statistics(**full_stats)
    in_memory_session.add(club)
    in_memory_session.commit()

    in_memory_session.delete(club)
    in_memory_session.commit()

    assert in_memory_session.query(Player).count() == 0
    assert in_memory_session.query(Statistics).count() == 0


def test_statistics_as_dict_lists_score_fields(full_stats):
    stats = Statistics(**full_stats)
    assert stats.as_dict() == full_stats


@pytest.mark.parametrize("column", [
    Club.__table__.c.name,
    Player.__table__.c.name,
    Player.__table__.c.nationality,
    Player.__table__.c.position,
])
def test_text_columns_have_no_length_limit(column):
    assert isinstance(column.type, Text)
    assert column.type.length is None
