"""Load the bundled clubs and players into an empty database.

Clubs are inserted only when the clubs table is empty and players (with
their statistics) only when the players table is empty, so running the seed
twice is harmless.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from champions.models import STAT_FIELDS, Club, Player, Statistics

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def load_json(path: Path) -> List[Dict[str, Any]]:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def seed_clubs(db: Session, clubs: List[Dict[str, Any]]) -> int:
    """Insert clubs unless the table already holds rows. Returns rows inserted."""
    if db.query(Club).count():
        logger.info("Clubs table already populated, skipping seed")
        return 0

    for entry in clubs:
        db.add(Club(name=entry["name"].strip()))
    db.commit()
    logger.info(f"Seeded {len(clubs)} clubs")
    return len(clubs)


def seed_players(db: Session, players: List[Dict[str, Any]]) -> int:
    """Insert players and statistics unless the table already holds rows.

    Each entry names its club; entries whose club is unknown are skipped.
    Statistics keys are matched case-insensitively (``Overall`` or ``overall``).
    """
    if db.query(Player).count():
        logger.info("Players table already populated, skipping seed")
        return 0

    clubs_by_name = {club.name: club.id for club in db.query(Club).all()}
    inserted = 0
    for entry in players:
        club_id = clubs_by_name.get(entry.get("club"))
        if club_id is None:
            logger.warning(f"Club '{entry.get('club')}' not found for player {entry.get('name')}, skipping")
            continue

        player = Player(
            name=entry["name"],
            nationality=entry["nationality"],
            position=entry["position"],
            club_id=club_id,
        )
        scores = _statistics_from(entry.get("statistics"))
        if scores is not None:
            player.statistics = Statistics(**scores)
        db.add(player)
        inserted += 1

    db.commit()
    logger.info(f"Seeded {inserted} players with statistics")
    return inserted


def _statistics_from(raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, int]]:
    if not raw:
        return None
    lowered = {key.lower(): value for key, value in raw.items()}
    return {field: int(lowered[field]) for field in STAT_FIELDS}


def seed_database(db: Session, data_dir: Path = DATA_DIR) -> Dict[str, int]:
    """Seed clubs then players from ``clubs.json`` and ``players.json``.

    Returns:
        Number of clubs and players inserted
    """
    try:
        clubs = seed_clubs(db, load_json(data_dir / "clubs.json"))
        players = seed_players(db, load_json(data_dir / "players.json"))
    except Exception:
        # pending players are discarded; seeded clubs stay committed
        db.rollback()
        raise
    return {"clubs": clubs, "players": players}
