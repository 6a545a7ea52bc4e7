from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import DeclarativeMeta, declarative_base, relationship

Base: DeclarativeMeta = declarative_base()

STAT_FIELDS = (
    "overall",
    "pace",
    "shooting",
    "passing",
    "dribbling",
    "defending",
    "physical",
)
STAT_MIN = 0
STAT_MAX = 100

# largest value an Integer key column holds on every supported backend
ID_MAX = 2**31 - 1


class Club(Base):
    __tablename__ = "clubs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, unique=True, nullable=False)

    # players are removed by the database if a club row is deleted directly;
    # ClubService refuses to delete clubs that still own players
    players = relationship(
        "Player",
        back_populates="club",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Player.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<Club id={self.id} name={self.name}>"


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    nationality = Column(Text, nullable=False)
    position = Column(Text, nullable=False)
    club_id = Column(
        Integer,
        ForeignKey("clubs.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    club = relationship("Club", back_populates="players")
    statistics = relationship(
        "Statistics",
        back_populates="player",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<Player id={self.id} name={self.name} club_id={self.club_id}>"


class Statistics(Base):
    __tablename__ = "statistics"
    __table_args__ = tuple(
        CheckConstraint(
            f"{field} BETWEEN {STAT_MIN} AND {STAT_MAX}", name=f"ck_statistics_{field}_range"
        )
        for field in STAT_FIELDS
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    overall = Column(Integer, nullable=False)
    pace = Column(Integer, nullable=False)
    shooting = Column(Integer, nullable=False)
    passing = Column(Integer, nullable=False)
    dribbling = Column(Integer, nullable=False)
    defending = Column(Integer, nullable=False)
    physical = Column(Integer, nullable=False)
    player_id = Column(
        Integer,
        ForeignKey("players.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        unique=True,
    )

    player = relationship("Player", back_populates="statistics")

    def as_dict(self) -> dict:
        return {field: getattr(self, field) for field in STAT_FIELDS}

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"<Statistics id={self.id} player_id={self.player_id} overall={self.overall}>"
