"""create clubs, players and statistics tables

Revision ID: 0001_create_champions_tables
Revises:
Create Date: 2025-07-16
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_create_champions_tables"
down_revision = None
branch_labels = None
depends_on = None

STAT_FIELDS = ("overall", "pace", "shooting", "passing", "dribbling", "defending", "physical")


def upgrade():
    op.create_table(
        "clubs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False, unique=True),
    )
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("nationality", sa.Text(), nullable=False),
        sa.Column("position", sa.Text(), nullable=False),
        sa.Column(
            "club_id",
            sa.Integer(),
            sa.ForeignKey("clubs.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_players_club_id", "players", ["club_id"])
    op.create_table(
        "statistics",
        sa.Column("id", sa.Integer(), primary_key=True),
        *[sa.Column(field, sa.Integer(), nullable=False) for field in STAT_FIELDS],
        sa.Column(
            "player_id",
            sa.Integer(),
            sa.ForeignKey("players.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
            unique=True,
        ),
        *[
            sa.CheckConstraint(f"{field} BETWEEN 0 AND 100", name=f"ck_statistics_{field}_range")
            for field in STAT_FIELDS
        ],
    )


def downgrade():
    op.drop_table("statistics")
    op.drop_index("ix_players_club_id", table_name="players")
    op.drop_table("players")
    op.drop_table("clubs")
