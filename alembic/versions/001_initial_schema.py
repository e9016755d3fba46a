"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=True)

    op.create_table(
        "session_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("player_id", sa.String(length=36), nullable=False),
        sa.Column("wave", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("playtime", sa.Integer(), nullable=False),
        sa.Column(
            "played_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("wave >= 0", name="ck_session_records_wave_non_negative"),
        sa.CheckConstraint("score >= 0", name="ck_session_records_score_non_negative"),
        sa.CheckConstraint("playtime >= 0", name="ck_session_records_playtime_non_negative"),
        sa.ForeignKeyConstraint(["player_id"], ["players.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_session_records_player_id"), "session_records", ["player_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_session_records_player_id"), table_name="session_records")
    op.drop_table("session_records")

    op.drop_index(op.f("ix_players_name"), table_name="players")
    op.drop_table("players")
