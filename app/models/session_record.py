from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, utcnow

# Largest value a 32-bit INTEGER column holds on every supported backend.
SESSION_VALUE_MAX = 2_147_483_647


class SessionRecord(Base):
    """One finished play session. Rows are only ever inserted, never updated."""

    __tablename__ = "session_records"
    __table_args__ = (
        CheckConstraint("wave >= 0", name="ck_session_records_wave_non_negative"),
        CheckConstraint("score >= 0", name="ck_session_records_score_non_negative"),
        CheckConstraint("playtime >= 0", name="ck_session_records_playtime_non_negative"),
    )
    __mapper_args__ = {"eager_defaults": True}

    # Autoincrement id doubles as the append sequence of a player's history.
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_id: Mapped[str] = mapped_column(
        ForeignKey("players.id"), nullable=False, index=True
    )
    wave: Mapped[int] = mapped_column(Integer, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    playtime: Mapped[int] = mapped_column(Integer, nullable=False)
    played_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=utcnow()
    )
