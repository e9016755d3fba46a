import uuid
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, utcnow
from app.models.session_record import SessionRecord


NAME_MAX_LENGTH = 100


def _new_player_id() -> str:
    return str(uuid.uuid4())


class Player(Base):
    __tablename__ = "players"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_player_id)
    # The unique index is the real guard against duplicate names; lookups
    # before insert only exist to fail fast.
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False, unique=True, index=True)
    # Set by the database so every service process orders players by one clock.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=utcnow()
    )

    history: Mapped[list[SessionRecord]] = relationship(
        order_by=SessionRecord.id,
        lazy="selectin",
        viewonly=True,
    )
