"""Player store: creation, lookup, history appends and listing.

All coordination between concurrent requests is left to the database.
Name uniqueness is enforced by the unique index on ``players.name`` and a
history append is a single-row insert into ``session_records``, so two
writers never rewrite each other's data.
"""

import asyncio
import functools
import logging
import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.errors import ConflictError, LeaderboardError, NotFoundError, StorageError, ValidationError
from app.models.player import NAME_MAX_LENGTH, Player
from app.models.session_record import SESSION_VALUE_MAX, SessionRecord

logger = logging.getLogger(__name__)

SESSION_FIELDS = ("wave", "score", "playtime")
NAME_TAKEN = "Player name is already taken"


async def _discard_transaction(db: AsyncSession) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        # the StorageError being raised already reports the failure
        logger.exception("Rollback after failed store call also failed")


def storage_operation(func):
    """Bound a store call by the configured timeout and hide driver errors."""

    @functools.wraps(func)
    async def wrapper(db: AsyncSession, *args, **kwargs):
        try:
            async with asyncio.timeout(settings.storage_timeout_seconds):
                return await func(db, *args, **kwargs)
        except LeaderboardError:
            raise
        except TimeoutError as exc:
            logger.error(
                "%s timed out after %ss", func.__name__, settings.storage_timeout_seconds
            )
            await _discard_transaction(db)
            raise StorageError("Storage operation timed out") from exc
        except SQLAlchemyError as exc:
            logger.exception("%s failed", func.__name__)
            await _discard_transaction(db)
            raise StorageError("Storage operation failed") from exc

    return wrapper


def normalize_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Player name is required")
    name = name.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Player name must be at most {NAME_MAX_LENGTH} characters")
    return name


def normalize_player_id(player_id: Any) -> str:
    try:
        return str(uuid.UUID(str(player_id)))
    except ValueError:
        raise ValidationError(f"Invalid player id: {player_id}") from None


def validate_session_record(record: Mapping[str, Any]) -> dict[str, int]:
    missing = [field for field in SESSION_FIELDS if record.get(field) is None]
    if missing:
        raise ValidationError(
            "wave, score and playtime are required",
            details=[{"field": field, "message": "Field required"} for field in missing],
        )

    invalid = [
        field
        for field in SESSION_FIELDS
        if isinstance(record[field], bool)
        or not isinstance(record[field], int)
        or not 0 <= record[field] <= SESSION_VALUE_MAX
    ]
    if invalid:
        raise ValidationError(
            f"wave, score and playtime must be integers between 0 and {SESSION_VALUE_MAX}",
            details=[
                {"field": field, "message": f"Must be an integer between 0 and {SESSION_VALUE_MAX}"}
                for field in invalid
            ],
        )
    return {field: record[field] for field in SESSION_FIELDS}


def _lookup(name: str | None, player_id: str | None):
    if (name is None) == (player_id is None):
        raise ValueError("Exactly one of name or player_id must be given")
    if name is not None:
        return Player.name == name, f"Player not found: {name}"
    player_id = normalize_player_id(player_id)
    return Player.id == player_id, f"No player with id {player_id}"


async def _load_player(db: AsyncSession, criterion) -> Player | None:
    # populate_existing so a player already in the identity map gets a fresh history
    result = await db.execute(
        select(Player).where(criterion).execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


@storage_operation
async def create_player(db: AsyncSession, name: str) -> Player:
    name = normalize_name(name)

    if await _load_player(db, Player.name == name) is not None:
        logger.info("Rejected duplicate player name %r", name)
        raise ConflictError(NAME_TAKEN)

    player = Player(name=name)
    db.add(player)
    try:
        await db.commit()
    except IntegrityError as exc:
        # Lost the race against a concurrent insert of the same name.
        await db.rollback()
        logger.info("Player name %r was taken by a concurrent insert", name)
        raise ConflictError(NAME_TAKEN) from exc

    logger.info("Created player %r (%s)", player.name, player.id)
    return await _load_player(db, Player.id == player.id)


@storage_operation
async def find_player(
    db: AsyncSession, *, name: str | None = None, player_id: str | None = None
) -> Player:
    criterion, not_found = _lookup(name, player_id)
    player = await _load_player(db, criterion)
    if player is None:
        raise NotFoundError(not_found)
    return player


@storage_operation
async def append_history(
    db: AsyncSession,
    record: Mapping[str, Any],
    *,
    name: str | None = None,
    player_id: str | None = None,
) -> Player:
    """Append one session to a player's history and return the updated player.

    The record is validated before any query runs. The append itself is a
    plain insert keyed by the player's id, never a rewrite of the history.
    """
    values = validate_session_record(record)
    criterion, not_found = _lookup(name, player_id)

    result = await db.execute(select(Player.id).where(criterion))
    target_id = result.scalar_one_or_none()
    if target_id is None:
        raise NotFoundError(not_found)

    db.add(SessionRecord(player_id=target_id, **values))
    await db.commit()
    logger.info(
        "Appended session to player %s (wave=%d, score=%d, playtime=%d)",
        target_id,
        values["wave"],
        values["score"],
        values["playtime"],
    )

    return await _load_player(db, Player.id == target_id)


@storage_operation
async def list_players(db: AsyncSession) -> list[Player]:
    result = await db.execute(
        select(Player)
        .order_by(Player.created_at.desc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())
