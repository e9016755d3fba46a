import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.player import ErrorResponse, PlayerCreate, PlayerResponse, SessionRecordCreate
from app.services.player_service import append_history, create_player, find_player, list_players

router = APIRouter(tags=["players"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "/add_player",
    response_model=PlayerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
    summary="Create a player",
)
async def add_player(body: PlayerCreate, db: AsyncSession = Depends(get_db)):
    return await create_player(db, body.name)


@router.patch(
    "/update_score/{name}",
    response_model=PlayerResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Append a play session to a player, by name",
)
@router.post(
    "/update_score/{name}",
    response_model=PlayerResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Append a play session to a player, by name",
)
async def update_score(name: str, body: SessionRecordCreate, db: AsyncSession = Depends(get_db)):
    return await append_history(db, body.model_dump(), name=name)


@router.patch(
    "/update_score/id/{player_id}",
    response_model=PlayerResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Append a play session to a player, by id",
)
@router.post(
    "/update_score/id/{player_id}",
    response_model=PlayerResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Append a play session to a player, by id",
)
async def update_score_by_id(
    player_id: uuid.UUID,
    body: SessionRecordCreate,
    db: AsyncSession = Depends(get_db),
):
    return await append_history(db, body.model_dump(), player_id=str(player_id))


@router.get(
    "/player/{name}",
    response_model=PlayerResponse,
    responses=_NOT_FOUND,
    summary="Get a player by name",
)
async def get_player(name: str, db: AsyncSession = Depends(get_db)):
    return await find_player(db, name=name)


@router.get(
    "/player/id/{player_id}",
    response_model=PlayerResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Get a player by id",
)
async def get_player_by_id(player_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await find_player(db, player_id=str(player_id))


@router.get(
    "/get_all_players",
    response_model=list[PlayerResponse],
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    summary="List all players, newest first",
)
async def get_all_players(db: AsyncSession = Depends(get_db)):
    return await list_players(db)
