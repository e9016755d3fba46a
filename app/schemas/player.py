from datetime import datetime

from pydantic import BaseModel, Field

from app.models.session_record import SESSION_VALUE_MAX


class PlayerCreate(BaseModel):
    name: str


class SessionRecordCreate(BaseModel):
    wave: int = Field(ge=0, le=SESSION_VALUE_MAX, strict=True)
    score: int = Field(ge=0, le=SESSION_VALUE_MAX, strict=True)
    playtime: int = Field(ge=0, le=SESSION_VALUE_MAX, strict=True, description="Seconds played")


class SessionRecordResponse(BaseModel):
    wave: int
    score: int
    playtime: int
    played_at: datetime

    model_config = {"from_attributes": True}


class PlayerResponse(BaseModel):
    id: str
    name: str
    history: list[SessionRecordResponse] = []
    created_at: datetime

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    error: str
    details: list[dict[str, str]] | None = None
