from app.models.base import Base  # noqa: F401
from app.models.player import Player  # noqa: F401
from app.models.session_record import SessionRecord  # noqa: F401
