"""Error taxonomy shared by the player store and the HTTP layer.

Each error knows the status code it maps to, so the handlers registered in
``app.main`` can render any of them without a lookup table.
"""

from typing import Any

from fastapi import status


class LeaderboardError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(LeaderboardError):
    """Malformed or missing input. Raised before any storage call."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(LeaderboardError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(LeaderboardError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(LeaderboardError):
    """Connectivity, timeout or internal storage failure.

    The message is always generic; the underlying exception is chained for
    logs only.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
