from __future__ import annotations

from enum import Enum

from fastapi.responses import PlainTextResponse


class ServerError(Enum):
    """Validation failures a handler can hand back instead of a greeting."""

    MISSING_NAME = "Name parameter not provided."
    INVALID_PAYLOAD = "Invalid request payload."

    def __str__(self) -> str:
        return self.value

    @property
    def status_code(self) -> int:
        # Every variant is a client mistake.
        return 400

    def into_response(self) -> PlainTextResponse:
        return PlainTextResponse(str(self), status_code=self.status_code)
