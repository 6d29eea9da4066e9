from __future__ import annotations

from typing import Optional, Union

from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import ServerError
from .schemas import Greeting, GreetRequest

Outcome = Union[Greeting, ServerError]

HELLO_TEXT = "Hello, World!"
ROOT_NOT_FOUND_TEXT = "404 page not found"
FALLBACK_TEXT = "Empty Response!"


def hello() -> PlainTextResponse:
    return PlainTextResponse(HELLO_TEXT)


def not_found() -> PlainTextResponse:
    return PlainTextResponse(ROOT_NOT_FOUND_TEXT, status_code=404)


def fallback() -> PlainTextResponse:
    return PlainTextResponse(FALLBACK_TEXT, status_code=404)


def greet_by_name(name: str) -> Outcome:
    """Greet the name taken from the URL; an empty segment is an error."""
    if not name:
        return ServerError.MISSING_NAME
    return Greeting(greet="Hello", name=name)


def greet_from_payload(payload: Optional[GreetRequest]) -> Outcome:
    """Echo the caller's own greeting back.

    Both ``input`` and ``name`` must be non-empty; a missing body is
    treated the same as one with empty fields.
    """
    if payload is None or not payload.input or not payload.name:
        return ServerError.INVALID_PAYLOAD
    return Greeting(greet=payload.input, name=payload.name)


def to_response(outcome: Outcome) -> Union[JSONResponse, PlainTextResponse]:
    if isinstance(outcome, ServerError):
        return outcome.into_response()
    return JSONResponse(outcome.model_dump())
