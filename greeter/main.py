import json
from email.message import Message
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import handlers
from .schemas import GreetRequest
from .utils import register_convertors

# Must run before any route using ``{...:segment}`` is declared.
register_convertors()

# Only the routes below are served; docs pages and slash redirects would
# otherwise answer paths that belong to the fallback.
app = FastAPI(
    title="Greeter API",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)


# === Helpers ===


def is_json_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    message = Message()
    message["content-type"] = content_type
    if message.get_content_maintype() != "application":
        return False
    subtype = message.get_content_subtype()
    return subtype == "json" or subtype.endswith("+json")


async def optional_greet_request(request: Request) -> Optional[GreetRequest]:
    """Read the POST body as an optional ``GreetRequest``.

    No body, a blank body and a JSON ``null`` all mean "absent" and yield
    ``None``. Anything else that is not a well-formed ``GreetRequest`` is
    rejected here, before the handler runs.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    if not is_json_content_type(request.headers.get("content-type")):
        raise HTTPException(
            status_code=415,
            detail="Expected request with Content-Type: application/json",
        )
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Failed to parse the request body as JSON.")
    if data is None:
        return None
    try:
        return GreetRequest.model_validate(data)
    except ValidationError:
        raise HTTPException(
            status_code=422,
            detail="Failed to deserialize the JSON body into the target type.",
        )


# === Error handling ===


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with the wrong method share the fallback.
    if exc.status_code in (404, 405):
        return handlers.fallback()
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# === Routes ===


@app.api_route("/hello", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def hello():
    return handlers.hello()


@app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def not_found():
    return handlers.not_found()


@app.api_route("/greet/{name:segment}", methods=["GET", "HEAD"])
def greet_user(name: str):
    return handlers.to_response(handlers.greet_by_name(name))


@app.post("/greetme")
def greet_user_post(payload: Optional[GreetRequest] = Depends(optional_greet_request)):
    return handlers.to_response(handlers.greet_from_payload(payload))
