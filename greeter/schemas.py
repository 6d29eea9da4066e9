from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Greeting(BaseModel):
    greet: str
    name: str


class GreetRequest(BaseModel):
    # Strings only; "1" is a name, 1 is a malformed payload.
    model_config = ConfigDict(strict=True)

    input: str
    name: str
