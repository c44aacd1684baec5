"""Request body parsing that ignores the Content-Type header.

Clients post JSON as ``text/plain`` to skip the CORS preflight, so the body is
read raw and decoded as JSON whatever the declared type.
"""

import json
from typing import Any, Callable, Coroutine, TypeVar

from fastapi import HTTPException, Request, status
from loguru import logger
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_JSON_MESSAGE = "Invalid JSON body."


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Render pydantic errors as ``loc: msg`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    )


async def read_json_body(request: Request) -> Any:
    """Decode the raw request body as JSON, an empty body being ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as err:
        logger.warning(f"Malformed JSON body for {request.method} {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON_MESSAGE
        ) from err


def json_body(model: type[ModelT]) -> Callable[[Request], Coroutine[Any, Any, ModelT]]:
    """Create a dependency parsing the request body into ``model``."""

    async def parse(request: Request) -> ModelT:
        data = await read_json_body(request)
        try:
            return model.model_validate(data)
        except ValidationError as err:
            message = format_validation_errors(err.errors())
            logger.warning(f"Rejected body for {request.method} {request.url.path}: {message}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from err

    return parse
