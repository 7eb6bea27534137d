"""
Champion API routes.
"""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from src.data.loaders import encode_champion, decode_champion_lenient
from src.data.samples import make_aatrox

from ..config import settings
from ..schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/aatrox")
async def get_aatrox() -> Response:
    """Get the Aatrox sample champion."""
    aatrox = make_aatrox()
    logger.debug("Serving sample champion %s", aatrox.key)
    return Response(content=encode_champion(aatrox), media_type="application/json")


@router.post("/create")
async def create_champion(request: Request) -> Response:
    """Decode a posted champion and echo its name and ability description.

    Decode failures are logged and the fields that failed keep their zero
    values, unless STRICT_DECODE is enabled, in which case they return 400.
    """
    body = await request.body()
    champ, error = decode_champion_lenient(body)

    if error is not None:
        logger.warning("Malformed champion payload: %s", error)
        if settings.STRICT_DECODE:
            payload = ErrorResponse(error="Malformed champion payload", detail=str(error))
            return JSONResponse(status_code=400, content=payload.model_dump(mode="json"))
    else:
        logger.debug("Decoded champion %r", champ.name)

    return PlainTextResponse(
        f"Name: {champ.name}, Ability Description: {champ.ability.description}"
    )
