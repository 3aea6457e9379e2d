"""Conversion Route — simulated format conversion.

Invariants:
    - Body must carry string fromFormat and toFormat; fileUrl is optional
    - Malformed JSON and schema violations both return 400 "Invalid conversion request"
    - The delay is a non-blocking asyncio.sleep; no storage access, no lock held

Design Decisions:
    - Body parsed by hand instead of a typed parameter: FastAPI's automatic
      validation would answer with the generic "Invalid request data" message
    - Delay read from Settings so tests can run with zero wait
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from media_catalog.config import Settings, get_settings
from media_catalog.core.errors import InvalidInputError
from media_catalog.schemas.api import ConvertRequest, ConvertResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["convert"])


async def parse_convert_request(request: Request) -> ConvertRequest:
    try:
        payload = await request.json()
        return ConvertRequest.model_validate(payload)
    except ValueError as e:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
        logger.warning(f"Rejected conversion request: {e}")
        raise InvalidInputError(
            "Invalid conversion request", field="body",
        ) from e


@router.post("/convert", response_model=ConvertResponse)
async def convert_media(
    body: ConvertRequest = Depends(parse_convert_request),
    settings: Settings = Depends(get_settings),
):
    """Pretend to convert a file between formats."""
    await asyncio.sleep(settings.conversion_delay_seconds)
    logger.info(f"Converted {body.from_format} -> {body.to_format}")
    return ConvertResponse(
        message="Conversion completed",
        from_format=body.from_format,
        to_format=body.to_format,
        converted_url=f"/downloads/converted-file.{body.to_format}",
    )
