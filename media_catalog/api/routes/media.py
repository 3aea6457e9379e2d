"""Media Routes — listing, filtering, search, lookup, and download of media.

Invariants:
    - Static paths (/featured, /search, /type/...) are declared before /{media_id}
    - /search rejects a missing or empty q with 400 before touching storage
    - /{media_id}/download increments the counter only after the media is found
    - /type/{media_type} accepts any string; unknown types return []

Design Decisions:
    - media_id taken as str and parsed by parse_media_id: the 400 body stays
      "Invalid media ID" instead of FastAPI's generic validation envelope
"""

import logging

from fastapi import APIRouter, Depends, Query

from media_catalog.api.dependencies import (
    get_storage, parse_media_id, translate_failures,
)
from media_catalog.core.errors import InvalidInputError, ResourceNotFoundError
from media_catalog.core.repository_protocols import CatalogStorage
from media_catalog.schemas.api import DownloadResponse
from media_catalog.schemas.catalog import Media

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/media", tags=["media"])


@router.get("", response_model=list[Media])
async def list_media(storage: CatalogStorage = Depends(get_storage)):
    """List every media item in insertion order."""
    with translate_failures("Failed to fetch media"):
        return await storage.get_all_media()


@router.get("/featured", response_model=list[Media])
async def list_featured_media(storage: CatalogStorage = Depends(get_storage)):
    with translate_failures("Failed to fetch featured media"):
        return await storage.get_featured_media()


@router.get("/type/{media_type}", response_model=list[Media])
async def list_media_by_type(
    media_type: str, storage: CatalogStorage = Depends(get_storage),
):
    with translate_failures("Failed to fetch media by type"):
        return await storage.get_media_by_type(media_type)


@router.get("/search", response_model=list[Media])
async def search_media(
    q: str | None = Query(None),
    storage: CatalogStorage = Depends(get_storage),
):
    """Case-insensitive search over title, artist, and category."""
    if not q:
        raise InvalidInputError("Search query is required", field="q")
    with translate_failures("Failed to search media"):
        results = await storage.search_media(q)
    logger.info(
        f"Search returned {len(results)} media", extra={"query": q},
    )
    return results


@router.get("/{media_id}", response_model=Media)
async def get_media(
    media_id: str, storage: CatalogStorage = Depends(get_storage),
):
    parsed_id = parse_media_id(media_id)
    with translate_failures("Failed to fetch media"):
        media = await storage.get_media_by_id(parsed_id)
    if media is None:
        raise ResourceNotFoundError("Media", str(parsed_id))
    return media


@router.post("/{media_id}/download", response_model=DownloadResponse)
async def download_media(
    media_id: str, storage: CatalogStorage = Depends(get_storage),
):
    """Start a download: returns the file URL and bumps the download counter."""
    parsed_id = parse_media_id(media_id)
    with translate_failures("Failed to start download"):
        media = await storage.get_media_by_id(parsed_id)
        if media is None:
            raise ResourceNotFoundError("Media", str(parsed_id))
        await storage.increment_downloads(parsed_id)
    logger.info("Download started", extra={"media_id": parsed_id})
    return DownloadResponse(message="Download started", file_url=media.file_url)
