"""Top Downloads Route — ranking snapshots joined with their media.

Invariants:
    - Rows ordered by ascending rank
    - A dangling media reference surfaces as 500 with a generic message
"""

from fastapi import APIRouter, Depends

from media_catalog.api.dependencies import get_storage, translate_failures
from media_catalog.core.repository_protocols import CatalogStorage
from media_catalog.schemas.catalog import RankedDownload

router = APIRouter(prefix="/api/downloads", tags=["downloads"])


@router.get("/top", response_model=list[RankedDownload])
async def list_top_downloads(storage: CatalogStorage = Depends(get_storage)):
    with translate_failures("Failed to fetch top downloads"):
        return await storage.get_top_downloads()
