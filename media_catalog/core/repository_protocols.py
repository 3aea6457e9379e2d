"""Boundary Protocols — contracts between the API layer and storage.

Invariants:
    - Routes depend on CatalogStorage, never on a concrete store class
    - Read operations return copies; only the store mutates its records
    - Only get_top_downloads (dangling media reference) and create_user
      (duplicate username) raise

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: a persistent backend would do IO, so the in-memory
      store keeps the same awaitable surface
"""

from typing import Protocol

from media_catalog.core.domain_types import MediaId, UserId
from media_catalog.schemas.catalog import (
    Media, MediaCreate, RankedDownload, TopDownload, TopDownloadCreate,
    User, UserCreate,
)


class MediaLike(Protocol):
    """Structural contract for the fields pure filters read."""
    title: str
    artist: str
    category: str
    type: str
    featured: bool


class RankedLike(Protocol):
    rank: int


class CatalogStorage(Protocol):
    """Contract for catalog persistence — implemented by infrastructure."""
    async def get_user(self, user_id: UserId) -> User | None: ...
    async def get_user_by_username(self, username: str) -> User | None: ...
    async def create_user(self, data: UserCreate) -> User: ...

    async def get_all_media(self) -> list[Media]: ...
    async def get_featured_media(self) -> list[Media]: ...
    async def get_media_by_type(self, media_type: str) -> list[Media]: ...
    async def get_media_by_id(self, media_id: MediaId) -> Media | None: ...
    async def create_media(self, data: MediaCreate) -> Media: ...
    async def search_media(self, query: str) -> list[Media]: ...

    async def get_top_downloads(self) -> list[RankedDownload]: ...
    async def create_top_download(self, data: TopDownloadCreate) -> TopDownload: ...
    async def increment_downloads(self, media_id: MediaId) -> None: ...
