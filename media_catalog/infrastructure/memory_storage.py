"""In-Memory Catalog Store — ordered maps of users, media, and ranking snapshots.

Invariants:
    - Ids per entity type start at 1, strictly increase, and are never reused
    - Mutations (create_*, increment_downloads, seed_sample_data) hold _write_lock
    - Reads never await between reading and returning: atomic on the event loop
    - Records leave the store as copies; callers cannot mutate stored state
    - Media.downloads only increases

Design Decisions:
    - dict keyed by id: insertion-ordered, so "all media" needs no sort
    - Top download foreign keys checked on read, not on write: a dangling
      reference is reported as DataIntegrityError when the join resolves it
    - asyncio.Lock over threading.Lock: every caller runs on the event loop,
      and the conversion stub sleeps without touching the store
"""

import asyncio
import logging

from media_catalog.core import media_filters
from media_catalog.core.domain_types import MediaId, TopDownloadId, UserId
from media_catalog.core.errors import ConflictError, DataIntegrityError, ErrorContext
from media_catalog.core.sample_data import SAMPLE_MEDIA, SAMPLE_RANKINGS
from media_catalog.schemas.catalog import (
    Media, MediaCreate, RankedDownload, TopDownload, TopDownloadCreate,
    User, UserCreate,
)

logger = logging.getLogger(__name__)


class MemStorage:
    """Process-lifetime catalog store implementing CatalogStorage."""

    def __init__(self, seed: bool = True):
        self._users: dict[UserId, User] = {}
        self._media: dict[MediaId, Media] = {}
        self._top_downloads: dict[TopDownloadId, TopDownload] = {}
        self._next_user_id = 1
        self._next_media_id = 1
        self._next_top_download_id = 1
        self._write_lock = asyncio.Lock()
        if seed:
            self._seed(SAMPLE_MEDIA, SAMPLE_RANKINGS)

    # ─── Seeding ──────────────────────────────────────────────────

    async def seed_sample_data(self) -> list[Media]:
        """Insert the sample catalog. Returns the media created by this call."""
        async with self._write_lock:
            return self._seed(SAMPLE_MEDIA, SAMPLE_RANKINGS)

    def _seed(
        self,
        media: tuple[MediaCreate, ...],
        rankings: tuple[tuple[int, int, int], ...],
    ) -> list[Media]:
        created = [self._insert_media(item) for item in media]
        for position, rank, downloads in rankings:
            self._insert_top_download(TopDownloadCreate(
                media_id=created[position].id, rank=rank, downloads=downloads,
            ))
        logger.info(
            f"Seeded {len(created)} media and {len(rankings)} top downloads",
        )
        return [item.model_copy() for item in created]

    # ─── Users ────────────────────────────────────────────────────

    async def get_user(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def get_user_by_username(self, username: str) -> User | None:
        user = self._find_user(username)
        return user.model_copy() if user else None

    async def create_user(self, data: UserCreate) -> User:
        async with self._write_lock:
            if self._find_user(data.username) is not None:
                raise ConflictError(
                    f"Username '{data.username}' is already taken",
                    ErrorContext(resource_type="User"),
                )
            user = User(id=self._next_user_id, **data.model_dump())
            self._next_user_id += 1
            self._users[user.id] = user
            return user.model_copy()

    def _find_user(self, username: str) -> User | None:
        return next(
            (u for u in self._users.values() if u.username == username), None,
        )

    # ─── Media ────────────────────────────────────────────────────

    async def get_all_media(self) -> list[Media]:
        return [item.model_copy() for item in self._media.values()]

    async def get_featured_media(self) -> list[Media]:
        return [
            item.model_copy()
            for item in media_filters.filter_featured(self._media.values())
        ]

    async def get_media_by_type(self, media_type: str) -> list[Media]:
        return [
            item.model_copy()
            for item in media_filters.filter_by_type(self._media.values(), media_type)
        ]

    async def get_media_by_id(self, media_id: MediaId) -> Media | None:
        item = self._media.get(media_id)
        return item.model_copy() if item else None

    async def create_media(self, data: MediaCreate) -> Media:
        async with self._write_lock:
            return self._insert_media(data).model_copy()

    async def search_media(self, query: str) -> list[Media]:
        return [
            item.model_copy()
            for item in media_filters.search(self._media.values(), query)
        ]

    async def increment_downloads(self, media_id: MediaId) -> None:
        async with self._write_lock:
            item = self._media.get(media_id)
            if item is None:
                logger.debug(
                    "Ignoring download increment for unknown media",
                    extra={"media_id": media_id},
                )
                return
            item.downloads += 1

    def _insert_media(self, data: MediaCreate) -> Media:
        item = Media(id=self._next_media_id, **data.model_dump())
        self._next_media_id += 1
        self._media[item.id] = item
        return item

    # ─── Top downloads ────────────────────────────────────────────

    async def get_top_downloads(self) -> list[RankedDownload]:
        ranked = []
        for row in media_filters.order_by_rank(self._top_downloads.values()):
            item = self._media.get(row.media_id)
            if item is None:
                raise DataIntegrityError(
                    f"Media {row.media_id} not found for top download {row.id}",
                    ErrorContext(
                        resource_type="TopDownload", resource_id=str(row.id),
                    ),
                )
            ranked.append(RankedDownload(**row.model_dump(), media=item.model_copy()))
        return ranked

    async def create_top_download(self, data: TopDownloadCreate) -> TopDownload:
        async with self._write_lock:
            return self._insert_top_download(data).model_copy()

    def _insert_top_download(self, data: TopDownloadCreate) -> TopDownload:
        row = TopDownload(id=self._next_top_download_id, **data.model_dump())
        self._next_top_download_id += 1
        self._top_downloads[row.id] = row
        return row
