"""In-Memory Catalog Store — ids, filters, search, counters, and the ranking join.

Tests:
    - Ids start at 1 and strictly increase per entity type
    - Featured/type/search views are subsets of get_all_media in the same order
    - increment_downloads adds exactly one per call; unknown ids are a no-op
    - get_top_downloads sorts by rank and joins the live media record
    - Dangling media references raise DataIntegrityError
    - Seeding reproduces 4 media and ranks 1-3 on the first three ids
    - Duplicate usernames are rejected without consuming an id
"""

import asyncio

import pytest

from media_catalog.core.errors import ConflictError, DataIntegrityError
from media_catalog.infrastructure.memory_storage import MemStorage
from media_catalog.schemas.catalog import MediaCreate, TopDownloadCreate, UserCreate


def _media(title: str, **overrides) -> MediaCreate:
    fields = {
        "title": title,
        "artist": "Artist",
        "type": "music",
        "category": "Pop",
        "duration": "3:00",
        "image_url": "/img.png",
        "file_url": f"/downloads/{title}.mp3",
    }
    fields.update(overrides)
    return MediaCreate(**fields)


@pytest.fixture
def store():
    return MemStorage(seed=False)


@pytest.fixture
def seeded():
    return MemStorage()


# --- Users -------------------------------------------------------------------

async def test_user_ids_start_at_one_and_increase(store):
    first = await store.create_user(UserCreate(username="ann", password="pw"))
    second = await store.create_user(UserCreate(username="bob", password="pw"))
    assert (first.id, second.id) == (1, 2)


async def test_user_lookup_by_id_and_username(store):
    user = await store.create_user(UserCreate(username="ann", password="secret"))
    assert await store.get_user(user.id) == user
    assert await store.get_user_by_username("ann") == user
    assert (await store.get_user_by_username("ann")).password == "secret"


async def test_missing_user_returns_none(store):
    assert await store.get_user(7) is None
    assert await store.get_user_by_username("nobody") is None


async def test_duplicate_username_rejected_without_consuming_id(store):
    await store.create_user(UserCreate(username="ann", password="pw"))
    with pytest.raises(ConflictError):
        await store.create_user(UserCreate(username="ann", password="other"))
    next_user = await store.create_user(UserCreate(username="bob", password="pw"))
    assert next_user.id == 2


# --- Media -------------------------------------------------------------------

async def test_media_ids_start_at_one_and_increase(store):
    ids = [(await store.create_media(_media(f"t{i}"))).id for i in range(3)]
    assert ids == [1, 2, 3]


async def test_create_media_defaults_downloads_and_featured(store):
    item = await store.create_media(_media("plain"))
    assert item.downloads == 0
    assert item.featured is False


async def test_get_all_media_keeps_insertion_order(store):
    for title in ("b", "a", "c"):
        await store.create_media(_media(title))
    assert [m.title for m in await store.get_all_media()] == ["b", "a", "c"]


async def test_featured_is_ordered_subset_of_all(store):
    await store.create_media(_media("one", featured=True))
    await store.create_media(_media("two"))
    await store.create_media(_media("three", featured=True))
    featured = await store.get_featured_media()
    all_featured = [m for m in await store.get_all_media() if m.featured]
    assert featured == all_featured
    assert [m.title for m in featured] == ["one", "three"]


async def test_media_by_type_accepts_unknown_types(store):
    await store.create_media(_media("song"))
    await store.create_media(_media("clip", type="video"))
    assert [m.title for m in await store.get_media_by_type("video")] == ["clip"]
    assert await store.get_media_by_type("podcast") == []
    assert await store.get_media_by_type("MUSIC") == []


async def test_search_is_case_insensitive_on_category(seeded):
    results = await seeded.search_media("ELECTRONIC")
    assert [m.title for m in results] == ["Electronic Beats"]


async def test_search_matches_artist(seeded):
    results = await seeded.search_media("various")
    assert [m.id for m in results] == [1, 3]


async def test_get_media_by_id_missing_returns_none(store):
    assert await store.get_media_by_id(999) is None


async def test_returned_records_are_copies(store):
    item = await store.create_media(_media("safe"))
    item.downloads = 10_000
    assert (await store.get_media_by_id(item.id)).downloads == 0


# --- Download counter --------------------------------------------------------

async def test_increment_downloads_adds_exactly_n(store):
    item = await store.create_media(_media("hit", downloads=5))
    for _ in range(4):
        await store.increment_downloads(item.id)
    assert (await store.get_media_by_id(item.id)).downloads == 9


async def test_increment_unknown_media_is_silent_noop(store):
    await store.create_media(_media("only"))
    await store.increment_downloads(404)
    assert [m.downloads for m in await store.get_all_media()] == [0]


async def test_concurrent_increments_are_not_lost(store):
    item = await store.create_media(_media("busy"))
    await asyncio.gather(*(store.increment_downloads(item.id) for _ in range(50)))
    assert (await store.get_media_by_id(item.id)).downloads == 50


async def test_concurrent_creates_get_distinct_increasing_ids(store):
    created = await asyncio.gather(
        *(store.create_media(_media(f"m{i}")) for i in range(20)),
    )
    assert sorted(m.id for m in created) == list(range(1, 21))


# --- Top downloads -----------------------------------------------------------

async def test_top_downloads_sorted_by_rank_regardless_of_insertion(store):
    a = await store.create_media(_media("a"))
    b = await store.create_media(_media("b"))
    c = await store.create_media(_media("c"))
    await store.create_top_download(TopDownloadCreate(media_id=c.id, rank=3, downloads=1))
    await store.create_top_download(TopDownloadCreate(media_id=a.id, rank=1, downloads=1))
    await store.create_top_download(TopDownloadCreate(media_id=b.id, rank=2, downloads=1))

    ranked = await store.get_top_downloads()

    assert [row.rank for row in ranked] == [1, 2, 3]
    for row in ranked:
        assert row.media == await store.get_media_by_id(row.media_id)


async def test_top_download_snapshot_does_not_track_live_counter(seeded):
    await seeded.increment_downloads(1)
    first = (await seeded.get_top_downloads())[0]
    assert first.downloads == 1_200_000
    assert first.media.downloads == 1_200_001


async def test_dangling_media_reference_raises_integrity_error(store):
    await store.create_top_download(TopDownloadCreate(media_id=99, rank=1, downloads=0))
    with pytest.raises(DataIntegrityError):
        await store.get_top_downloads()


# --- Seeding -----------------------------------------------------------------

async def test_seeded_store_has_four_media_two_featured(seeded):
    media = await seeded.get_all_media()
    assert [m.id for m in media] == [1, 2, 3, 4]
    assert [m.title for m in await seeded.get_featured_media()] == [
        "Trending Hits 2024", "Electronic Beats",
    ]


async def test_seeded_rankings_reference_first_three_ids(seeded):
    ranked = await seeded.get_top_downloads()
    assert [(r.id, r.media_id, r.rank) for r in ranked] == [
        (1, 1, 1), (2, 2, 2), (3, 3, 3),
    ]
    assert [r.downloads for r in ranked] == [1_200_000, 890_000, 950_000]


async def test_explicit_seed_uses_ids_generated_by_that_call(store):
    await store.create_media(_media("existing"))
    created = await store.seed_sample_data()
    assert [m.id for m in created] == [2, 3, 4, 5]
    ranked = await store.get_top_downloads()
    assert [r.media_id for r in ranked] == [2, 3, 4]
