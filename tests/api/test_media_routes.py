"""Media Routes — listing, filtering, search, lookup, and download endpoints.

Invariants:
    - GET /api/media returns the 4 seeded items with camelCase keys
    - POST /api/media/{id}/download returns the file URL and bumps the counter
    - Bad ids → 400 "Invalid media ID"; unknown ids → 404 "Media not found"
    - Search without q → 400 "Search query is required"
"""

from media_catalog.schemas.catalog import MediaCreate

MEDIA_KEYS = {
    "id", "title", "artist", "type", "category", "duration",
    "downloads", "featured", "imageUrl", "fileUrl",
}


async def test_list_media_returns_seeded_items(client):
    res = await client.get("/api/media")
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 4
    assert [m["id"] for m in body] == [1, 2, 3, 4]
    assert set(body[0]) == MEDIA_KEYS


async def test_list_featured_media(client):
    res = await client.get("/api/media/featured")
    assert res.status_code == 200
    assert [m["id"] for m in res.json()] == [1, 2]
    assert all(m["featured"] for m in res.json())


async def test_list_media_by_type(client):
    res = await client.get("/api/media/type/video")
    assert res.status_code == 200
    assert [m["title"] for m in res.json()] == [
        "Music Video Collection", "Live Concert Highlights",
    ]


async def test_unknown_type_returns_empty_list(client):
    res = await client.get("/api/media/type/podcast")
    assert res.status_code == 200
    assert res.json() == []


async def test_search_is_case_insensitive(client):
    res = await client.get("/api/media/search", params={"q": "ELECTRONIC"})
    assert res.status_code == 200
    assert [m["title"] for m in res.json()] == ["Electronic Beats"]


async def test_search_without_query_returns_400(client):
    res = await client.get("/api/media/search")
    assert res.status_code == 400
    assert res.json() == {"message": "Search query is required"}


async def test_search_with_empty_query_returns_400(client):
    res = await client.get("/api/media/search", params={"q": ""})
    assert res.status_code == 400
    assert res.json() == {"message": "Search query is required"}


async def test_get_media_by_id(client):
    res = await client.get("/api/media/2")
    assert res.status_code == 200
    assert res.json()["fileUrl"] == "/downloads/electronic-beats.mp3"


async def test_get_unknown_media_returns_404(client):
    res = await client.get("/api/media/999")
    assert res.status_code == 404
    assert res.json() == {"message": "Media not found"}


async def test_download_returns_file_url_and_increments_counter(client):
    before = (await client.get("/api/media/1")).json()

    res = await client.post("/api/media/1/download")

    assert res.status_code == 200
    assert res.json() == {"message": "Download started", "fileUrl": before["fileUrl"]}
    after = (await client.get("/api/media/1")).json()
    assert after["downloads"] == before["downloads"] + 1


async def test_download_counter_visible_in_listing(client):
    await client.post("/api/media/4/download")
    await client.post("/api/media/4/download")
    listing = (await client.get("/api/media")).json()
    assert listing[3]["downloads"] == 780_002


async def test_download_unknown_media_returns_404(client, storage):
    res = await client.post("/api/media/999/download")
    assert res.status_code == 404
    assert res.json() == {"message": "Media not found"}
    assert [m.downloads for m in await storage.get_all_media()] == [
        1_200_000, 890_000, 950_000, 780_000,
    ]


async def test_download_non_integer_id_returns_400(client):
    res = await client.post("/api/media/abc/download")
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid media ID"}


async def test_download_partially_numeric_id_returns_400(client):
    res = await client.post("/api/media/12abc/download")
    assert res.status_code == 400


async def test_created_media_is_listed(client, storage):
    await storage.create_media(MediaCreate(
        title="New Single", artist="Fresh Face", type="music", category="Indie",
        duration="2:58", image_url="/i.png", file_url="/downloads/new-single.mp3",
    ))
    res = await client.get("/api/media/search", params={"q": "indie"})
    assert [m["id"] for m in res.json()] == [5]
