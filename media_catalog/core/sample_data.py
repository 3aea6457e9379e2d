"""Sample Catalog — fixed seed records loaded into a fresh store.

Invariants:
    - Exactly 4 media: 2 music then 2 video, in this order
    - SAMPLE_RANKINGS index into SAMPLE_MEDIA (0-based), not into store ids;
      the store maps positions to the ids it generated while seeding
    - Ranking snapshots equal the seeded download counts of the ranked media
"""

from media_catalog.core.domain_types import MediaType
from media_catalog.schemas.catalog import MediaCreate

_UNSPLASH = "https://images.unsplash.com"
_CROP = "ixlib=rb-4.0.3&auto=format&fit=crop"

SAMPLE_MEDIA: tuple[MediaCreate, ...] = (
    MediaCreate(
        title="Trending Hits 2024",
        artist="Various Artists",
        type=MediaType.MUSIC,
        category="Pop",
        duration="3:45",
        downloads=1_200_000,
        featured=True,
        image_url=f"{_UNSPLASH}/photo-1493225457124-a3eb161ffa5f?{_CROP}&w=400&h=300",
        file_url="/downloads/trending-hits-2024.mp3",
    ),
    MediaCreate(
        title="Electronic Beats",
        artist="DJ Master",
        type=MediaType.MUSIC,
        category="Electronic",
        duration="4:20",
        downloads=890_000,
        featured=True,
        image_url=f"{_UNSPLASH}/photo-1459749411175-04bf5292ceea?{_CROP}&w=400&h=300",
        file_url="/downloads/electronic-beats.mp3",
    ),
    MediaCreate(
        title="Music Video Collection",
        artist="Various Artists",
        type=MediaType.VIDEO,
        category="Music Video",
        duration="3:45",
        downloads=950_000,
        featured=False,
        image_url=f"{_UNSPLASH}/photo-1493225457124-a3eb161ffa5f?{_CROP}&w=300&h=200",
        file_url="/downloads/music-video-collection.mp4",
    ),
    MediaCreate(
        title="Live Concert Highlights",
        artist="Concert Crew",
        type=MediaType.VIDEO,
        category="Concert",
        duration="45:30",
        downloads=780_000,
        featured=False,
        image_url=f"{_UNSPLASH}/photo-1459749411175-04bf5292ceea?{_CROP}&w=300&h=200",
        file_url="/downloads/live-concert.mp4",
    ),
)

# (position in SAMPLE_MEDIA, rank, downloads snapshot)
SAMPLE_RANKINGS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 1_200_000),
    (1, 2, 890_000),
    (2, 3, 950_000),
)
