"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, MediaId, TopDownloadId wrap positive ints generated by the store
    - MediaType lists the two known kinds; filtering by type stays permissive

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
MediaId = NewType("MediaId", int)
TopDownloadId = NewType("TopDownloadId", int)


# ─── Enums ───────────────────────────────────────────────────────

class MediaType(str, Enum):
    """Known media kinds. get_media_by_type accepts any string regardless."""
    MUSIC = "music"
    VIDEO = "video"
