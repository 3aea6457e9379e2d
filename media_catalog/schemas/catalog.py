"""Catalog Schemas — Pydantic models for the stored entities and their inserts.

Invariants:
    - JSON keys are camelCase (imageUrl, fileUrl, mediaId); attributes are snake_case
    - Insert models never carry an id; the store assigns ids
    - Media.downloads >= 0, TopDownload.rank >= 1

Design Decisions:
    - Entities double as response models: the store hands out copies of these
      and routes return them directly
    - populate_by_name=True so code can build models with snake_case kwargs
      while clients send camelCase
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from media_catalog.core.domain_types import MediaType


class CamelModel(BaseModel):
    """Base model with camelCase aliases on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True,
    )


# --- Users -------------------------------------------------------------------

class UserCreate(CamelModel):
    """User registration payload. Password is stored as given."""
    username: str = Field(min_length=1)
    password: str


class User(UserCreate):
    id: int


# --- Media -------------------------------------------------------------------

class MediaCreate(CamelModel):
    """Media insert — downloads and featured default like the table columns."""
    title: str
    artist: str
    type: MediaType
    category: str
    duration: str
    downloads: int = Field(0, ge=0)
    featured: bool = False
    image_url: str
    file_url: str


class Media(MediaCreate):
    id: int


# --- Top downloads -----------------------------------------------------------

class TopDownloadCreate(CamelModel):
    """Ranking snapshot insert. downloads is frozen at creation time."""
    media_id: int
    rank: int = Field(ge=1)
    downloads: int = Field(ge=0)


class TopDownload(TopDownloadCreate):
    id: int


class RankedDownload(TopDownload):
    """TopDownload joined with the media it references."""
    media: Media
