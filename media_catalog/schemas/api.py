"""API Schemas — request/response bodies for endpoints that are not plain entities.

Invariants:
    - ConvertRequest requires fromFormat and toFormat as strings; fileUrl may be
      omitted but, when present, must be a string (null is rejected)
    - Every error body is MessageResponse

Design Decisions:
    - strict=True on ConvertRequest: a number where a format string is expected
      is a schema violation, not something to coerce
"""

from pydantic import ConfigDict, field_validator

from media_catalog.schemas.catalog import CamelModel


class MessageResponse(CamelModel):
    message: str


class DownloadResponse(CamelModel):
    message: str
    file_url: str


class ConvertRequest(CamelModel):
    """Format conversion request."""
    model_config = ConfigDict(strict=True)

    from_format: str
    to_format: str
    file_url: str | None = None

    @field_validator("file_url", mode="before")
    @classmethod
    def reject_null_file_url(cls, v):
        # Defaults are not validated, so this only fires for an explicit null
        if v is None:
            raise ValueError("fileUrl must be a string when provided")
        return v


class ConvertResponse(CamelModel):
    message: str
    from_format: str
    to_format: str
    converted_url: str
