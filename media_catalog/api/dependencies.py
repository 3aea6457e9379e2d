"""Route Dependencies — storage lookup, failure translation, and id parsing.

Invariants:
    - The store is read from app.state, never from a module-level global
    - Client errors (4xx CatalogError) pass through translate_failures untouched
    - Everything else becomes UnexpectedError carrying the endpoint's public message
    - Media ids are optional sign + decimal digits; anything else is a 400

Design Decisions:
    - translate_failures as a context manager: each route names its own 500
      message without repeating try/except blocks
    - translate_failures does not log; the CatalogError handler logs once,
      with the chained cause
"""

import re
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request

from media_catalog.core.domain_types import MediaId
from media_catalog.core.errors import (
    CatalogError, ErrorContext, InvalidInputError, UnexpectedError,
)
from media_catalog.core.repository_protocols import CatalogStorage

_INTEGER_ID = re.compile(r"^\s*[+-]?\d+\s*$")


def get_storage(request: Request) -> CatalogStorage:
    return request.app.state.storage


@contextmanager
def translate_failures(public_message: str) -> Iterator[None]:
    """Map unclassified failures inside the block to a 500 with public_message."""
    try:
        yield
    except CatalogError as e:
        if e.http_status < 500:
            raise
        raise UnexpectedError(
            e.message, ErrorContext(user_message=public_message),
        ) from e
    except Exception as e:
        raise UnexpectedError(
            str(e), ErrorContext(user_message=public_message),
        ) from e


def parse_media_id(raw: str) -> MediaId:
    """Parse a path segment into a media id or raise InvalidInputError."""
    if not _INTEGER_ID.match(raw):
        raise InvalidInputError("Invalid media ID", field="id")
    return MediaId(int(raw))
