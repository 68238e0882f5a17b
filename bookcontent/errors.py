"""Exceptions raised while fetching and normalizing book content."""

from __future__ import annotations

from typing import Optional

from bookcontent.models.book import BookFormat


class BookContentError(Exception):
    """Base class for all book content failures."""


class FetchError(BookContentError):
    """The document source could not supply a content document."""

    def __init__(self, source: str, message: str, status_code: Optional[int] = None) -> None:
        self.source = source
        self.status_code = status_code
        detail = f"{message} (status {status_code})" if status_code is not None else message
        super().__init__(f"Failed to fetch {source}: {detail}")


class StructuralParseError(BookContentError):
    """The document is valid JSON but does not match the expected shape."""

    def __init__(
        self,
        format: BookFormat,
        path: str,
        message: str,
        page_index: Optional[int] = None,
    ) -> None:
        self.format = format
        self.path = path
        self.message = message
        self.page_index = page_index
        super().__init__(f"[{format.value}] {path}: {message}")
