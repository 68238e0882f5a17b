"""Assemble a normalized Book from a document source."""

from __future__ import annotations

import logging
from typing import Any

from bookcontent.ingestion.classify import classify
from bookcontent.ingestion.normalizers import walk_pages
from bookcontent.ingestion.sources import DocumentSource, strip_reserved_keys
from bookcontent.models.book import Book, BookFormat

logger = logging.getLogger(__name__)


class BookParser:
    """Fetches one content document and normalizes it."""

    def __init__(self, source: DocumentSource) -> None:
        self.source = source

    async def parse(self) -> Book:
        """Fetch, classify and normalize the source's content document.

        Raises FetchError when the source cannot supply a document and
        StructuralParseError when the document does not match its format.
        An unrecognized format is not an error: the returned book has no
        pages and ``BookFormat.UNKNOWN``.
        """
        raw = await self.source.fetch()
        logger.debug("Fetched content document from %s", self.source.describe())
        book = self.parse_raw(raw)
        if book.is_supported:
            logger.info(
                "Parsed %s book with %s pages from %s",
                book.format.value,
                len(book.pages),
                self.source.describe(),
            )
        else:
            logger.warning("Unknown content format in %s", self.source.describe())
        return book

    @staticmethod
    def parse_raw(raw: Any) -> Book:
        """Normalize an already decoded content document."""
        content = strip_reserved_keys(raw)
        book_format = classify(content)
        if book_format is BookFormat.UNKNOWN:
            return Book(format=book_format)
        return Book(format=book_format, pages=tuple(walk_pages(content, book_format)))


async def parse_book(source: DocumentSource) -> Book:
    return await BookParser(source).parse()
