"""Fetching, classification and normalization of content documents."""

from .book_parser import BookParser, parse_book
from .classify import classify
from .normalizers import parse_elements, walk_pages
from .sources import (
    DocumentSource,
    FileDocumentSource,
    HttpDocumentSource,
    InMemoryDocumentSource,
    source_for,
    strip_reserved_keys,
)

__all__ = [
    "BookParser",
    "DocumentSource",
    "FileDocumentSource",
    "HttpDocumentSource",
    "InMemoryDocumentSource",
    "classify",
    "parse_book",
    "parse_elements",
    "source_for",
    "strip_reserved_keys",
    "walk_pages",
]
