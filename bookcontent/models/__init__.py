"""Typed models shared across the application."""

from .book import (
    EMPTY_IMAGE_SOURCE,
    AudioElement,
    Book,
    BookFormat,
    ImageElement,
    Page,
    TextElement,
    VisualElement,
    WordTimestampElement,
)

__all__ = [
    "AudioElement",
    "Book",
    "BookFormat",
    "EMPTY_IMAGE_SOURCE",
    "ImageElement",
    "Page",
    "TextElement",
    "VisualElement",
    "WordTimestampElement",
]
