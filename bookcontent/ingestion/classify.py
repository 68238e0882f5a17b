"""Detect which authoring-tool export a content document follows."""

from __future__ import annotations

from typing import Any, Mapping

from bookcontent.models.book import BookFormat


def classify(raw: Any) -> BookFormat:
    """Return the format of ``raw`` based on its top-level keys."""
    if not isinstance(raw, Mapping):
        return BookFormat.UNKNOWN
    if "presentation" in raw:
        return BookFormat.CURIOUS_READER
    if "chapters" in raw:
        return BookFormat.GDL
    return BookFormat.UNKNOWN
