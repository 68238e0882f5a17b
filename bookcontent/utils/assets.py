"""Helpers for turning element sources into asset locations."""

from __future__ import annotations

from typing import Optional

from bookcontent.config import settings
from bookcontent.models.book import ImageElement

EXPORT_IMAGE_PREFIX = "images/"


def resolve_image_url(image: ImageElement, images_root: Optional[str] = None) -> str:
    """Return the asset location of ``image`` below ``images_root``."""
    if image.is_placeholder:
        raise ValueError("Placeholder images have no asset to resolve.")
    root = settings.images_path if images_root is None else images_root
    return root + image.image_source.removeprefix(EXPORT_IMAGE_PREFIX)
