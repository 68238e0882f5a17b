"""Normalized book, page and visual element models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

EMPTY_IMAGE_SOURCE = "empty_glow_image"


class BookFormat(str, Enum):
    """Authoring-tool export a raw content document follows."""

    CURIOUS_READER = "curious_reader"
    GDL = "gdl"
    UNKNOWN = "unknown"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class WordTimestampElement(_Frozen):
    """A single word of narration with its own audio clip."""

    word: str
    start_timestamp: float
    end_timestamp: float
    audio_source: str


class _Positioned(_Frozen):
    # None means "not applicable": the renderer lays the element out by flow.
    position_x: Optional[float] = None
    position_y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class TextElement(_Positioned):
    """Inline HTML text, passed through unsanitized."""

    type: Literal["text"] = "text"
    text_content_as_html: str


class ImageElement(_Positioned):
    """Image reference; the empty-image sentinel marks a placeholder slot."""

    type: Literal["image"] = "image"
    image_source: str

    @property
    def is_placeholder(self) -> bool:
        return self.image_source == EMPTY_IMAGE_SOURCE


class AudioElement(_Positioned):
    """Narration audio with per-word timing. No parser produces this yet."""

    type: Literal["audio"] = "audio"
    audio_source: str
    word_timestamps: Tuple[WordTimestampElement, ...] = ()
    styles: Dict[str, Any] = Field(default_factory=dict)


VisualElement = Annotated[
    Union[TextElement, ImageElement, AudioElement],
    Field(discriminator="type"),
]


class Page(_Frozen):
    """One screen of ordered visual elements."""

    visual_elements: Tuple[VisualElement, ...] = ()
    background_color: str

    def real_images(self) -> List[ImageElement]:
        return [
            element
            for element in self.visual_elements
            if isinstance(element, ImageElement) and not element.is_placeholder
        ]


class Book(_Frozen):
    """Normalized content of an entire book."""

    format: BookFormat
    pages: Tuple[Page, ...] = ()

    @property
    def is_supported(self) -> bool:
        return self.format is not BookFormat.UNKNOWN

    def real_images(self) -> List[ImageElement]:
        """Images that point at an actual asset, in display order."""
        images: List[ImageElement] = []
        for page in self.pages:
            images.extend(page.real_images())
        return images
