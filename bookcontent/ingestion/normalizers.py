"""Per-format walkers that turn raw export trees into pages and elements."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from bookcontent.errors import StructuralParseError
from bookcontent.models.book import (
    EMPTY_IMAGE_SOURCE,
    BookFormat,
    ImageElement,
    Page,
    TextElement,
    VisualElement,
)
from bookcontent.models.raw import (
    CRDocument,
    CRElementHeader,
    CRImageElement,
    CRSlide,
    CRTextElement,
    GDLChapter,
    GDLDocument,
    GDLElementHeader,
    GDLImageParams,
    GDLTextParams,
)

logger = logging.getLogger(__name__)

GDL_BACKGROUND_COLOR = "#FCFCF2"
TEXT_LIBRARY_MARKER = "AdvancedText"
IMAGE_LIBRARY_MARKER = "Image"

RecordT = TypeVar("RecordT", bound=BaseModel)


def join_path(base: str, loc: Sequence[Union[int, str]]) -> str:
    """Render a validation location as a JSON path below ``base``."""
    path = base
    for part in loc:
        if isinstance(part, int):
            path = f"{path}[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def validate_record(
    model: Type[RecordT],
    data: Any,
    book_format: BookFormat,
    path: str,
    page_index: Optional[int] = None,
) -> RecordT:
    """Validate ``data`` against ``model`` or raise a StructuralParseError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise StructuralParseError(
            book_format,
            join_path(path, first["loc"]),
            first["msg"],
            page_index=page_index,
        ) from exc


def element_kind(library: str) -> Optional[str]:
    if TEXT_LIBRARY_MARKER in library:
        return "text"
    if IMAGE_LIBRARY_MARKER in library:
        return "image"
    return None


class PageNormalizer(ABC):
    """Produces normalized pages for one export format."""

    book_format: BookFormat

    @abstractmethod
    def walk_pages(self, raw: Dict[str, Any]) -> List[Page]:
        """Build every page of the document in display order."""

    @abstractmethod
    def parse_elements(
        self, page_raw: Any, path: str = "", page_index: Optional[int] = None
    ) -> List[VisualElement]:
        """Build the visual elements of a single raw page."""


class CuriousReaderNormalizer(PageNormalizer):
    book_format = BookFormat.CURIOUS_READER

    def walk_pages(self, raw: Dict[str, Any]) -> List[Page]:
        document = validate_record(CRDocument, raw, self.book_format, "")
        presentation = document.presentation
        background = presentation.global_background_selector.fill_global_background

        pages: List[Page] = []
        for index, slide in enumerate(presentation.slides):
            elements = self.parse_elements(
                slide, path=f"presentation.slides[{index}]", page_index=index
            )
            pages.append(Page(visual_elements=tuple(elements), background_color=background))
        return pages

    def parse_elements(
        self, page_raw: Any, path: str = "", page_index: Optional[int] = None
    ) -> List[VisualElement]:
        slide = validate_record(CRSlide, page_raw, self.book_format, path, page_index)

        elements: List[VisualElement] = []
        for index, element_raw in enumerate(slide.elements):
            element_path = join_path(path, ["elements", index])
            header = validate_record(
                CRElementHeader, element_raw, self.book_format, element_path, page_index
            )
            kind = element_kind(header.action.library)
            if kind == "text":
                text = validate_record(
                    CRTextElement, element_raw, self.book_format, element_path, page_index
                )
                elements.append(
                    TextElement(
                        position_x=text.x,
                        position_y=text.y,
                        width=text.width,
                        height=text.height,
                        text_content_as_html=text.action.params.text,
                    )
                )
            elif kind == "image":
                image = validate_record(
                    CRImageElement, element_raw, self.book_format, element_path, page_index
                )
                file_ref = image.action.params.file
                elements.append(
                    ImageElement(
                        position_x=image.x,
                        position_y=image.y,
                        width=image.width,
                        height=image.height,
                        image_source=file_ref.path if file_ref else EMPTY_IMAGE_SOURCE,
                    )
                )
            else:
                logger.debug("Skipping %s element at %s", header.action.library, element_path)
        return elements


class GDLNormalizer(PageNormalizer):
    book_format = BookFormat.GDL

    def walk_pages(self, raw: Dict[str, Any]) -> List[Page]:
        document = validate_record(GDLDocument, raw, self.book_format, "")

        pages: List[Page] = []
        for index, chapter in enumerate(document.chapters):
            elements = self.parse_elements(chapter, path=f"chapters[{index}]", page_index=index)
            pages.append(
                Page(visual_elements=tuple(elements), background_color=GDL_BACKGROUND_COLOR)
            )
        return pages

    def parse_elements(
        self, page_raw: Any, path: str = "", page_index: Optional[int] = None
    ) -> List[VisualElement]:
        chapter = validate_record(GDLChapter, page_raw, self.book_format, path, page_index)

        elements: List[VisualElement] = []
        for index, element_raw in enumerate(chapter.params.content):
            element_path = join_path(path, ["params", "content", index])
            header = validate_record(
                GDLElementHeader, element_raw, self.book_format, element_path, page_index
            )
            params_path = join_path(element_path, ["content", "params"])
            kind = element_kind(header.content.library)
            if kind == "text":
                text = validate_record(
                    GDLTextParams, header.content.params, self.book_format, params_path, page_index
                )
                elements.append(TextElement(text_content_as_html=text.text))
            elif kind == "image":
                image = validate_record(
                    GDLImageParams, header.content.params, self.book_format, params_path, page_index
                )
                elements.append(
                    ImageElement(width=image.width, height=image.height, image_source=image.file.path)
                )
            else:
                logger.debug("Skipping %s element at %s", header.content.library, element_path)
        return elements


NORMALIZERS: Dict[BookFormat, PageNormalizer] = {
    BookFormat.CURIOUS_READER: CuriousReaderNormalizer(),
    BookFormat.GDL: GDLNormalizer(),
}


def walk_pages(raw: Dict[str, Any], book_format: BookFormat) -> List[Page]:
    """Build the pages of ``raw`` using the normalizer for ``book_format``."""
    normalizer = NORMALIZERS.get(book_format)
    if normalizer is None:
        logger.warning("Unsupported book format %s; no pages produced", book_format.value)
        return []
    return normalizer.walk_pages(raw)


def parse_elements(
    page_raw: Any, book_format: BookFormat, path: str = ""
) -> List[VisualElement]:
    """Build the visual elements of one raw page of ``book_format``."""
    normalizer = NORMALIZERS.get(book_format)
    if normalizer is None:
        logger.warning("Unsupported book format %s; no elements produced", book_format.value)
        return []
    return normalizer.parse_elements(page_raw, path=path)
