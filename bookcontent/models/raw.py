"""Schema records for the two supported authoring-tool exports.

Only the keys the normalizer reads are declared; everything else in an
export is ignored. Field names follow the exports (camelCase via aliases),
so validation error locations read like JSON paths into the source document.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# NaN and infinities are valid in JSON as Python decodes it but never a position.
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class _RawRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FileRef(_RawRecord):
    path: str


# --- Curious Reader (presentation / slides) ---


class CRGlobalBackground(_RawRecord):
    fill_global_background: str = Field(alias="fillGlobalBackground")


class CRPresentation(_RawRecord):
    slides: List[Any]
    global_background_selector: CRGlobalBackground = Field(alias="globalBackgroundSelector")


class CRDocument(_RawRecord):
    presentation: CRPresentation


class CRSlide(_RawRecord):
    elements: List[Dict[str, Any]]


class CRLibraryRef(_RawRecord):
    library: str


class CRElementHeader(_RawRecord):
    """Just enough of an element to decide what kind it is."""

    action: CRLibraryRef


class CRGeometry(_RawRecord):
    x: FiniteFloat
    y: FiniteFloat
    width: FiniteFloat
    height: FiniteFloat


class CRTextParams(_RawRecord):
    text: str


class CRTextAction(_RawRecord):
    params: CRTextParams


class CRTextElement(CRGeometry):
    action: CRTextAction


class CRImageParams(_RawRecord):
    file: Optional[FileRef] = None


class CRImageAction(_RawRecord):
    params: CRImageParams


class CRImageElement(CRGeometry):
    action: CRImageAction


# --- GDL (chapters) ---


class GDLDocument(_RawRecord):
    chapters: List[Any]


class GDLChapterParams(_RawRecord):
    content: List[Dict[str, Any]]


class GDLChapter(_RawRecord):
    params: GDLChapterParams


class GDLContentRef(_RawRecord):
    library: str
    # Checked against the text or image record once the library is known.
    params: Any = None


class GDLElementHeader(_RawRecord):
    content: GDLContentRef


class GDLTextParams(_RawRecord):
    text: str


class GDLImageParams(_RawRecord):
    width: Optional[FiniteFloat] = None
    height: Optional[FiniteFloat] = None
    file: FileRef
