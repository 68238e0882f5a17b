"""FastAPI application entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from bookcontent.config import settings
from bookcontent.errors import FetchError, StructuralParseError
from bookcontent.ingestion.book_parser import parse_book
from bookcontent.ingestion.sources import FileDocumentSource
from bookcontent.models.book import Book

logger = logging.getLogger(__name__)

app = FastAPI(
    title="BookContent",
    description="Normalizes Curious Reader and GDL book exports",
    version="0.1.0",
)


class ParseRequest(BaseModel):
    """Location of the content document, relative to the content root."""

    source: str = Field(..., min_length=1)


class ParseResponse(BaseModel):
    """Normalized book returned to the caller."""

    book: Book
    supported: bool
    real_image_count: int


def resolve_content_path(source: str) -> Path:
    """Resolve ``source`` inside the configured content root.

    URLs and paths that escape the root are refused.
    """
    if "://" in source:
        raise HTTPException(status_code=400, detail="Only content root paths are accepted.")
    root = settings.content_root_path.resolve()
    candidate = (root / source).resolve()
    if not candidate.is_relative_to(root):
        raise HTTPException(status_code=403, detail="Source is outside the content root.")
    return candidate


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.post("/parse", response_model=ParseResponse)
async def parse(payload: ParseRequest) -> ParseResponse:
    """Parse a content document into the normalized book model."""
    try:
        book = await parse_book(FileDocumentSource(resolve_content_path(payload.source)))
    except FetchError as exc:
        logger.error("Fetch failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except StructuralParseError as exc:
        logger.error("Structural parse error: %s", exc)
        raise HTTPException(
            status_code=422,
            detail={"format": exc.format.value, "path": exc.path, "message": exc.message},
        ) from exc

    return ParseResponse(
        book=book,
        supported=book.is_supported,
        real_image_count=len(book.real_images()),
    )
