"""Parse a book content document and write the normalized book as JSON."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

from bookcontent.config import settings
from bookcontent.errors import BookContentError
from bookcontent.ingestion.book_parser import parse_book
from bookcontent.ingestion.sources import source_for

logger = logging.getLogger(__name__)


def parse_to_file(location: Optional[str] = None) -> int:
    """Parse ``location`` (default: configured source) and persist the result."""
    source = source_for(location or settings.content_source)
    logger.info("Parsing book content from %s", source.describe())
    try:
        book = asyncio.run(parse_book(source))
    except BookContentError as exc:
        logger.error("%s", exc)
        return 1

    output_path = settings.parsed_book_path_obj
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(book.model_dump_json(indent=2), encoding="utf-8")
    logger.info(
        "Wrote %s pages (%s real images) to %s",
        len(book.pages),
        len(book.real_images()),
        output_path,
    )
    return 0


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    location = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(parse_to_file(location))


if __name__ == "__main__":
    main()
