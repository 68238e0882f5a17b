"""Document sources that supply the raw content JSON tree."""

from __future__ import annotations

import asyncio
import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

import requests

from bookcontent.config import settings
from bookcontent.errors import FetchError

logger = logging.getLogger(__name__)

# Top-level blocks of an export that carry no book content.
RESERVED_KEYS = ("l10n", "override")


def strip_reserved_keys(raw: Any) -> Any:
    """Return a shallow copy of ``raw`` without the reserved top-level keys.

    Anything other than a JSON object is returned unchanged.
    """
    if not isinstance(raw, dict):
        return raw
    return {key: value for key, value in raw.items() if key not in RESERVED_KEYS}


class DocumentSource(ABC):
    """Supplies the raw content document of one book."""

    @abstractmethod
    async def fetch(self) -> Any:
        """Fetch and decode the content document."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable location, used in logs and errors."""


class FileDocumentSource(DocumentSource):
    """Reads a content document from the local filesystem."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    async def fetch(self) -> Any:
        return await asyncio.to_thread(self._read)

    def _read(self) -> Any:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(self.describe(), str(exc)) from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FetchError(self.describe(), f"malformed JSON: {exc}") from exc
        return data


class HttpDocumentSource(DocumentSource):
    """Downloads a content document over HTTP(S). Failures are not retried."""

    def __init__(self, url: str, timeout: Optional[float] = None) -> None:
        self.url = url
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def describe(self) -> str:
        return self.url

    async def fetch(self) -> Any:
        return await asyncio.to_thread(self._download)

    def _download(self) -> Any:
        headers = {"User-Agent": settings.user_agent, "Accept": "application/json"}
        try:
            response = requests.get(self.url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise FetchError(self.url, str(exc)) from exc
        if not response.ok:
            raise FetchError(self.url, response.reason or "request failed", response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(self.url, f"malformed JSON: {exc}", response.status_code) from exc
        return data


class InMemoryDocumentSource(DocumentSource):
    """Serves an already decoded tree; each fetch returns an independent copy."""

    def __init__(self, data: Any, name: str = "<memory>") -> None:
        self.data = data
        self.name = name

    def describe(self) -> str:
        return self.name

    async def fetch(self) -> Any:
        return copy.deepcopy(self.data)


def source_for(location: str) -> DocumentSource:
    """Pick a source implementation for a path or URL."""
    if location.startswith(("http://", "https://")):
        return HttpDocumentSource(location)
    return FileDocumentSource(location)
