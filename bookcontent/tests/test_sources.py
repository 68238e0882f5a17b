"""Tests for document sources and reserved-key stripping."""
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

import requests

from bookcontent.errors import FetchError
from bookcontent.ingestion.sources import (
    FileDocumentSource,
    HttpDocumentSource,
    InMemoryDocumentSource,
    source_for,
    strip_reserved_keys,
)


class StripReservedKeysTest(unittest.TestCase):
    def test_removes_l10n_and_override_only(self) -> None:
        raw = {"l10n": {"a": 1}, "override": {}, "chapters": [], "title": "t"}
        self.assertEqual(strip_reserved_keys(raw), {"chapters": [], "title": "t"})

    def test_does_not_mutate_input(self) -> None:
        raw = {"l10n": {}, "presentation": {}}
        strip_reserved_keys(raw)
        self.assertIn("l10n", raw)

    def test_non_object_passes_through(self) -> None:
        self.assertEqual(strip_reserved_keys([{"l10n": {}}]), [{"l10n": {}}])
        self.assertIsNone(strip_reserved_keys(None))


class FileDocumentSourceTest(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    async def test_reads_json_object(self) -> None:
        path = self.root / "content.json"
        path.write_text('{"chapters": []}', encoding="utf-8")
        self.assertEqual(await FileDocumentSource(path).fetch(), {"chapters": []})

    async def test_missing_file(self) -> None:
        with self.assertRaises(FetchError):
            await FileDocumentSource(self.root / "missing.json").fetch()

    async def test_malformed_json(self) -> None:
        path = self.root / "content.json"
        path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(FetchError) as ctx:
            await FileDocumentSource(path).fetch()
        self.assertIn("malformed JSON", str(ctx.exception))

    async def test_top_level_array_is_returned_as_is(self) -> None:
        path = self.root / "content.json"
        path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(await FileDocumentSource(path).fetch(), [1, 2])


class HttpDocumentSourceTest(unittest.IsolatedAsyncioTestCase):
    URL = "https://books.example.org/book/content.json"

    def _response(self, status: int, payload=None, ok=None) -> Mock:
        response = Mock()
        response.status_code = status
        response.ok = status < 400 if ok is None else ok
        response.reason = "Not Found" if status == 404 else "OK"
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload
        return response

    async def test_success(self) -> None:
        with patch("bookcontent.ingestion.sources.requests.get") as get:
            get.return_value = self._response(200, {"presentation": {}})
            data = await HttpDocumentSource(self.URL, timeout=3).fetch()

        self.assertEqual(data, {"presentation": {}})
        self.assertEqual(get.call_args.kwargs["timeout"], 3)

    async def test_non_success_status(self) -> None:
        with patch("bookcontent.ingestion.sources.requests.get") as get:
            get.return_value = self._response(404)
            with self.assertRaises(FetchError) as ctx:
                await HttpDocumentSource(self.URL).fetch()
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.source, self.URL)

    async def test_network_failure(self) -> None:
        with patch("bookcontent.ingestion.sources.requests.get") as get:
            get.side_effect = requests.exceptions.ConnectionError("refused")
            with self.assertRaises(FetchError) as ctx:
                await HttpDocumentSource(self.URL).fetch()
        self.assertIsNone(ctx.exception.status_code)

    async def test_malformed_body(self) -> None:
        with patch("bookcontent.ingestion.sources.requests.get") as get:
            get.return_value = self._response(200, ValueError("Expecting value"))
            with self.assertRaises(FetchError):
                await HttpDocumentSource(self.URL).fetch()


class InMemoryDocumentSourceTest(unittest.IsolatedAsyncioTestCase):
    async def test_each_fetch_is_a_copy(self) -> None:
        source = InMemoryDocumentSource({"chapters": [{"params": {}}]})
        first = await source.fetch()
        first["chapters"].clear()
        self.assertEqual(await source.fetch(), {"chapters": [{"params": {}}]})


class SourceForTest(unittest.TestCase):
    def test_urls_use_http(self) -> None:
        self.assertIsInstance(source_for("http://x/content.json"), HttpDocumentSource)
        self.assertIsInstance(source_for("https://x/content.json"), HttpDocumentSource)

    def test_paths_use_files(self) -> None:
        source = source_for("content/content.json")
        self.assertIsInstance(source, FileDocumentSource)
        self.assertEqual(source.describe(), str(Path("content/content.json")))


if __name__ == "__main__":
    unittest.main()
