"""Tests for the HTTP parse endpoint."""
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from bookcontent.api.main import app
from bookcontent.config import settings


class ParseEndpointTest(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        self.root = self.base / "content"
        self.root.mkdir()
        root_patch = patch.object(settings, "content_root", str(self.root))
        root_patch.start()
        self.addCleanup(root_patch.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, data, name: str = "content.json") -> str:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return name

    def test_health(self) -> None:
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_supported_book(self) -> None:
        source = self._write({"chapters": [{"params": {"content": [
            {"content": {"library": "H5P.Image 1.1", "params": {"file": {"path": "images/x.png"}}}}
        ]}}]}, name="book-7/content.json")
        response = self.client.post("/parse", json={"source": source})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["supported"])
        self.assertEqual(body["real_image_count"], 1)
        self.assertEqual(body["book"]["format"], "gdl")
        element = body["book"]["pages"][0]["visual_elements"][0]
        self.assertEqual(element["type"], "image")
        self.assertIsNone(element["position_x"])

    def test_unknown_format_is_not_an_error(self) -> None:
        response = self.client.post("/parse", json={"source": self._write({"title": "?"})})

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["supported"])
        self.assertEqual(response.json()["book"]["pages"], [])

    def test_structural_error(self) -> None:
        source = self._write({"presentation": {"slides": []}})
        response = self.client.post("/parse", json={"source": source})

        self.assertEqual(response.status_code, 422)
        detail = response.json()["detail"]
        self.assertEqual(detail["format"], "curious_reader")
        self.assertEqual(detail["path"], "presentation.globalBackgroundSelector")

    def test_fetch_error(self) -> None:
        response = self.client.post("/parse", json={"source": "missing.json"})
        self.assertEqual(response.status_code, 502)

    def test_paths_outside_root_are_rejected(self) -> None:
        secret = self.base / "secret.json"
        secret.write_text(json.dumps({"chapters": []}), encoding="utf-8")

        for source in (str(secret), "../secret.json", "book/../../secret.json"):
            with self.subTest(source=source):
                response = self.client.post("/parse", json={"source": source})
                self.assertEqual(response.status_code, 403)

    def test_urls_are_rejected(self) -> None:
        with patch("bookcontent.ingestion.sources.requests.get") as get:
            response = self.client.post("/parse", json={"source": "http://169.254.169.254/latest"})
        self.assertEqual(response.status_code, 400)
        get.assert_not_called()


if __name__ == "__main__":
    unittest.main()
