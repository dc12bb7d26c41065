from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
import requests

from beautify.catalog import Product
from beautify.config import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stand-in for requests.Session: replays one response or raises one error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture()
def catalog_payload() -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / "products.json").read_text(encoding="utf-8"))


@pytest.fixture()
def products(catalog_payload) -> list[Product]:  # noqa: ANN001
    return [Product.from_dict(item) for item in catalog_payload["products"]]


@pytest.fixture()
def fake_session_factory():
    def build(status_code: int = 200, payload: Any = None, text: str | None = None, error: Exception | None = None):
        if error is not None:
            return FakeSession(error=error)
        return FakeSession(FakeResponse(status_code=status_code, payload=payload, text=text))

    return build


@pytest.fixture()
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch) -> Settings:  # noqa: ANN001
    root = tmp_path / "project"
    root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("BEAUTIFY_HOME", str(root))
    s = Settings.load(base_dir=root)
    s.ensure_directories()
    return s


@pytest.fixture()
def test_logger() -> logging.Logger:
    logger = logging.getLogger("beautify-test")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)
    return logger
