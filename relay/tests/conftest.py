"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from relay.config.schema import NwsConfig, RelayConfig
from relay.ingest.nws_client import NwsClient
from relay.server import create_app

NWS_TEST_BASE = "https://test-nws.example.com"
FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def nws_base() -> str:
    return NWS_TEST_BASE


@pytest.fixture
def load_nws(fixtures_dir: Path):
    """Return a loader for canned NWS API payloads."""

    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A public root with a few assets and a secret file just outside it."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>relay</h1>")
    (root / "style.css").write_text("body { margin: 0; }")
    (root / "script.js").write_text("console.log('relay');")
    (root / "notes.md").write_text("# notes")
    (root / "assets").mkdir()
    (root / "assets" / "logo.svg").write_text("<svg/>")
    (tmp_path / "secret.txt").write_text("do not serve")
    return root


@pytest.fixture
def config(public_dir: Path) -> RelayConfig:
    return RelayConfig(
        public_dir=public_dir,
        nws=NwsConfig(base_url=NWS_TEST_BASE, user_agent="relay-tests/1.0"),
    )


@pytest.fixture
def nws() -> NwsClient:
    return NwsClient(base_url=NWS_TEST_BASE, user_agent="relay-tests/1.0")


@pytest.fixture
def client(config: RelayConfig) -> TestClient:
    return TestClient(create_app(config), raise_server_exceptions=False)
