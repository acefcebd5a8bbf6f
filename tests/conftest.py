"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from nautobot_cli.client.transport import RequestExecutor
from nautobot_cli.config.manager import ConfigManager
from nautobot_cli.config.models import NautobotProfile

NB = "https://nautobot.local"
TOKEN = "0123456789abcdef"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's NAUTOBOT_* variables and config file out of the tests."""
    monkeypatch.setattr(
        "nautobot_cli.config.manager.CONFIG_FILE", tmp_path / "default-config.toml",
    )
    for var in ("NAUTOBOT_URL", "NAUTOBOT_TOKEN", "NAUTOBOT_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> NautobotProfile:
    """Return a sample Nautobot profile for testing."""
    return NautobotProfile(name="lab", url=NB, token=TOKEN)


@pytest.fixture
def executor():
    """A RequestExecutor over a fresh httpx client (mock it with respx)."""
    with httpx.Client() as http:
        yield RequestExecutor(http, TOKEN)


def _make_site(index: int, **extra) -> dict:
    """A site record as the API renders it."""
    site = {
        "id": f"site-{index:04d}",
        "url": f"{NB}/api/dcim/sites/site-{index:04d}/",
        "name": f"Site {index}",
        "slug": f"site-{index}",
        "status": {"value": "active", "label": "Active"},
        "region": {"id": "r-1", "name": "EMEA", "slug": "emea", "_depth": 0},
        "tenant": None,
        "facility": "DC1",
        "asn": 65000 + index,
        "time_zone": "Europe/Berlin",
        "tags": [],
        "custom_fields": {},
        "created": "2024-01-01",
        "last_updated": "2024-01-02T10:00:00.000000Z",
        "device_count": index,
        "display": f"Site {index}",
    }
    site.update(extra)
    return site


def _make_interface_status(slug: str, status: str = "up") -> dict:
    device, _, interface = slug.partition("__")
    return {
        "id": f"id-{slug}",
        "display": slug,
        "url": f"{NB}/api/plugins/interfaces-telemetry/interfaces-status/{slug}/",
        "interface_name": interface,
        "interface_id": f"if-{interface}",
        "interface_status": status,
        "device_name": device,
        "device_id": f"dev-{device}",
        "notes_url": f"{NB}/notes/{slug}/",
        "created": "2024-01-01",
        "last_updated": "2024-01-02T10:00:00Z",
    }


def _envelope(results: list, next_url: str | None = None, count: int | None = None) -> dict:
    return {
        "count": len(results) if count is None else count,
        "next": next_url,
        "previous": None,
        "results": results,
    }


@pytest.fixture
def make_site():
    return _make_site


@pytest.fixture
def make_interface_status():
    return _make_interface_status


@pytest.fixture
def envelope():
    return _envelope
