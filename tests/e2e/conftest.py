"""E2E test configuration: CLI options for a live Nautobot instance."""

from __future__ import annotations

import pytest


def pytest_addoption(parser):
    parser.addoption("--nautobot-url", action="store", default=None)
    parser.addoption("--nautobot-token", action="store", default=None)


@pytest.fixture
def nb_opts(request):
    url = request.config.getoption("--nautobot-url")
    token = request.config.getoption("--nautobot-token")
    if not url or not token:
        pytest.skip("Live Nautobot credentials not provided")
    return ["--url", url, "--token", token]
