"""Tests for config models."""

import logging

import pytest
from pydantic import ValidationError

from nautobot_cli.config.models import CLIConfig, NautobotProfile


class TestNautobotProfile:
    def test_create_with_token(self):
        p = NautobotProfile(name="lab", url="https://nb.local", token="abc")
        assert p.name == "lab"
        assert p.url == "https://nb.local"
        assert p.token == "abc"

    def test_create_no_auth(self):
        p = NautobotProfile(name="lab", url="https://nb.local")
        assert p.token is None

    def test_defaults(self):
        p = NautobotProfile(name="lab", url="https://nb.local")
        assert p.offset == 0
        assert p.limit == 0
        assert p.verify_ssl is True
        assert p.timeout == 10.0

    def test_url_must_start_with_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            NautobotProfile(name="lab", url="ftp://nb.local")

    def test_url_strips_trailing_slash(self):
        p = NautobotProfile(name="lab", url="https://nb.local/")
        assert p.url == "https://nb.local"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            NautobotProfile(name="lab", url="https://nb.local", timeout=0)

    def test_negative_offset_coerced_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="nautobot_cli.config.models"):
            p = NautobotProfile(name="lab", url="https://nb.local", offset=-3)
        assert p.offset == 50
        assert "Offset set to 50" in caplog.text
        assert "-3" in caplog.text

    def test_negative_limit_coerced_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="nautobot_cli.config.models"):
            p = NautobotProfile(name="lab", url="https://nb.local", limit=-1)
        assert p.limit == 50
        assert "Limit set to 50" in caplog.text

    def test_valid_values_kept(self):
        p = NautobotProfile(name="lab", url="https://nb.local", offset=10, limit=200)
        assert (p.offset, p.limit) == (10, 200)

    def test_immutable(self):
        p = NautobotProfile(name="lab", url="https://nb.local")
        with pytest.raises(ValidationError):
            p.limit = 5


class TestCLIConfig:
    def test_defaults(self):
        c = CLIConfig()
        assert c.default_profile is None
        assert c.profiles == {}

    def test_with_profiles(self):
        p = NautobotProfile(name="lab", url="https://nb.local")
        c = CLIConfig(default_profile="lab", profiles={"lab": p})
        assert "lab" in c.profiles
