"""Configuration manager: read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from nautobot_cli.client.errors import ConfigurationError
from nautobot_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_NAUTOBOT_PROFILE,
    ENV_NAUTOBOT_TOKEN,
    ENV_NAUTOBOT_URL,
)
from nautobot_cli.config.models import CLIConfig, NautobotProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

# Profile values left out of the file when unchanged
_PROFILE_DEFAULTS: dict[str, Any] = {
    "verify_ssl": True,
    "timeout": DEFAULT_TIMEOUT,
    "offset": 0,
    "limit": 0,
}


def _profile_table(profile: NautobotProfile) -> dict[str, Any]:
    data = profile.model_dump(exclude={"name"}, exclude_none=True)
    return {
        key: value
        for key, value in data.items()
        if key not in _PROFILE_DEFAULTS or _PROFILE_DEFAULTS[key] != value
    }


class ConfigManager:
    """Manages CLI configuration on disk and resolves Nautobot profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid config file {self.config_path}: {exc}") from exc
        profiles: dict[str, NautobotProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = NautobotProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only directory
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                data["profiles"][name] = _profile_table(profile)
        # Atomic write: temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: NautobotProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> NautobotProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> NautobotProfile:
        """Resolve the Nautobot connection.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_NAUTOBOT_PROFILE)
        profile = self.get_profile(profile_name or env_profile)
        fields: dict[str, Any] = profile.model_dump() if profile else {"name": "cli"}
        overrides = {
            "url": url or os.environ.get(ENV_NAUTOBOT_URL),
            "token": token or os.environ.get(ENV_NAUTOBOT_TOKEN),
        }
        fields.update({key: value for key, value in overrides.items() if value})

        if not fields.get("url"):
            raise ConfigurationError(
                "No Nautobot URL configured. Use 'nautobot-cli config add' or set "
                f"{ENV_NAUTOBOT_URL} or pass --url."
            )
        return NautobotProfile(**fields)
