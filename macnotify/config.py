"""User configuration: where it lives, how it is loaded, saved and listed."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG_NAME = "config.yaml"
_CONFIG_EXTENSIONS = (".yaml", ".yml")


def _default_notifiers() -> list[str]:
    return ["audio", "dialog"]


def _default_dialog_settings() -> dict[str, str]:
    return {"title": "Notification"}


@dataclass
class Config:
    """Which notifiers are enabled and how dialogs are shown."""

    enabled_notifiers: list[str] = field(default_factory=list)
    dialog_settings: dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "Config":
        """The configuration written when none exists yet."""
        return cls(
            enabled_notifiers=_default_notifiers(),
            dialog_settings=_default_dialog_settings(),
        )

    def to_dict(self) -> dict:
        return {
            "enabledNotifiers": list(self.enabled_notifiers),
            "dialogSettings": dict(self.dialog_settings),
        }

    @classmethod
    def from_dict(cls, data: object) -> "Config":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")

        notifiers = data.get("enabledNotifiers") or []
        if not isinstance(notifiers, list):
            raise ValueError("enabledNotifiers must be a list")

        settings = data.get("dialogSettings") or {}
        if not isinstance(settings, dict):
            raise ValueError("dialogSettings must be a mapping")

        return cls(
            enabled_notifiers=[str(name) for name in notifiers],
            dialog_settings={str(key): str(value) for key, value in settings.items()},
        )


def get_config_dir() -> str:
    """Return the directory that holds every configuration file."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return "notify"
    return str(home / ".config" / "notify")


def get_config_path(config_file: str = "") -> str:
    """Return the path of a configuration file.

    An absolute path is used as given; a relative one is taken inside the
    configuration directory; an empty name means the default file.
    """
    config_dir = get_config_dir()
    if config_file:
        if os.path.isabs(config_file):
            return config_file
        return os.path.join(config_dir, config_file)
    return os.path.join(config_dir, DEFAULT_CONFIG_NAME)


def load(config_file: str = "") -> Config:
    """Load a configuration, creating the default one if the file is missing."""
    config_path = get_config_path(config_file)

    if not os.path.exists(config_path):
        config = Config.default()
        os.makedirs(os.path.dirname(config_path) or ".", exist_ok=True)
        save(config, config_path)
        return config

    with open(config_path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return Config.from_dict(data)


def save(config: Config, config_path: str) -> None:
    """Write the configuration as YAML to the given path."""
    text = yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
    with open(config_path, "w", encoding="utf-8") as handle:
        handle.write(text)


def list_config_files() -> list[str]:
    """Return the names of the YAML files in the configuration directory."""
    config_dir = Path(get_config_dir())

    if not config_dir.exists():
        config_dir.mkdir(parents=True, exist_ok=True)
        return []

    return sorted(
        entry.name
        for entry in config_dir.iterdir()
        if not entry.is_dir() and entry.suffix in _CONFIG_EXTENSIONS
    )