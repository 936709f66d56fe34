"""User-level spfx-upgrade settings stored in config.yaml.

Resolution order for the settings directory:
1. SPFX_UPGRADE_HOME environment variable
2. The platform user config directory (via platformdirs)

Only the ``upgrade`` section is read. Command-line options always take
precedence over anything loaded here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from spfx_upgrade.errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "spfx-upgrade"
HOME_ENV_VAR = "SPFX_UPGRADE_HOME"
OUTPUT_CHOICES = ("json", "text", "md")


@dataclass(frozen=True)
class UpgradeSettings:
    """Defaults applied when the matching command-line option is omitted."""

    output: str = "text"

    @classmethod
    def from_dict(cls, data: object) -> "UpgradeSettings":
        if not isinstance(data, dict):
            return cls()

        output = data.get("output")
        if output is None:
            return cls()
        if not isinstance(output, str) or output.strip().lower() not in OUTPUT_CHOICES:
            logger.warning(
                "Ignoring invalid output format %r in settings (expected one of %s)",
                output,
                ", ".join(OUTPUT_CHOICES),
            )
            return cls()
        return cls(output=output.strip().lower())


def get_settings_home() -> Path:
    """Return the directory that holds config.yaml."""
    if env_home := os.environ.get(HOME_ENV_VAR):
        return Path(env_home)
    return Path(user_config_dir(APP_NAME))


def settings_path() -> Path:
    return get_settings_home() / "config.yaml"


def load_settings(path: Path | None = None) -> UpgradeSettings:
    """Load settings from *path* (defaults to :func:`settings_path`).

    A missing file yields defaults. A file that exists but cannot be parsed
    raises :class:`SettingsError`.
    """
    config_path = path or settings_path()
    if not config_path.is_file():
        logger.debug("No settings file at %s", config_path)
        return UpgradeSettings()

    yaml = YAML(typ="safe")
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except (OSError, YAMLError) as exc:
        raise SettingsError(f"Failed to parse {config_path}: {exc}") from exc

    section = payload.get("upgrade") if isinstance(payload, dict) else None
    return UpgradeSettings.from_dict(section)


__all__ = [
    "HOME_ENV_VAR",
    "UpgradeSettings",
    "get_settings_home",
    "load_settings",
    "settings_path",
]
