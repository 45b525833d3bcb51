"""
Settings loader — reads p.conf (or p.yml) into a Settings model.

Two formats are accepted:

    p.conf  line based, ``key=value``, ``#`` starts a comment line
    p.yml   a YAML mapping with the same keys

Recognised keys:

    projects           projects directory (required)
    open               open-command template, may use ${PROJECT}
    open_from_project  true/false, chdir into the project before opening
    git                true/false, structured discovery + git init on create
    readme             true/false, create readme.md on create

A malformed value is reported as a warning and the setting is left at
its default; only a missing/unreadable file or a missing ``projects``
setting is fatal (ConfigError).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from pswitch.core.errors import ConfigError
from pswitch.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Searched in order under ~/.config/p/
CONFIG_DIR = Path("~/.config/p")
CONFIG_FILES = ("p.yml", "p.conf")

# Explicit override for the config location
CONFIG_ENV_VAR = "P_CONFIG"

_YAML_SUFFIXES = (".yml", ".yaml")

# key in the file -> Settings field
_BOOL_KEYS = {
    "open_from_project": "open_from_project",
    "git": "git",
    "readme": "readme",
}


def find_config_file(config_dir: Path | None = None) -> Path | None:
    """Locate the settings file.

    ``$P_CONFIG`` wins when set. Otherwise the first existing file of
    CONFIG_FILES inside ``config_dir`` (default: ~/.config/p) is used.

    Returns:
        Path to the settings file, or None if nothing was found.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    base = (config_dir or CONFIG_DIR).expanduser()
    for name in CONFIG_FILES:
        candidate = base / name
        if candidate.is_file():
            return candidate

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, logging any warnings.

    Raises:
        ConfigError: If the file is missing, unreadable or lacks ``projects``.
    """
    settings, warnings = read_settings(path)
    for warning in warnings:
        logger.warning("Failed to read config! %s", warning)
    return settings


def read_settings(path: Path | None = None) -> tuple[Settings, list[str]]:
    """Load settings and return them with the warnings found on the way.

    Args:
        path: Explicit settings file. If None, find_config_file() is used.

    Raises:
        ConfigError: If the file is missing, unreadable or lacks ``projects``.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(
            f"No settings file found. Create {CONFIG_DIR / CONFIG_FILES[1]} "
            f"or point ${CONFIG_ENV_VAR} / --config at one."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    fmt = "yaml" if path.suffix in _YAML_SUFFIXES else "conf"
    return parse_settings(raw, fmt=fmt, source=str(path))


def parse_settings(text: str, fmt: str = "conf", source: str = "p.conf") -> tuple[Settings, list[str]]:
    """Parse settings text.

    Args:
        text: File contents.
        fmt: ``"conf"`` for key=value lines, ``"yaml"`` for a YAML mapping.
        source: Name used in messages.

    Returns:
        (settings, warnings)

    Raises:
        ConfigError: On invalid YAML or a missing ``projects`` setting.
    """
    warnings: list[str] = []

    if fmt == "yaml":
        pairs = _yaml_pairs(text, source)
    else:
        pairs = _conf_pairs(text, warnings)

    values = _apply(pairs, warnings)

    if "projects_dir" not in values:
        raise ConfigError(f"The 'projects' setting is missing from {source}")

    try:
        settings = Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {source}: {e}") from e

    logger.info(
        "Settings: projects=%s git=%s open=%r",
        settings.projects_dir,
        settings.git,
        settings.open_command,
    )
    return settings, warnings


# ── Parsing ─────────────────────────────────────────────────────


def _conf_pairs(text: str, warnings: list[str]) -> list[tuple[int, str, str]]:
    """Split p.conf lines into (line number, key, value)."""
    pairs = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        if not sep:
            warnings.append(f"line {lineno}: expected 'key=value', got {stripped!r}")
            continue

        pairs.append((lineno, key.strip(), value.strip()))
    return pairs


def _yaml_pairs(text: str, source: str) -> list[tuple[int, str, str]]:
    """Flatten a YAML mapping into the same (position, key, value) shape."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {source}, got {type(data).__name__}")

    pairs = []
    for position, (key, value) in enumerate(data.items(), start=1):
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif value is None:
            value = ""
        pairs.append((position, str(key), str(value)))
    return pairs


def _apply(pairs: list[tuple[int, str, str]], warnings: list[str]) -> dict:
    """Fold parsed pairs into Settings field values, in file order."""
    values: dict = {}

    for lineno, key, value in pairs:
        if key == "projects":
            if not value:
                warnings.append(f"line {lineno}: the 'projects' setting is empty")
                continue
            values["projects_dir"] = Path(value).expanduser().absolute()

        elif key == "open":
            # ${projects} is only meaningful once the root is known
            if "${projects}" in value and "projects_dir" not in values:
                warnings.append(
                    "Make sure the 'projects' setting is set in your config, "
                    "and that it comes before the 'open' setting"
                )
                continue
            values["open_command"] = _unquote(value)

        elif key in _BOOL_KEYS:
            if value == "true":
                values[_BOOL_KEYS[key]] = True
            elif value == "false":
                values[_BOOL_KEYS[key]] = False
            else:
                warnings.append(
                    f"the '{key}' setting only supports the values 'true' and 'false'"
                )

        else:
            warnings.append(f"line {lineno}: unknown setting '{key}'")

    return values


def _unquote(value: str) -> str:
    """Drop one pair of double quotes wrapping the whole value.

    Inner quotes are left for the command tokenizer, so
    ``open=tmux new -s "my session"`` keeps "my session" as one argument.
    """
    if len(value) >= 2 and value[0] == value[-1] == '"' and '"' not in value[1:-1]:
        return value[1:-1]
    return value
