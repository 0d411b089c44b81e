"""Locate and read ``tankctl.toml``.

Lookup order: ``TANKCTL_CONFIG`` if set, otherwise the nearest
``tankctl.toml`` in the working directory or one of its parents (the way
git finds ``.git``). ``--config`` bypasses discovery entirely.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "tankctl.toml"
CONFIG_ENV_VAR = "TANKCTL_CONFIG"


class ConfigError(ValueError):
    """A config file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid TOML in {path}: {reason}")
        self.path = path


def _candidates(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    yield directory / CONFIG_FILENAME
    for parent in directory.parents:
        yield parent / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd).

    A ``TANKCTL_CONFIG`` pointing at a missing file means "no config";
    it does not fall back to walking up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    return next((p for p in _candidates(start or Path.cwd()) if p.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, raising :class:`ConfigError` on malformed TOML."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, str(exc)) from exc
