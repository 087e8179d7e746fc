"""Helpers for resolving configuration file locations."""
from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR_ENV = "OUTDOOR_SCALING_CONFIG_DIR"


def get_package_root() -> Path:
    """Return the installed package directory."""
    return Path(__file__).resolve().parents[1]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding the JSON configuration files.

    An explicit ``base_path`` wins, then the ``OUTDOOR_SCALING_CONFIG_DIR``
    environment variable, then the definitions bundled with the package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return get_package_root() / "data" / "definitions"
