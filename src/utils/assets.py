"""Helpers for locating asset files."""
from __future__ import annotations

from pathlib import Path


def get_project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def get_asset_path(*parts: str) -> Path:
    """Return a Path to an asset within the repository."""
    return get_project_root() / "assets" / Path(*parts)


def get_config_path(filename: str) -> Path:
    return get_project_root() / "config" / filename
