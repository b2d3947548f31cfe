"""Declared (unresolved) dependency of a package."""

from __future__ import annotations

from pathlib import Path

from wesl_metadata.models.base import WeslModel


class Dependency(WeslModel):
    """A dependency as written in a package's ``wesl.toml``."""

    name: str
    # New name the dependency is referred to by, None if not renamed
    rename: str | None = None
    # Only set for local path dependencies
    path: Path | None = None
