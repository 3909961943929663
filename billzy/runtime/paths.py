"""Centralized path management for billzy.

This module provides a single source of truth for configuration paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_config_root() -> Path:
    """Determine the configuration root (``$BILLZY_HOME`` or ``~/.config/billzy``)."""
    env_home = os.environ.get("BILLZY_HOME", "").strip()
    if env_home:
        return Path(env_home).expanduser()
    return Path("~/.config/billzy").expanduser()


@dataclass
class ProjectPaths:
    """Container for billzy configuration paths."""

    root: Path = field(default_factory=_get_config_root)

    def __post_init__(self) -> None:
        # Ensure root is resolved to absolute path
        self.root = self.root.resolve()

    @property
    def parser_settings(self) -> Path:
        """Receipt parser settings TOML file."""
        return self.root / "parser.toml"


# Module-level singleton
_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance.

    Returns:
        The global ProjectPaths instance.
    """
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached paths so ``BILLZY_HOME`` is read again."""
    global _paths
    _paths = None
