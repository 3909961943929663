"""Runtime loader for receipt parser settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from billzy.receipt.ocr_parser.common import ParserSettings, build_parser_settings
from billzy.runtime.logging import get_logger
from billzy.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=4)
def load_parser_settings(config_path: str | None = None) -> ParserSettings:
    """
    Load parser settings from the ``[parser]`` table of parser.toml.

    Args:
        config_path: Optional TOML path override. If None, uses the default config path.

    Returns:
        Immutable ParserSettings; defaults when the file or table is missing.
    """
    path = Path(config_path) if config_path is not None else get_paths().parser_settings
    config = _load_toml(path)
    table = config.get("parser", {})
    if not isinstance(table, dict):
        raise ValueError(f"[parser] in {path} must be a table")
    settings = build_parser_settings(table)
    logger.debug("Loaded parser settings from %s: %s", path, settings)
    return settings
