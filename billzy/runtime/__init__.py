"""Runtime infrastructure for billzy.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Parser settings via load_parser_settings()
- OCR service access via call_ocr_service()
- Split file loading via load_split_file()

Usage:
    from billzy.runtime import get_logger, load_parser_settings

    logger = get_logger(__name__)
    settings = load_parser_settings()
"""

from billzy.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from billzy.runtime.ocr_client import DEFAULT_OCR_URL, OCRServiceUnavailable, call_ocr_service
from billzy.runtime.parser_settings import load_parser_settings
from billzy.runtime.paths import ProjectPaths, get_paths, reset_paths
from billzy.runtime.split_file import SplitFile, SplitFileError, load_split_file

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "load_parser_settings",
    # OCR
    "DEFAULT_OCR_URL",
    "OCRServiceUnavailable",
    "call_ocr_service",
    # Split files
    "SplitFile",
    "SplitFileError",
    "load_split_file",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
