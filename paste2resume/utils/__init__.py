"""Utility modules."""

from .logger import get_logger, setup_logging
from .file_utils import ensure_directory, save_json, save_text
from .paths import (
    get_debug_artifact_path,
    get_log_file_path,
    cleanup_old_data,
    DATA_DIR,
    DEBUG_DIR,
    LOGS_DIR,
)
from .structured_text import StructuredTextDecoder, parse_structured_text

__all__ = [
    "get_logger",
    "setup_logging",
    "ensure_directory",
    "save_json",
    "save_text",
    "get_debug_artifact_path",
    "get_log_file_path",
    "cleanup_old_data",
    "DATA_DIR",
    "DEBUG_DIR",
    "LOGS_DIR",
    "StructuredTextDecoder",
    "parse_structured_text",
]
