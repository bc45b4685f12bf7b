"""
Path constants and utilities for data file management.
"""

import os
import time
from pathlib import Path
from datetime import datetime
from typing import Optional

from .logger import get_logger

logger = get_logger(__name__)


# Base directories
DATA_DIR = Path(os.getenv("PASTE2RESUME_DATA_DIR", "data"))
DEBUG_DIR = DATA_DIR / "debug"
LOGS_DIR = DATA_DIR / "logs"


def ensure_data_directories():
    """Ensure all data directories exist."""
    for directory in (DATA_DIR, DEBUG_DIR, LOGS_DIR):
        directory.mkdir(parents=True, exist_ok=True)


def get_timestamped_filename(prefix: str, extension: str, timestamp: Optional[datetime] = None) -> str:
    """
    Generate a timestamped filename.
    
    Args:
        prefix: Filename prefix (e.g., 'extraction', 'resume')
        extension: File extension without dot (e.g., 'html', 'json')
        timestamp: Optional timestamp, defaults to now
        
    Returns:
        Filename string like 'resume_20251103_105621_123456.html'
    """
    if timestamp is None:
        timestamp = datetime.now()
    
    timestamp_str = timestamp.strftime("%Y%m%d_%H%M%S_%f")
    return f"{prefix}_{timestamp_str}.{extension}"


def get_debug_artifact_path(
    prefix: str,
    extension: str,
    timestamp: Optional[datetime] = None,
    base_dir: Optional[Path] = None
) -> Path:
    """
    Get path for a debug artifact (raw model output, record JSON, HTML), organized by date.
    
    Args:
        prefix: Artifact kind used as filename prefix
        extension: File extension without dot
        timestamp: Optional timestamp, defaults to now
        base_dir: Optional override for the debug directory
        
    Returns:
        Path object for the artifact
    """
    if timestamp is None:
        timestamp = datetime.now()
    
    # Create date-based subdirectory (YYYY-MM-DD)
    debug_dir = (base_dir or DEBUG_DIR) / timestamp.strftime("%Y-%m-%d")
    debug_dir.mkdir(parents=True, exist_ok=True)
    
    return debug_dir / get_timestamped_filename(prefix, extension, timestamp)


def get_log_file_path(log_type: str = "app", timestamp: Optional[datetime] = None) -> Path:
    """
    Get path for log file, organized by date.
    
    Args:
        log_type: Type of log ('app', 'error', 'debug')
        timestamp: Optional timestamp, defaults to now
        
    Returns:
        Path object for the log file
    """
    if timestamp is None:
        timestamp = datetime.now()
    
    log_dir = LOGS_DIR / timestamp.strftime("%Y-%m-%d")
    log_dir.mkdir(parents=True, exist_ok=True)
    
    # Log files are named by date, not time (one per day)
    return log_dir / f"{log_type}_{timestamp.strftime('%Y%m%d')}.log"


def find_old_files(directory: Path, days_old: int):
    """
    List files older than the given age.
    
    Args:
        directory: Directory to scan recursively
        days_old: Age threshold in days
        
    Returns:
        List of (path, size_in_bytes) tuples
    """
    if not directory.exists():
        return []
    
    cutoff_time = time.time() - (days_old * 24 * 60 * 60)
    old_files = []
    for file_path in directory.rglob("*"):
        if file_path.is_file() and file_path.name != ".gitkeep":
            stat = file_path.stat()
            if stat.st_mtime < cutoff_time:
                old_files.append((file_path, stat.st_size))
    return old_files


def cleanup_old_files(directory: Path, days_old: int = 7) -> int:
    """
    Clean up old files from a directory.
    
    Args:
        directory: Directory to clean
        days_old: Remove files older than this many days
        
    Returns:
        Number of files removed
    """
    removed = 0
    for file_path, _ in find_old_files(directory, days_old):
        try:
            file_path.unlink()
            removed += 1
            logger.debug(f"Removed old file: {file_path}")
        except OSError as e:
            logger.error(f"Error removing {file_path}: {e}")
    return removed


def cleanup_old_data(debug_days: int = 7, logs_days: int = 90) -> int:
    """
    Run cleanup for all data directories based on retention policy.
    
    Retention policy:
    - Debug artifacts: 7 days
    - Logs: 90 days
    
    Returns:
        Number of files removed
    """
    logger.info("Running data cleanup...")
    
    removed = cleanup_old_files(DEBUG_DIR, days_old=debug_days)
    removed += cleanup_old_files(LOGS_DIR, days_old=logs_days)
    
    logger.info(f"Cleanup complete ({removed} files removed).")
    return removed
