"""Tests for debug artifact paths and retention cleanup."""

import os
import time
from datetime import datetime

from paste2resume.utils import paths


def test_debug_artifact_path_is_grouped_by_date(tmp_path):
    timestamp = datetime(2025, 3, 14, 9, 26, 53, 589793)

    path = paths.get_debug_artifact_path("record", "json", timestamp, base_dir=tmp_path)

    assert path == tmp_path / "2025-03-14" / "record_20250314_092653_589793.json"
    assert path.parent.is_dir()


def test_cleanup_removes_only_old_files(tmp_path):
    old_file = tmp_path / "2024-01-01" / "resume_old.html"
    old_file.parent.mkdir()
    old_file.write_text("<html></html>", encoding="utf-8")
    ten_days_ago = time.time() - 10 * 24 * 60 * 60
    os.utime(old_file, (ten_days_ago, ten_days_ago))

    fresh_file = tmp_path / "resume_new.html"
    fresh_file.write_text("<html></html>", encoding="utf-8")
    (tmp_path / ".gitkeep").touch()
    os.utime(tmp_path / ".gitkeep", (ten_days_ago, ten_days_ago))

    assert paths.find_old_files(tmp_path, days_old=7) == [(old_file, 13)]
    assert paths.cleanup_old_files(tmp_path, days_old=7) == 1
    assert not old_file.exists()
    assert fresh_file.exists()


def test_missing_directory_is_ignored(tmp_path):
    assert paths.find_old_files(tmp_path / "nope", days_old=1) == []
    assert paths.cleanup_old_files(tmp_path / "nope") == 0
