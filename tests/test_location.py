from __future__ import annotations

from pathlib import Path

import pytest

from track_export.config import OUTPUT_SUBFOLDER
from track_export.core.location import ensure_exists, resolve_output_folder
from track_export.exceptions import FileSystemFailure


def test_saved_project_exports_next_to_project_file(tmp_path: Path) -> None:
    project_file = tmp_path / "show" / "episode1.json"
    assert resolve_output_folder(project_file) == tmp_path / "show" / OUTPUT_SUBFOLDER
    assert resolve_output_folder(str(project_file)) == tmp_path / "show" / OUTPUT_SUBFOLDER


def test_unsaved_project_uses_fallback_dir(tmp_path: Path) -> None:
    assert resolve_output_folder(None, fallback_dir=tmp_path) == tmp_path / OUTPUT_SUBFOLDER
    assert resolve_output_folder("", fallback_dir=tmp_path) == tmp_path / OUTPUT_SUBFOLDER


def test_unsaved_project_defaults_to_desktop_or_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert resolve_output_folder(None) == tmp_path / OUTPUT_SUBFOLDER

    (tmp_path / "Desktop").mkdir()
    assert resolve_output_folder(None) == tmp_path / "Desktop" / OUTPUT_SUBFOLDER


def test_resolution_and_creation_are_idempotent(tmp_path: Path) -> None:
    project_file = tmp_path / "p.json"
    first = ensure_exists(resolve_output_folder(project_file))
    second = ensure_exists(resolve_output_folder(project_file))
    assert first == second
    assert first.is_dir()


def test_ensure_exists_creates_missing_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / OUTPUT_SUBFOLDER
    ensure_exists(target)
    assert target.is_dir()


def test_ensure_exists_reports_file_system_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder")
    with pytest.raises(FileSystemFailure) as exc:
        ensure_exists(blocker / OUTPUT_SUBFOLDER)
    assert exc.value.path == blocker / OUTPUT_SUBFOLDER
