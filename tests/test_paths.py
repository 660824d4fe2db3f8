from pathlib import Path

from bqtools.data import paths


def test_get_export_path_base_path(tmp_path: Path) -> None:
    assert paths.get_export_path(tmp_path) == tmp_path


def test_get_export_path_accepts_str(tmp_path: Path) -> None:
    assert paths.get_export_path(str(tmp_path)) == tmp_path


def test_get_export_path_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.EXPORT_DIR_ENV, str(tmp_path))
    assert paths.get_export_path() == tmp_path


def test_get_export_path_explicit_beats_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.EXPORT_DIR_ENV, str(tmp_path / "env"))
    assert paths.get_export_path(tmp_path) == tmp_path


def test_get_export_path_default(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(paths.EXPORT_DIR_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    expected = tmp_path / "config" / "betterquesting" / "DefaultQuests"
    assert paths.get_export_path() == expected
