"""Tests for promptgen.repo_scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from promptgen.repo_scanner import RepoScanner, walk_files


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_walk_lists_nested_files_relative_to_root(tmp_path: Path) -> None:
    _write(tmp_path / "index.html")
    _write(tmp_path / "src" / "App.tsx")
    _write(tmp_path / "src" / "components" / "Button.jsx")

    outcome = walk_files(tmp_path)

    assert sorted(outcome.value) == ["index.html", "src/App.tsx", "src/components/Button.jsx"]
    assert outcome.fallback_used is False
    assert outcome.issues == ()


def test_walk_skips_default_ignored_directories(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "main.js")
    _write(tmp_path / "node_modules" / "react" / "index.js")
    _write(tmp_path / ".git" / "HEAD")
    _write(tmp_path / "dist" / "bundle.js")
    _write(tmp_path / "src" / ".next" / "cache.json")

    files = RepoScanner().scan(tmp_path).value

    assert list(files) == ["src/main.js"]


def test_walk_skips_ignored_file_names(tmp_path: Path) -> None:
    _write(tmp_path / "main.js")
    _write(tmp_path / "coverage" / "lcov.info")
    _write(tmp_path / "notes" / "coverage")

    files = RepoScanner(ignore={"coverage"}).scan(tmp_path).value

    assert list(files) == ["main.js"]


def test_walk_is_stable_for_unchanged_tree(tmp_path: Path) -> None:
    for name in ("a.js", "b/c.ts", "b/d/e.css", "f.md"):
        _write(tmp_path / name)

    first = walk_files(tmp_path).value
    second = walk_files(tmp_path).value

    assert sorted(first) == sorted(second)


def test_walk_omits_unreadable_subtree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / "src" / "main.js")
    _write(tmp_path / "locked" / "secret.js")

    real_walk = os.walk

    def _walk(top, onerror=None, **kwargs):
        for dirpath, dirnames, filenames in real_walk(top, onerror=onerror, **kwargs):
            if Path(dirpath).name == "locked":
                onerror(PermissionError(13, "Permission denied", dirpath))
                dirnames[:] = []
                continue
            yield dirpath, dirnames, filenames

    monkeypatch.setattr(os, "walk", _walk)

    outcome = walk_files(tmp_path)

    assert list(outcome.value) == ["src/main.js"]
    assert outcome.fallback_used is True
    assert len(outcome.issues) == 1
    assert "locked" in outcome.issues[0]


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    with pytest.raises(FileNotFoundError) as excinfo:
        RepoScanner().scan(missing)
    assert str(missing) in str(excinfo.value)


def test_scan_rejects_file_root(tmp_path: Path) -> None:
    target = tmp_path / "package.json"
    _write(target, "{}")
    with pytest.raises(NotADirectoryError):
        RepoScanner().scan(target)
