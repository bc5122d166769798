"""Tests for the directory layout summary."""

from __future__ import annotations

from pathlib import Path

from promptgen.analyzers.structure import summarize


def test_summarize_collects_sorted_directories() -> None:
    summary = summarize(
        ["package.json", "src/main.ts", "src/components/Nav.tsx", "public/index.html"],
        "/project",
    )

    assert summary.directories == ("public", "src", "src/components")
    assert summary.has_src_folder is True
    assert summary.has_public_folder is True
    assert summary.has_components_folder is True
    assert summary.has_pages_folder is False
    assert summary.has_api_folder is False


def test_nested_flags_use_substring_matching() -> None:
    summary = summarize(["app/pages/index.js", "server/rapid/handler.js"], "/project")

    assert summary.has_src_folder is False
    assert summary.has_pages_folder is True
    assert summary.has_api_folder is True


def test_src_flag_requires_exact_top_level_match() -> None:
    summary = summarize(["packages/web/src/index.js"], "/project")

    assert summary.has_src_folder is False
    assert summary.directories == ("packages/web/src",)


def test_absolute_paths_are_made_relative(tmp_path: Path) -> None:
    summary = summarize([str(tmp_path / "src" / "index.js"), str(tmp_path / "README.md")], tmp_path)

    assert summary.directories == ("src",)
    assert summary.has_src_folder is True


def test_empty_file_list() -> None:
    summary = summarize([], "/project")

    assert summary.directories == ()
    assert not any(
        (
            summary.has_src_folder,
            summary.has_public_folder,
            summary.has_components_folder,
            summary.has_pages_folder,
            summary.has_api_folder,
        )
    )
