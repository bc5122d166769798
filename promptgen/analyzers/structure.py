"""Directory layout summary."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, Set

from ..models import StructureSummary


def _relative(path: str, root: Path) -> PurePosixPath:
    candidate = Path(path)
    if candidate.is_absolute():
        try:
            return PurePosixPath(candidate.relative_to(root).as_posix())
        except ValueError:
            return PurePosixPath(candidate.as_posix())
    return PurePosixPath(path)


def summarize(files: Iterable[str], root: Path | str) -> StructureSummary:
    """Collect parent directories of ``files`` and derive layout flags."""
    root_path = Path(root)
    directories: Set[str] = set()
    for path in files:
        parent = _relative(path, root_path).parent.as_posix()
        if parent != ".":
            directories.add(parent)

    ordered = tuple(sorted(directories))
    return StructureSummary(
        directories=ordered,
        has_src_folder="src" in directories,
        has_public_folder="public" in directories,
        has_components_folder=any("components" in directory for directory in ordered),
        has_pages_folder=any("pages" in directory for directory in ordered),
        has_api_folder=any("api" in directory for directory in ordered),
    )


__all__ = ["summarize"]
