"""Repository walking utilities."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_IGNORE_PATTERNS
from .logging import get_logger
from .models import Outcome

logger = get_logger("scanner")


def walk_files(root: Path, ignore: Iterable[str] = DEFAULT_IGNORE_PATTERNS) -> Outcome[tuple[str, ...]]:
    """List root-relative POSIX paths of every file below ``root``.

    Directories and files whose basename is in ``ignore`` are skipped along
    with everything beneath them. Directories that cannot be listed are
    omitted and reported through ``Outcome.issues``. Symlinked directories
    are not descended into.
    """
    ignored = frozenset(ignore)
    skipped: List[str] = []

    def _on_error(exc: OSError) -> None:
        location = exc.filename or str(root)
        skipped.append(f"Skipped unreadable directory: {location} ({exc.strerror or exc})")

    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        dirnames[:] = [name for name in dirnames if name not in ignored]

        for filename in filenames:
            if filename in ignored:
                continue
            files.append(f"{rel_dir}/{filename}" if rel_dir else filename)

    for issue in skipped:
        logger.warning(issue)

    return Outcome(value=tuple(files), fallback_used=bool(skipped), issues=tuple(skipped))


class RepoScanner:
    """Walks a project directory to produce its file list."""

    def __init__(self, ignore: Iterable[str] | None = None) -> None:
        self.ignore = frozenset(ignore) if ignore is not None else frozenset(DEFAULT_IGNORE_PATTERNS)

    def resolve_root(self, root: str | os.PathLike[str]) -> Path:
        """Return the absolute project root, rejecting missing paths and files."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path does not exist: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")
        return root_path

    def scan(self, root: str | os.PathLike[str]) -> Outcome[tuple[str, ...]]:
        """Return the root-relative paths of all files under ``root``."""
        root_path = self.resolve_root(root)
        outcome = walk_files(root_path, self.ignore)
        logger.debug("Scanner discovered %d files under %s", len(outcome.value), root_path)
        return outcome


__all__ = ["RepoScanner", "walk_files"]
