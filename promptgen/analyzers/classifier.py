"""File categorisation and importance tagging."""

from __future__ import annotations

import re
from collections import defaultdict
from pathlib import PurePosixPath
from typing import Dict, Iterable, List, Tuple

from ..models import CATEGORY_KEYS, ROLE_KEYS, CategoryBuckets, ImportanceRoles

_TEST_MARKERS = (".test.", ".spec.")

_STYLE_SUFFIXES = {".css", ".scss", ".sass", ".less"}
_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp"}
_DOC_SUFFIXES = {".md", ".txt", ".rst"}

_CONFIG_FILES = {
    "package.json",
    "package-lock.json",
    ".env",
    "tsconfig.json",
    "webpack.config.js",
}

_ENTRY_POINT_FILES = {
    "index.html",
    "index.js",
    "index.ts",
    "App.js",
    "App.tsx",
    "main.js",
    "main.ts",
}

_IMPORTANT_CONFIG_FILES = {
    "package.json",
    ".env",
    "tsconfig.json",
    "next.config.js",
    "vite.config.js",
}

_PRIMARY_STYLESHEETS = {"index.css", "App.css", "globals.css"}

_COMPONENT_FILE = re.compile(r"^[A-Z].*\.(jsx|tsx)$")
_PAGE_FILE = re.compile(r"^page\.(js|ts|jsx|tsx)$")

_PAGE_SEGMENTS = {"pages", "views"}
_API_SEGMENTS = {"api", "routes"}


def _has_test_marker(name: str) -> bool:
    return any(marker in name for marker in _TEST_MARKERS)


def categorize(path: str) -> str:
    """Return the single category key for ``path``.

    Rules are checked in order and the first match wins, so a
    ``webpack.config.js`` is a script rather than config and ``App.test.tsx``
    is a component rather than a test.
    """
    name = PurePosixPath(path).name
    suffix = PurePosixPath(name).suffix.lower()
    is_test = _has_test_marker(name)

    if suffix == ".js" and not is_test:
        return "javascript"
    if suffix == ".ts" and not is_test:
        return "typescript"
    if suffix in {".jsx", ".tsx"}:
        return "react"
    if suffix == ".vue":
        return "vue"
    if suffix in _STYLE_SUFFIXES:
        return "styles"
    if suffix == ".html":
        return "html"
    if suffix in _IMAGE_SUFFIXES:
        return "images"
    if name in _CONFIG_FILES:
        return "config"
    if suffix in _DOC_SUFFIXES:
        return "documentation"
    if is_test:
        return "tests"
    return "other"


def importance_roles(path: str) -> List[str]:
    """Return every importance role key that applies to ``path``."""
    pure = PurePosixPath(path)
    name = pure.name
    segments = {part.lower() for part in pure.parent.parts}

    roles: List[str] = []
    if name in _ENTRY_POINT_FILES:
        roles.append("entryPoints")
    if _COMPONENT_FILE.match(name):
        roles.append("components")
    if segments & _PAGE_SEGMENTS or _PAGE_FILE.match(name):
        roles.append("pages")
    if segments & _API_SEGMENTS or "route" in name:
        roles.append("api")
    if name in _IMPORTANT_CONFIG_FILES:
        roles.append("config")
    if name in _PRIMARY_STYLESHEETS:
        roles.append("styles")
    return roles


def classify(files: Iterable[str]) -> Tuple[CategoryBuckets, ImportanceRoles]:
    """Partition ``files`` into category buckets and collect importance roles."""
    buckets: Dict[str, List[str]] = defaultdict(list)
    roles: Dict[str, List[str]] = defaultdict(list)

    for path in files:
        buckets[categorize(path)].append(path)
        for role in importance_roles(path):
            roles[role].append(path)

    return (
        CategoryBuckets(**{key: tuple(buckets[key]) for key in CATEGORY_KEYS}),
        ImportanceRoles(**{attr: tuple(roles[key]) for key, attr in ROLE_KEYS.items()}),
    )


__all__ = ["categorize", "classify", "importance_roles"]
