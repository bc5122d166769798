"""Technology profile detection from file buckets and dependencies."""

from __future__ import annotations

from typing import AbstractSet, Sequence, Tuple

from ..models import CategoryBuckets, DependencyRecord, TechnologyProfile

UNKNOWN = "Unknown"
NO_TEST_TOOL = "None detected"

# Order matters: the first dependency present decides the label.
FRAMEWORKS: Tuple[Tuple[str, str], ...] = (
    ("next", "Next.js"),
    ("nuxt", "Nuxt.js"),
    ("vue", "Vue.js"),
    ("@angular/core", "Angular"),
    ("react", "React"),
    ("express", "Express.js"),
)

STYLING_LIBRARIES: Tuple[Tuple[str, str], ...] = (
    ("tailwindcss", "Tailwind CSS"),
    ("styled-components", "Styled Components"),
    ("@emotion/react", "Emotion"),
)

BUNDLERS: Tuple[Tuple[str, str], ...] = (
    ("vite", "Vite"),
    ("webpack", "Webpack"),
    ("parcel", "Parcel"),
)

TEST_TOOLS: Tuple[Tuple[str, str], ...] = (
    ("jest", "Jest"),
    ("vitest", "Vitest"),
    ("cypress", "Cypress"),
    ("@testing-library/react", "Testing Library"),
)


def _first_present(
    names: AbstractSet[str], rules: Sequence[Tuple[str, str]], default: str
) -> str:
    for dependency, label in rules:
        if dependency in names:
            return label
    return default


def detect_framework(names: AbstractSet[str]) -> str:
    return _first_present(names, FRAMEWORKS, UNKNOWN)


def detect_language(buckets: CategoryBuckets) -> str:
    if buckets.typescript or any(path.endswith(".tsx") for path in buckets.react):
        return "TypeScript"
    if buckets.javascript:
        return "JavaScript"
    return UNKNOWN


def detect_styling(buckets: CategoryBuckets, names: AbstractSet[str]) -> str:
    label = _first_present(names, STYLING_LIBRARIES, "")
    if label:
        return label
    if buckets.styles:
        return "CSS/SCSS"
    return UNKNOWN


def detect_bundler(names: AbstractSet[str]) -> str:
    return _first_present(names, BUNDLERS, UNKNOWN)


def detect_testing(names: AbstractSet[str]) -> str:
    return _first_present(names, TEST_TOOLS, NO_TEST_TOOL)


def detect(buckets: CategoryBuckets, dependencies: DependencyRecord) -> TechnologyProfile:
    """Resolve the technology profile for a classified project."""
    names = dependencies.names()
    return TechnologyProfile(
        framework=detect_framework(names),
        language=detect_language(buckets),
        styling=detect_styling(buckets, names),
        bundler=detect_bundler(names),
        testing=detect_testing(names),
        has_typescript=bool(buckets.typescript)
        or any(path.endswith(".tsx") for path in buckets.react),
        has_react=bool(buckets.react) or "react" in names,
        has_vue=bool(buckets.vue) or "vue" in names,
        has_angular="@angular/core" in names,
    )


__all__ = [
    "BUNDLERS",
    "FRAMEWORKS",
    "NO_TEST_TOOL",
    "STYLING_LIBRARIES",
    "TEST_TOOLS",
    "UNKNOWN",
    "detect",
]
