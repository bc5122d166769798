"""Tests for technology profile detection."""

from __future__ import annotations

from dataclasses import replace

import pytest

from promptgen.analyzers.technology import detect
from promptgen.models import CategoryBuckets, DependencyRecord


def _deps(*runtime: str, dev: tuple[str, ...] = ()) -> DependencyRecord:
    return DependencyRecord(
        dependencies={name: "*" for name in runtime},
        dev_dependencies={name: "*" for name in dev},
    )


def test_meta_framework_takes_precedence_over_react() -> None:
    profile = detect(CategoryBuckets(), _deps("react", "next"))

    assert profile.framework == "Next.js"
    assert profile.has_react is True


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        (("nuxt", "vue"), "Nuxt.js"),
        (("vue", "react"), "Vue.js"),
        (("@angular/core", "react"), "Angular"),
        (("react", "express"), "React"),
        (("express",), "Express.js"),
        ((), "Unknown"),
    ],
)
def test_framework_precedence(names: tuple[str, ...], expected: str) -> None:
    assert detect(CategoryBuckets(), _deps(*names)).framework == expected


def test_dev_dependencies_count_towards_detection() -> None:
    profile = detect(CategoryBuckets(), _deps(dev=("vite", "jest", "tailwindcss")))

    assert profile.bundler == "Vite"
    assert profile.testing == "Jest"
    assert profile.styling == "Tailwind CSS"


def test_language_prefers_typescript_bucket() -> None:
    buckets = CategoryBuckets(javascript=("a.js",), typescript=("b.ts",))
    assert detect(buckets, DependencyRecord()).language == "TypeScript"
    assert detect(CategoryBuckets(javascript=("a.js",)), DependencyRecord()).language == "JavaScript"
    assert detect(CategoryBuckets(react=("App.tsx",)), DependencyRecord()).language == "TypeScript"
    assert detect(CategoryBuckets(other=("x.py",)), DependencyRecord()).language == "Unknown"


def test_jsx_components_alone_leave_language_unknown() -> None:
    buckets = CategoryBuckets(react=("src/App.jsx", "src/Nav.jsx"))

    assert detect(buckets, DependencyRecord()).language == "Unknown"
    assert detect(replace(buckets, javascript=("src/index.js",)), DependencyRecord()).language == "JavaScript"


def test_styling_falls_back_to_stylesheets() -> None:
    buckets = CategoryBuckets(styles=("index.css",))

    assert detect(buckets, DependencyRecord()).styling == "CSS/SCSS"
    assert detect(buckets, _deps("@emotion/react", "styled-components")).styling == "Styled Components"
    assert detect(CategoryBuckets(), DependencyRecord()).styling == "Unknown"


def test_bundler_and_testing_defaults() -> None:
    profile = detect(CategoryBuckets(), DependencyRecord())

    assert profile.bundler == "Unknown"
    assert profile.testing == "None detected"
    assert detect(CategoryBuckets(), _deps("parcel", "webpack")).bundler == "Webpack"
    assert detect(CategoryBuckets(), _deps("@testing-library/react", "cypress")).testing == "Cypress"


def test_capability_flags() -> None:
    buckets = CategoryBuckets(react=("src/App.tsx",), vue=("src/Home.vue",))
    profile = detect(buckets, _deps("@angular/core"))

    assert profile.has_typescript is True
    assert profile.has_react is True
    assert profile.has_vue is True
    assert profile.has_angular is True

    plain = detect(CategoryBuckets(react=("src/App.jsx",)), DependencyRecord())
    assert plain.has_typescript is False
    assert plain.has_vue is False
    assert plain.has_angular is False
