from __future__ import annotations

from pathlib import Path

import pytest

from promptgen.models import (
    AnalysisRecord,
    CategoryBuckets,
    DependencyRecord,
    ImportanceRoles,
    StructureSummary,
    TechnologyProfile,
)
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def demo_analysis() -> AnalysisRecord:
    """Hand-built analysis record: 3 files, React on TypeScript, no roles."""
    return AnalysisRecord(
        project_name="demo",
        root="/tmp/demo",
        total_files=3,
        file_types=CategoryBuckets(
            react=("src/App.tsx",),
            styles=("src/index.css",),
            config=("package.json",),
        ),
        important_files=ImportanceRoles(),
        dependencies=DependencyRecord(dependencies={"react": "^18.2.0", "typescript": "^5.0.0"}),
        technology=TechnologyProfile(
            framework="React",
            language="TypeScript",
            styling="CSS/SCSS",
            bundler="Unknown",
            testing="None detected",
            has_typescript=True,
            has_react=True,
        ),
        structure=StructureSummary(directories=("src",), has_src_folder=True),
    )
