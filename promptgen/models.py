"""Core data models shared across promptgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

CATEGORY_KEYS: Tuple[str, ...] = (
    "javascript",
    "typescript",
    "react",
    "vue",
    "styles",
    "html",
    "images",
    "config",
    "documentation",
    "tests",
    "other",
)

ROLE_KEYS: Dict[str, str] = {
    "entryPoints": "entry_points",
    "components": "components",
    "pages": "pages",
    "api": "api",
    "config": "config",
    "styles": "styles",
}

TECHNOLOGY_LABEL_KEYS: Dict[str, str] = {
    "framework": "framework",
    "language": "language",
    "styling": "styling",
    "bundler": "bundler",
    "testing": "testing",
}

TECHNOLOGY_FLAG_KEYS: Dict[str, str] = {
    "hasTypeScript": "has_typescript",
    "hasReact": "has_react",
    "hasVue": "has_vue",
    "hasAngular": "has_angular",
}

STRUCTURE_FLAG_KEYS: Dict[str, str] = {
    "hasSrcFolder": "has_src_folder",
    "hasPublicFolder": "has_public_folder",
    "hasComponentsFolder": "has_components_folder",
    "hasPagesFolder": "has_pages_folder",
    "hasApiFolder": "has_api_folder",
}


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Value produced by a step that may have degraded to a default."""

    value: T
    fallback_used: bool = False
    issues: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryBuckets:
    """Mutually exclusive file categories keyed by extension and basename."""

    javascript: Tuple[str, ...] = ()
    typescript: Tuple[str, ...] = ()
    react: Tuple[str, ...] = ()
    vue: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()
    html: Tuple[str, ...] = ()
    images: Tuple[str, ...] = ()
    config: Tuple[str, ...] = ()
    documentation: Tuple[str, ...] = ()
    tests: Tuple[str, ...] = ()
    other: Tuple[str, ...] = ()

    def get(self, category: str) -> Tuple[str, ...]:
        if category not in CATEGORY_KEYS:
            raise KeyError(category)
        return getattr(self, category)

    def all_files(self) -> Tuple[str, ...]:
        return tuple(path for key in CATEGORY_KEYS for path in self.get(key))

    def to_dict(self) -> Dict[str, list[str]]:
        return {key: list(self.get(key)) for key in CATEGORY_KEYS}


@dataclass(frozen=True)
class ImportanceRoles:
    """Non-exclusive importance tags; a path may appear under several roles."""

    entry_points: Tuple[str, ...] = ()
    components: Tuple[str, ...] = ()
    pages: Tuple[str, ...] = ()
    api: Tuple[str, ...] = ()
    config: Tuple[str, ...] = ()
    styles: Tuple[str, ...] = ()

    def get(self, role: str) -> Tuple[str, ...]:
        return getattr(self, ROLE_KEYS[role])

    def to_dict(self) -> Dict[str, list[str]]:
        return {key: list(self.get(key)) for key in ROLE_KEYS}


@dataclass(frozen=True)
class DependencyRecord:
    """Dependencies, scripts and module type declared by package.json."""

    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    scripts: Dict[str, str] = field(default_factory=dict)
    type: str = "commonjs"

    def names(self) -> set[str]:
        """Return the merged runtime and development dependency names."""
        return set(self.dependencies) | set(self.dev_dependencies)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
            "scripts": dict(self.scripts),
            "type": self.type,
        }


@dataclass(frozen=True)
class TechnologyProfile:
    """Single-valued technology labels plus capability flags."""

    framework: str
    language: str
    styling: str
    bundler: str
    testing: str
    has_typescript: bool = False
    has_react: bool = False
    has_vue: bool = False
    has_angular: bool = False

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            key: getattr(self, attr) for key, attr in TECHNOLOGY_LABEL_KEYS.items()
        }
        payload.update(
            {key: getattr(self, attr) for key, attr in TECHNOLOGY_FLAG_KEYS.items()}
        )
        return payload


@dataclass(frozen=True)
class StructureSummary:
    """Directory layout flags derived from the walked file list."""

    directories: Tuple[str, ...] = ()
    has_src_folder: bool = False
    has_public_folder: bool = False
    has_components_folder: bool = False
    has_pages_folder: bool = False
    has_api_folder: bool = False

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"directories": list(self.directories)}
        payload.update(
            {key: getattr(self, attr) for key, attr in STRUCTURE_FLAG_KEYS.items()}
        )
        return payload


@dataclass(frozen=True)
class AnalysisRecord:
    """Complete, immutable result of scanning one project root."""

    project_name: str
    root: str
    total_files: int
    file_types: CategoryBuckets
    important_files: ImportanceRoles
    dependencies: DependencyRecord
    technology: TechnologyProfile
    structure: StructureSummary
    issues: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projectName": self.project_name,
            "root": self.root,
            "totalFiles": self.total_files,
            "fileTypes": self.file_types.to_dict(),
            "importantFiles": self.important_files.to_dict(),
            "dependencies": self.dependencies.to_dict(),
            "technology": self.technology.to_dict(),
            "structure": self.structure.to_dict(),
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class GenerationResult:
    """Rendered prompt together with the analysis it was built from."""

    analysis: AnalysisRecord
    prompt: str
    template: str
    timestamp: str
    task_type: Optional[str] = None
    saved_path: Optional[str] = None
