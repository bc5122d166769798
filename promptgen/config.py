"""Configuration loading for promptgen (.promptgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".promptgen.yml"

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    ".nuxt",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class AnalysisConfig:
    """Scanner settings."""

    ignore_patterns: List[str] = field(default_factory=list)

    def ignore_set(self) -> frozenset[str]:
        """Return the default ignore names extended by configured ones."""
        return frozenset(DEFAULT_IGNORE_PATTERNS).union(self.ignore_patterns)


@dataclass
class PromptsConfig:
    """Template selection and prompt output settings."""

    output_directory: Path = Path("output")
    templates_dir: Optional[Path] = None
    default_template: str = "default"


@dataclass
class PromptGenConfig:
    """Represents the settings defined in .promptgen.yml."""

    root: Path
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    prompts: PromptsConfig = field(default_factory=PromptsConfig)


def load_config(config_path: Path) -> PromptGenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PromptGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    analysis = AnalysisConfig()
    analysis_data = _as_dict(data.get("analysis"))
    if analysis_data:
        analysis.ignore_patterns = _as_str_list(analysis_data.get("ignore_patterns"))

    prompts = PromptsConfig()
    prompts_data = _as_dict(data.get("prompts"))
    if prompts_data:
        output_dir = _as_str(prompts_data.get("output_directory"))
        if output_dir:
            prompts.output_directory = root / output_dir
        templates_dir = _as_str(prompts_data.get("templates_dir"))
        if templates_dir:
            prompts.templates_dir = root / templates_dir
        default_template = _as_str(prompts_data.get("default_template"))
        if default_template:
            prompts.default_template = default_template

    return PromptGenConfig(root=root, analysis=analysis, prompts=prompts)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnalysisConfig",
    "ConfigError",
    "DEFAULT_IGNORE_PATTERNS",
    "PromptGenConfig",
    "PromptsConfig",
    "load_config",
]
