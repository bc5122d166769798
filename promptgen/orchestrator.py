"""Pipeline orchestration for analysis and prompt generation."""

from __future__ import annotations

import os
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import List, Optional

from .analyzers import classify, detect, read_manifest, summarize
from .config import PromptGenConfig, load_config
from .logging import get_logger
from .models import AnalysisRecord, GenerationResult
from .prompting.renderer import TemplateRenderer
from .prompting.store import TemplateStore
from .repo_scanner import RepoScanner

PROMPT_FILENAME_PREFIX = "ai-prompt-"


class PromptWriteError(RuntimeError):
    """Raised when a rendered prompt cannot be written to disk."""


def _timestamp_ms() -> int:
    return time.time_ns() // 1_000_000


class Orchestrator:
    """Coordinates scanning, analysis, rendering and persistence."""

    def __init__(
        self,
        config: PromptGenConfig | None = None,
        scanner: RepoScanner | None = None,
        store: TemplateStore | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or load_config(Path.cwd())
        self.scanner = scanner or RepoScanner(self.config.analysis.ignore_set())
        if renderer is None:
            renderer = TemplateRenderer(store or TemplateStore(self.config.prompts.templates_dir))
        self.renderer = renderer
        self.logger = get_logger("orchestrator")

    @property
    def store(self) -> TemplateStore:
        return self.renderer.store

    def analyze(self, path: str | os.PathLike[str]) -> AnalysisRecord:
        """Scan ``path`` and assemble its analysis record."""
        root = self.scanner.resolve_root(path)
        self.logger.info("Analyzing codebase at %s", root)

        scan = self.scanner.scan(root)
        files = scan.value
        file_types, important_files = classify(files)
        manifest = read_manifest(root)
        technology = detect(file_types, manifest.value)
        structure = summarize(files, root)

        record = AnalysisRecord(
            project_name=root.name,
            root=str(root),
            total_files=len(files),
            file_types=file_types,
            important_files=important_files,
            dependencies=manifest.value,
            technology=technology,
            structure=structure,
            issues=scan.issues + manifest.issues,
        )
        self.logger.info(
            "Analysis complete: %d files, main technology %s",
            record.total_files,
            record.technology.framework,
        )
        return record

    def quick_analysis(self, path: str | os.PathLike[str]) -> AnalysisRecord:
        """Analyze ``path`` and log a short summary without rendering a prompt."""
        record = self.analyze(path)
        technology = record.technology
        self.logger.info("Project: %s", record.project_name)
        self.logger.info("Files: %d", record.total_files)
        self.logger.info("Framework: %s", technology.framework)
        self.logger.info("Language: %s", technology.language)
        self.logger.info("Has React: %s", "Yes" if technology.has_react else "No")
        self.logger.info("Has TypeScript: %s", "Yes" if technology.has_typescript else "No")
        return record

    def generate(
        self,
        path: str | os.PathLike[str],
        user_question: str = "",
        *,
        template: str | None = None,
        task_type: str | None = None,
        output_dir: Path | None = None,
        save: bool = True,
    ) -> GenerationResult:
        """Analyze ``path`` and render a prompt, optionally saving it."""
        analysis = self.analyze(path)
        template_name = template or self.config.prompts.default_template

        self.logger.debug("Rendering template '%s'", template_name)
        rendered = self.renderer.render_named(template_name, analysis, user_question)
        prompt = self.renderer.specialize(rendered.value, task_type)

        saved_path: Optional[Path] = None
        if save:
            saved_path = self.save_prompt(prompt, output_dir)

        return GenerationResult(
            analysis=analysis,
            prompt=prompt,
            template=template_name,
            timestamp=datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            task_type=task_type,
            saved_path=str(saved_path) if saved_path is not None else None,
        )

    def generate_specialized(
        self,
        path: str | os.PathLike[str],
        task_type: str,
        description: str = "",
        *,
        template: str | None = None,
        output_dir: Path | None = None,
        save: bool = True,
    ) -> GenerationResult:
        """Render a prompt with the guidance block for ``task_type`` appended."""
        self.logger.info("Generating specialized prompt for: %s", task_type)
        return self.generate(
            path,
            description,
            template=template,
            task_type=task_type,
            output_dir=output_dir,
            save=save,
        )

    def list_templates(self) -> List[str]:
        return self.store.names()

    def save_prompt(self, prompt: str, output_dir: Path | None = None) -> Path:
        """Write ``prompt`` to ``ai-prompt-<millis>.md`` inside ``output_dir``.

        File names that are not valid UTF-8 reach the prompt as surrogate
        escapes; they are written back as their original bytes.
        """
        directory = Path(output_dir or self.config.prompts.output_directory)
        target = directory / f"{PROMPT_FILENAME_PREFIX}{_timestamp_ms()}.md"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            target.write_text(prompt, encoding="utf-8", errors="surrogateescape")
        except (OSError, UnicodeError) as exc:
            raise PromptWriteError(f"Could not save prompt to {target}: {exc}") from exc
        self.logger.info("Prompt saved to %s", target)
        return target


__all__ = ["Orchestrator", "PROMPT_FILENAME_PREFIX", "PromptWriteError"]
