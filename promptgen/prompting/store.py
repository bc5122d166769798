"""Template lookup backed by jinja2 loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from ..logging import get_logger
from ..models import Outcome
from .constants import DEFAULT_TEMPLATE, TEMPLATE_SUFFIX

BUILTIN_TEMPLATES_DIR = Path(__file__).with_name("templates")


class TemplateStore:
    """Resolves template identifiers to template text.

    User templates in ``templates_dir`` shadow the built-in ones with the same
    identifier. Loaded sources are cached for the lifetime of the store.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self._cache: Dict[str, str] = {}
        self.logger = get_logger("prompting.store")

    def load(self, identifier: str | None = None) -> Outcome[str]:
        """Return the template for ``identifier`` or the built-in default."""
        name = identifier or DEFAULT_TEMPLATE
        try:
            return Outcome(value=self._source(name))
        except TemplateNotFound:
            if name == DEFAULT_TEMPLATE:
                raise
            reason = f"Template '{name}' not found; using '{DEFAULT_TEMPLATE}'"
            self.logger.warning(reason)
            return Outcome(value=self._source(DEFAULT_TEMPLATE), fallback_used=True, issues=(reason,))

    def names(self) -> List[str]:
        """Return the identifiers of all top-level templates."""
        found = {
            name[: -len(TEMPLATE_SUFFIX)]
            for name in self._env.list_templates(extensions=[TEMPLATE_SUFFIX.lstrip(".")])
            if "/" not in name
        }
        return sorted(found)

    def _source(self, name: str) -> str:
        if name not in self._cache:
            loader = self._env.loader
            if loader is None:
                raise TemplateNotFound(name)
            source, _, _ = loader.get_source(self._env, f"{name}{TEMPLATE_SUFFIX}")
            self._cache[name] = source
        return self._cache[name]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        builtin = str(BUILTIN_TEMPLATES_DIR)
        if builtin not in directories:
            directories.append(builtin)
        return Environment(loader=FileSystemLoader(directories), autoescape=False)


__all__ = ["BUILTIN_TEMPLATES_DIR", "TemplateStore"]
