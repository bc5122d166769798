"""Template storage and prompt rendering."""

from .renderer import TemplateRenderer, parse_template
from .store import TemplateStore

__all__ = ["TemplateRenderer", "TemplateStore", "parse_template"]
