"""Placeholder parsing and substitution for prompt templates.

Templates are plain text with ``{{...}}`` placeholders. Only a closed set of
placeholder shapes is understood; each is parsed once into a typed token and
evaluated against an :class:`~promptgen.models.AnalysisRecord`. Anything that
does not parse is emitted verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..logging import get_logger
from ..models import (
    CATEGORY_KEYS,
    ROLE_KEYS,
    STRUCTURE_FLAG_KEYS,
    TECHNOLOGY_FLAG_KEYS,
    TECHNOLOGY_LABEL_KEYS,
    AnalysisRecord,
    Outcome,
)
from .constants import (
    DEPENDENCY_SUMMARY_LIMIT,
    NO_DEPENDENCIES_FALLBACK,
    NO_FILES_FALLBACK,
    TASK_GUIDANCE,
    UNKNOWN_VALUE,
)
from .store import TemplateStore

_PLACEHOLDER = re.compile(r"\{\{([^{}]+?)\}\}")

_FALLBACK = r"(?:\s*\|\|\s*'(?P<fallback>[^']*)')?"
_SLICE = r"(?:\.slice\(\s*0\s*,\s*(?P<limit>\d+)\s*\))?"
_JOIN = r"(?:\.join\(\s*'(?P<separator>[^']*)'\s*\))?"

_BOOLEAN_SHAPE = re.compile(
    r"^(?P<group>technology|structure)\.(?P<key>\w+)"
    r"\s*\?\s*'(?P<truthy>[^']*)'\s*:\s*'(?P<falsy>[^']*)'$"
)
_LENGTH_SHAPE = re.compile(r"^fileTypes\.(?P<key>\w+)\.length$")
_ROLE_SHAPE = re.compile(rf"^importantFiles\.(?P<key>\w+){_SLICE}{_JOIN}{_FALLBACK}$")
_DEPENDENCY_SHAPE = re.compile(
    rf"^Object\.keys\(\s*dependencies\.(?P<key>dependencies|devDependencies)\s*\)"
    rf"{_SLICE}{_JOIN}{_FALLBACK}$"
)
_FIELD_SHAPE = re.compile(rf"^(?P<path>[A-Za-z_]\w*(?:\.\w+)?){_FALLBACK}$")

_TOP_LEVEL_FIELDS = {"projectName", "totalFiles", "userQuestion"}


class PlaceholderKind(Enum):
    FIELD = "field"
    LENGTH = "length"
    JOINED = "joined"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Placeholder:
    """A parsed ``{{...}}`` expression."""

    kind: PlaceholderKind
    path: Tuple[str, ...]
    raw: str
    fallback: Optional[str] = None
    limit: Optional[int] = None
    separator: str = ", "
    truthy: str = "Yes"
    falsy: str = "No"


Token = Union[str, Placeholder]


def _parse_expression(expression: str, raw: str) -> Optional[Placeholder]:
    expression = expression.strip()

    match = _BOOLEAN_SHAPE.match(expression)
    if match:
        group, key = match.group("group"), match.group("key")
        flags = TECHNOLOGY_FLAG_KEYS if group == "technology" else STRUCTURE_FLAG_KEYS
        if key not in flags:
            return None
        return Placeholder(
            kind=PlaceholderKind.BOOLEAN,
            path=(group, key),
            raw=raw,
            truthy=match.group("truthy"),
            falsy=match.group("falsy"),
        )

    match = _LENGTH_SHAPE.match(expression)
    if match:
        if match.group("key") not in CATEGORY_KEYS:
            return None
        return Placeholder(kind=PlaceholderKind.LENGTH, path=("fileTypes", match.group("key")), raw=raw)

    for shape, group, known, default_fallback in (
        (_ROLE_SHAPE, "importantFiles", ROLE_KEYS, NO_FILES_FALLBACK),
        (_DEPENDENCY_SHAPE, "dependencies", {"dependencies", "devDependencies"}, NO_DEPENDENCIES_FALLBACK),
    ):
        match = shape.match(expression)
        if not match:
            continue
        if match.group("key") not in known:
            return None
        limit = match.group("limit")
        if limit is None and group == "dependencies":
            limit = str(DEPENDENCY_SUMMARY_LIMIT)
        separator = match.group("separator")
        fallback = match.group("fallback")
        return Placeholder(
            kind=PlaceholderKind.JOINED,
            path=(group, match.group("key")),
            raw=raw,
            fallback=fallback if fallback is not None else default_fallback,
            limit=int(limit) if limit is not None else None,
            separator=separator if separator is not None else ", ",
        )

    match = _FIELD_SHAPE.match(expression)
    if match:
        path = tuple(match.group("path").split("."))
        if not _is_known_field(path):
            return None
        if path[0] == "structure":
            return Placeholder(kind=PlaceholderKind.BOOLEAN, path=path, raw=raw)
        if path[0] == "technology" and path[1] in TECHNOLOGY_FLAG_KEYS:
            return Placeholder(kind=PlaceholderKind.BOOLEAN, path=path, raw=raw)
        return Placeholder(
            kind=PlaceholderKind.FIELD,
            path=path,
            raw=raw,
            fallback=match.group("fallback"),
        )

    return None


def _is_known_field(path: Tuple[str, ...]) -> bool:
    if len(path) == 1:
        return path[0] in _TOP_LEVEL_FIELDS
    group, key = path
    if group == "technology":
        return key in TECHNOLOGY_LABEL_KEYS or key in TECHNOLOGY_FLAG_KEYS
    if group == "structure":
        return key in STRUCTURE_FLAG_KEYS
    if group == "dependencies":
        return key == "type"
    return False


def parse_template(text: str) -> Tuple[Token, ...]:
    """Split ``text`` into literal strings and recognised placeholders."""
    tokens: List[Token] = []
    position = 0
    for match in _PLACEHOLDER.finditer(text):
        placeholder = _parse_expression(match.group(1), match.group(0))
        if placeholder is None:
            continue
        if match.start() > position:
            tokens.append(text[position : match.start()])
        tokens.append(placeholder)
        position = match.end()
    if position < len(text):
        tokens.append(text[position:])
    return tuple(tokens)


def _text_or_fallback(value: object, fallback: Optional[str], default: str) -> str:
    if value is None or value == "":
        return fallback if fallback is not None else default
    return str(value)


def _evaluate_field(token: Placeholder, analysis: AnalysisRecord, user_request: str) -> str:
    if token.path == ("projectName",):
        return _text_or_fallback(analysis.project_name, token.fallback, UNKNOWN_VALUE)
    if token.path == ("totalFiles",):
        return _text_or_fallback(analysis.total_files, token.fallback, "0")
    if token.path == ("userQuestion",):
        return _text_or_fallback(user_request, token.fallback, "")
    group, key = token.path
    if group == "technology":
        value = getattr(analysis.technology, TECHNOLOGY_LABEL_KEYS[key], None)
    else:
        value = analysis.dependencies.type
    return _text_or_fallback(value, token.fallback, UNKNOWN_VALUE)


def _evaluate_length(token: Placeholder, analysis: AnalysisRecord, user_request: str) -> str:
    return str(len(analysis.file_types.get(token.path[1])))


def _evaluate_joined(token: Placeholder, analysis: AnalysisRecord, user_request: str) -> str:
    group, key = token.path
    items: Sequence[str]
    if group == "importantFiles":
        items = [PurePosixPath(path).name for path in analysis.important_files.get(key)]
    elif key == "dependencies":
        items = list(analysis.dependencies.dependencies)
    else:
        items = list(analysis.dependencies.dev_dependencies)
    if token.limit is not None:
        items = items[: token.limit]
    joined = token.separator.join(items)
    return joined or (token.fallback or "")


def _evaluate_boolean(token: Placeholder, analysis: AnalysisRecord, user_request: str) -> str:
    group, key = token.path
    if group == "technology":
        value = getattr(analysis.technology, TECHNOLOGY_FLAG_KEYS[key], False)
    else:
        value = getattr(analysis.structure, STRUCTURE_FLAG_KEYS[key], False)
    return token.truthy if value else token.falsy


_EVALUATORS: Dict[PlaceholderKind, Callable[[Placeholder, AnalysisRecord, str], str]] = {
    PlaceholderKind.FIELD: _evaluate_field,
    PlaceholderKind.LENGTH: _evaluate_length,
    PlaceholderKind.JOINED: _evaluate_joined,
    PlaceholderKind.BOOLEAN: _evaluate_boolean,
}


def render_tokens(tokens: Sequence[Token], analysis: AnalysisRecord, user_request: str = "") -> str:
    parts: List[str] = []
    for token in tokens:
        if isinstance(token, str):
            parts.append(token)
        else:
            parts.append(_EVALUATORS[token.kind](token, analysis, user_request))
    return "".join(parts)


class TemplateRenderer:
    """Renders templates from a :class:`TemplateStore` against analysis records."""

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store or TemplateStore()
        self.logger = get_logger("prompting.renderer")

    def render(self, template: str, analysis: AnalysisRecord, user_request: str = "") -> str:
        """Substitute every recognised placeholder in ``template``."""
        return render_tokens(parse_template(template), analysis, user_request or "")

    def render_named(
        self, identifier: str | None, analysis: AnalysisRecord, user_request: str = ""
    ) -> Outcome[str]:
        """Render the template stored under ``identifier``.

        Unknown identifiers render the default template; the returned outcome
        carries ``fallback_used`` in that case.
        """
        template = self.store.load(identifier)
        document = self.render(template.value, analysis, user_request)
        return Outcome(value=document, fallback_used=template.fallback_used, issues=template.issues)

    def specialize(self, document: str, task_type: str | None) -> str:
        """Append the guidance block for ``task_type``; unknown types add nothing."""
        guidance = TASK_GUIDANCE.get(task_type or "", "")
        if task_type and not guidance:
            self.logger.debug("No guidance for task type '%s'", task_type)
        return document + guidance


__all__ = [
    "Placeholder",
    "PlaceholderKind",
    "TemplateRenderer",
    "Token",
    "parse_template",
    "render_tokens",
]
