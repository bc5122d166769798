"""Analysis stages that turn a file list into an analysis record."""

from __future__ import annotations

from .classifier import categorize, classify, importance_roles
from .dependencies import read_manifest
from .structure import summarize
from .technology import detect

__all__ = [
    "categorize",
    "classify",
    "detect",
    "importance_roles",
    "read_manifest",
    "summarize",
]
