"""package.json manifest reader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..logging import get_logger
from ..models import DependencyRecord, Outcome

MANIFEST_FILENAME = "package.json"
DEFAULT_MODULE_TYPE = "commonjs"

logger = get_logger("analyzers.dependencies")


def read_manifest(root: Path) -> Outcome[DependencyRecord]:
    """Load dependency information from ``root/package.json``.

    Never raises: a missing, unreadable or malformed manifest yields an empty
    record flagged with ``fallback_used``.
    """
    manifest_path = Path(root) / MANIFEST_FILENAME
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _fallback(f"No {MANIFEST_FILENAME} found")
    except (OSError, UnicodeDecodeError) as exc:
        return _fallback(f"Could not read {MANIFEST_FILENAME}: {exc}")
    except (json.JSONDecodeError, RecursionError) as exc:
        return _fallback(f"Invalid JSON in {MANIFEST_FILENAME}: {exc}")

    if not isinstance(data, dict):
        return _fallback(f"{MANIFEST_FILENAME} does not contain an object")

    module_type = data.get("type")
    record = DependencyRecord(
        dependencies=_string_map(data.get("dependencies")),
        dev_dependencies=_string_map(data.get("devDependencies")),
        scripts=_string_map(data.get("scripts")),
        type=module_type if isinstance(module_type, str) and module_type else DEFAULT_MODULE_TYPE,
    )
    return Outcome(value=record)


def _fallback(reason: str) -> Outcome[DependencyRecord]:
    logger.debug("%s; continuing without dependency information", reason)
    return Outcome(value=DependencyRecord(), fallback_used=True, issues=(reason,))


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}


__all__ = ["DEFAULT_MODULE_TYPE", "MANIFEST_FILENAME", "read_manifest"]
