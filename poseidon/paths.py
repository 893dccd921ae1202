"""Relative-to-absolute path rewriting for loaded config documents.

Keys prefixed with "_" mark path values:

    {"_log": "logs/app.log"}           → {"log": "/etc/app/logs/app.log"}
    {"_dirs": {"a": "x", "b": {"c": "y"}}}
                                        → every string below "dirs" resolved

Below a marked object every string is a path, nested keys need no prefix.
Arrays are left alone at every level.
"""

import os
from typing import Any

PATH_MARKER = "_"


def resolve_path(base_dir: str, value: str) -> str:
    """Resolve value against base_dir without following symlinks."""
    return os.path.abspath(os.path.join(base_dir, value))


def _absolutize_all(obj: dict[str, Any], base_dir: str) -> dict[str, Any]:
    converted: dict[str, Any] = {}
    for key, value in obj.items():
        if isinstance(value, str):
            converted[key] = resolve_path(base_dir, value)
        elif isinstance(value, dict):
            converted[key] = _absolutize_all(value, base_dir)
        else:
            converted[key] = value
    return converted


def absolutize(document: Any, base_dir: str) -> Any:
    """Return a copy of document with marked path keys rewritten.

    The input is not modified. A converted key wins over a plain sibling of
    the same name.
    """
    if not isinstance(document, dict):
        return document

    result: dict[str, Any] = {}
    converted_keys: set[str] = set()
    for key, value in document.items():
        if key.startswith(PATH_MARKER):
            stripped = key[len(PATH_MARKER):]
            if isinstance(value, str):
                result[stripped] = resolve_path(base_dir, value)
                converted_keys.add(stripped)
                continue
            if isinstance(value, dict):
                result[stripped] = _absolutize_all(value, base_dir)
                converted_keys.add(stripped)
                continue
        if key in converted_keys:
            continue
        result[key] = absolutize(value, base_dir)
    return result
