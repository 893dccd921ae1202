"""Deep immutability for JSON-shaped values."""

from collections.abc import Mapping
from typing import Any

from frozendict import frozendict


def deep_freeze(value: Any) -> Any:
    """Freeze every nested container: dicts become frozendicts, lists tuples.

    Scalars are returned unchanged. Input must be acyclic (JSON data is).
    """
    if isinstance(value, Mapping):
        return frozendict({key: deep_freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of deep_freeze, producing plain dicts and lists for json.dumps."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value
