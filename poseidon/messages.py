"""Handlebars rendering for human-readable error messages.

Every exception raised by the store carries text produced by T(key, context).
The catalog maps message keys to Handlebars templates; values are inserted
with triple-stash so paths and reprs are never HTML-escaped.
"""

from collections.abc import Callable
from typing import Any

import pybars


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class MessageError(Exception):
    """Raised when a message template fails to compile or render."""


MESSAGES: dict[str, str] = {
    "type.not-string": "config type must be a string, got {{{kind}}}: {{{value}}}",
    "type.empty": "config type must not be empty, got {{{value}}}",
    "dir.invalid": "config dir must be a string, a path or None, got {{{kind}}}: {{{value}}}",
    "types.invalid": "preload types must be a string or a list, got {{{kind}}}: {{{value}}}",
    "file.missing": "config file not found: {{{path}}}",
    "file.malformed": "config file is not valid JSON: {{{path}}} ({{{reason}}})",
    "view.read-only": "loaded configs are read-only, cannot modify {{{key}}}",
}


def T(key: str, context: dict[str, Any] | None = None) -> str:
    """Render the message for key with context.

    Unknown keys render as the key itself. Compiled templates are cached by key.
    """
    source = MESSAGES.get(key)
    if source is None:
        return key
    try:
        compiled = _cache.get(key)
        if compiled is None:
            compiled = _compiler.compile(source)
            _cache[key] = compiled
        return str(compiled(context or {}))
    except Exception as e:
        raise MessageError(f"Message error for {key!r}: {e}") from e
