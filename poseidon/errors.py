"""Exception hierarchy for the config store.

Each error also derives from the builtin it stands for, so callers may catch
either PoseidonError or e.g. FileNotFoundError.
"""

from typing import Any

from .messages import T


class PoseidonError(Exception):
    """Base class for all config store errors."""

    message_key = ""

    def __init__(self, context: dict[str, Any] | None = None) -> None:
        self.context = dict(context or {})
        super().__init__(T(self.message_key, self.context))


class InvalidArgument(PoseidonError, TypeError):
    """Malformed type token, directory or preload list."""

    def __init__(self, message_key: str, context: dict[str, Any] | None = None) -> None:
        self.message_key = message_key
        super().__init__(context)


class ConfigNotFound(PoseidonError, FileNotFoundError):
    """The backing JSON file of a config type does not exist."""

    message_key = "file.missing"


class ConfigParseError(PoseidonError, ValueError):
    """The backing JSON file exists but cannot be decoded."""

    message_key = "file.malformed"


class ReadOnlyViolation(PoseidonError, AttributeError):
    """Attempted assignment through the read-only config view."""

    message_key = "view.read-only"
