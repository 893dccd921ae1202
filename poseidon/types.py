"""Config type tokens.

A type token names one JSON file in the config directory:

    "_"        → config.json            (default slot)
    "server"   → config.server.json
    ".secret"  → .config.secret.json    (hidden config)
    "._"       → .config.json           (hidden default)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints, computed_field

from .errors import InvalidArgument

DEFAULT_SLOT = "_"
HIDDEN_SYMBOL = "."


class ConfigType(BaseModel):
    """Parsed config type. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    slot: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    symbol_hidden: Literal["", "."] = ""

    @computed_field
    @property
    def is_default(self) -> bool:
        return self.slot == DEFAULT_SLOT

    @classmethod
    def parse(cls, type_: Any, parse_hidden: bool = True) -> ConfigType:
        """Parse a raw token. A ConfigType passes through unchanged."""
        if isinstance(type_, ConfigType):
            return type_
        if not isinstance(type_, str):
            raise InvalidArgument(
                "type.not-string", {"kind": type(type_).__name__, "value": repr(type_)}
            )

        slot = type_.strip()
        symbol_hidden = ""
        if parse_hidden and slot.startswith(HIDDEN_SYMBOL):
            slot = slot[len(HIDDEN_SYMBOL):].strip()
            symbol_hidden = HIDDEN_SYMBOL
        if not slot:
            raise InvalidArgument("type.empty", {"value": repr(type_)})

        return cls(slot=slot, symbol_hidden=symbol_hidden)

    def stem(self, prefix: str) -> str:
        """File name without the .json suffix, also the backup stem."""
        classifier = "" if self.is_default else f".{self.slot}"
        return f"{self.symbol_hidden}{prefix}{classifier}"

    def file_name(self, prefix: str) -> str:
        return f"{self.stem(prefix)}.json"

    def __str__(self) -> str:
        return f"{self.symbol_hidden}{self.slot}"
