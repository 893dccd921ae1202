"""Read-only lazy view over a config store.

Lookup order for a key:
  "$"                       → the store itself
  key of the default config → promoted top-level value
  cached slot               → that slot's config (".x" and " x " name slot "x")
  anything else             → get_or_load() loads it (safely); get() gives None
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import InvalidArgument, ReadOnlyViolation
from .types import DEFAULT_SLOT, ConfigType

if TYPE_CHECKING:
    from .store import Poseidon

SELF_KEY = "$"


class ConfigView:
    __slots__ = ("_store",)

    def __init__(self, store: Poseidon) -> None:
        object.__setattr__(self, "_store", store)

    @property
    def store(self) -> Poseidon:
        return self._store

    def get(self, key: str) -> Any:
        """Cached value for key, or None. Never touches the disk."""
        if key == SELF_KEY:
            return self._store
        configs = self._store.configs
        default = configs.get(DEFAULT_SLOT)
        if isinstance(default, Mapping) and key in default:
            return default[key]
        return configs.get(ConfigType.parse(key).slot)

    def get_or_load(self, key: str) -> Any:
        """Cached value for key, loading the config type named key on a miss."""
        if key in self:
            return self.get(key)
        return self._store.load(key, safe=True)

    def __getitem__(self, key: str) -> Any:
        return self.get_or_load(key)

    def __contains__(self, key: object) -> bool:
        if key == SELF_KEY:
            return True
        configs = self._store.configs
        default = configs.get(DEFAULT_SLOT)
        if isinstance(default, Mapping) and key in default:
            return True
        try:
            return ConfigType.parse(key).slot in configs
        except InvalidArgument:
            return False

    def __setitem__(self, key: str, value: Any) -> None:
        raise ReadOnlyViolation({"key": key})

    def __delitem__(self, key: str) -> None:
        raise ReadOnlyViolation({"key": key})

    def __setattr__(self, name: str, value: Any) -> None:
        raise ReadOnlyViolation({"key": name})

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyViolation({"key": name})

    def __repr__(self) -> str:
        return f"ConfigView({self._store!r})"
