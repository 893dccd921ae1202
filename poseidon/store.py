"""File-backed config store.

One JSON file per config type, all in one directory:

    <dir>/
      config.json                  default config (type "_")
      config.<slot>.json           classified config (type "<slot>")
      .config.<slot>.json          hidden config (type ".<slot>")
      config.<slot>.<N>.backup.json
                                   numbered backups written by save(backup=True)

Loaded configs are path-rewritten (see paths.py), deep-frozen and cached per
slot. Raw bytes are cached alongside. Both caches change together, only after
a load fully succeeds.
"""

from __future__ import annotations

import inspect
import json
import logging
import os
import re
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Union

from . import settings
from .backup import BACKUP_SUFFIX, next_backup_name
from .errors import ConfigNotFound, ConfigParseError, InvalidArgument
from .freeze import deep_freeze, thaw
from .paths import absolutize
from .types import DEFAULT_SLOT, ConfigType
from .view import ConfigView

logger = logging.getLogger(__name__)

TypeLike = Union[str, ConfigType]
EditCallback = Callable[[Any, ConfigType, "Poseidon"], Union[Any, Awaitable[Any]]]


def _parse_types(types: Any) -> list[TypeLike]:
    """Normalize the preload argument. Empty entries denote the default slot."""
    if isinstance(types, str):
        raw: list[Any] = types.split(",") if types.strip() else [DEFAULT_SLOT]
    elif isinstance(types, (list, tuple)):
        raw = list(types)
    else:
        raise InvalidArgument(
            "types.invalid", {"kind": type(types).__name__, "value": repr(types)}
        )
    return [
        DEFAULT_SLOT if isinstance(t, str) and not t.strip() else t
        for t in raw
    ]


class Poseidon:
    """Read-mostly store of JSON configs in one directory.

    Args:
        dir_config:   Directory holding the config files. Defaults to
                      $POSEIDON_DIR, then the working directory.
        types:        Types to load at construction, comma-separated or a
                      list. Empty entries mean the default config.
                      Defaults to $POSEIDON_PRELOAD ("" → default config).
        prefix_file:  File name prefix. Defaults to $POSEIDON_PREFIX or "config".
        safe_preload: Skip missing or malformed preload files instead of
                      raising.
    """

    def __init__(
        self,
        dir_config: str | os.PathLike | None = None,
        types: str | list[TypeLike] | tuple[TypeLike, ...] | None = None,
        *,
        prefix_file: str | None = None,
        safe_preload: bool = False,
    ) -> None:
        if dir_config is None or types is None or not prefix_file:
            settings.load_env()
        if dir_config is None:
            dir_config = settings.default_dir()
        elif not isinstance(dir_config, (str, os.PathLike)) or not os.fspath(dir_config):
            raise InvalidArgument(
                "dir.invalid", {"kind": type(dir_config).__name__, "value": repr(dir_config)}
            )
        self._dir = os.path.abspath(os.fspath(dir_config))
        self._prefix = prefix_file or settings.default_prefix()

        self.buffers: dict[str, bytes] = {}
        self.configs: dict[str, Any] = {}
        self._view = ConfigView(self)

        if types is None:
            types = settings.default_preload()
        for type_ in _parse_types(types):
            self.load(type_, safe_preload)

    @property
    def dir_config(self) -> str:
        return self._dir

    @property
    def prefix_file(self) -> str:
        return self._prefix

    @property
    def view(self) -> ConfigView:
        """Lazy read-only access to the loaded configs."""
        return self._view

    def __repr__(self) -> str:
        return f"Poseidon({self._dir!r}, loaded={sorted(self.configs)})"

    # ------------------------------------------------------------------
    # Internal path helpers
    # ------------------------------------------------------------------

    def _config_path(self, config_type: ConfigType) -> Path:
        return Path(self._dir) / config_type.file_name(self._prefix)

    # ------------------------------------------------------------------
    # Read / load
    # ------------------------------------------------------------------

    def read(self, type_: TypeLike, parse_json: bool = True) -> Any:
        """Read a config file as parsed JSON, or as raw bytes.

        No caching, freezing or path rewriting happens here.
        """
        config_type = ConfigType.parse(type_)
        path = self._config_path(config_type)
        logger.debug("read type=%s path=%s", config_type, path)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise ConfigNotFound({"path": str(path)}) from e
        if not parse_json:
            return data
        return self._decode(data, path)

    @staticmethod
    def _decode(data: bytes, path: Path) -> Any:
        try:
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigParseError({"path": str(path), "reason": str(e)}) from e

    def load(self, type_: TypeLike, safe: bool = False) -> Any:
        """Load a config into the cache and return its frozen value.

        Object documents get their marked path keys absolutized. Reloading
        replaces the cached entry. With safe=True a missing or malformed file
        returns None and leaves the cache untouched.
        """
        config_type = ConfigType.parse(type_)
        try:
            raw = self.read(config_type, parse_json=False)
            config = self._decode(raw, self._config_path(config_type))
        except (OSError, ConfigParseError) as e:
            if not safe:
                raise
            logger.warning("safe load of %s failed: %s", config_type, e)
            return None

        frozen = deep_freeze(absolutize(config, self._dir))
        self.buffers[config_type.slot] = raw
        self.configs[config_type.slot] = frozen
        logger.debug("loaded type=%s bytes=%d", config_type, len(raw))
        return frozen

    # ------------------------------------------------------------------
    # Save / edit
    # ------------------------------------------------------------------

    def save(
        self,
        type_: TypeLike,
        config: Any,
        backup: bool = False,
        dir_backup: str | os.PathLike | None = None,
    ) -> Poseidon:
        """Write config to its file, optionally backing up the current file.

        The backup goes to dir_backup (default: the config dir) as
        <stem>.<N>.backup.json. The cache is not refreshed; call load().
        """
        config_type = ConfigType.parse(type_)
        stem = config_type.stem(self._prefix)

        if backup:
            current = self.read(config_type, parse_json=False)
            backup_dir = Path(self._dir if dir_backup is None else dir_backup)
            backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = backup_dir / next_backup_name(stem, str(backup_dir))
            backup_path.write_bytes(current)
            logger.info("backed up type=%s to %s", config_type, backup_path)

        path = self._config_path(config_type)
        path.write_text(
            json.dumps(thaw(config), indent="\t", ensure_ascii=False),
            encoding="utf-8",
        )
        logger.debug("saved type=%s path=%s", config_type, path)
        return self

    async def edit(self, type_: TypeLike, callback: EditCallback) -> Poseidon:
        """Modify, save and reload a config.

        callback(config, config_type, store) receives the parsed, unfrozen
        config and returns the replacement, or None to keep the (possibly
        mutated in place) original. It may be sync or async.
        """
        config_type = ConfigType.parse(type_)
        config = self.read(config_type)

        result = callback(config, config_type, self)
        if inspect.isawaitable(result):
            result = await result
        if result is None:
            result = config

        self.save(config_type, result)
        self.load(config_type)
        return self

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def get_types_exist(self) -> list[str]:
        """Type tokens of the config files present, backups excluded.

        Sorted by file name.
        """
        prefix = re.escape(self._prefix)
        default_re = re.compile(rf"^(\.?){prefix}\.json$")
        classified_re = re.compile(rf"^(\.?){prefix}\.(.+)\.json$")
        backup_re = re.compile(rf"^\.?{prefix}(\..+)?\.\d+{re.escape(BACKUP_SUFFIX)}$")

        types: list[str] = []
        for path in sorted(Path(self._dir).glob("*.json")):
            if not path.is_file():
                continue
            name = path.name
            if backup_re.match(name):
                continue
            match = default_re.match(name)
            if match:
                types.append(f"{match.group(1)}{DEFAULT_SLOT}")
                continue
            match = classified_re.match(name)
            if match:
                types.append(f"{match.group(1)}{match.group(2)}")
        logger.debug("types in %s: %s", self._dir, types)
        return types
