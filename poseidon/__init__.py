"""Read-only JSON config store with lazy loading, path rewriting and backups.

Data layout (one directory):
  config.json                    Default config, type "_"
  config.<slot>.json             Classified config, type "<slot>"
  .config.<slot>.json            Hidden config, type ".<slot>"
  <stem>.<N>.backup.json         Numbered backups of <stem>.json

Loading: the file is parsed, keys prefixed with "_" are rewritten from
relative to absolute paths (prefix dropped), and the result is deep-frozen
and cached per slot. Default config keys are promoted to the top level of
the lazy view:

    store = Poseidon("/etc/app", "_,server")
    store.view["port"]           # from config.json
    store.view["server"]         # config.server.json
    store.view["db"]             # loads config.db.json on first access

Saving writes tab-indented JSON; save(..., backup=True) first copies the
current file to the next free numbered backup. edit() is async and runs
read → callback → save → load.
"""

# Re-export public symbols so `from poseidon import Poseidon` works.

from .errors import (  # noqa: F401
    ConfigNotFound,
    ConfigParseError,
    InvalidArgument,
    PoseidonError,
    ReadOnlyViolation,
)

from .freeze import (  # noqa: F401
    deep_freeze,
    thaw,
)

from .messages import (  # noqa: F401
    MessageError,
    T,
)

from .paths import absolutize  # noqa: F401

from .store import Poseidon  # noqa: F401

from .types import (  # noqa: F401
    DEFAULT_SLOT,
    ConfigType,
)

from .view import ConfigView  # noqa: F401
