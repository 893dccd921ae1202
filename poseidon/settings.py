"""Environment defaults for the config store.

Values come from the process environment, seeded from a .env file in the
working directory when a store first needs a default. Importing the package
leaves os.environ alone. Explicit constructor arguments always win.

    POSEIDON_DIR       default config directory (default: cwd)
    POSEIDON_PREFIX    file name prefix (default: "config")
    POSEIDON_PRELOAD   comma-separated types loaded at construction (default: "")
"""

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PREFIX = "config"


def load_env() -> None:
    """Read ./.env into os.environ. Variables already set are kept."""
    load_dotenv(Path.cwd() / ".env")


def default_dir() -> str:
    return os.getenv("POSEIDON_DIR") or os.getcwd()


def default_prefix() -> str:
    return os.getenv("POSEIDON_PREFIX") or DEFAULT_PREFIX


def default_preload() -> str:
    return os.getenv("POSEIDON_PRELOAD", "")
