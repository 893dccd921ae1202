import shutil
from pathlib import Path

import pytest

from poseidon import Poseidon

FIXTURE_CONFIG_DIR = Path(__file__).parent / "tests" / "fixtures" / "config"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep POSEIDON_* settings from the developer's shell out of tests."""
    for name in ("POSEIDON_DIR", "POSEIDON_PREFIX", "POSEIDON_PRELOAD"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Fresh copy of the fixture config directory for every test."""
    target = tmp_path / "config"
    shutil.copytree(FIXTURE_CONFIG_DIR, target)
    return target


@pytest.fixture
def store(config_dir: Path) -> Poseidon:
    """Store over the fixture directory with the default config preloaded."""
    return Poseidon(config_dir)
