"""Numbered backup file naming.

Backups sit next to (or away from) the config they copy:

    config.json          → config.1.backup.json, config.2.backup.json, ...
    config.server.json  → config.server.1.backup.json, config.server.2.backup.json, ...

Numbering is max(existing) + 1, so gaps left by deleted backups are never
refilled. Scanning and writing are separate steps; two writers racing on the
same directory may pick the same number.
"""

import os
import re
from collections.abc import Iterable

BACKUP_SUFFIX = ".backup.json"


def backup_pattern(stem: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(stem)}\.(\d+){re.escape(BACKUP_SUFFIX)}$")


def backup_indices(stem: str, names: Iterable[str]) -> list[int]:
    """Indices of the backups of stem among the given file names."""
    pattern = backup_pattern(stem)
    indices = []
    for name in names:
        match = pattern.match(name)
        if match:
            indices.append(int(match.group(1)))
    return indices


def next_backup_index(stem: str, names: Iterable[str]) -> int:
    return max([0, *backup_indices(stem, names)]) + 1


def backup_file_name(stem: str, index: int) -> str:
    return f"{stem}.{index}{BACKUP_SUFFIX}"


def next_backup_name(stem: str, dir_backup: str) -> str:
    """File name for the next backup of stem inside dir_backup."""
    return backup_file_name(stem, next_backup_index(stem, os.listdir(dir_backup)))
