# printing/storage.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from printing.config import Settings, settings as default_settings
from printing.errors import ContentNotFoundError


@dataclass(frozen=True)
class Storage:
    """Named disks, each rooted at a directory, that file based print content is read from."""

    disks: Mapping[str, Path]

    @staticmethod
    def from_settings(config: Settings = default_settings) -> "Storage":
        return Storage(disks={name: Path(root) for name, root in config.storage_disks.items()})

    def path_for(self, disk: str, path: str) -> Path:
        if disk not in self.disks:
            raise ContentNotFoundError(f"Unknown storage disk: {disk}")

        root = Path(self.disks[disk]).resolve()
        full_path = (root / path).resolve()
        if root != full_path and root not in full_path.parents:
            raise ContentNotFoundError(f"Path escapes disk '{disk}': {path}")
        return full_path

    def read(self, disk: str, path: str) -> bytes:
        full_path = self.path_for(disk, path)

        if not full_path.is_file():
            raise ContentNotFoundError(f"File does not exist on disk '{disk}': {path}")

        try:
            return full_path.read_bytes()
        except OSError as e:
            raise ContentNotFoundError(f"Could not read '{path}' from disk '{disk}': {e}") from e
