"""Filesystem port used by the component generator.

The generator only needs three operations, so it depends on this small
protocol rather than on ``pathlib`` directly.  ``LocalFileSystem`` is the
real implementation; tests substitute an in-memory one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystemPort(Protocol):
    """The filesystem operations needed to write a component."""

    def exists(self, path: Path) -> bool:
        """Return whether *path* exists (file or directory)."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create *path* and any missing ancestors."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path*, replacing any existing file."""
        ...


class LocalFileSystem:
    """``FileSystemPort`` backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
