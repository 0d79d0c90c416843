"""Shared pytest fixtures for the cd-engine test suite.

Provides reusable fixtures for:
- An in-memory filesystem standing in for ``LocalFileSystem``
- A real ``TemplateRenderer`` over the packaged templates
- The "Free Zone" sample request used across the suite
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cd_engine.config import Config
from cd_engine.scaffolder.models import GenerationRequest
from cd_engine.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Filesystem fake
# ---------------------------------------------------------------------------

class MemoryFileSystem:
    """In-memory ``FileSystemPort`` that records every call."""

    def __init__(self, existing: list[Path] | None = None) -> None:
        self.dirs: set[Path] = set(existing or [])
        self.files: dict[Path, str] = {}
        self.calls: list[tuple[str, Path]] = []

    def exists(self, path: Path) -> bool:
        self.calls.append(("exists", path))
        return path in self.dirs or path in self.files

    def make_dirs(self, path: Path) -> None:
        self.calls.append(("make_dirs", path))
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def write_text(self, path: Path, content: str) -> None:
        self.calls.append(("write_text", path))
        self.files[path] = content


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def memory_fs_factory() -> type[MemoryFileSystem]:
    """The fake class itself, for tests that need pre-existing paths."""
    return MemoryFileSystem


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """TemplateRenderer over the templates shipped with the package."""
    return TemplateRenderer()


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Parent directory for generated components (auto-cleanup)."""
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def config(output_root: Path) -> Config:
    return Config(output_dir=output_root)


# ---------------------------------------------------------------------------
# Sample requests
# ---------------------------------------------------------------------------

@pytest.fixture
def free_zone_request() -> GenerationRequest:
    """Title "Free Zone" with table, create, filter and three columns."""
    return GenerationRequest(
        title="Free Zone",
        include_table=True,
        include_create_button=True,
        include_filter_button=True,
        columns="Name, Age, Address",
    )


@pytest.fixture
def bare_request() -> GenerationRequest:
    """Title only, every optional region off."""
    return GenerationRequest(title="Orders")
