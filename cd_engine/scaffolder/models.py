"""Pydantic v2 models for component generation.

``GenerationRequest`` holds the resolved CLI options for one run,
``ComponentIdentity`` the names derived from its title, and ``Artifact`` /
``GenerationResult`` what ends up on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cd_engine.utils import slugify, split_columns, to_pascal


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """Options for one ``generate component`` invocation."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Component display title")
    include_table: bool = Field(default=False, description="Render a table region")
    include_create_button: bool = Field(default=False, description="Render a Create button")
    include_filter_button: bool = Field(default=False, description="Render a Filter button")
    columns: list[str] = Field(
        default_factory=list,
        description="Ordered column names; a comma-separated string is accepted",
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        # Stripped before slugging: " Free Zone" -> "free-zone", not "-free-zone".
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("columns", mode="before")
    @classmethod
    def _split_columns(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return split_columns(value)
        return [str(col).strip() for col in value if str(col).strip()]

    @property
    def identity(self) -> "ComponentIdentity":
        return ComponentIdentity.from_title(self.title)


# ---------------------------------------------------------------------------
# Derived names
# ---------------------------------------------------------------------------

class ComponentIdentity(BaseModel):
    """Names derived from a component title."""

    model_config = ConfigDict(frozen=True)

    slug: str
    class_name: str

    @classmethod
    def from_title(cls, title: str) -> "ComponentIdentity":
        slug = slugify(title)
        return cls(slug=slug, class_name=f"{to_pascal(slug)}Component")

    @property
    def selector(self) -> str:
        return f"app-{self.slug}"

    def file_name(self, extension: str) -> str:
        """``free-zone`` + ``html`` -> ``free-zone.component.html``."""
        return f"{self.slug}.component.{extension}"


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class Artifact(BaseModel):
    """One generated file, before it is written."""
    file_name: str
    content: str = ""


class GenerationResult(BaseModel):
    """What a successful generation wrote."""
    component_dir: Path
    identity: ComponentIdentity
    files: list[Path] = Field(default_factory=list)

    def as_summary(self) -> dict[str, str]:
        """Return a ``{file name: absolute path}`` mapping for display."""
        return {path.name: str(path) for path in self.files}
