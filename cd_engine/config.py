"""cd-engine configuration.

Typed settings for a single generation run.  The CLI builds a ``Config``
from environment defaults and then applies its own flags on top, so the
generator never reads the working directory or the environment itself.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class StyleExtension(str, Enum):
    """Stylesheet flavour written next to the component."""
    SCSS = "scss"
    CSS = "css"


class Config(BaseModel):
    """Settings for one ``generate`` invocation."""

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory that receives the component folder",
    )
    style_ext: StyleExtension = Field(
        default=StyleExtension.SCSS,
        description="Extension of the stylesheet file and of the styleUrls entry",
    )
    stub_columns: bool = Field(
        default=False,
        description="Forward the requested columns into the logic stub",
    )
    stub_rows: int = Field(
        default=0, ge=0, description="Blank rows placed in the logic stub dataSource"
    )

    @property
    def forwards_columns(self) -> bool:
        """Whether the logic stub receives the request's columns."""
        return self.stub_columns or self.stub_rows > 0

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CD_ENGINE_OUTPUT_DIR, CD_ENGINE_STYLE_EXT.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CD_ENGINE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CD_ENGINE_OUTPUT_DIR"])
        if os.environ.get("CD_ENGINE_STYLE_EXT"):
            kwargs["style_ext"] = os.environ["CD_ENGINE_STYLE_EXT"].lower()
        return cls(**kwargs)
