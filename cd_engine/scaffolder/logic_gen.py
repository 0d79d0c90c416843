"""Component logic stub (``.component.ts``) generation.

Produces an Angular ``@Component`` class with a placeholder ``dataSource``,
the ``displayedColumns`` list, a ``resultLength`` counter and empty
``onFilter`` / ``openCreateForm`` callbacks to be filled in by hand.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cd_engine.config import StyleExtension

from .models import ComponentIdentity
from .templates import TemplateRenderer

LOGIC_TEMPLATE = "component/component.ts.j2"


@dataclass(frozen=True)
class LogicView:
    """Everything the logic template needs."""

    identity: ComponentIdentity
    columns: tuple[str, ...] = ()
    row_count: int = 0
    style_ext: str = StyleExtension.SCSS.value

    @property
    def data_source(self) -> list[dict[str, str]]:
        return [{col: "" for col in self.columns} for _ in range(self.row_count)]

    def as_context(self) -> dict[str, Any]:
        return {
            "selector": self.identity.selector,
            "class_name": self.identity.class_name,
            "template_url": self.identity.file_name("html"),
            "style_url": self.identity.file_name(self.style_ext),
            "data_source": json.dumps(self.data_source, indent=2),
            "displayed_columns": ", ".join(f"'{col}'" for col in self.columns),
            "result_length": self.row_count,
        }


def build_logic_view(
    component_slug: str,
    columns: Sequence[str] | None = None,
    row_count: int | None = None,
    style_ext: StyleExtension | str = StyleExtension.SCSS,
) -> LogicView:
    """Build the view for *component_slug*.

    Missing ``columns`` means an empty column list and missing ``row_count``
    means zero rows.
    """
    identity = ComponentIdentity.from_title(component_slug)
    trimmed = tuple(col.strip() for col in (columns or ()) if col.strip())
    return LogicView(
        identity=identity,
        columns=trimmed,
        row_count=row_count or 0,
        style_ext=StyleExtension(style_ext).value,
    )


class LogicGenerator:
    """Renders the component logic stub artifact."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(
        self,
        component_slug: str,
        columns: Sequence[str] | None = None,
        row_count: int | None = None,
        style_ext: StyleExtension | str = StyleExtension.SCSS,
    ) -> str:
        view = build_logic_view(component_slug, columns, row_count, style_ext)
        return self.renderer.render(LOGIC_TEMPLATE, view.as_context())
