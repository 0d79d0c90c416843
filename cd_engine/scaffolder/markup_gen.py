"""Component markup (``.component.html``) generation.

The markup is described by a small view model -- header title, action
buttons, optional table -- which is then rendered through
``component/component.html.j2``.  Tests can assert on the view model's
structure instead of matching substrings in the rendered text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .templates import TemplateRenderer

MARKUP_TEMPLATE = "component/component.html.j2"
EMPTY_TABLE_MESSAGE = "No results found!"


@dataclass(frozen=True)
class ButtonView:
    label: str
    handler: str
    css_class: str


FILTER_BUTTON = ButtonView(
    label="Filter",
    handler="onFilter",
    css_class="cd-btn-round cd-btn-stroked-primary",
)
CREATE_BUTTON = ButtonView(
    label="Create",
    handler="openCreateForm",
    css_class="cd-btn-round cd-btn-primary ml-2",
)


@dataclass(frozen=True)
class TableView:
    columns: tuple[str, ...]
    empty_message: str = EMPTY_TABLE_MESSAGE


@dataclass(frozen=True)
class MarkupView:
    """Everything the markup template needs."""

    title: str
    buttons: tuple[ButtonView, ...] = field(default_factory=tuple)
    table: TableView | None = None

    def as_context(self) -> dict[str, Any]:
        return {"title": self.title, "buttons": self.buttons, "table": self.table}


def build_markup_view(
    title: str,
    include_table: bool,
    include_create_button: bool,
    include_filter_button: bool,
    columns: Sequence[str] | None,
) -> MarkupView:
    """Map the request flags onto a ``MarkupView``.

    The filter button always comes before the create button.  A table is
    only present when it was requested *and* at least one column remains
    after trimming.
    """
    buttons: list[ButtonView] = []
    if include_filter_button:
        buttons.append(FILTER_BUTTON)
    if include_create_button:
        buttons.append(CREATE_BUTTON)

    trimmed = tuple(col.strip() for col in (columns or ()) if col.strip())
    table = TableView(columns=trimmed) if include_table and trimmed else None

    return MarkupView(title=title, buttons=tuple(buttons), table=table)


class MarkupGenerator:
    """Renders the component markup artifact."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(
        self,
        title: str,
        include_table: bool = False,
        include_create_button: bool = False,
        include_filter_button: bool = False,
        columns: Sequence[str] | None = None,
    ) -> str:
        view = build_markup_view(
            title,
            include_table,
            include_create_button,
            include_filter_button,
            columns,
        )
        return self.render_view(view)

    def render_view(self, view: MarkupView) -> str:
        return self.renderer.render(MARKUP_TEMPLATE, view.as_context())
