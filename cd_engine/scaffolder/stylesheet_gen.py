"""Component stylesheet generation.  The stylesheet starts out empty."""

from __future__ import annotations

from .templates import TemplateRenderer

STYLESHEET_TEMPLATE = "component/component.scss.j2"


class StylesheetGenerator:
    """Renders the (empty) stylesheet placeholder."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self) -> str:
        return self.renderer.render(STYLESHEET_TEMPLATE, {})
