"""Component scaffolding orchestrator.

Takes a ``GenerationRequest`` and writes a component folder containing the
markup, logic stub and stylesheet, following Angular's
``<slug>/<slug>.component.<ext>`` naming.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from cd_engine.config import Config

from .filesystem import FileSystemPort, LocalFileSystem
from .logic_gen import LogicGenerator
from .markup_gen import MarkupGenerator
from .models import Artifact, GenerationRequest, GenerationResult
from .stylesheet_gen import StylesheetGenerator
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a component cannot be generated."""


class DirectoryExistsError(ScaffoldError):
    """Raised when the component directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Component directory already exists: {path}")


class MissingTitleError(ScaffoldError):
    """Raised when no usable title was supplied."""

    def __init__(self) -> None:
        super().__init__("A non-empty --title is required to generate a component")


# ---------------------------------------------------------------------------
# Request construction
# ---------------------------------------------------------------------------


def build_request(
    title: str | None,
    table: bool = False,
    create: bool = False,
    filter: bool = False,
    columns: str | list[str] | None = None,
) -> GenerationRequest:
    """Turn raw CLI option values into a validated ``GenerationRequest``.

    Raises:
        MissingTitleError: If *title* is missing or blank.
    """
    if title is None or not title.strip():
        raise MissingTitleError()
    try:
        return GenerationRequest(
            title=title,
            include_table=table,
            include_create_button=create,
            include_filter_button=filter,
            columns=columns,
        )
    except ValidationError as exc:
        if any(err["loc"] == ("title",) for err in exc.errors()):
            raise MissingTitleError() from exc
        raise


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Writes one component folder per call to :meth:`generate`."""

    def __init__(
        self,
        config: Config | None = None,
        fs: FileSystemPort | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.fs = fs or LocalFileSystem()
        self.renderer = renderer or TemplateRenderer()
        self.markup_gen = MarkupGenerator(self.renderer)
        self.logic_gen = LogicGenerator(self.renderer)
        self.stylesheet_gen = StylesheetGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    def target_dir(self, request: GenerationRequest) -> Path:
        """Absolute directory the component for *request* is written to."""
        return (Path(self.config.output_dir) / request.identity.slug).absolute()

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate the component described by *request*.

        Returns:
            The component directory and the files written into it.

        Raises:
            DirectoryExistsError: If the component directory already exists.
                Nothing is created in that case.
        """
        component_dir = self.target_dir(request)
        if self.fs.exists(component_dir):
            raise DirectoryExistsError(component_dir)

        self.fs.make_dirs(component_dir)

        written: list[Path] = []
        for artifact in self.render_artifacts(request):
            path = component_dir / artifact.file_name
            self.fs.write_text(path, artifact.content)
            written.append(path)

        return GenerationResult(
            component_dir=component_dir,
            identity=request.identity,
            files=written,
        )

    def render_artifacts(self, request: GenerationRequest) -> list[Artifact]:
        """Render the markup, logic and stylesheet artifacts in memory."""
        identity = request.identity
        style_ext = self.config.style_ext.value

        markup = self.markup_gen.render(
            request.title,
            request.include_table,
            request.include_create_button,
            request.include_filter_button,
            request.columns,
        )

        # The logic stub only sees the columns when configured to.
        if self.config.forwards_columns:
            logic = self.logic_gen.render(
                identity.slug,
                request.columns,
                self.config.stub_rows,
                style_ext,
            )
        else:
            logic = self.logic_gen.render(identity.slug, style_ext=style_ext)

        return [
            Artifact(file_name=identity.file_name("html"), content=markup),
            Artifact(file_name=identity.file_name("ts"), content=logic),
            Artifact(
                file_name=identity.file_name(style_ext),
                content=self.stylesheet_gen.render(),
            ),
        ]
