"""cd-engine scaffolder -- renders Angular component boilerplate.

Quick usage::

    from cd_engine.scaffolder import ComponentGenerator, build_request

    request = build_request("Free Zone", table=True, columns="Name, Age")
    result = ComponentGenerator().generate(request)
    print(result.component_dir)
"""

from cd_engine.scaffolder.generator import (
    ComponentGenerator,
    DirectoryExistsError,
    MissingTitleError,
    ScaffoldError,
    build_request,
)
from cd_engine.scaffolder.models import ComponentIdentity, GenerationRequest, GenerationResult
from cd_engine.scaffolder.templates import TemplateRenderer

__all__ = [
    "ComponentGenerator",
    "ComponentIdentity",
    "DirectoryExistsError",
    "GenerationRequest",
    "GenerationResult",
    "MissingTitleError",
    "ScaffoldError",
    "TemplateRenderer",
    "build_request",
]
