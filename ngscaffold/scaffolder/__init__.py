"""ngscaffold scaffolder -- turns a specification into Angular artifacts.

The generation engine is pure: it returns in-memory artifacts and the
external commands that must run first.  ``ArtifactWriter`` persists the
artifacts once those commands have succeeded.

Quick usage::

    from ngscaffold.parser import load_specification
    from ngscaffold.scaffolder import ProjectGenerator, LayoutOptions

    spec = load_specification("spec.json")
    result = ProjectGenerator(spec, LayoutOptions(use_bootstrap=True, column_layout=3)).generate()
    for artifact in result.artifacts:
        print(artifact.path)
"""

from ngscaffold.config import LayoutOptions
from ngscaffold.scaffolder.artifacts import (
    Artifact,
    GenerationResult,
    InvocationPurpose,
    ToolInvocation,
)
from ngscaffold.scaffolder.generator import GenerationState, ProjectGenerator, generate_project
from ngscaffold.scaffolder.skeleton import (
    CliSkeletonStrategy,
    DirectSkeletonStrategy,
    SkeletonStrategy,
)
from ngscaffold.scaffolder.templates import TemplateRenderer
from ngscaffold.scaffolder.writer import ArtifactWriter

__all__ = [
    "Artifact",
    "ArtifactWriter",
    "CliSkeletonStrategy",
    "DirectSkeletonStrategy",
    "GenerationResult",
    "GenerationState",
    "InvocationPurpose",
    "LayoutOptions",
    "ProjectGenerator",
    "SkeletonStrategy",
    "TemplateRenderer",
    "ToolInvocation",
    "generate_project",
]
