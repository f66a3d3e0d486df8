"""Main generation orchestrator.

Takes a ``Specification`` and ``LayoutOptions`` and produces the complete set
of Angular artifacts plus the external commands that must run before they are
written.  Generation is a linear sequence of states::

    INIT -> SKELETON_REQUESTED -> COMPONENTS_GENERATED -> ROUTING_GENERATED
         -> SHELL_ASSEMBLED -> DONE

Nothing is returned until ``DONE`` is reached, so a failure in any state
leaves the caller with no artifacts at all.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.errors import SpecificationError
from ngscaffold.parser.models import Specification

from .artifacts import Artifact, GenerationResult, ToolInvocation
from .component_gen import ComponentGenerator
from .naming import component_class_name
from .routing_gen import RoutingGenerator, build_imports
from .shell_gen import ShellGenerator
from .skeleton import CliSkeletonStrategy, SkeletonStrategy
from .templates import TemplateRenderer

APP_DIR = "src/app"


class GenerationState(str, Enum):
    INIT = "init"
    SKELETON_REQUESTED = "skeleton_requested"
    COMPONENTS_GENERATED = "components_generated"
    ROUTING_GENERATED = "routing_generated"
    SHELL_ASSEMBLED = "shell_assembled"
    DONE = "done"


_TRANSITIONS: dict[GenerationState, GenerationState] = {
    GenerationState.INIT: GenerationState.SKELETON_REQUESTED,
    GenerationState.SKELETON_REQUESTED: GenerationState.COMPONENTS_GENERATED,
    GenerationState.COMPONENTS_GENERATED: GenerationState.ROUTING_GENERATED,
    GenerationState.ROUTING_GENERATED: GenerationState.SHELL_ASSEMBLED,
    GenerationState.SHELL_ASSEMBLED: GenerationState.DONE,
}


class ProjectGenerator:
    """Generation orchestrator.

    Given a ``Specification``, produces:
    - one module, markup, and style artifact per component
    - the app module and routing module
    - the shell markup and style, plus the global stylesheet
    - skeleton files or commands from the injected ``SkeletonStrategy``

    A generator instance can be run any number of times; each call to
    :meth:`generate` starts again from ``INIT``.
    """

    def __init__(
        self,
        spec: Specification,
        layout: Optional[LayoutOptions] = None,
        strategy: Optional[SkeletonStrategy] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.spec = spec
        self.layout = layout or LayoutOptions()
        self.renderer = renderer or TemplateRenderer()
        self.strategy = strategy or CliSkeletonStrategy()
        self.component_gen = ComponentGenerator(self.renderer)
        self.routing_gen = RoutingGenerator(self.renderer)
        self.shell_gen = ShellGenerator(self.renderer)
        self.state = GenerationState.INIT
        self.history: list[GenerationState] = []

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Run every state and return the complete result.

        Raises:
            SpecificationError: If the specification declares no components.
        """
        self._reset()
        if not self.spec.components:
            raise SpecificationError(
                "specification must declare at least one component"
            )

        artifacts: list[Artifact] = []
        invocations: list[ToolInvocation] = []

        # 1. Skeleton: external commands and/or direct skeleton files
        invocations.extend(self.strategy.invocations(self.spec, self.layout))
        artifacts.extend(self.strategy.artifacts(self.spec, self.layout))
        self._advance(GenerationState.SKELETON_REQUESTED)

        # 2. Per-component module, markup, and style
        for component in self.spec.components:
            artifacts.extend(
                self.component_gen.generate(component, self.layout, base_dir=APP_DIR)
            )
        self._advance(GenerationState.COMPONENTS_GENERATED)

        # 3. Routing and app module
        artifacts.append(Artifact(
            path=f"{APP_DIR}/app-routing.module.ts",
            content=self.routing_gen.render(self.spec.components),
        ))
        artifacts.append(Artifact(
            path=f"{APP_DIR}/app.module.ts",
            content=self._render_app_module(),
        ))
        self._advance(GenerationState.ROUTING_GENERATED)

        # 4. Shell, shell style, and global stylesheet
        artifacts.extend(self._assemble_shell())
        self._advance(GenerationState.SHELL_ASSEMBLED)

        self._advance(GenerationState.DONE)
        return GenerationResult(
            project_name=self.spec.project_name,
            artifacts=artifacts,
            invocations=invocations,
            states=[state.value for state in self.history],
        )

    # -- State machine -----------------------------------------------------

    def _reset(self) -> None:
        self.state = GenerationState.INIT
        self.history = [GenerationState.INIT]

    def _advance(self, target: GenerationState) -> None:
        expected = _TRANSITIONS.get(self.state)
        if expected is not target:
            raise RuntimeError(
                f"invalid generation transition {self.state.value} -> {target.value}"
            )
        self.state = target
        self.history.append(target)

    # -- Artifact builders -------------------------------------------------

    def _render_app_module(self) -> str:
        components = self.spec.components
        return self.renderer.render(
            "app/app.module.ts.j2",
            {
                "imports": build_imports(components),
                "declarations": [component_class_name(c.name) for c in components],
            },
        )

    def _assemble_shell(self) -> list[Artifact]:
        spec = self.spec
        return [
            Artifact(
                path=f"{APP_DIR}/app.component.html",
                content=self.shell_gen.render_shell(
                    spec.components, spec.menu_type, spec.footer_content, self.layout
                ),
            ),
            Artifact(
                path=f"{APP_DIR}/app.component.css",
                content=self.shell_gen.render_style(spec.menu_type, self.layout),
            ),
            Artifact(
                path="src/styles.css",
                content=self.renderer.render(
                    "app/styles.css.j2", {"use_bootstrap": self.layout.use_bootstrap}
                ),
            ),
        ]


def generate_project(
    spec: Specification,
    layout: Optional[LayoutOptions] = None,
    strategy: Optional[SkeletonStrategy] = None,
) -> GenerationResult:
    """Convenience wrapper: build a ``ProjectGenerator`` and run it once."""
    return ProjectGenerator(spec, layout, strategy).generate()
