"""Routing table generation.

Builds one route per component in specification order, followed by an
empty-path redirect and a wildcard redirect, both pointing at the first
component.  Renders ``app-routing.module.ts`` from those routes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ngscaffold.parser.errors import SpecificationError
from ngscaffold.parser.models import Component

from .naming import component_class_name, path_form
from .templates import TemplateRenderer


class RouteEntry(BaseModel):
    """A single entry of the Angular ``Routes`` array."""

    path: str = Field(..., description="Route path segment ('' and '**' for redirects)")
    component: Optional[str] = Field(default=None, description="Component class identifier")
    redirect_to: Optional[str] = Field(default=None, description="Absolute redirect target")
    path_match: Optional[str] = Field(default=None, description="'full' for the empty path")

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None

    def to_typescript(self) -> str:
        """Object literal for the ``Routes`` array."""
        parts = [f"path: '{self.path}'"]
        if self.component is not None:
            parts.append(f"component: {self.component}")
        if self.redirect_to is not None:
            parts.append(f"redirectTo: '{self.redirect_to}'")
        if self.path_match is not None:
            parts.append(f"pathMatch: '{self.path_match}'")
        return "{ " + ", ".join(parts) + " }"


def _require_components(components: list[Component]) -> Component:
    if not components:
        raise SpecificationError(
            "routing needs at least one component to use as the default route"
        )
    return components[0]


def build_routes(components: list[Component]) -> list[RouteEntry]:
    """Route entries for *components* plus the two default redirects.

    Raises:
        SpecificationError: If *components* is empty.
    """
    default = path_form(_require_components(components).name)
    routes = [
        RouteEntry(path=path_form(c.name), component=component_class_name(c.name))
        for c in components
    ]
    routes.append(RouteEntry(path="", redirect_to=f"/{default}", path_match="full"))
    routes.append(RouteEntry(path="**", redirect_to=f"/{default}"))
    return routes


def build_imports(components: list[Component]) -> list[str]:
    """One import declaration per component, in specification order."""
    statements = []
    for component in components:
        slug = path_form(component.name)
        statements.append(
            f"import {{ {component_class_name(component.name)} }} "
            f"from './{slug}/{slug}.component';"
        )
    return statements


class RoutingGenerator:
    """Renders the routing module for a component list."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self, components: list[Component]) -> str:
        """Render ``app-routing.module.ts``.

        Raises:
            SpecificationError: If *components* is empty.
        """
        return self.renderer.render(
            "app/app-routing.module.ts.j2",
            {
                "imports": build_imports(components),
                "routes": build_routes(components),
            },
        )
