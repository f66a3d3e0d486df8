"""Navigation menu and application shell assembly.

The shell (``app.component.html``) is the navigation menu, the router outlet,
and an optional footer.  With the Bootstrap grid the menu uses ``nav``
classes; otherwise it uses custom classes styled by ``app.component.css``.
"""

from __future__ import annotations

from typing import Optional

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.errors import SpecificationError
from ngscaffold.parser.models import Component, MenuType

from .naming import path_form
from .templates import TemplateRenderer


def menu_class(menu_type: MenuType, use_bootstrap: bool) -> str:
    """CSS class of the ``<nav>`` element for an orientation."""
    vertical = menu_type is MenuType.VERTICAL
    if use_bootstrap:
        return "nav flex-column" if vertical else "nav nav-pills"
    return "custom-vertical-menu" if vertical else "custom-horizontal-menu"


def menu_links(components: list[Component]) -> list[dict[str, str]]:
    return [
        {"label": component.menu_label, "path": path_form(component.name)}
        for component in components
    ]


class ShellGenerator:
    """Builds the navigation fragment, footer, and shell markup."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render_menu(
        self,
        components: list[Component],
        menu_type: MenuType,
        layout: LayoutOptions,
    ) -> str:
        """Render the ``<nav>`` fragment with one link per component.

        Raises:
            SpecificationError: If *components* is empty.
        """
        if not components:
            raise SpecificationError("navigation needs at least one component")
        return self.renderer.render(
            "app/nav.html.j2",
            {
                "menu_class": menu_class(menu_type, layout.use_bootstrap),
                "link_class": "nav-link" if layout.use_bootstrap else "custom-menu-link",
                "links": menu_links(components),
            },
        ).rstrip("\n")

    def render_footer(self, footer_content: Optional[str], layout: LayoutOptions) -> str:
        """Render the footer, or an empty string when there is no footer text."""
        if not footer_content:
            return ""
        return self.renderer.render(
            "app/footer.html.j2",
            {
                "footer_content": footer_content,
                "footer_class": "mt-4 text-center" if layout.use_bootstrap else "custom-footer",
            },
        ).rstrip("\n")

    def render_shell(
        self,
        components: list[Component],
        menu_type: MenuType,
        footer_content: Optional[str],
        layout: LayoutOptions,
    ) -> str:
        """Render ``app.component.html``."""
        return self.renderer.render(
            "app/app.component.html.j2",
            {
                "nav": self.render_menu(components, menu_type, layout),
                "footer": self.render_footer(footer_content, layout),
                "content_class": "container mt-3" if layout.use_bootstrap else "custom-content",
            },
        )

    def render_style(self, menu_type: MenuType, layout: LayoutOptions) -> str:
        """Render ``app.component.css``."""
        return self.renderer.render(
            "app/app.component.css.j2",
            {"use_bootstrap": layout.use_bootstrap, "menu_type": menu_type.value},
        )
