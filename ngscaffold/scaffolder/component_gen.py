"""Per-component artifact generation.

Generates, for each component in the specification:
- ``<slug>/<slug>.component.ts``   -- class with a reactive form and submit handler
- ``<slug>/<slug>.component.html`` -- form markup: fields in a column grid, then buttons
- ``<slug>/<slug>.component.css``  -- custom grid rules (empty for the Bootstrap grid)
"""

from __future__ import annotations

from typing import Any

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.models import Component, FieldType

from .artifacts import Artifact
from .fields import FieldMarkupRenderer, initial_value
from .naming import component_class_name, component_selector, path_form
from .templates import TemplateRenderer
from .validation import compile_field

DEFAULT_BUTTON = "Submit"
GRID_COLUMNS = 12


# ---------------------------------------------------------------------------
# Layout policy
# ---------------------------------------------------------------------------

def column_class(layout: LayoutOptions) -> str:
    """CSS class wrapping each field.

    The Bootstrap width is ``12 // columns``; a non-positive column count
    falls back to the auto-width ``col-md`` class.
    """
    columns = layout.column_layout
    if layout.use_bootstrap:
        if columns <= 0:
            return "col-md"
        return f"col-md-{GRID_COLUMNS // columns}"
    return f"custom-col-{columns}"


def form_layout_class(layout: LayoutOptions) -> str:
    return "row" if layout.use_bootstrap else "custom-layout"


def actions_class(layout: LayoutOptions) -> str:
    return "col-12 mt-3" if layout.use_bootstrap else "custom-actions"


def button_specs(labels: list[str], layout: LayoutOptions) -> list[dict[str, str]]:
    """Button descriptors; the first label submits the form."""
    labels = labels or [DEFAULT_BUTTON]
    specs = []
    for index, label in enumerate(labels):
        if layout.use_bootstrap:
            css_class = "btn btn-primary" if index == 0 else "btn btn-secondary ms-2"
        else:
            css_class = "custom-button"
        specs.append({
            "label": label,
            "type": "submit" if index == 0 else "button",
            "css_class": css_class,
        })
    return specs


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Generates the module, markup, and style artifacts of one component."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer
        self.field_renderer = FieldMarkupRenderer(renderer)

    def generate(
        self,
        component: Component,
        layout: LayoutOptions,
        base_dir: str = "src/app",
    ) -> list[Artifact]:
        """Generate all artifacts for *component*.

        Args:
            component: The component to generate.
            layout: Grid options for the markup and style artifacts.
            base_dir: Directory (relative to the project root) that holds the
                component directories.

        Returns:
            Module, markup, and style artifacts, in that order.
        """
        slug = path_form(component.name)
        prefix = f"{base_dir}/{slug}/{slug}.component"
        return [
            Artifact(path=f"{prefix}.ts", content=self.render_module(component)),
            Artifact(path=f"{prefix}.html", content=self.render_markup(component, layout)),
            Artifact(path=f"{prefix}.css", content=self.render_style(layout)),
        ]

    def render_module(self, component: Component) -> str:
        """Render the component class with its form model and submit handler."""
        controls: list[dict[str, Any]] = []
        for field_model in component.fields:
            compiled = compile_field(field_model)
            controls.append({
                "name": field_model.name,
                "initial": initial_value(field_model),
                "validators": compiled.validators(),
            })
        context = {
            "class_name": component_class_name(component.name),
            "selector": component_selector(component.name),
            "slug": path_form(component.name),
            "controls": controls,
            "has_option_lists": any(
                f.field_type is FieldType.CHECKBOXLIST for f in component.fields
            ),
        }
        return self.renderer.render("component/component.ts.j2", context)

    def render_markup(self, component: Component, layout: LayoutOptions) -> str:
        """Render the form: one column per field, then the buttons."""
        fragments = [
            self.field_renderer.render(field_model, compile_field(field_model))
            for field_model in component.fields
        ]
        context = {
            "fragments": fragments,
            "layout_class": form_layout_class(layout),
            "column_class": column_class(layout),
            "actions_class": actions_class(layout),
            "buttons": button_specs(component.buttons, layout),
        }
        return self.renderer.render("component/component.html.j2", context)

    def render_style(self, layout: LayoutOptions) -> str:
        return self.renderer.render(
            "component/component.css.j2",
            {
                "use_bootstrap": layout.use_bootstrap,
                "column_layout": layout.column_layout,
            },
        )
