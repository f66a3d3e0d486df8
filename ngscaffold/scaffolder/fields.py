"""Field markup rendering.

``FIELD_CONTROLS`` is the one table that maps a declared field type to its
runtime control: which template renders it, whether it holds several values,
its empty value, and which validation error blocks it displays.  Adding a
``FieldType`` member without a row here fails at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ngscaffold.parser.models import FieldModel, FieldType

from .naming import label_form
from .templates import TemplateRenderer
from .validation import CompiledField, compile_field

REQUIRED_MARKER = " *"


@dataclass(frozen=True)
class FieldControl:
    """How one field type is rendered."""

    template: str
    multi_value: bool = False
    required_error: bool = False
    pattern_error: bool = False
    empty_value: Any = None
    # Control value is an array of the selected options.
    array_value: bool = False


FIELD_CONTROLS: dict[FieldType, FieldControl] = {
    FieldType.TEXTBOX: FieldControl(
        "fields/textbox.html.j2", required_error=True, pattern_error=True
    ),
    FieldType.TEXTAREA: FieldControl("fields/textarea.html.j2", required_error=True),
    FieldType.DROPDOWN: FieldControl("fields/dropdown.html.j2", required_error=True),
    FieldType.CHECKBOX: FieldControl("fields/checkbox.html.j2", empty_value=False),
    FieldType.CHECKBOXLIST: FieldControl(
        "fields/checkboxlist.html.j2", multi_value=True, empty_value=(), array_value=True
    ),
    FieldType.RADIOBUTTON: FieldControl("fields/radiobutton.html.j2"),
    FieldType.RADIOBUTTONLIST: FieldControl(
        "fields/radiobuttonlist.html.j2", multi_value=True, required_error=True
    ),
}

_unhandled = set(FieldType) - set(FIELD_CONTROLS)
if _unhandled:
    raise RuntimeError(
        "FIELD_CONTROLS has no entry for: "
        + ", ".join(sorted(member.value for member in _unhandled))
    )


def control_for(field_model: FieldModel) -> FieldControl:
    """Table row for *field_model*'s resolved type."""
    return FIELD_CONTROLS[field_model.field_type]


def initial_value(field_model: FieldModel) -> Any:
    """Value the form control starts with.

    Array-valued controls always start with a list, so a single declared
    default becomes a one-item selection.
    """
    control = control_for(field_model)
    bundle = field_model.validations
    if bundle is None or bundle.default_value is None:
        return control.empty_value
    default = bundle.default_value
    if control.array_value and not isinstance(default, list):
        return [default]
    return default


class FieldMarkupRenderer:
    """Renders a single field into a ``form-group`` markup fragment."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(
        self,
        field_model: FieldModel,
        compiled: Optional[CompiledField] = None,
    ) -> str:
        """Render *field_model* with its compiled validation.

        Args:
            field_model: The field to render.
            compiled: Pre-compiled directives and messages; compiled on demand
                when omitted.

        Returns:
            The fragment, without a trailing newline.
        """
        if compiled is None:
            compiled = compile_field(field_model)
        control = control_for(field_model)
        context = {
            "name": field_model.name,
            "label": label_form(field_model.name),
            "marker": REQUIRED_MARKER if compiled.is_required else "",
            "options": field_model.options,
            "compiled": compiled,
            "show_required_error": control.required_error and compiled.is_required,
            "show_pattern_error": control.pattern_error and compiled.pattern is not None,
        }
        body = self.renderer.render(control.template, context).rstrip("\n")
        return self.renderer.render(
            "fields/container.html.j2", {"body": body}
        ).rstrip("\n")
