"""Consistency checks for a parsed specification.

The generation engine tolerates most malformed input and renders degenerate
output for it.  These checks surface such input up front so the pipeline can
warn about it (permissive mode) or refuse to run (strict mode).  An empty
component list is always fatal since there is no default route to target.
"""

from __future__ import annotations

from typing import Optional

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.errors import IssueSeverity, SpecificationError, SpecIssue
from ngscaffold.parser.models import OPTION_FIELD_TYPES, FieldModel, FieldType, Specification
from ngscaffold.scaffolder.naming import class_form, path_form

SUPPORTED_COLUMN_LAYOUTS: tuple[int, ...] = (2, 3, 4)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def find_issues(
    spec: Specification, layout: Optional[LayoutOptions] = None
) -> list[SpecIssue]:
    """Return every issue found in *spec*, in document order."""
    issues: list[SpecIssue] = []

    if not spec.components:
        issues.append(SpecIssue(
            code="no-components",
            message="specification must declare at least one component",
            severity=IssueSeverity.FATAL,
        ))

    seen_paths: dict[str, str] = {}
    seen_classes: dict[str, str] = {}
    for component in spec.components:
        where = f"components.{component.name}"
        route = path_form(component.name)
        cls = class_form(component.name)
        if route in seen_paths:
            issues.append(SpecIssue(
                code="duplicate-route",
                message=f"route path '{route}' is also derived from '{seen_paths[route]}'",
                location=where,
            ))
        else:
            seen_paths[route] = component.name
        if cls in seen_classes and seen_classes[cls] != component.name:
            issues.append(SpecIssue(
                code="duplicate-class",
                message=f"class name '{cls}Component' is also derived from '{seen_classes[cls]}'",
                location=where,
            ))
        else:
            seen_classes.setdefault(cls, component.name)

        issues.extend(_field_issues(component.name, component.fields))

    if layout is not None and layout.column_layout not in SUPPORTED_COLUMN_LAYOUTS:
        issues.append(SpecIssue(
            code="column-layout",
            message=(
                f"column layout {layout.column_layout} is not one of "
                f"{', '.join(str(n) for n in SUPPORTED_COLUMN_LAYOUTS)}"
            ),
            location="layout",
        ))

    return issues


def _field_issues(component_name: str, fields: list[FieldModel]) -> list[SpecIssue]:
    issues: list[SpecIssue] = []
    seen: set[str] = set()
    for field in fields:
        where = f"components.{component_name}.fields.{field.name}"
        if field.name in seen:
            issues.append(SpecIssue(
                code="duplicate-field",
                message=f"field name '{field.name}' appears more than once",
                location=where,
            ))
        seen.add(field.name)

        if not FieldType.is_known(field.type):
            issues.append(SpecIssue(
                code="unknown-type",
                message=f"type '{field.type}' is not recognised, rendering as textbox",
                location=where,
                severity=IssueSeverity.WARNING,
            ))
        elif field.field_type in OPTION_FIELD_TYPES and not field.options:
            issues.append(SpecIssue(
                code="empty-options",
                message=f"{field.field_type.value} field declares no options",
                location=where,
            ))

        bundle = field.validations
        if bundle is not None and bundle.range is not None:
            low, high = bundle.range
            if low > high:
                issues.append(SpecIssue(
                    code="range-order",
                    message=f"range ({low}, {high}) is not ascending",
                    location=where,
                ))
    return issues


def check_specification(
    spec: Specification,
    layout: Optional[LayoutOptions] = None,
    *,
    strict: bool = False,
) -> list[SpecIssue]:
    """Validate *spec* and return the issues that did not abort the run.

    Raises:
        SpecificationError: On any fatal issue, or on any error-level issue
            when *strict* is set.
    """
    issues = find_issues(spec, layout)
    raising = [
        issue for issue in issues
        if issue.severity is IssueSeverity.FATAL
        or (strict and issue.severity is IssueSeverity.ERROR)
    ]
    if raising:
        raise SpecificationError(raising)
    return issues
