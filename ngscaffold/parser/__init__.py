"""ngscaffold specification parser.

Loads UI specification documents (JSON or YAML) into validated models and
checks them for inconsistencies the generators would otherwise tolerate.

Usage::

    from ngscaffold.parser import load_specification, check_specification

    spec = load_specification("spec.json")
    warnings = check_specification(spec, strict=False)
"""

from ngscaffold.parser.errors import IssueSeverity, SpecificationError, SpecIssue
from ngscaffold.parser.models import (
    Component,
    FieldModel,
    FieldType,
    MenuType,
    Specification,
    ValidationBundle,
)
from ngscaffold.parser.checks import check_specification, find_issues
from ngscaffold.parser.loader import load_specification, parse_specification

__all__ = [
    "check_specification",
    "find_issues",
    "load_specification",
    "parse_specification",
    "Component",
    "FieldModel",
    "FieldType",
    "IssueSeverity",
    "MenuType",
    "SpecIssue",
    "SpecificationError",
    "Specification",
    "ValidationBundle",
]
