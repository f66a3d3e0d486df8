"""Compilation of field constraints into ordered validation directives.

A field carries its constraints in one of two shapes: the flat ``required`` /
``regex`` attributes, or a structured ``validations`` bundle.  When the bundle
is present it wins and the flat attributes are ignored.  The resulting
directive list drives both the ``Validators`` chain in the component module
and the error blocks in the markup, so emission order is preserved
everywhere: required first, then length, pattern and range checks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ngscaffold.parser.models import FieldModel
from ngscaffold.scaffolder.naming import label_form


class DirectiveKind(str, Enum):
    REQUIRED = "required"
    MIN_LENGTH = "minlength"
    MAX_LENGTH = "maxlength"
    PATTERN = "pattern"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class ValidationDirective:
    """One compiled validation rule, e.g. ``MinLength(3)``."""

    kind: DirectiveKind
    argument: Optional[Union[int, float, str]] = None

    @classmethod
    def required(cls) -> "ValidationDirective":
        return cls(DirectiveKind.REQUIRED)

    @classmethod
    def min_length(cls, n: int) -> "ValidationDirective":
        return cls(DirectiveKind.MIN_LENGTH, n)

    @classmethod
    def max_length(cls, n: int) -> "ValidationDirective":
        return cls(DirectiveKind.MAX_LENGTH, n)

    @classmethod
    def pattern(cls, expr: str) -> "ValidationDirective":
        return cls(DirectiveKind.PATTERN, expr)

    @classmethod
    def min(cls, n: Union[int, float]) -> "ValidationDirective":
        return cls(DirectiveKind.MIN, n)

    @classmethod
    def max(cls, n: Union[int, float]) -> "ValidationDirective":
        return cls(DirectiveKind.MAX, n)

    def to_validator(self) -> str:
        """Angular ``Validators`` expression for this directive."""
        if self.kind is DirectiveKind.REQUIRED:
            return "Validators.required"
        if self.kind is DirectiveKind.MIN_LENGTH:
            return f"Validators.minLength({ts_literal(self.argument)})"
        if self.kind is DirectiveKind.MAX_LENGTH:
            return f"Validators.maxLength({ts_literal(self.argument)})"
        if self.kind is DirectiveKind.PATTERN:
            return f"Validators.pattern({ts_literal(self.argument)})"
        if self.kind is DirectiveKind.MIN:
            return f"Validators.min({ts_literal(self.argument)})"
        return f"Validators.max({ts_literal(self.argument)})"

    def __str__(self) -> str:
        name = "".join(part.capitalize() for part in self.kind.name.split("_"))
        if self.argument is None:
            return name
        return f"{name}({self.argument!r})"


@dataclass(frozen=True)
class CompiledField:
    """Directives and resolved messages for one field."""

    directives: tuple[ValidationDirective, ...] = field(default_factory=tuple)
    required_message: str = ""
    pattern_message: str = ""

    @property
    def is_required(self) -> bool:
        return self.has(DirectiveKind.REQUIRED)

    @property
    def pattern(self) -> Optional[str]:
        for directive in self.directives:
            if directive.kind is DirectiveKind.PATTERN:
                return str(directive.argument)
        return None

    def has(self, kind: DirectiveKind) -> bool:
        return any(directive.kind is kind for directive in self.directives)

    def validators(self) -> list[str]:
        return [directive.to_validator() for directive in self.directives]


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------


def compile_directives(field_model: FieldModel) -> list[ValidationDirective]:
    """Translate a field's constraints into an ordered directive list."""
    directives: list[ValidationDirective] = []
    bundle = field_model.validations

    if bundle is None:
        if field_model.required:
            directives.append(ValidationDirective.required())
        if field_model.regex:
            directives.append(ValidationDirective.pattern(field_model.regex))
        return directives

    if bundle.required:
        directives.append(ValidationDirective.required())
    if bundle.min_length is not None:
        directives.append(ValidationDirective.min_length(bundle.min_length))
    if bundle.max_length is not None:
        directives.append(ValidationDirective.max_length(bundle.max_length))
    if bundle.regex:
        directives.append(ValidationDirective.pattern(bundle.regex))
    if bundle.range is not None:
        low, high = bundle.range
        directives.append(ValidationDirective.min(low))
        directives.append(ValidationDirective.max(high))
    return directives


def compile_field(field_model: FieldModel) -> CompiledField:
    """Compile directives and resolve the error messages for *field_model*."""
    override = field_model.validation_message
    return CompiledField(
        directives=tuple(compile_directives(field_model)),
        required_message=override or f"{label_form(field_model.name)} is required",
        pattern_message=override or f"{field_model.name} format is invalid",
    )


# ---------------------------------------------------------------------------
# TypeScript literals
# ---------------------------------------------------------------------------


def ts_literal(value: Any) -> str:
    """Render a Python scalar or list as a TypeScript literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(ts_literal(item) for item in value) + "]"
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
