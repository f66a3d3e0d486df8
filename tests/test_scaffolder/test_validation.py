"""Tests for the validation rule compiler (ngscaffold.scaffolder.validation).

Covers:
- Flat required/regex translation
- Structured bundle precedence and emission order
- Resolved error messages
- Angular validator expressions and TypeScript literals
"""

from __future__ import annotations

import pytest

from ngscaffold.parser.models import FieldModel
from ngscaffold.scaffolder.validation import (
    DirectiveKind,
    ValidationDirective,
    compile_directives,
    compile_field,
    ts_literal,
)

pytestmark = pytest.mark.unit


def _field(**data) -> FieldModel:
    return FieldModel.model_validate({"name": "username", **data})


class TestCompileDirectives:
    def test_no_constraints(self):
        assert compile_directives(_field()) == []

    def test_flat_required_and_regex(self):
        directives = compile_directives(_field(required=True, regex="^[a-z]+$"))
        assert directives == [
            ValidationDirective.required(),
            ValidationDirective.pattern("^[a-z]+$"),
        ]
        assert [str(d) for d in directives] == ["Required", "Pattern('^[a-z]+$')"]

    def test_flat_regex_only(self):
        assert compile_directives(_field(regex="\\d+")) == [ValidationDirective.pattern("\\d+")]

    def test_bundle_lengths(self):
        directives = compile_directives(
            _field(validations={"required": True, "minLength": 3, "maxLength": 10})
        )
        assert [str(d) for d in directives] == ["Required", "MinLength(3)", "MaxLength(10)"]

    def test_bundle_full_order(self):
        directives = compile_directives(_field(validations={
            "range": [1, 9],
            "regex": "^\\d$",
            "maxLength": 1,
            "minLength": 1,
            "required": True,
        }))
        assert [d.kind for d in directives] == [
            DirectiveKind.REQUIRED,
            DirectiveKind.MIN_LENGTH,
            DirectiveKind.MAX_LENGTH,
            DirectiveKind.PATTERN,
            DirectiveKind.MIN,
            DirectiveKind.MAX,
        ]

    def test_bundle_takes_precedence_over_flat_attributes(self):
        directives = compile_directives(
            _field(required=True, regex="^x$", validations={"minLength": 2})
        )
        assert directives == [ValidationDirective.min_length(2)]

    def test_empty_bundle_yields_nothing(self):
        assert compile_directives(_field(required=True, validations={})) == []

    def test_zero_min_length_kept(self):
        assert compile_directives(_field(validations={"minLength": 0})) == [
            ValidationDirective.min_length(0)
        ]

    def test_range_min_before_max(self):
        directives = compile_directives(_field(validations={"range": [18, 99]}))
        assert directives == [ValidationDirective.min(18), ValidationDirective.max(99)]

    def test_descending_range_passes_through(self):
        directives = compile_directives(_field(validations={"range": [10, 1]}))
        assert [str(d) for d in directives] == ["Min(10)", "Max(1)"]


class TestCompileField:
    def test_default_messages(self):
        compiled = compile_field(
            FieldModel(name="first name", required=True, regex="^[A-Z]")
        )
        assert compiled.is_required
        assert compiled.pattern == "^[A-Z]"
        assert compiled.required_message == "First Name is required"
        assert compiled.pattern_message == "first name format is invalid"

    def test_override_applies_to_every_message(self):
        compiled = compile_field(_field(
            required=True, regex="^a", validationMessage="Pick a proper username"
        ))
        assert compiled.required_message == "Pick a proper username"
        assert compiled.pattern_message == "Pick a proper username"

    def test_required_from_bundle(self):
        compiled = compile_field(_field(validations={"required": True}))
        assert compiled.is_required
        assert compiled.pattern is None

    def test_has(self):
        compiled = compile_field(_field(validations={"maxLength": 5}))
        assert compiled.has(DirectiveKind.MAX_LENGTH)
        assert not compiled.has(DirectiveKind.REQUIRED)

    def test_validators(self):
        compiled = compile_field(_field(validations={
            "required": True, "minLength": 3, "regex": "^[a-z]+$", "range": [1, 2.5],
        }))
        assert compiled.validators() == [
            "Validators.required",
            "Validators.minLength(3)",
            "Validators.pattern('^[a-z]+$')",
            "Validators.min(1)",
            "Validators.max(2.5)",
        ]


class TestTsLiteral:
    @pytest.mark.parametrize("value,expected", [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
        ("USA", "'USA'"),
        ("it's", "'it\\'s'"),
        ("\\d+", "'\\\\d+'"),
        ((), "[]"),
        (["a", 1], "['a', 1]"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ])
    def test_literals(self, value, expected: str):
        assert ts_literal(value) == expected
