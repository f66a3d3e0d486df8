"""Tests for the specification models (ngscaffold.parser.models).

Covers:
- FieldType resolution and the textbox fallback
- camelCase aliases and snake_case population
- ValidationBundle parsing
- Component menu label fallback
- Specification defaults and required fields
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ngscaffold.parser.models import (
    OPTION_FIELD_TYPES,
    Component,
    FieldModel,
    FieldType,
    MenuType,
    Specification,
    ValidationBundle,
)

pytestmark = pytest.mark.unit


class TestFieldType:
    @pytest.mark.parametrize("raw,expected", [
        ("textbox", FieldType.TEXTBOX),
        ("TextArea", FieldType.TEXTAREA),
        (" dropdown ", FieldType.DROPDOWN),
        ("checkboxlist", FieldType.CHECKBOXLIST),
        ("radiobuttonlist", FieldType.RADIOBUTTONLIST),
    ])
    def test_resolve_known(self, raw: str, expected: FieldType):
        assert FieldType.resolve(raw) is expected

    @pytest.mark.parametrize("raw", ["datepicker", "", "text box"])
    def test_resolve_unknown_falls_back_to_textbox(self, raw: str):
        assert FieldType.resolve(raw) is FieldType.TEXTBOX

    def test_is_known(self):
        assert FieldType.is_known("Checkbox")
        assert not FieldType.is_known("slider")

    def test_option_field_types(self):
        assert OPTION_FIELD_TYPES == {
            FieldType.DROPDOWN,
            FieldType.CHECKBOXLIST,
            FieldType.RADIOBUTTONLIST,
        }


class TestFieldModel:
    def test_defaults(self):
        field = FieldModel(name="email")
        assert field.type == "textbox"
        assert field.field_type is FieldType.TEXTBOX
        assert field.required is False
        assert field.regex is None
        assert field.options == []
        assert field.validation_message is None
        assert field.validations is None

    def test_aliases(self):
        field = FieldModel.model_validate({
            "name": "email",
            "type": "textbox",
            "validationMessage": "Bad email",
            "validations": {"minLength": 3, "maxLength": 10, "defaultValue": "a@b"},
        })
        assert field.validation_message == "Bad email"
        assert field.validations.min_length == 3
        assert field.validations.max_length == 10
        assert field.validations.default_value == "a@b"

    def test_unknown_type_is_kept_verbatim(self):
        field = FieldModel(name="when", type="datepicker")
        assert field.type == "datepicker"
        assert field.field_type is FieldType.TEXTBOX

    def test_name_required(self):
        with pytest.raises(ValidationError):
            FieldModel.model_validate({"type": "textbox"})


class TestValidationBundle:
    def test_range_parsed_as_pair(self):
        bundle = ValidationBundle.model_validate({"range": [1, 5.5]})
        assert bundle.range == (1, 5.5)

    def test_range_must_have_two_items(self):
        with pytest.raises(ValidationError):
            ValidationBundle.model_validate({"range": [1, 2, 3]})

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError):
            ValidationBundle.model_validate({"minLength": -1})

    def test_boolean_default_stays_boolean(self):
        bundle = ValidationBundle.model_validate({"defaultValue": True})
        assert bundle.default_value is True

    def test_list_default_accepted(self):
        bundle = ValidationBundle.model_validate({"defaultValue": ["Music", "Travel"]})
        assert bundle.default_value == ["Music", "Travel"]


class TestComponent:
    def test_menu_label_falls_back_to_name(self):
        assert Component(name="About").menu_label == "About"

    def test_menu_label_uses_menu_name(self):
        component = Component.model_validate({"name": "Register", "menuName": "Sign Up"})
        assert component.menu_label == "Sign Up"

    def test_fields_and_buttons_default_empty(self):
        component = Component(name="About")
        assert component.fields == []
        assert component.buttons == []


class TestSpecification:
    def test_parse_example(self, example_spec_dict):
        spec = Specification.model_validate(example_spec_dict)
        assert spec.project_name == "my-angular-app"
        assert [c.name for c in spec.components] == ["Register", "About"]
        assert spec.menu_type is MenuType.HORIZONTAL
        assert spec.footer_content == "(c) 2024 My Angular App"

    def test_snake_case_population(self):
        spec = Specification(project_name="app", menu_type="vertical")
        assert spec.project_name == "app"
        assert spec.menu_type is MenuType.VERTICAL
        assert spec.components == []
        assert spec.footer_content is None

    def test_empty_project_name_rejected(self):
        with pytest.raises(ValidationError):
            Specification.model_validate({"projectName": ""})

    def test_invalid_menu_type_rejected(self):
        with pytest.raises(ValidationError):
            Specification.model_validate({"projectName": "app", "menuType": "diagonal"})
