"""Pydantic v2 models for the UI specification document.

Defines the input hierarchy (specification -> components -> fields) that the
generation engine consumes.  Input documents use camelCase keys
(``projectName``, ``menuName``, ``validationMessage``, ...); the models accept
both those aliases and the snake_case attribute names.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FieldType(str, Enum):
    """Closed set of form controls a field can be rendered as."""
    TEXTBOX = "textbox"
    TEXTAREA = "textarea"
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"
    CHECKBOXLIST = "checkboxlist"
    RADIOBUTTON = "radiobutton"
    RADIOBUTTONLIST = "radiobuttonlist"

    @classmethod
    def resolve(cls, raw: str) -> "FieldType":
        """Map a declared type string to a member, falling back to ``TEXTBOX``."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.TEXTBOX

    @classmethod
    def is_known(cls, raw: str) -> bool:
        return raw.strip().lower() in {member.value for member in cls}


OPTION_FIELD_TYPES: frozenset[FieldType] = frozenset({
    FieldType.DROPDOWN,
    FieldType.CHECKBOXLIST,
    FieldType.RADIOBUTTONLIST,
})


class MenuType(str, Enum):
    """Navigation orientation."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# ---------------------------------------------------------------------------
# Field Models
# ---------------------------------------------------------------------------

Number = Union[int, float]


class ValidationBundle(BaseModel):
    """Structured validation settings for a field.

    When present on a field it takes precedence over the flat ``required`` and
    ``regex`` attributes.
    """
    model_config = ConfigDict(populate_by_name=True)

    required: bool = Field(default=False, description="Whether a value is mandatory")
    min_length: Optional[int] = Field(default=None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(default=None, alias="maxLength", ge=0)
    regex: Optional[str] = Field(default=None, description="Pattern the value must match")
    range: Optional[tuple[Number, Number]] = Field(
        default=None, description="Inclusive numeric (min, max) pair"
    )
    default_value: Optional[Union[bool, int, float, str, list[str]]] = Field(
        default=None, alias="defaultValue", description="Initial control value"
    )


class FieldModel(BaseModel):
    """A single form field inside a component."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Field name, used for label, id and control name")
    type: str = Field(default=FieldType.TEXTBOX.value, description="Declared control type")
    required: bool = Field(default=False, description="Whether the field is required")
    regex: Optional[str] = Field(default=None, description="Pattern the value must match")
    options: list[str] = Field(
        default_factory=list, description="Choices for option-bearing controls"
    )
    validation_message: Optional[str] = Field(
        default=None, alias="validationMessage", description="Error message override"
    )
    validations: Optional[ValidationBundle] = Field(
        default=None, description="Structured validation bundle"
    )

    @property
    def field_type(self) -> FieldType:
        """The resolved control type (unknown declarations become ``TEXTBOX``)."""
        return FieldType.resolve(self.type)


# ---------------------------------------------------------------------------
# Component & Specification
# ---------------------------------------------------------------------------

class Component(BaseModel):
    """One generated page: a form with fields and buttons."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Identifier-safe component name, e.g. 'Register'")
    menu_name: Optional[str] = Field(
        default=None, alias="menuName", description="Navigation label override"
    )
    fields: list[FieldModel] = Field(default_factory=list, description="Ordered form fields")
    buttons: list[str] = Field(default_factory=list, description="Ordered button labels")

    @property
    def menu_label(self) -> str:
        return self.menu_name or self.name


class Specification(BaseModel):
    """Root of the UI specification document."""
    model_config = ConfigDict(populate_by_name=True)

    project_name: str = Field(..., alias="projectName", min_length=1)
    components: list[Component] = Field(
        default_factory=list, description="Ordered components; the first is the default route"
    )
    menu_type: MenuType = Field(default=MenuType.HORIZONTAL, alias="menuType")
    footer_content: Optional[str] = Field(default=None, alias="footerContent")
