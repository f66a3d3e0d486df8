"""Shared pytest fixtures for the ngscaffold test suite.

Provides reusable fixtures for:
- The example specification as a raw mapping and as a parsed model
- Layout options for the Bootstrap and custom grids
- A template renderer and a project generator
- Temporary output directories and a pipeline config pointing at them
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from ngscaffold.config import Config, LayoutOptions
from ngscaffold.parser.loader import parse_specification
from ngscaffold.parser.models import Specification
from ngscaffold.scaffolder.templates import TemplateRenderer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Specifications
# ---------------------------------------------------------------------------

EXAMPLE_SPEC: dict[str, Any] = {
    "projectName": "my-angular-app",
    "components": [
        {
            "name": "Register",
            "menuName": "Sign Up",
            "fields": [
                {"name": "username", "type": "textbox", "required": True, "regex": "^[a-z]+$"},
                {
                    "name": "email",
                    "type": "textbox",
                    "required": True,
                    "regex": "^[^@]+@[^@]+$",
                    "validationMessage": "Enter a valid email",
                },
                {"name": "bio", "type": "textarea"},
                {"name": "country", "type": "dropdown", "required": True,
                 "options": ["USA", "Canada", "India"]},
                {"name": "interests", "type": "checkboxlist", "required": True,
                 "options": ["Sports", "Music", "Travel"]},
                {"name": "gender", "type": "radiobuttonlist", "required": True,
                 "options": ["Male", "Female", "Other"]},
                {"name": "subscribe", "type": "checkbox"},
                {
                    "name": "age",
                    "type": "textbox",
                    "validations": {"required": True, "range": [18, 99]},
                },
            ],
            "buttons": ["Register", "Cancel"],
        },
        {
            "name": "About",
            "fields": [],
            "buttons": [],
        },
    ],
    "menuType": "horizontal",
    "footerContent": "(c) 2024 My Angular App",
}


@pytest.fixture
def example_spec_dict() -> dict[str, Any]:
    """Raw example specification (a fresh deep copy per test)."""
    return copy.deepcopy(EXAMPLE_SPEC)


@pytest.fixture
def example_spec(example_spec_dict: dict[str, Any]) -> Specification:
    """The example specification parsed into models."""
    return parse_specification(example_spec_dict)


@pytest.fixture
def sample_spec_json() -> Path:
    path = FIXTURES_DIR / "sample-spec.json"
    assert path.exists(), f"Sample spec fixture not found at {path}"
    return path


@pytest.fixture
def sample_spec_yaml() -> Path:
    path = FIXTURES_DIR / "sample-spec.yaml"
    assert path.exists(), f"Sample spec fixture not found at {path}"
    return path


# ---------------------------------------------------------------------------
# Generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def bootstrap_layout() -> LayoutOptions:
    return LayoutOptions(use_bootstrap=True, column_layout=3)


@pytest.fixture
def custom_layout() -> LayoutOptions:
    return LayoutOptions(use_bootstrap=False, column_layout=2)


# ---------------------------------------------------------------------------
# Paths & Config
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary output directory for generated projects (auto-cleanup)."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    yield output_dir


@pytest.fixture
def pipeline_config(tmp_output_dir: Path) -> Config:
    """Config writing into the temporary output directory."""
    return Config(output_dir=tmp_output_dir)
