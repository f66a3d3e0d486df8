"""Reading specification documents from disk.

Supports JSON (``.json``) and YAML (``.yaml`` / ``.yml``) files whose content
matches the ``Specification`` model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ngscaffold.parser.errors import SpecificationError
from ngscaffold.parser.models import Specification
from ngscaffold.utils import load_json, load_yaml

_LOADERS = {
    ".json": load_json,
    ".yaml": load_yaml,
    ".yml": load_yaml,
}


def parse_specification(data: dict[str, Any]) -> Specification:
    """Validate a raw mapping into a ``Specification``.

    Raises:
        SpecificationError: If the mapping does not match the schema.
    """
    try:
        return Specification.model_validate(data)
    except ValidationError as exc:
        messages = [
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise SpecificationError("invalid specification: " + "; ".join(messages)) from exc


def load_specification(path: str | Path) -> Specification:
    """Load and validate a specification file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SpecificationError: If the extension is unsupported or the content is
            malformed.
    """
    spec_path = Path(path)
    if not spec_path.exists():
        raise FileNotFoundError(f"Specification file not found: {spec_path}")

    loader = _LOADERS.get(spec_path.suffix.lower())
    if loader is None:
        raise SpecificationError(
            f"unsupported specification format '{spec_path.suffix}' "
            f"(expected one of {', '.join(sorted(_LOADERS))})"
        )

    try:
        data = loader(spec_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecificationError(f"could not parse {spec_path.name}: {exc}") from exc

    if "_root" in data:
        raise SpecificationError(f"{spec_path.name} must contain a mapping at the top level")
    return parse_specification(data)
