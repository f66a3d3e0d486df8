"""ngscaffold configuration.

Centralised, typed configuration for a generation run. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field


class LayoutOptions(BaseModel):
    """Run-level style options consumed by the generation engine.

    ``column_layout`` is nominally 2, 3 or 4.  Other values are not rejected
    here; the generators render degenerate but valid output for them.
    """

    use_bootstrap: bool = Field(default=False, description="Use the Bootstrap column grid")
    column_layout: int = Field(default=2, description="Number of form columns")


class Config(BaseModel):
    """Global ngscaffold configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``Pipeline``.
    """

    output_dir: Path = Field(default=Path("./output"))
    use_bootstrap: bool = Field(default=False)
    column_layout: int = Field(default=2)
    strict: bool = Field(
        default=False, description="Treat specification issues as fatal errors"
    )
    skeleton: Literal["cli", "direct"] = Field(
        default="cli", description="How the base project skeleton is produced"
    )
    install_dependencies: bool = Field(
        default=True, description="Run npm install after the CLI skeleton is created"
    )
    command_timeout: int = Field(
        default=600, ge=10, description="Per-invocation timeout in seconds"
    )
    angular_cli_package: str = Field(default="@angular/cli@17")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def layout(self) -> LayoutOptions:
        """The style options handed to the generation engine."""
        return LayoutOptions(
            use_bootstrap=self.use_bootstrap,
            column_layout=self.column_layout,
        )

    def project_path(self, project_name: str) -> Path:
        """Directory the generated project lives in."""
        return self.output_dir / project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NGS_OUTPUT_DIR, NGS_USE_BOOTSTRAP, NGS_COLUMN_LAYOUT, NGS_STRICT,
            NGS_SKELETON, NGS_INSTALL_DEPENDENCIES, NGS_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {
            "output_dir": Path(os.environ.get("NGS_OUTPUT_DIR", "./output")),
        }
        if os.environ.get("NGS_USE_BOOTSTRAP"):
            kwargs["use_bootstrap"] = _env_flag(os.environ["NGS_USE_BOOTSTRAP"])
        if os.environ.get("NGS_COLUMN_LAYOUT"):
            kwargs["column_layout"] = int(os.environ["NGS_COLUMN_LAYOUT"])
        if os.environ.get("NGS_STRICT"):
            kwargs["strict"] = _env_flag(os.environ["NGS_STRICT"])
        if os.environ.get("NGS_SKELETON"):
            kwargs["skeleton"] = os.environ["NGS_SKELETON"]
        if os.environ.get("NGS_INSTALL_DEPENDENCIES"):
            kwargs["install_dependencies"] = _env_flag(os.environ["NGS_INSTALL_DEPENDENCIES"])
        if os.environ.get("NGS_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["NGS_COMMAND_TIMEOUT"])
        return cls(**kwargs)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
