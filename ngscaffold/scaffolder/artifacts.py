"""Output models of a generation run.

Provides Pydantic v2 models for the generated files (``Artifact``), the
external commands the caller must run first (``ToolInvocation``), and the
complete run result (``GenerationResult``).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class InvocationPurpose(str, Enum):
    """Why an external command is needed."""
    SKELETON = "skeleton"
    DEPENDENCIES = "dependencies"
    STYLING = "styling"


class Artifact(BaseModel):
    """A generated file, keyed by its path relative to the project root."""

    path: str = Field(..., description="POSIX path relative to the project root")
    content: str = Field(default="", description="Complete file content")


class ToolInvocation(BaseModel):
    """An external command the caller runs before writing artifacts."""

    argv: list[str] = Field(..., description="Command and arguments")
    cwd: str = Field(
        default=".",
        description="Working directory relative to the output directory",
    )
    purpose: InvocationPurpose = Field(..., description="Role of the command in the run")
    description: str = Field(default="", description="Human-readable summary")

    @computed_field  # type: ignore[misc]
    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


class GenerationResult(BaseModel):
    """Everything a generation run produced, ready to execute and persist."""

    project_name: str = Field(..., description="Project directory name")
    artifacts: list[Artifact] = Field(default_factory=list)
    invocations: list[ToolInvocation] = Field(default_factory=list)
    states: list[str] = Field(
        default_factory=list, description="Orchestrator states visited, in order"
    )

    def as_mapping(self) -> dict[str, str]:
        """Ordered ``{relative path: content}`` view of the artifacts."""
        return {artifact.path: artifact.content for artifact in self.artifacts}

    def get(self, path: str) -> str:
        """Content of the artifact at *path*.

        Raises:
            KeyError: If no artifact has that path.
        """
        for artifact in self.artifacts:
            if artifact.path == path:
                return artifact.content
        raise KeyError(path)
