"""Issue and exception types shared by the parser and the generators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueSeverity(str, Enum):
    """How an issue affects a run."""
    FATAL = "fatal"  # always aborts
    ERROR = "error"  # aborts in strict mode only
    WARNING = "warning"  # never aborts


@dataclass(frozen=True)
class SpecIssue:
    """A single problem found in a specification."""

    code: str
    message: str
    location: str = ""
    severity: IssueSeverity = IssueSeverity.ERROR

    def __str__(self) -> str:
        where = f"{self.location}: " if self.location else ""
        return f"[{self.code}] {where}{self.message}"


class SpecificationError(Exception):
    """Raised when a specification cannot be turned into a project."""

    def __init__(self, issues: list[SpecIssue] | str) -> None:
        if isinstance(issues, str):
            issues = [SpecIssue(code="invalid", message=issues, severity=IssueSeverity.FATAL)]
        self.issues = issues
        super().__init__("; ".join(str(issue) for issue in issues))
