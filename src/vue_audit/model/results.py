"""Result shapes returned by the analyzer and the fixer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .issue import Issue

SUMMARY_CLEAN = "Component follows all conventions"
SUMMARY_INVALID = "Invalid Vue component"


def summary_for(issue_count: int) -> str:
    if not issue_count:
        return SUMMARY_CLEAN
    return f"Found {issue_count} issue{'s' if issue_count != 1 else ''}"


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of one ``analyze`` call.  ``success`` iff no issues."""

    success: bool
    summary: str
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: list[Issue]) -> "AnalysisResult":
        return cls(success=not issues, summary=summary_for(len(issues)), issues=list(issues))

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "summary": self.summary,
            "issues": [i.to_dict() for i in self.issues],
        }


@dataclass(frozen=True, slots=True)
class Artifact:
    """A side file produced by a fix (extracted component, mixin, ...).

    The engine never writes it; the caller decides where it goes.
    """

    filename: str
    content: str

    def to_dict(self) -> dict:
        return {"filename": self.filename, "content": self.content}


@dataclass(frozen=True, slots=True)
class Repair:
    """A fix that actually changed a segment during a ``fix`` call."""

    fix: str
    message: str
    segment: str
    artifacts: tuple[Artifact, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "fix": self.fix,
            "message": self.message,
            "segment": self.segment,
        }
        if self.artifacts:
            d["artifacts"] = [a.to_dict() for a in self.artifacts]
        return d


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of one ``fix`` call.

    Successful results carry ``code`` and ``repairs``; failed ones carry
    ``error`` only.
    """

    success: bool
    code: str = ""
    repairs: list[Repair] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> "FixResult":
        return cls(success=False, error=error)

    @property
    def artifacts(self) -> list[Artifact]:
        return [a for r in self.repairs for a in r.artifacts]

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error or "fix failed"}
        return {
            "success": True,
            "code": self.code,
            "repairs": [r.to_dict() for r in self.repairs],
        }
