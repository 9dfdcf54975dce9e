"""A single rule finding and its wire shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from . import IssueType

# wire key -> attribute name
_OPTIONAL_KEYS = {
    "fix": "fix",
    "line": "line",
    "prop": "prop",
    "oldHook": "old_hook",
    "newHook": "new_hook",
    "method": "method",
    "severity": "severity",
}


def _as_line(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"line must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"line must be an integer, got {value!r}") from None


@dataclass(frozen=True, slots=True)
class Issue:
    """Immutable rule finding.

    ``fix`` names the Fix Catalog entry able to resolve the issue; ``None``
    means the issue is not auto-fixable.  The optional positional fields are
    only populated by the rules that need them (``line`` for long lines,
    ``prop`` for props rules, ``old_hook``/``new_hook`` for lifecycle hooks,
    ``method`` for method length).
    """

    type: str
    message: str
    fix: str | None = None
    line: int | None = None
    prop: str | None = None
    old_hook: str | None = None
    new_hook: str | None = None
    method: str | None = None
    severity: str | None = None
    metadata: dict = field(default_factory=dict)

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    @property
    def identity(self) -> tuple[str, str]:
        """The ``(type, message)`` pair used to compare issue sets."""
        return (self.type, self.message)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"type": self.type, "message": self.message}
        for key, attr in _OPTIONAL_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                d[key] = value
        if self.metadata:
            d["metadata"] = dict(self.metadata)
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Issue":
        """Build an issue from its wire shape.

        Accepts both the camelCase wire keys and the snake_case attribute
        names (``oldHook`` or ``old_hook``).  ``line`` is coerced to ``int``;
        a value that is not a whole number raises ``ValueError``.
        """
        kwargs: dict[str, Any] = {
            "type": str(data.get("type", IssueType.WARNING.value)),
            "message": str(data.get("message", "")),
        }
        for key, attr in _OPTIONAL_KEYS.items():
            if key in data:
                kwargs[attr] = data[key]
            elif attr in data:
                kwargs[attr] = data[attr]
        if kwargs.get("line") is not None:
            kwargs["line"] = _as_line(kwargs["line"])
        if kwargs.get("fix") is not None:
            kwargs["fix"] = str(kwargs["fix"])
        if data.get("metadata"):
            kwargs["metadata"] = dict(data["metadata"])
        return cls(**kwargs)


def make_issue(issue_type: IssueType | str, message: str, **kwargs: Any) -> Issue:
    """Shorthand used by the rule catalog."""
    type_value = issue_type.value if isinstance(issue_type, IssueType) else issue_type
    return Issue(type=type_value, message=message, **kwargs)
