"""Issue translator: groups raw issues into report-ready category dicts.

Produces the ``issues`` and ``recommendations`` arrays of
``analysis_report.schema.json`` and the per-repair ``location`` array of
``fix_report.schema.json``.
"""

from __future__ import annotations

import difflib
from typing import Any, Iterable

from vue_audit import fix_ids
from vue_audit.model import IssueType
from vue_audit.model.issue import Issue

# ── display names ────────────────────────────────────────────────────
CATEGORY_NAMES: dict[str, str] = {
    IssueType.ERROR.value: "Errors",
    IssueType.WARNING.value: "Warnings",
    IssueType.STYLE.value: "Style",
    IssueType.PERFORMANCE.value: "Performance",
    IssueType.SECURITY.value: "Security",
    IssueType.ACCESSIBILITY.value: "Accessibility",
    IssueType.I18N.value: "Internationalization",
}

DEFAULT_SEVERITY = IssueType.WARNING.value

# Fix ids whose issues count as structural complexity for recommendations.
COMPLEXITY_FIX_IDS = frozenset(
    {fix_ids.SPLIT_METHOD, fix_ids.EXTRACT_MIXIN, fix_ids.EXTRACT_COMPONENT}
)

RECOMMENDATIONS: dict[str, list[str]] = {
    "Performance": [
        "Consider virtual scrolling for large lists",
        "Reduce the work done inside computed properties",
        "Remove watchers that are not needed",
    ],
    "Complexity": [
        "Split large components into smaller ones",
        "Move repeated logic into mixins or composables",
        "Replace complex template expressions with computed properties",
    ],
    "Accessibility": [
        "Add suitable ARIA attributes",
        "Make every interactive element reachable from the keyboard",
        "Provide sufficient color contrast",
    ],
}


def category_name(issue_type: str) -> str:
    return CATEGORY_NAMES.get(issue_type, issue_type)


def autofix_info(fix_id: str | None) -> dict[str, Any] | None:
    if not fix_id:
        return None
    return {
        "type": fix_id,
        "description": fix_ids.describe_fix(fix_id),
        "safe": fix_ids.is_safe_fix(fix_id),
    }


def _issue_entry(issue: Issue) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "type": issue.type,
        "severity": issue.severity or DEFAULT_SEVERITY,
        "message": issue.message,
        "autofix": autofix_info(issue.fix),
    }
    if issue.line is not None:
        entry["line"] = issue.line
    return entry


def group_issues(issues: Iterable[Issue]) -> list[dict[str, Any]]:
    """Group issues by ``type``, categories in first-seen order."""
    groups: dict[str, dict[str, Any]] = {}
    for issue in issues:
        group = groups.setdefault(
            issue.type,
            {"type": issue.type, "category": category_name(issue.type), "issues": []},
        )
        group["issues"].append(_issue_entry(issue))
    return list(groups.values())


def recommendations(issues: Iterable[Issue]) -> list[dict[str, Any]]:
    issues = list(issues)
    types = {issue.type for issue in issues}
    wanted: list[str] = []
    if IssueType.PERFORMANCE.value in types:
        wanted.append("Performance")
    if any(issue.fix in COMPLEXITY_FIX_IDS for issue in issues):
        wanted.append("Complexity")
    if IssueType.ACCESSIBILITY.value in types:
        wanted.append("Accessibility")
    return [{"category": name, "suggestions": list(RECOMMENDATIONS[name])} for name in wanted]


def repair_locations(old_code: str, new_code: str) -> list[dict[str, Any]]:
    """Changed line ranges between two versions of a component (1-based)."""
    old_lines = old_code.split("\n")
    new_lines = new_code.split("\n")
    matcher = difflib.SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)
    changes: list[dict[str, Any]] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        changes.append(
            {
                "type": tag,
                "oldStart": i1 + 1,
                "oldEnd": i2,
                "newStart": j1 + 1,
                "newEnd": j2,
                "oldContent": "\n".join(old_lines[i1:i2]),
                "newContent": "\n".join(new_lines[j1:j2]),
            }
        )
    return changes
