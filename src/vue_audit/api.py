"""
vue_audit.api
=============

Report-level entrypoints for callers that render or transmit results
(stdio/JSON-RPC adapters, HTTP handlers, CLIs).

Goals:
  - JSON-friendly payloads validated against the bundled schemas
  - Deterministic mode (``ci_mode=True``) with a fixed timestamp
  - Fix verification: re-analysis, new-issue diff, quality delta

Non-goals:
  - File-system I/O: callers read sources and persist fixed code and artifacts
  - Framing and transport

Usage::

    from vue_audit.api import analyze_component, fix_component, report_json

    report = analyze_component(source)
    fixed = fix_component(source, ["addVForKey", "addScopedStyle"])
    print(report_json(report))
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from vue_audit.contracts.load import (
    ANALYSIS_REPORT_SCHEMA,
    FIX_REPORT_SCHEMA,
    validate_instance,
)
from vue_audit.core.config import RuleOptions
from vue_audit.core.runner import VueAnalyzer, find_new_issues
from vue_audit.fixers import NameFactory, VueFixer
from vue_audit.insights.translator import group_issues, recommendations, repair_locations
from vue_audit.model.issue import Issue
from vue_audit.policy.quality import quality_score
from vue_audit.utils.json_norm import stable_json_dumps

# Fixed timestamp for deterministic mode.
_DETERMINISTIC_TIMESTAMP = "2000-01-01T00:00:00+00:00"


def _now_iso_utc() -> str:
    return datetime.now(timezone.utc).isoformat()


def _timestamp(ci_mode: bool) -> str:
    return _DETERMINISTIC_TIMESTAMP if ci_mode else _now_iso_utc()


# ── analyze_component ───────────────────────────────────────────────


def analyze_component(
    source: str,
    *,
    options: RuleOptions | None = None,
    ci_mode: bool = False,
    validate: bool = True,
) -> dict[str, Any]:
    """Analyze *source* and build the report payload.

    The ``summary`` block carries ``totalIssues``, ``categories`` (number of
    distinct issue types), ``fixableIssues``, ``qualityScore`` and
    ``hasAutoFixableIssues``.
    """
    result = VueAnalyzer(options).analyze(source)
    issues = result.issues
    fixable = sum(1 for issue in issues if issue.fixable)

    payload: dict[str, Any] = {
        "success": result.success,
        "message": result.summary,
        "timestamp": _timestamp(ci_mode),
        "summary": {
            "totalIssues": len(issues),
            "categories": len({issue.type for issue in issues}),
            "fixableIssues": fixable,
            "qualityScore": quality_score(result),
            "hasAutoFixableIssues": fixable > 0,
        },
        "issues": group_issues(issues),
        "recommendations": recommendations(issues),
    }
    if validate:
        validate_instance(payload, ANALYSIS_REPORT_SCHEMA)
    return payload


# ── fix_component ───────────────────────────────────────────────────


def fix_component(
    source: str,
    issues: Iterable[Issue | Mapping[str, Any] | str],
    *,
    options: RuleOptions | None = None,
    name_factory: NameFactory | None = None,
    validate: bool = True,
) -> dict[str, Any]:
    """Apply fixes, re-analyze the result and report what changed.

    ``verification.newIssuesIntroduced`` lists issues of the fixed code whose
    ``(type, message)`` pair did not occur before the fix.  ``qualityDelta``
    is the fixed score minus the original score.
    """
    fixer = VueFixer(options, name_factory=name_factory)
    result = fixer.fix(source, list(issues))

    if not result.success:
        payload: dict[str, Any] = {
            "success": False,
            "error": result.error,
            "originalCode": source,
        }
    else:
        analyzer = VueAnalyzer(options)
        before = analyzer.analyze(source)
        after = analyzer.analyze(result.code)
        location = repair_locations(source, result.code)
        score_before = quality_score(before)
        score_after = quality_score(after)
        payload = {
            "success": True,
            "code": result.code,
            "repairs": [{**r.to_dict(), "location": location} for r in result.repairs],
            "artifacts": [a.to_dict() for a in result.artifacts],
            "verification": {
                "remainingIssues": len(after.issues),
                "newIssuesIntroduced": [
                    i.to_dict() for i in find_new_issues(before.issues, after.issues)
                ],
                "qualityScore": score_after,
                "qualityDelta": score_after - score_before,
            },
        }
    if validate:
        validate_instance(payload, FIX_REPORT_SCHEMA)
    return payload


def report_json(payload: Mapping[str, Any]) -> str:
    """Canonical JSON text for an ``analyze_component`` / ``fix_component`` payload."""
    return stable_json_dumps(payload)
