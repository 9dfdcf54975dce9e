"""Runner: extracts segments, runs the rule catalog, builds results."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from vue_audit.core.config import RuleOptions
from vue_audit.core.segments import extract_segments, is_valid_component
from vue_audit.fixers import NameFactory, VueFixer
from vue_audit.model import IssueType
from vue_audit.model.issue import Issue, make_issue
from vue_audit.model.results import SUMMARY_INVALID, AnalysisResult, FixResult
from vue_audit.rules import enabled_rules

_logger = logging.getLogger(__name__)

MSG_MISSING_TAGS = "Code must contain <template> and <script> tags"


class VueAnalyzer:
    """Run every enabled rule over a component source.

    Configuration is fixed at construction; ``analyze`` keeps no state
    between calls.
    """

    def __init__(self, options: RuleOptions | None = None) -> None:
        self.options = options or RuleOptions()

    def analyze(self, source: str) -> AnalysisResult:
        if not is_valid_component(source):
            return AnalysisResult(
                success=False,
                summary=SUMMARY_INVALID,
                issues=[make_issue(IssueType.ERROR, MSG_MISSING_TAGS)],
            )

        segments = extract_segments(source)
        issues: list[Issue] = []
        for rule in enabled_rules(self.options):
            try:
                issues.extend(rule.check(segments, self.options))
            except Exception as exc:
                _logger.exception("rule %s crashed", rule.id)
                issues.append(
                    make_issue(
                        IssueType.ERROR,
                        f"Rule {rule.id} failed: {exc}",
                        metadata={"rule": rule.id},
                    )
                )
        return AnalysisResult.from_issues(issues)


def find_new_issues(old: Iterable[Issue], new: Iterable[Issue]) -> list[Issue]:
    """Issues of *new* whose ``(type, message)`` pair never occurs in *old*."""
    seen = {issue.identity for issue in old}
    return [issue for issue in new if issue.identity not in seen]


def analyze(source: str, *, options: RuleOptions | None = None) -> AnalysisResult:
    return VueAnalyzer(options).analyze(source)


def fix(
    source: str,
    issues: Iterable[Issue | Mapping[str, Any] | str],
    *,
    options: RuleOptions | None = None,
    name_factory: NameFactory | None = None,
) -> FixResult:
    return VueFixer(options, name_factory=name_factory).fix(source, issues)
