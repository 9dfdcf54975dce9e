"""Issue weights and the quality score derived from them.

Report building and fix verification both derive the score from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from vue_audit.model.issue import Issue
from vue_audit.model.results import AnalysisResult


@dataclass(frozen=True, slots=True)
class QualityWeights:
    """Points subtracted from 100 per issue, by severity."""

    error: int = 10
    warning: int = 5
    style: int = 2
    default: int = 5

    def weight(self, issue: Issue) -> int:
        """Weight by ``severity`` when set, otherwise by ``type``."""
        level = issue.severity or issue.type
        if level == "error":
            return self.error
        if level == "warning":
            return self.warning
        if level == "style":
            return self.style
        return self.default


DEFAULT_WEIGHTS = QualityWeights()


def quality_score(
    result: AnalysisResult | Iterable[Issue],
    *,
    weights: QualityWeights = DEFAULT_WEIGHTS,
) -> int:
    """``100 - sum(weights)``, clamped to ``[0, 100]``."""
    issues = result.issues if isinstance(result, AnalysisResult) else result
    penalty = sum(weights.weight(issue) for issue in issues)
    return max(0, min(100, 100 - penalty))
