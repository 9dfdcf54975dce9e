"""Style conventions."""

from __future__ import annotations

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

MSG_SCOPED = "Use scoped styles to avoid style leakage"


def check_scoped_style(segments: Segments, options: RuleOptions) -> list[Issue]:
    styles = segments.styles
    if styles and not any(s.scoped for s in styles):
        return [make_issue(IssueType.WARNING, MSG_SCOPED, fix=fix_ids.ADD_SCOPED_STYLE)]
    return []
