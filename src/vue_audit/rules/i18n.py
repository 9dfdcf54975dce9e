"""Hard-coded user-facing text."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

_TEXT_NODE_RE = re.compile(r">([^<{}]+)<")


def check_hardcoded_text(segments: Segments, options: RuleOptions) -> list[Issue]:
    issues: list[Issue] = []
    for match in _TEXT_NODE_RE.finditer(segments.template):
        text = match.group(1).strip()
        if text:
            issues.append(
                make_issue(
                    IssueType.I18N,
                    f'Hard-coded text "{text}"; use an i18n key instead',
                    fix=fix_ids.EXTRACT_I18N_KEY,
                )
            )
    return issues
