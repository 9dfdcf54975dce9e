"""Template conventions: loop keys and line length."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

MSG_VFOR_KEY = "v-for directives must bind a key attribute"

_VFOR_RE = re.compile(r"""v-for\s*=\s*["'][^"']+["']""")
_KEY_RE = re.compile(r""":key\s*=\s*["'][^"']+["']""")


def long_line_message(line_no: int, max_length: int) -> str:
    return f"Line {line_no} exceeds {max_length} characters"


def check_loop_keys(segments: Segments, options: RuleOptions) -> list[Issue]:
    """One warning when ``v-for`` directives outnumber ``:key`` bindings."""
    template = segments.template
    if len(_VFOR_RE.findall(template)) > len(_KEY_RE.findall(template)):
        return [make_issue(IssueType.WARNING, MSG_VFOR_KEY, fix=fix_ids.ADD_VFOR_KEY)]
    return []


def check_line_length(segments: Segments, options: RuleOptions) -> list[Issue]:
    limit = options.max_line_length
    return [
        make_issue(
            IssueType.STYLE,
            long_line_message(i, limit),
            fix=fix_ids.FORMAT_LONG_LINE,
            line=i,
        )
        for i, line in enumerate(segments.template.split("\n"), start=1)
        if len(line) > limit
    ]
