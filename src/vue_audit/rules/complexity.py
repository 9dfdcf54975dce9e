"""Complexity heuristics: method length, method count, template nesting."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue
from vue_audit.rules._text import iter_naive_methods, line_count, method_names

# ``<tag`` opens and ``</tag`` closes.  A self-closing ``<tag />`` counts
# for its own level only; void elements written without the slash
# (``<br>``, ``<img>``) stay open.
_TAG_RE = re.compile(r"<(/?)[A-Za-z][^>]*?(/?)>")


def template_max_depth(template: str) -> int:
    depth = max_depth = 0
    for match in _TAG_RE.finditer(template):
        closing, self_closing = match.group(1), match.group(2)
        if closing:
            depth -= 1
        elif self_closing:
            max_depth = max(max_depth, depth + 1)
        else:
            depth += 1
            max_depth = max(max_depth, depth)
    return max_depth


def check_method_length(segments: Segments, options: RuleOptions) -> list[Issue]:
    limit = options.max_method_lines
    issues: list[Issue] = []
    for name, body in iter_naive_methods(segments.script):
        lines = line_count(body)
        if lines > limit:
            issues.append(
                make_issue(
                    IssueType.WARNING,
                    f"Method is too long ({lines} lines), keep it under {limit} lines",
                    fix=fix_ids.SPLIT_METHOD,
                    method=name,
                )
            )
    return issues


def check_method_count(segments: Segments, options: RuleOptions) -> list[Issue]:
    count = len(method_names(segments.script))
    limit = options.max_methods
    if count > limit:
        return [
            make_issue(
                IssueType.WARNING,
                f"Component has too many methods ({count}), keep it under {limit}",
                fix=fix_ids.EXTRACT_MIXIN,
            )
        ]
    return []


def check_nesting_depth(segments: Segments, options: RuleOptions) -> list[Issue]:
    depth = template_max_depth(segments.template)
    limit = options.max_nesting_depth
    if depth > limit:
        return [
            make_issue(
                IssueType.WARNING,
                f"Template nesting is too deep ({depth} levels), keep it under {limit}",
                fix=fix_ids.EXTRACT_COMPONENT,
            )
        ]
    return []
