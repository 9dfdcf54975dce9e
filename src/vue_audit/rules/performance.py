"""Performance heuristics: toggle overuse, computed complexity, watchers."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue
from vue_audit.rules._text import find_keyed_block, first_brace_body, split_top_level

MSG_TOGGLE_MIX = (
    "Mixing many v-if and v-show directives may hurt performance; "
    "prefer one approach"
)
MSG_COMPUTED_ARRAY_OPS = (
    "Computed property performs array operations; cache or precompute the result"
)

ARRAY_OPS = ("filter(", "map(", "reduce(")

_VIF_RE = re.compile(r"v-if")
_VSHOW_RE = re.compile(r"v-show")
_DOLLAR_WATCH_RE = re.compile(r"\$watch\(")


def has_array_ops(text: str) -> bool:
    return any(op in text for op in ARRAY_OPS)


def count_watchers(script: str) -> int:
    """Entries of the ``watch: { ... }`` block plus ``$watch(`` calls."""
    count = len(_DOLLAR_WATCH_RE.findall(script))
    block = find_keyed_block(script, "watch")
    if block is not None:
        count += sum(1 for e in split_top_level(block.body(script)) if e.strip())
    return count


def check_toggle_overuse(segments: Segments, options: RuleOptions) -> list[Issue]:
    threshold = options.toggle_threshold
    template = segments.template
    if (
        len(_VIF_RE.findall(template)) > threshold
        and len(_VSHOW_RE.findall(template)) > threshold
    ):
        return [
            make_issue(IssueType.PERFORMANCE, MSG_TOGGLE_MIX, fix=fix_ids.OPTIMIZE_TOGGLE)
        ]
    return []


def check_computed_complexity(segments: Segments, options: RuleOptions) -> list[Issue]:
    body = first_brace_body(segments.script, "computed")
    if body is not None and has_array_ops(body):
        return [
            make_issue(
                IssueType.PERFORMANCE,
                MSG_COMPUTED_ARRAY_OPS,
                fix=fix_ids.OPTIMIZE_COMPUTED,
            )
        ]
    return []


def check_watcher_count(segments: Segments, options: RuleOptions) -> list[Issue]:
    count = count_watchers(segments.script)
    if count > options.max_watchers:
        return [
            make_issue(
                IssueType.PERFORMANCE,
                f"Component declares many watchers ({count}), which may hurt performance",
                fix=fix_ids.OPTIMIZE_WATCH,
            )
        ]
    return []
