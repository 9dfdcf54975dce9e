"""Composition API usage: reactive state, watchers, hooks, provide."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue
from vue_audit.rules.performance import MSG_COMPUTED_ARRAY_OPS, has_array_ops

PROVIDE_MARKER = "/* @provide */"
MSG_PROVIDE_COMMENT = (
    "Annotate provide() calls with a @provide comment to keep them discoverable"
)

COMPOSITION_HOOKS = (
    "onMounted",
    "onBeforeMount",
    "onUpdated",
    "onBeforeUpdate",
    "onUnmounted",
    "onBeforeUnmount",
)

MAX_COMPOSITION_WATCHERS = 5

_STATE_RE = re.compile(r"(?<![\w$.])(?:ref|reactive)\(")
_WATCH_RE = re.compile(r"(?<![\w$.])(?:watch|watchEffect)\(")
_COMPUTED_ARROW_RE = re.compile(r"computed\(\(\)\s*=>\s*\{([^}]+)\}")
# provide('key', value) -- an options ``provide() {`` method has no arguments
PROVIDE_CALL_RE = re.compile(r"(?<![\w$.])provide\(\s*[^)\s]")


def check_reactive_state(segments: Segments, options: RuleOptions) -> list[Issue]:
    count = len(_STATE_RE.findall(segments.script))
    if count > options.max_reactive_state:
        return [
            make_issue(
                IssueType.WARNING,
                f"Too many reactive variables ({count}); merge related state",
                fix=fix_ids.MERGE_STATE,
            )
        ]
    return []


def check_watch_calls(segments: Segments, options: RuleOptions) -> list[Issue]:
    count = len(_WATCH_RE.findall(segments.script))
    if count > MAX_COMPOSITION_WATCHERS:
        return [
            make_issue(
                IssueType.WARNING,
                f"Too many watchers ({count}), which may hurt performance",
                fix=fix_ids.OPTIMIZE_WATCHERS,
            )
        ]
    return []


def check_computed_arrow(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(
            IssueType.PERFORMANCE,
            MSG_COMPUTED_ARRAY_OPS,
            fix=fix_ids.OPTIMIZE_COMPUTED,
        )
        for match in _COMPUTED_ARROW_RE.finditer(segments.script)
        if has_array_ops(match.group(1))
    ]


def check_repeated_hooks(segments: Segments, options: RuleOptions) -> list[Issue]:
    issues: list[Issue] = []
    for hook in COMPOSITION_HOOKS:
        if len(re.findall(rf"(?<![\w$.]){hook}\(", segments.script)) > 1:
            issues.append(
                make_issue(
                    IssueType.WARNING,
                    f"The {hook} hook is used more than once; merge the related logic",
                    fix=fix_ids.MERGE_LIFECYCLE_HOOKS,
                )
            )
    return issues


def check_provide_comment(segments: Segments, options: RuleOptions) -> list[Issue]:
    script = segments.script
    if PROVIDE_CALL_RE.search(script) and PROVIDE_MARKER not in script:
        return [
            make_issue(IssueType.STYLE, MSG_PROVIDE_COMMENT, fix=fix_ids.ADD_PROVIDE_COMMENT)
        ]
    return []
