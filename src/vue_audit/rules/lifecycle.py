"""Lifecycle hooks: deprecated names and async mount."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

# old name -> replacement, in report order
DEPRECATED_HOOKS: dict[str, str] = {
    "beforeDestroy": "beforeUnmount",
    "destroyed": "unmounted",
}

MSG_ASYNC_MOUNT = (
    "Avoid async/await directly in mounted; it can delay component rendering"
)

_ASYNC_MOUNT_RE = re.compile(r"async\s+mounted\s*\(\)")


def hook_pattern(hook: str) -> re.Pattern[str]:
    """Declaration of *hook* either as ``hook: ...`` or ``hook(...)``."""
    return re.compile(rf"(?<![\w$.]){re.escape(hook)}(\s*)([:(])")


def deprecated_hook_message(old: str, new: str) -> str:
    return f"Use {new} instead of the deprecated {old} lifecycle hook"


def check_deprecated_hooks(segments: Segments, options: RuleOptions) -> list[Issue]:
    issues: list[Issue] = []
    for old, new in DEPRECATED_HOOKS.items():
        if hook_pattern(old).search(segments.script):
            issues.append(
                make_issue(
                    IssueType.WARNING,
                    deprecated_hook_message(old, new),
                    fix=fix_ids.UPDATE_LIFECYCLE,
                    old_hook=old,
                    new_hook=new,
                )
            )
    return issues


def check_async_mount(segments: Segments, options: RuleOptions) -> list[Issue]:
    if _ASYNC_MOUNT_RE.search(segments.script):
        return [
            make_issue(IssueType.WARNING, MSG_ASYNC_MOUNT, fix=fix_ids.REFACTOR_ASYNC_MOUNT)
        ]
    return []
