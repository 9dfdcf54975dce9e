"""Script conventions: component name and props declarations.

The props block is captured up to the *first* closing brace after
``props: {``.  A prop declared as a nested object therefore truncates the
block: the entries after it are never inspected.
"""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue
from vue_audit.rules._text import split_top_level

MSG_NO_NAME = "Component is missing a name property"
MSG_PROPS_TYPE = "Props attribute is missing a type definition"
MSG_PROPS_DEFAULT = "Props attribute is missing a default value"

PROPS_RE = re.compile(r"props\s*:\s*\{([^}]+)\}")


def has_component_name(script: str) -> bool:
    return "name:" in script or "name :" in script


def props_entries(script: str) -> list[str] | None:
    """Non-empty entries of the props block, or None without one."""
    match = PROPS_RE.search(script)
    if not match:
        return None
    return [e.strip() for e in split_top_level(match.group(1)) if e.strip()]


def prop_name(entry: str) -> str:
    return entry.split(":", 1)[0].strip()


def check_component_name(segments: Segments, options: RuleOptions) -> list[Issue]:
    if has_component_name(segments.script):
        return []
    return [make_issue(IssueType.WARNING, MSG_NO_NAME, fix=fix_ids.ADD_COMPONENT_NAME)]


def _props_missing(script: str, marker: str, message: str, fix: str) -> list[Issue]:
    entries = props_entries(script) or []
    return [
        make_issue(IssueType.WARNING, message, fix=fix, prop=prop_name(entry))
        for entry in entries
        if marker not in entry
    ]


def check_props_type(segments: Segments, options: RuleOptions) -> list[Issue]:
    return _props_missing(segments.script, "type:", MSG_PROPS_TYPE, fix_ids.ADD_PROPS_TYPE)


def check_props_default(segments: Segments, options: RuleOptions) -> list[Issue]:
    return _props_missing(
        segments.script, "default:", MSG_PROPS_DEFAULT, fix_ids.ADD_PROPS_DEFAULT
    )
