"""Naming and call-chain style."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue
from vue_audit.rules._text import method_names

MSG_METHOD_CHAIN = "Long method chain; split it with intermediate variables"

_CAMEL_CASE_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_CHAIN_RE = re.compile(r"\.\w+\([^)]*\)\.\w+\([^)]*\)\.\w+\([^)]*\)")


def check_method_names(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(
            IssueType.STYLE,
            f'Method name "{name}" is not camelCase',
            fix=fix_ids.FIX_METHOD_NAME,
            method=name,
        )
        for name in method_names(segments.script)
        if not _CAMEL_CASE_RE.match(name)
    ]


def check_method_chains(segments: Segments, options: RuleOptions) -> list[Issue]:
    if _CHAIN_RE.search(segments.script):
        return [make_issue(IssueType.STYLE, MSG_METHOD_CHAIN, fix=fix_ids.SPLIT_METHOD_CHAIN)]
    return []
