"""Security checks: raw HTML binding and hard-coded secrets."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

MSG_V_HTML = (
    "v-html can expose the component to XSS; prefer v-text or interpolation"
)

SENSITIVE_NAMES = ("password", "token", "secret", "api_key", "apikey")


def _secret_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"""{name}\s*[:=]\s*["'][^"']+["']""", re.IGNORECASE)


def check_v_html(segments: Segments, options: RuleOptions) -> list[Issue]:
    if "v-html" in segments.template:
        return [
            make_issue(
                IssueType.SECURITY,
                MSG_V_HTML,
                fix=fix_ids.REPLACE_V_HTML,
                severity=IssueType.ERROR.value,
            )
        ]
    return []


def check_hardcoded_secrets(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(
            IssueType.SECURITY,
            f"Possible hard-coded secret ({name}); read it from an environment variable",
            fix=fix_ids.USE_ENV_VARIABLE,
            severity=IssueType.ERROR.value,
        )
        for name in SENSITIVE_NAMES
        if _secret_re(name).search(segments.script)
    ]
