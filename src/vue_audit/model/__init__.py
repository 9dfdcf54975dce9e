"""Enums shared across the rule catalog, the fixers and the insight layer."""

from __future__ import annotations

from enum import Enum


class IssueType(str, Enum):
    """Category tags emitted by the built-in rule catalog.

    The set is open: ``Issue.type`` is a plain string so callers may feed
    issues of other categories back into the fixer.
    """

    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    PERFORMANCE = "performance"
    SECURITY = "security"
    ACCESSIBILITY = "accessibility"
    I18N = "i18n"


class SegmentKind(str, Enum):
    """The three textual regions of a single-file component."""

    TEMPLATE = "template"
    SCRIPT = "script"
    STYLE = "style"
