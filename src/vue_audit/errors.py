"""Exceptions raised for caller mistakes.

Engine calls (``analyze`` / ``fix``) never raise these; they report problems
inside their result objects instead.
"""

from __future__ import annotations


class VueAuditError(Exception):
    """Base class for vue_audit errors."""


class ConfigError(VueAuditError, ValueError):
    """Invalid rule configuration (unknown key, wrong type, unreadable file)."""
