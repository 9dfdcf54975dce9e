"""Shared utilities for vue_audit."""

from vue_audit.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "stable_json_dump",
    "stable_json_dumps",
]
