"""Style fixes operate on the whole ordered list of style blocks."""

from __future__ import annotations

from vue_audit.fixers.base import FixContext, FixOutcome
from vue_audit.model.component import Style
from vue_audit.model.issue import Issue


def add_scoped_style(
    styles: tuple[Style, ...], issue: Issue, ctx: FixContext
) -> FixOutcome:
    """Scope the first style block, or add an empty scoped block when there is none."""
    if not styles:
        return FixOutcome(
            success=True,
            message="Added an empty scoped style block",
            styles=(Style(content="", scoped=True),),
        )
    if any(s.scoped for s in styles):
        return FixOutcome.skipped("A scoped style block already exists")
    first = Style(content=styles[0].content, scoped=True)
    return FixOutcome(
        success=True,
        message="Marked the first style block as scoped",
        styles=(first, *styles[1:]),
    )
