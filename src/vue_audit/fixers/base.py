"""Shared fix types: outcome record, fix context, name generation."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from typing import Callable

from vue_audit.core.config import RuleOptions
from vue_audit.model.component import Style
from vue_audit.model.results import Artifact

NameFactory = Callable[[], str]

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


def default_component_name() -> str:
    """``Vue`` followed by a random six character suffix, first letter upper."""
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=6))
    return "Vue" + suffix[0].upper() + suffix[1:]


@dataclass(frozen=True, slots=True)
class FixContext:
    """Per-call inputs a fix may need beyond its segment and issue."""

    options: RuleOptions = field(default_factory=RuleOptions)
    name_factory: NameFactory = default_component_name


@dataclass(frozen=True, slots=True)
class FixOutcome:
    """Result of one fix against one segment.

    Template and script fixes fill ``code``; style fixes fill ``styles``.
    ``success=False`` means nothing changed and the segment must be kept.
    """

    success: bool
    message: str
    code: str | None = None
    styles: tuple[Style, ...] | None = None
    artifacts: tuple[Artifact, ...] = ()

    @classmethod
    def applied(
        cls, code: str, message: str, artifacts: tuple[Artifact, ...] = ()
    ) -> "FixOutcome":
        return cls(success=True, message=message, code=code, artifacts=artifacts)

    @classmethod
    def skipped(cls, message: str) -> "FixOutcome":
        return cls(success=False, message=message)
