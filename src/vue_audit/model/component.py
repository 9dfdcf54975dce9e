"""Value types for the extracted regions of a single-file component."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Style:
    """One ``<style>`` block, in document order."""

    content: str
    scoped: bool = False

    def to_dict(self) -> dict:
        return {"content": self.content, "scoped": self.scoped}


@dataclass(frozen=True, slots=True)
class Segments:
    """Template, script and style regions copied out of a component source."""

    template: str = ""
    script: str = ""
    styles: tuple[Style, ...] = field(default_factory=tuple)
