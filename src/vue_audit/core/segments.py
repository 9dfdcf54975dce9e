"""Segment extraction and merging for Vue single-file components.

Extraction is regex based, not a parser.  Nothing here raises: a missing
block yields an empty string (or an empty style list) and
``is_valid_component`` is the single validity gate used upstream.
"""

from __future__ import annotations

import re
from typing import Iterable

from vue_audit.model.component import Segments, Style

# Greedy on purpose: nested ``<template v-if>`` elements close with
# ``</template>`` too, so the outer block ends at the last closer.
_TEMPLATE_RE = re.compile(r"<template>([\s\S]*)</template>")
_SCRIPT_RE = re.compile(r"<script>([\s\S]*)</script>")
_STYLE_RE = re.compile(r"<style\b([^>]*)>([\s\S]*?)</style>")


def is_valid_component(source: str) -> bool:
    """True iff *source* has both a template block and a script block."""
    return bool(_TEMPLATE_RE.search(source)) and bool(_SCRIPT_RE.search(source))


def extract_template(source: str) -> str:
    match = _TEMPLATE_RE.search(source)
    return match.group(1).strip() if match else ""


def extract_script(source: str) -> str:
    match = _SCRIPT_RE.search(source)
    return match.group(1).strip() if match else ""


def extract_styles(source: str) -> list[Style]:
    """All ``<style>`` blocks in document order.

    A block is scoped when its opening tag's attribute text mentions
    ``scoped``.
    """
    return [
        Style(content=m.group(2).strip(), scoped="scoped" in m.group(1))
        for m in _STYLE_RE.finditer(source)
    ]


def extract_segments(source: str) -> Segments:
    return Segments(
        template=extract_template(source),
        script=extract_script(source),
        styles=tuple(extract_styles(source)),
    )


def merge_component(template: str, script: str, styles: Iterable[Style]) -> str:
    """Reassemble a component from its segments.

    Empty template/script segments are dropped; every style block is kept
    and re-flagged ``scoped`` when needed.
    """
    parts: list[str] = []
    if template:
        parts.append(f"<template>\n{template}\n</template>")
    if script:
        parts.append(f"<script>\n{script}\n</script>")
    for style in styles:
        attrs = " scoped" if style.scoped else ""
        parts.append(f"<style{attrs}>\n{style.content}\n</style>")
    return "\n\n".join(parts).strip()


def merge_segments(segments: Segments) -> str:
    return merge_component(segments.template, segments.script, segments.styles)
