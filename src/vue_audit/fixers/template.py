"""Template fixes."""

from __future__ import annotations

import re

from vue_audit.fixers.base import FixContext, FixOutcome
from vue_audit.model.issue import Issue
from vue_audit.model.results import Artifact
from vue_audit.rules._text import leading_whitespace, split_top_level
from vue_audit.rules.accessibility import (
    BUTTON_RE,
    IMG_RE,
    INPUT_RE,
    button_needs_label,
    img_needs_alt,
    input_needs_id,
)

_OPEN_TAG_RE = re.compile(r"<[A-Za-z][^>]*>")
_VFOR_EXPR_RE = re.compile(r"""v-for\s*=\s*(["'])(.*?)\1""")
_LOOP_HEAD_RE = re.compile(r"^\s*(.+?)\s+(?:in|of)\s+")
_ALIAS_RE = re.compile(r"^[\w$][\w$.]*$")

# attribute assignments that go on their own line when a line is wrapped
_ATTR_RE = re.compile(r"""\s+([\w:@.#\-]+="[^"]*")""")

_VIF_RE = re.compile(r'v-if="([^"]+)"')

# opening/closing element tokens used to find an extractable subtree
_ELEMENT_RE = re.compile(r"<(/?)([A-Za-z][\w-]*)\b[^>]*?(/?)>")
VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)


# ── loop keys ───────────────────────────────────────────────────────


def loop_key_alias(expression: str) -> str | None:
    """Key for a ``v-for`` expression.

    ``item in items`` binds ``item``; ``(item, index) in items`` binds the
    second alias (``index``).  Destructured aliases yield None.
    """
    match = _LOOP_HEAD_RE.match(expression)
    if not match:
        return None
    head = match.group(1).strip()
    if head.startswith("(") and head.endswith(")"):
        aliases = [a.strip() for a in split_top_level(head[1:-1]) if a.strip()]
        if not aliases:
            return None
        head = aliases[1] if len(aliases) > 1 else aliases[0]
    return head if _ALIAS_RE.match(head) else None


def _with_key(tag: str) -> str | None:
    if "v-for" not in tag or ":key" in tag:
        return None
    expr = _VFOR_EXPR_RE.search(tag)
    if not expr:
        return None
    alias = loop_key_alias(expr.group(2))
    if alias is None:
        return None
    binding = f' :key="{alias}"'
    if tag.endswith("/>"):
        return tag[:-2].rstrip() + binding + " />"
    return tag[:-1] + binding + ">"


def add_vfor_key(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    fixed = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal fixed
        keyed = _with_key(match.group(0))
        if keyed is None:
            return match.group(0)
        fixed += 1
        return keyed

    code = _OPEN_TAG_RE.sub(_replace, template)
    if not fixed:
        return FixOutcome.skipped("No v-for element is missing a key binding")
    return FixOutcome.applied(code, f"Added a :key binding to {fixed} v-for element(s)")


# ── long lines ──────────────────────────────────────────────────────


def format_long_line(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    """Put each attribute of an overlong line on its own line.

    The issue's ``line`` (1-based) selects the line; without one every
    overlong line is wrapped.
    """
    limit = ctx.options.max_line_length
    lines = template.split("\n")
    if issue.line is not None:
        targets = [issue.line - 1]
    else:
        targets = [i for i, line in enumerate(lines) if len(line) > limit]

    wrapped: list[int] = []
    for index in targets:
        if not 0 <= index < len(lines) or len(lines[index]) <= limit:
            continue
        line = lines[index]
        indent = leading_whitespace(line) + "  "
        new_line = _ATTR_RE.sub(lambda m: "\n" + indent + m.group(1), line)
        if new_line != line:
            lines[index] = new_line
            wrapped.append(index + 1)

    if not wrapped:
        return FixOutcome.skipped("Line length is within the limit")
    numbers = ", ".join(str(n) for n in wrapped)
    return FixOutcome.applied("\n".join(lines), f"Wrapped long line(s) {numbers}")


# ── conditional rendering ───────────────────────────────────────────


def condition_complexity(condition: str) -> int:
    """Boolean operators + calls + 2x ternaries."""
    return (
        len(re.findall(r"&&|\|\|", condition))
        + len(re.findall(r"\w+\(", condition))
        + 2 * condition.count("?")
    )


def toggle_frequency(condition: str) -> float:
    """Guess how often *condition* flips, from the state names it mentions."""
    if "loading" in condition:
        return 0.9
    if "visible" in condition or "show" in condition:
        return 0.8
    if "active" in condition or "selected" in condition:
        return 0.7
    if "error" in condition or "valid" in condition:
        return 0.5
    return 0.3


def optimize_toggle(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    """Switch simple, frequently flipping ``v-if`` conditions to ``v-show``."""
    conditions = dict.fromkeys(m.group(1) for m in _VIF_RE.finditer(template))
    code = template
    switched = []
    for condition in conditions:
        if condition_complexity(condition) < 3 and toggle_frequency(condition) > 0.7:
            code = code.replace(f'v-if="{condition}"', f'v-show="{condition}"')
            switched.append(condition)
    if not switched:
        return FixOutcome.skipped("No v-if condition qualifies for v-show")
    return FixOutcome.applied(
        code, f"Switched {len(switched)} condition(s) from v-if to v-show"
    )


# ── component extraction ────────────────────────────────────────────


def find_deep_subtree(template: str, max_depth: int) -> tuple[int, int] | None:
    """Span of the element whose children first nest deeper than *max_depth*.

    Returns the ``(start, end)`` of the element sitting at depth
    ``max_depth`` (or of the first element when ``max_depth`` is 0).
    """
    target_depth = max(max_depth, 1)
    stack: list[tuple[str, int]] = []
    target_start: int | None = None
    for match in _ELEMENT_RE.finditer(template):
        closing, name, self_closing = match.group(1), match.group(2).lower(), match.group(3)
        if not closing:
            if self_closing or name in VOID_ELEMENTS:
                continue
            stack.append((name, match.start()))
            if target_start is None and len(stack) > max_depth:
                target_start = stack[target_depth - 1][1]
            continue
        # unwind to the matching opener; stray closers are ignored
        names = [n for n, _ in stack]
        if name not in names:
            continue
        while stack:
            popped, _ = stack.pop()
            if popped == name:
                break
        if target_start is not None and len(stack) < target_depth:
            return target_start, match.end()
    return None


def extract_component(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    span = find_deep_subtree(template, ctx.options.max_nesting_depth)
    if span is None:
        return FixOutcome.skipped("No nested markup to extract")
    start, end = span
    name = ctx.name_factory()
    subtree = template[start:end]
    child = (
        f"<template>\n  {subtree}\n</template>\n\n"
        f"<script>\nexport default {{\n  name: '{name}'\n}}\n</script>\n"
    )
    code = template[:start] + f"<{name} />" + template[end:]
    return FixOutcome.applied(
        code,
        f"Extracted nested markup into {name}.vue",
        artifacts=(Artifact(f"{name}.vue", child),),
    )


# ── accessibility ───────────────────────────────────────────────────


def add_img_alt(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        tag = match.group(0)
        if not img_needs_alt(tag):
            return tag
        count += 1
        return '<img alt=""' + tag[len("<img"):]

    code = IMG_RE.sub(_replace, template)
    if not count:
        return FixOutcome.skipped("Every image has an alt attribute")
    return FixOutcome.applied(code, f'Added alt="" to {count} image(s)')


def add_aria_label(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        element = match.group(0)
        if not button_needs_label(element):
            return element
        count += 1
        return '<button aria-label="Button"' + element[len("<button"):]

    code = BUTTON_RE.sub(_replace, template)
    if not count:
        return FixOutcome.skipped("Every button has text or an aria-label")
    return FixOutcome.applied(code, f"Added aria-label to {count} button(s)")


_MODEL_RE = re.compile(r"""(?:v-model|name)\s*=\s*["']([^"']+)["']""")


def _input_id(tag: str, taken: set[str]) -> str:
    bound = _MODEL_RE.search(tag)
    base = re.sub(r"\W+", "-", bound.group(1)).strip("-") if bound else "input"
    candidate = base or "input"
    n = 1
    while candidate in taken:
        n += 1
        candidate = f"{base}-{n}"
    taken.add(candidate)
    return candidate


def add_input_id(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    taken = set(re.findall(r"""(?<![\w-])id\s*=\s*["']([^"']+)["']""", template))
    count = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal count
        tag = match.group(0)
        if not input_needs_id(tag):
            return tag
        count += 1
        return f'<input id="{_input_id(tag, taken)}"' + tag[len("<input"):]

    code = INPUT_RE.sub(_replace, template)
    if not count:
        return FixOutcome.skipped("Every form control has an id")
    return FixOutcome.applied(code, f"Added an id to {count} form control(s)")


# ── security ────────────────────────────────────────────────────────


def replace_v_html(template: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    code, count = re.subn(r"\bv-html(\s*=)", r"v-text\1", template)
    if not count:
        return FixOutcome.skipped("No v-html binding found")
    return FixOutcome.applied(code, f"Replaced {count} v-html binding(s) with v-text")
