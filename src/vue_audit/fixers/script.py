"""Script fixes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from vue_audit.fixers.base import FixContext, FixOutcome
from vue_audit.model.issue import Issue
from vue_audit.model.results import Artifact
from vue_audit.rules._text import (
    balanced_block,
    brace_depth,
    find_keyed_block,
    find_method,
    iter_naive_methods,
    leading_whitespace,
    line_count,
    split_top_level,
)
from vue_audit.rules.composition import PROVIDE_CALL_RE, PROVIDE_MARKER
from vue_audit.rules.lifecycle import DEPRECATED_HOOKS, hook_pattern
from vue_audit.rules.performance import has_array_ops
from vue_audit.rules.script import PROPS_RE, has_component_name

_EXPORT_DEFAULT_RE = re.compile(r"export\s+default\s*\{")
_TYPE_RE = re.compile(r"type\s*:\s*(\w+)")
_CONSTRUCTOR_RE = re.compile(r"^(?:[A-Z]\w*|\[[\w\s,]*\])$")
_NAME_RE = re.compile(r"""name\s*:\s*['"]([^'"]+)['"]""")

DEFAULTS_BY_TYPE: dict[str, str] = {
    "String": "''",
    "Number": "0",
    "Boolean": "false",
    "Array": "[]",
    "Object": "{}",
}


def default_for_type(type_name: str | None) -> str:
    return DEFAULTS_BY_TYPE.get((type_name or "").strip(), "null")


# ── component name ──────────────────────────────────────────────────


def add_component_name(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    if has_component_name(script):
        return FixOutcome.skipped("Component already has a name")
    if not _EXPORT_DEFAULT_RE.search(script):
        return FixOutcome.skipped("No export default object found")
    name = ctx.name_factory()
    code = _EXPORT_DEFAULT_RE.sub(
        lambda _m: f"export default {{\n  name: '{name}',", script, count=1
    )
    return FixOutcome.applied(code, f"Added component name: {name}")


# ── props ───────────────────────────────────────────────────────────
#
# Both props fixes rewrite the body captured by PROPS_RE (up to the first
# closing brace) and keep that brace.  A truncated object entry is therefore
# completed in place rather than wrapped.


def _split_entry(raw: str) -> tuple[str, str, str, str | None]:
    """``(lead, name, trail, value)`` for one raw props entry."""
    stripped = raw.strip()
    lead = raw[: len(raw) - len(raw.lstrip())]
    trail = raw[len(raw.rstrip()):]
    if ":" not in stripped:
        return lead, stripped, trail, None
    name, value = stripped.split(":", 1)
    return lead, name.strip(), trail, value.strip()


def _typed_entry(raw: str) -> str:
    if not raw.strip() or "type:" in raw:
        return raw
    lead, name, trail, value = _split_entry(raw)
    if value is not None and value.startswith("{"):
        inner = value[1:].strip()
        return f"{lead}{name}: {{ type: String{', ' + inner if inner else ''}{trail or ' '}"
    if value is not None and _CONSTRUCTOR_RE.match(value):
        return f"{lead}{name}: {{ type: {value} }}{trail}"
    return f"{lead}{name}: {{ type: String }}{trail}"


def _defaulted_entry(raw: str) -> str:
    if not raw.strip() or "default:" in raw:
        return raw
    lead, name, trail, value = _split_entry(raw)
    if value is not None and value.startswith("{"):
        found = _TYPE_RE.search(value)
        default = default_for_type(found.group(1) if found else None)
        inner = value[1:].strip().rstrip(",").strip()
        sep = ", " if inner else " "
        return f"{lead}{name}: {{{' ' + inner if inner else ''}{sep}default: {default}{trail or ' '}"
    if value is not None and _CONSTRUCTOR_RE.match(value):
        return f"{lead}{name}: {{ type: {value}, default: {default_for_type(value)} }}{trail}"
    return f"{lead}{name}: {{ default: null }}{trail}"


def _rewrite_props(
    script: str, rewrite: Callable[[str], str], done: str, applied: str
) -> FixOutcome:
    match = PROPS_RE.search(script)
    if not match:
        return FixOutcome.skipped("No props block found")
    body = match.group(1)
    new_body = ",".join(rewrite(entry) for entry in split_top_level(body))
    if new_body == body:
        return FixOutcome.skipped(done)
    return FixOutcome.applied(script[: match.start(1)] + new_body + script[match.end(1):], applied)


def add_props_type(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    return _rewrite_props(
        script, _typed_entry, "Every prop already declares a type", "Added props type definitions"
    )


def add_props_default(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    return _rewrite_props(
        script,
        _defaulted_entry,
        "Every prop already declares a default",
        "Added props default values",
    )


# ── lifecycle ───────────────────────────────────────────────────────


def update_lifecycle(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    if issue.old_hook and issue.new_hook:
        renames = {issue.old_hook: issue.new_hook}
    else:
        renames = dict(DEPRECATED_HOOKS)
    code = script
    done = []
    for old, new in renames.items():
        code, count = hook_pattern(old).subn(lambda m, new=new: new + m.group(1) + m.group(2), code)
        if count:
            done.append(f"{old} -> {new}")
    if not done:
        return FixOutcome.skipped("No deprecated lifecycle hook found")
    return FixOutcome.applied(code, "Renamed lifecycle hook(s): " + ", ".join(done))


_ASYNC_MOUNTED_RE = re.compile(r"async\s+mounted\s*\(\)\s*\{")
_AWAIT_RE = re.compile(r"await\s+([^;\n]+)")


def refactor_async_mount(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    """Drop ``async`` from ``mounted`` and defer each ``await`` to ``$nextTick``."""
    match = _ASYNC_MOUNTED_RE.search(script)
    if not match:
        return FixOutcome.skipped("No async mounted hook found")
    open_brace = match.end() - 1
    close = balanced_block(script, open_brace)
    if close < 0:
        return FixOutcome.skipped("Unbalanced mounted hook body")
    body = _AWAIT_RE.sub(
        lambda m: f"this.$nextTick(async () => {{ await {m.group(1).strip()} }})",
        script[open_brace + 1:close],
    )
    code = script[: match.start()] + "mounted() {" + body + "}" + script[close + 1:]
    return FixOutcome.applied(code, "Moved async work in mounted to $nextTick")


# ── method splitting ────────────────────────────────────────────────

_HELPER_SUFFIX = {
    "condition": "Condition",
    "loop": "Process",
    "error_handling": "ErrorHandler",
    "other": "Helper",
}


@dataclass
class _CodeBlock:
    kind: str
    complexity: int = 0
    lines: list[str] = field(default_factory=list)


def _line_kind(line: str) -> str | None:
    if re.search(r"\b(?:if|switch)\b", line):
        return "condition"
    if re.search(r"\b(?:for|while)\b", line):
        return "loop"
    if re.search(r"\b(?:try|catch)\b", line):
        return "error_handling"
    return None


_KIND_COMPLEXITY = {"condition": 1, "loop": 2, "error_handling": 1}


def method_blocks(body_lines: list[str]) -> list[_CodeBlock]:
    """Group a method's lines into blocks, starting a new block at each
    top-level condition, loop or try statement."""
    blocks: list[_CodeBlock] = []
    current = _CodeBlock("other")
    depth = 0
    for line in body_lines:
        kind = _line_kind(line) if depth == 0 else None
        if kind is not None:
            if current.lines:
                blocks.append(current)
            current = _CodeBlock(kind, _KIND_COMPLEXITY[kind], [line])
        else:
            current.lines.append(line)
            if "&&" in line or "||" in line:
                current.complexity += 1
        depth += brace_depth(line, len(line))
        depth = max(depth, 0)
    if current.lines:
        blocks.append(current)
    return blocks


def _long_method(script: str, limit: int) -> str | None:
    for name, body in iter_naive_methods(script):
        if line_count(body) > limit:
            return name
    return None


def split_method(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    limit = ctx.options.max_method_lines
    name = issue.method or _long_method(script, limit)
    span = find_method(script, name) if name else None
    if span is None:
        return FixOutcome.skipped("No method to split")
    body_lines = script[span.open_brace + 1:span.close_brace].split("\n")
    while body_lines and not body_lines[0].strip():
        body_lines.pop(0)
    while body_lines and not body_lines[-1].strip():
        body_lines.pop()
    if len(body_lines) <= limit:
        return FixOutcome.skipped(f"Method {span.name} is short enough")

    line_start = script.rfind("\n", 0, span.start) + 1
    indent = leading_whitespace(script[line_start:span.start])
    inner = indent + "  "

    main_lines: list[str] = []
    helpers: list[str] = []
    for index, block in enumerate(method_blocks(body_lines), start=1):
        if block.complexity > 1 or len(block.lines) > 5:
            helper = f"{span.name}{_HELPER_SUFFIX[block.kind]}{index}"
            main_lines.append(f"{inner}this.{helper}();")
            helpers.append(
                f"{indent}{helper}() {{\n" + "\n".join(block.lines) + f"\n{indent}}}"
            )
        else:
            main_lines.extend(block.lines)
    if not helpers:
        return FixOutcome.skipped(f"Method {span.name} has no block worth extracting")

    head = script[span.start:span.open_brace + 1]
    rewritten = head + "\n" + "\n".join(main_lines) + f"\n{indent}}},\n" + ",\n".join(helpers)
    code = script[: span.start] + rewritten + script[span.close_brace + 1:]
    return FixOutcome.applied(
        code, f"Split {span.name} into {len(helpers)} helper method(s)"
    )


# ── mixin extraction ────────────────────────────────────────────────


def _remove_block(script: str, start: int, end: int) -> str:
    """Cut ``script[start:end]`` together with one adjoining comma."""
    after = re.match(r"\s*,", script[end:])
    if after:
        end += after.end()
    else:
        before = re.search(r",\s*$", script[:start])
        if before:
            start = before.start()
    line_start = script.rfind("\n", 0, start) + 1
    if not script[line_start:start].strip():
        start = line_start
        if script[end:].startswith("\n"):
            end += 1
    return script[:start] + script[end:]


def extract_mixin(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    """Move the ``methods`` block into a mixin side file."""
    block = find_keyed_block(script, "methods")
    if block is None:
        return FixOutcome.skipped("No methods block found")
    if not _EXPORT_DEFAULT_RE.search(script):
        return FixOutcome.skipped("No export default object found")

    named = _NAME_RE.search(script)
    base = named.group(1) if named else ctx.name_factory()
    mixin = re.sub(r"\W", "", base[:1].upper() + base[1:]) + "Mixin"
    methods_text = script[block.start:block.close_brace + 1]

    code = _remove_block(script, block.start, block.close_brace + 1)
    existing = re.search(r"mixins\s*:\s*\[", code)
    if existing:
        code = code[: existing.end()] + f"{mixin}, " + code[existing.end():]
    else:
        code = _EXPORT_DEFAULT_RE.sub(
            lambda _m: f"export default {{\n  mixins: [{mixin}],", code, count=1
        )
    code = f"import {mixin} from './{mixin}'\n" + code

    artifact = Artifact(f"{mixin}.js", f"export default {{\n  {methods_text}\n}}\n")
    return FixOutcome.applied(
        code, f"Moved methods into mixin {mixin}.js", artifacts=(artifact,)
    )


# ── computed ────────────────────────────────────────────────────────

_COMPUTED_METHOD_RE = re.compile(r"(\w+)\s*(?::\s*function\s*)?\(\)\s*\{")
_NOT_ENTRY_NAMES = frozenset({"function", "async"})
_BRANCH_RE = re.compile(r"\b(?:if|else|switch|case)\b")


def computed_dependencies(body: str) -> list[str]:
    """Names reached through ``this.`` or ``props.``, first-seen order."""
    names = re.findall(r"\b(?:this|props)\.(\w+)", body)
    return list(dict.fromkeys(names))


def optimize_computed(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    """Wrap costly computed getters in a cached object with dependencies."""
    block = find_keyed_block(script, "computed")
    if block is None:
        return FixOutcome.skipped("No computed block found")
    body = block.body(script)

    entries: list[tuple[str, int, int, int]] = []
    pos = 0
    while True:
        match = _COMPUTED_METHOD_RE.search(body, pos)
        if not match:
            break
        open_brace = match.end() - 1
        close = balanced_block(body, open_brace)
        if close < 0:
            break
        if match.group(1) in _NOT_ENTRY_NAMES:
            pos = match.end()
        elif brace_depth(body, match.start()) == 0:
            entries.append((match.group(1), match.start(), open_brace, close))
            pos = close + 1
        else:
            pos = match.end()

    names = {name for name, *_ in entries}
    pieces: list[str] = []
    last = 0
    optimized: list[str] = []
    for name, start, open_brace, close in entries:
        getter = body[open_brace + 1:close]
        depends_on_sibling = any(
            re.search(rf"\b{re.escape(other)}\b", getter) for other in names - {name}
        )
        branchy = len(_BRANCH_RE.findall(getter)) > 2
        if not (has_array_ops(getter) or depends_on_sibling or branchy):
            continue
        line_start = body.rfind("\n", 0, start) + 1
        indent = leading_whitespace(body[line_start:start])
        deps = ", ".join(f"'{d}'" for d in computed_dependencies(getter))
        pieces.append(body[last:start])
        pieces.append(
            f"{name}: {{\n"
            f"{indent}  cache: true,\n"
            f"{indent}  get() {{{getter}}},\n"
            f"{indent}  dependencies: [{deps}]\n"
            f"{indent}}}"
        )
        last = close + 1
        optimized.append(name)
    if not optimized:
        return FixOutcome.skipped("No computed property needs caching")
    pieces.append(body[last:])
    code = script[: block.open_brace + 1] + "".join(pieces) + script[block.close_brace:]
    return FixOutcome.applied(code, "Cached computed properties: " + ", ".join(optimized))


# ── provide ─────────────────────────────────────────────────────────


def add_provide_comment(script: str, issue: Issue, ctx: FixContext) -> FixOutcome:
    if PROVIDE_MARKER in script:
        return FixOutcome.skipped("provide() calls are already annotated")
    code, count = PROVIDE_CALL_RE.subn(lambda m: f"{PROVIDE_MARKER} {m.group(0)}", script)
    if not count:
        return FixOutcome.skipped("No provide() call found")
    return FixOutcome.applied(code, f"Annotated {count} provide() call(s)")
