"""Textual scanning helpers shared by rules and fixers.

Two brace strategies live side by side:

* ``first_brace_body`` stops at the first ``}`` after the opening key.  The
  props and computed rules use it, so a nested object literal ends the
  captured body early and later entries go unseen.
* ``balanced_block`` follows nesting, skipping strings and comments, for the
  fixers that must rewrite a whole block.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

CONTROL_KEYWORDS = frozenset(
    {"if", "for", "while", "switch", "catch", "with", "function", "return"}
)

# name(args) {   -- method shorthand, function declarations and control flow
_METHOD_HEAD_RE = re.compile(r"(\w+)\s*\([^)]*\)\s*\{")
# name(args) { body }   -- body ends at the first closing brace
_METHOD_NAIVE_RE = re.compile(r"(\w+)\s*\([^)]*\)\s*\{([^}]*)\}")

_QUOTES = "'\"`"
_OPENERS = "([{"
_CLOSERS = ")]}"


class Block(NamedTuple):
    """Span of a ``key: { ... }`` block inside a text."""

    start: int        # start of the key
    open_brace: int   # index of the opening ``{``
    close_brace: int  # index of the matching ``}``

    def body(self, text: str) -> str:
        return text[self.open_brace + 1:self.close_brace]


class MethodSpan(NamedTuple):
    name: str
    start: int        # start of the method name
    open_brace: int
    close_brace: int


def first_brace_body(text: str, key: str) -> str | None:
    """Body of ``key: { ... }`` up to the first closing brace, or None."""
    match = re.search(rf"{re.escape(key)}\s*:\s*\{{([^}}]+)\}}", text)
    return match.group(1) if match else None


def skip_string(text: str, index: int) -> int:
    """Given *index* on a quote, return the index just past its closing quote."""
    quote = text[index]
    i = index + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return len(text)


def iter_code(text: str, start: int = 0, end: int | None = None) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside strings and comments."""
    stop = len(text) if end is None else end
    i = start
    while i < stop:
        ch = text[i]
        if ch in _QUOTES:
            i = skip_string(text, i)
            continue
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = stop if newline < 0 else newline
            continue
        if text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = stop if close < 0 else close + 2
            continue
        yield i, ch
        i += 1


def balanced_block(text: str, open_index: int) -> int:
    """Index of the ``}`` matching the ``{`` at *open_index*, or -1."""
    depth = 0
    for i, ch in iter_code(text, open_index):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def brace_depth(text: str, end: int) -> int:
    """Curly-brace nesting depth at *end*."""
    depth = 0
    for _, ch in iter_code(text, 0, end):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
    return depth


def find_keyed_block(text: str, key: str) -> Block | None:
    """Locate ``key: { ... }`` with nesting honoured."""
    match = re.search(rf"(?<![\w$.]){re.escape(key)}\s*:\s*\{{", text)
    if not match:
        return None
    open_brace = match.end() - 1
    close = balanced_block(text, open_brace)
    if close < 0:
        return None
    return Block(match.start(), open_brace, close)


def split_top_level(body: str) -> list[str]:
    """Split *body* on commas that are not nested in brackets or strings."""
    parts: list[str] = []
    depth = 0
    last = 0
    for i, ch in iter_code(body):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append(body[last:i])
            last = i + 1
    parts.append(body[last:])
    return parts


def iter_naive_methods(script: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, body)`` for ``name(...) { body }`` with non-nested bodies.

    The body ends at the first ``}``.  Control-flow heads (``if (...) {``)
    are skipped.
    """
    for match in _METHOD_NAIVE_RE.finditer(script):
        if match.group(1) in CONTROL_KEYWORDS:
            continue
        yield match.group(1), match.group(2)


def method_names(script: str) -> list[str]:
    """Names of every method-like declaration head, in order."""
    return [
        m.group(1)
        for m in _METHOD_HEAD_RE.finditer(script)
        if m.group(1) not in CONTROL_KEYWORDS
    ]


def find_method(script: str, name: str | None = None) -> MethodSpan | None:
    """Locate a method with its full (balanced) body.

    With *name* given, the first declaration of that name; otherwise the
    first method-like declaration.
    """
    for m in _METHOD_HEAD_RE.finditer(script):
        method = m.group(1)
        if method in CONTROL_KEYWORDS or (name is not None and method != name):
            continue
        open_brace = m.end() - 1
        close = balanced_block(script, open_brace)
        if close < 0:
            return None
        return MethodSpan(method, m.start(), open_brace, close)
    return None


def line_count(text: str) -> int:
    return len(text.split("\n"))


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]
