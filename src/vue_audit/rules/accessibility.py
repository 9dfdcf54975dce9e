"""Accessibility checks on template markup."""

from __future__ import annotations

import re

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.model import IssueType
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue, make_issue

MSG_IMG_ALT = "Image is missing an alt attribute, which hurts screen reader users"
MSG_BUTTON_LABEL = (
    "Button has no text content or aria-label, which hurts screen reader users"
)
MSG_INPUT_ID = "Form control is missing an id, so no label can be associated"

IMG_RE = re.compile(r"<img\b[^>]*>")
BUTTON_RE = re.compile(r"<button\b[^>]*>[^<]*</button>")
INPUT_RE = re.compile(r"<input\b[^>]*>")
_BUTTON_TEXT_RE = re.compile(r">\s*[^<\s][^<]*<")


def img_needs_alt(tag: str) -> bool:
    return "alt=" not in tag


def button_needs_label(element: str) -> bool:
    return "aria-label=" not in element and not _BUTTON_TEXT_RE.search(element)


def input_needs_id(tag: str) -> bool:
    return not re.search(r"(?<![\w-])id=", tag)


def check_img_alt(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(IssueType.ACCESSIBILITY, MSG_IMG_ALT, fix=fix_ids.ADD_IMG_ALT)
        for tag in IMG_RE.findall(segments.template)
        if img_needs_alt(tag)
    ]


def check_button_label(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(IssueType.ACCESSIBILITY, MSG_BUTTON_LABEL, fix=fix_ids.ADD_ARIA_LABEL)
        for element in BUTTON_RE.findall(segments.template)
        if button_needs_label(element)
    ]


def check_input_id(segments: Segments, options: RuleOptions) -> list[Issue]:
    return [
        make_issue(IssueType.ACCESSIBILITY, MSG_INPUT_ID, fix=fix_ids.ADD_INPUT_ID)
        for tag in INPUT_RE.findall(segments.template)
        if input_needs_id(tag)
    ]
