"""Fix catalog and the ``VueFixer`` that applies it.

Dispatch keys on ``Issue.fix``.  Each catalog entry names the segment it
rewrites; a ``fix`` call processes template fixes first, then script, then
style, each against the segment as left by the previous fix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from vue_audit import fix_ids
from vue_audit.core.config import RuleOptions
from vue_audit.core.segments import extract_segments, is_valid_component, merge_component
from vue_audit.fixers import script, style, template
from vue_audit.fixers.base import FixContext, FixOutcome, NameFactory, default_component_name
from vue_audit.model import IssueType, SegmentKind
from vue_audit.model.issue import Issue
from vue_audit.model.results import FixResult, Repair

_logger = logging.getLogger(__name__)

MSG_INVALID_COMPONENT = "Invalid Vue component"

FixFunction = Callable[[Any, Issue, FixContext], FixOutcome]


@dataclass(frozen=True, slots=True)
class FixEntry:
    segment: SegmentKind
    apply: FixFunction


FIX_CATALOG: dict[str, FixEntry] = {
    # template
    fix_ids.ADD_VFOR_KEY: FixEntry(SegmentKind.TEMPLATE, template.add_vfor_key),
    fix_ids.FORMAT_LONG_LINE: FixEntry(SegmentKind.TEMPLATE, template.format_long_line),
    fix_ids.EXTRACT_COMPONENT: FixEntry(SegmentKind.TEMPLATE, template.extract_component),
    fix_ids.OPTIMIZE_TOGGLE: FixEntry(SegmentKind.TEMPLATE, template.optimize_toggle),
    fix_ids.ADD_IMG_ALT: FixEntry(SegmentKind.TEMPLATE, template.add_img_alt),
    fix_ids.ADD_ARIA_LABEL: FixEntry(SegmentKind.TEMPLATE, template.add_aria_label),
    fix_ids.ADD_INPUT_ID: FixEntry(SegmentKind.TEMPLATE, template.add_input_id),
    fix_ids.REPLACE_V_HTML: FixEntry(SegmentKind.TEMPLATE, template.replace_v_html),
    # script
    fix_ids.ADD_COMPONENT_NAME: FixEntry(SegmentKind.SCRIPT, script.add_component_name),
    fix_ids.ADD_PROPS_TYPE: FixEntry(SegmentKind.SCRIPT, script.add_props_type),
    fix_ids.ADD_PROPS_DEFAULT: FixEntry(SegmentKind.SCRIPT, script.add_props_default),
    fix_ids.UPDATE_LIFECYCLE: FixEntry(SegmentKind.SCRIPT, script.update_lifecycle),
    fix_ids.REFACTOR_ASYNC_MOUNT: FixEntry(SegmentKind.SCRIPT, script.refactor_async_mount),
    fix_ids.SPLIT_METHOD: FixEntry(SegmentKind.SCRIPT, script.split_method),
    fix_ids.EXTRACT_MIXIN: FixEntry(SegmentKind.SCRIPT, script.extract_mixin),
    fix_ids.OPTIMIZE_COMPUTED: FixEntry(SegmentKind.SCRIPT, script.optimize_computed),
    fix_ids.ADD_PROVIDE_COMMENT: FixEntry(SegmentKind.SCRIPT, script.add_provide_comment),
    # style
    fix_ids.ADD_SCOPED_STYLE: FixEntry(SegmentKind.STYLE, style.add_scoped_style),
}

_SEGMENT_ORDER = (SegmentKind.TEMPLATE, SegmentKind.SCRIPT, SegmentKind.STYLE)


def coerce_issue(item: Issue | Mapping[str, Any] | str) -> Issue:
    """Accept an ``Issue``, its dict shape, or a bare fix id."""
    if isinstance(item, Issue):
        return item
    if isinstance(item, str):
        return Issue(type=IssueType.WARNING.value, message=fix_ids.describe_fix(item), fix=item)
    if isinstance(item, Mapping):
        return Issue.from_dict(item)
    raise TypeError(f"cannot interpret {type(item).__name__} as an issue")


def _template_order(indexed: tuple[int, Issue]) -> tuple[int, int]:
    # line-targeted wraps run first and bottom-up so line numbers stay valid
    index, issue = indexed
    if issue.fix == fix_ids.FORMAT_LONG_LINE and isinstance(issue.line, int):
        return (0, -issue.line)
    return (1, index)


class VueFixer:
    """Apply fix catalog entries to a component source.

    Holds only immutable configuration, so one instance may serve many
    callers.  ``name_factory`` supplies generated component names and can be
    replaced with a deterministic callable in tests.
    """

    def __init__(
        self,
        options: RuleOptions | None = None,
        *,
        name_factory: NameFactory | None = None,
    ) -> None:
        self.options = options or RuleOptions()
        self.name_factory = name_factory or default_component_name

    @property
    def context(self) -> FixContext:
        return FixContext(options=self.options, name_factory=self.name_factory)

    def supports(self, fix_id: str | None) -> bool:
        return fix_id in FIX_CATALOG

    def apply(self, fix_id: str, segment: Any, issue: Issue | None = None) -> FixOutcome:
        """Run one fix against one segment value.

        *segment* is the template or script text, or the tuple of style
        blocks for style fixes.  Unknown fix ids yield ``success=False``.
        """
        entry = FIX_CATALOG.get(fix_id)
        if entry is None:
            return FixOutcome.skipped(f"Unsupported fix: {fix_id}")
        if issue is None:
            issue = coerce_issue(fix_id)
        return entry.apply(segment, issue, self.context)

    def plan(self, issues: Iterable[Issue | Mapping[str, Any] | str]) -> list[Issue]:
        """Supported issues in application order (template, script, style)."""
        grouped: dict[SegmentKind, list[tuple[int, Issue]]] = {k: [] for k in _SEGMENT_ORDER}
        for index, item in enumerate(issues):
            try:
                issue = coerce_issue(item)
            except (TypeError, ValueError) as exc:
                _logger.debug("ignoring issue entry %r: %s", item, exc)
                continue
            entry = FIX_CATALOG.get(issue.fix) if issue.fix else None
            if entry is None:
                _logger.debug("no fix available for %r (%s)", issue.fix, issue.message)
                continue
            grouped[entry.segment].append((index, issue))
        grouped[SegmentKind.TEMPLATE].sort(key=_template_order)
        return [issue for kind in _SEGMENT_ORDER for _, issue in grouped[kind]]

    def fix(self, source: str, issues: Iterable[Issue | Mapping[str, Any] | str]) -> FixResult:
        if not is_valid_component(source):
            return FixResult.failure(MSG_INVALID_COMPONENT)

        segments = extract_segments(source)
        current: dict[SegmentKind, Any] = {
            SegmentKind.TEMPLATE: segments.template,
            SegmentKind.SCRIPT: segments.script,
            SegmentKind.STYLE: segments.styles,
        }
        repairs: list[Repair] = []
        for issue in self.plan(issues):
            entry = FIX_CATALOG[issue.fix]
            try:
                outcome = entry.apply(current[entry.segment], issue, self.context)
            except Exception:
                _logger.exception("fix %s failed; skipping", issue.fix)
                continue
            if not outcome.success:
                _logger.debug("fix %s skipped: %s", issue.fix, outcome.message)
                continue
            current[entry.segment] = (
                outcome.styles if entry.segment is SegmentKind.STYLE else outcome.code
            )
            repairs.append(
                Repair(
                    fix=issue.fix,
                    message=outcome.message,
                    segment=entry.segment.value,
                    artifacts=outcome.artifacts,
                )
            )

        code = merge_component(
            current[SegmentKind.TEMPLATE],
            current[SegmentKind.SCRIPT],
            current[SegmentKind.STYLE],
        )
        return FixResult(success=True, code=code, repairs=repairs)


def _assert_catalog_matches_registry() -> None:
    missing = set(fix_ids.SUPPORTED_FIX_IDS) - set(FIX_CATALOG)
    extra = set(FIX_CATALOG) - set(fix_ids.SUPPORTED_FIX_IDS)
    if missing or extra:
        raise ValueError(
            f"fix catalog out of sync: missing={sorted(missing)} extra={sorted(extra)}"
        )


_assert_catalog_matches_registry()
