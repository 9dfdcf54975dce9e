"""Rule catalog.

Every rule is a pure function ``(segments, options) -> list[Issue]``.  Rules
never look at each other's output; the catalog order below fixes the order
of issues in an analysis result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from vue_audit.core.config import RuleOptions
from vue_audit.model.component import Segments
from vue_audit.model.issue import Issue
from vue_audit.rules import (
    accessibility,
    code_style,
    complexity,
    composition,
    i18n,
    lifecycle,
    performance,
    script,
    security,
    style,
    template,
)

RuleCheck = Callable[[Segments, RuleOptions], "list[Issue]"]


@dataclass(frozen=True, slots=True)
class Rule:
    """A catalog entry: stable id, check function and the toggle gating it."""

    id: str
    check: RuleCheck
    toggle: str | None = None

    def enabled(self, options: RuleOptions) -> bool:
        return self.toggle is None or bool(getattr(options, self.toggle))


RULE_CATALOG: tuple[Rule, ...] = (
    # template
    Rule("loop-key", template.check_loop_keys, "require_vfor_key"),
    Rule("line-length", template.check_line_length),
    # script
    Rule("component-name", script.check_component_name, "require_component_name"),
    Rule("props-type", script.check_props_type, "require_props_type"),
    Rule("props-default", script.check_props_default, "require_props_default"),
    # style
    Rule("scoped-style", style.check_scoped_style, "require_scoped_style"),
    # lifecycle
    Rule("deprecated-lifecycle", lifecycle.check_deprecated_hooks, "check_lifecycle"),
    Rule("async-mount", lifecycle.check_async_mount, "check_lifecycle"),
    # complexity
    Rule("method-length", complexity.check_method_length, "check_complexity"),
    Rule("method-count", complexity.check_method_count, "check_complexity"),
    Rule("nesting-depth", complexity.check_nesting_depth, "check_complexity"),
    # performance
    Rule("toggle-overuse", performance.check_toggle_overuse, "check_performance"),
    Rule("computed-complexity", performance.check_computed_complexity, "check_performance"),
    Rule("watcher-count", performance.check_watcher_count, "check_performance"),
    # composition API
    Rule("reactive-state", composition.check_reactive_state, "check_composition_api"),
    Rule("watch-calls", composition.check_watch_calls, "check_composition_api"),
    Rule("computed-arrow", composition.check_computed_arrow, "check_composition_api"),
    Rule("repeated-hooks", composition.check_repeated_hooks, "check_composition_api"),
    Rule("provide-comment", composition.check_provide_comment, "check_composition_api"),
    # accessibility
    Rule("img-alt", accessibility.check_img_alt, "check_accessibility"),
    Rule("button-label", accessibility.check_button_label, "check_accessibility"),
    Rule("input-id", accessibility.check_input_id, "check_accessibility"),
    # security
    Rule("v-html", security.check_v_html, "check_security"),
    Rule("hardcoded-secret", security.check_hardcoded_secrets, "check_security"),
    # i18n
    Rule("hardcoded-text", i18n.check_hardcoded_text, "check_i18n"),
    # code style
    Rule("method-name", code_style.check_method_names, "check_code_style"),
    Rule("method-chain", code_style.check_method_chains, "check_code_style"),
)

RULE_IDS: list[str] = [r.id for r in RULE_CATALOG]


def enabled_rules(options: RuleOptions) -> list[Rule]:
    return [r for r in RULE_CATALOG if r.enabled(options)]


def _assert_catalog_invariants() -> None:
    if len(set(RULE_IDS)) != len(RULE_IDS):
        raise ValueError("duplicate rule ids in RULE_CATALOG")
    toggles = set(RuleOptions.__dataclass_fields__)
    for rule in RULE_CATALOG:
        if rule.toggle is not None and rule.toggle not in toggles:
            raise ValueError(f"rule {rule.id!r} gated by unknown option {rule.toggle!r}")


_assert_catalog_invariants()
