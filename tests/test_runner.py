"""Tests for the analyzer, the fixer orchestration and the package entrypoints."""

import logging

import pytest

import vue_audit
from vue_audit import fixers, rules
from vue_audit.core.config import RuleOptions
from vue_audit.core.runner import MSG_MISSING_TAGS, VueAnalyzer, find_new_issues
from vue_audit.fixers import FixEntry, VueFixer, coerce_issue
from vue_audit.model import SegmentKind
from vue_audit.model.issue import Issue
from vue_audit.rules import Rule

DIRTY_COMPONENT = """<template>
  <ul>
    <li v-for="item in items">{{ item }}</li>
  </ul>
</template>

<script>
export default {
  data() {
    return { items: [] }
  }
}
</script>

<style>
li { color: red; }
</style>
"""


def _fixed_name():
    return "VueTest01"


class TestVueAnalyzer:
    """Tests for VueAnalyzer.analyze."""

    def test_invalid_component(self):
        result = VueAnalyzer().analyze("<div>hello</div>")
        assert result.success is False
        assert result.summary == "Invalid Vue component"
        assert [(i.type, i.message) for i in result.issues] == [("error", MSG_MISSING_TAGS)]

    def test_repeated_calls_agree(self):
        analyzer = VueAnalyzer()
        assert analyzer.analyze(DIRTY_COMPONENT) == analyzer.analyze(DIRTY_COMPONENT)

    def test_crashing_rule_becomes_error_issue(self, monkeypatch, caplog):
        def _boom(segments, options):
            raise RuntimeError("kaboom")

        catalog = (Rule("boom", _boom),) + rules.RULE_CATALOG
        monkeypatch.setattr(rules, "RULE_CATALOG", catalog)
        with caplog.at_level(logging.ERROR, logger="vue_audit.core.runner"):
            result = VueAnalyzer().analyze(DIRTY_COMPONENT)

        first = result.issues[0]
        assert first.type == "error"
        assert first.message == "Rule boom failed: kaboom"
        assert first.metadata == {"rule": "boom"}
        # the remaining rules still ran
        assert [i.fix for i in result.issues[1:]] == [
            "addVForKey",
            "addComponentName",
            "addScopedStyle",
        ]
        assert "rule boom crashed" in caplog.text

    def test_module_level_analyze(self):
        assert vue_audit.analyze(DIRTY_COMPONENT).summary == "Found 3 issues"


class TestFindNewIssues:
    """Tests for find_new_issues."""

    def test_compares_type_and_message(self):
        old = [Issue("warning", "a"), Issue("style", "b")]
        new = [Issue("warning", "a", fix="x"), Issue("warning", "b"), Issue("error", "c")]
        assert find_new_issues(old, new) == [Issue("warning", "b"), Issue("error", "c")]


class TestCoerceIssue:
    """Tests for coerce_issue."""

    def test_bare_fix_id(self):
        issue = coerce_issue("addVForKey")
        assert issue.fix == "addVForKey"
        assert issue.type == "warning"

    def test_wire_dict(self):
        issue = coerce_issue({"type": "warning", "message": "m", "fix": "updateLifecycle",
                              "oldHook": "destroyed", "newHook": "unmounted"})
        assert (issue.old_hook, issue.new_hook) == ("destroyed", "unmounted")

    def test_issue_passes_through(self):
        issue = Issue("style", "m", fix="formatLongLine", line=3)
        assert coerce_issue(issue) is issue

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            coerce_issue(42)

    def test_line_coerced_to_int(self):
        issue = coerce_issue(
            {"type": "style", "message": "m", "fix": "formatLongLine", "line": "7"}
        )
        assert issue.line == 7

    def test_non_numeric_line_rejected(self):
        with pytest.raises(ValueError):
            coerce_issue({"type": "style", "message": "m", "line": "seven"})


class TestPlan:
    """Tests for VueFixer.plan ordering."""

    def test_segment_order_and_bottom_up_wraps(self):
        plan = VueFixer().plan(
            [
                "addScopedStyle",
                "addComponentName",
                Issue("style", "l2", fix="formatLongLine", line=2),
                Issue("style", "l5", fix="formatLongLine", line=5),
                "addVForKey",
                "noSuchFix",
                Issue("warning", "advisory", fix="mergeState"),
            ]
        )
        assert [(i.fix, i.line) for i in plan] == [
            ("formatLongLine", 5),
            ("formatLongLine", 2),
            ("addVForKey", None),
            ("addComponentName", None),
            ("addScopedStyle", None),
        ]


class TestVueFixerFix:
    """Tests for VueFixer.fix."""

    def test_invalid_source(self):
        result = VueFixer().fix("<p>no</p>", ["addVForKey"])
        assert result.success is False
        assert result.error == "Invalid Vue component"

    def test_dirty_component_fixed(self):
        result = VueFixer(name_factory=_fixed_name).fix(
            DIRTY_COMPONENT, ["addVForKey", "addComponentName", "addScopedStyle"]
        )
        assert result.success
        assert '<li v-for="item in items" :key="item">' in result.code
        assert "name: 'VueTest01'," in result.code
        assert "<style scoped>" in result.code
        assert [(r.fix, r.segment) for r in result.repairs] == [
            ("addVForKey", "template"),
            ("addComponentName", "script"),
            ("addScopedStyle", "style"),
        ]
        assert VueAnalyzer().analyze(result.code).issues == []

    def test_issue_dicts_from_analysis(self):
        issues = [i.to_dict() for i in VueAnalyzer().analyze(DIRTY_COMPONENT).issues]
        result = vue_audit.fix(DIRTY_COMPONENT, issues, name_factory=_fixed_name)
        assert len(result.repairs) == 3

    def test_noop_fix_records_no_repair(self):
        result = VueFixer().fix(DIRTY_COMPONENT, ["replaceVHtml"])
        assert result.success
        assert result.repairs == []
        assert '<li v-for="item in items">' in result.code

    def test_failing_fix_is_skipped(self, monkeypatch, caplog):
        def _boom(segment, issue, ctx):
            raise ValueError("bad fix")

        monkeypatch.setitem(
            fixers.FIX_CATALOG, "addVForKey", FixEntry(SegmentKind.TEMPLATE, _boom)
        )
        with caplog.at_level(logging.ERROR, logger="vue_audit.fixers"):
            result = VueFixer(name_factory=_fixed_name).fix(
                DIRTY_COMPONENT, ["addVForKey", "addComponentName"]
            )
        assert result.success
        assert [r.fix for r in result.repairs] == ["addComponentName"]
        assert "fix addVForKey failed" in caplog.text

    def test_artifacts_collected(self):
        source = (
            "<template>\n<div><section><article><p>x</p></article></section></div>\n</template>\n"
            "<script>\nexport default {\n  name: 'Deep'\n}\n</script>"
        )
        result = VueFixer(name_factory=_fixed_name).fix(source, ["extractComponent"])
        assert [a.filename for a in result.artifacts] == ["VueTest01.vue"]
        assert "<VueTest01 />" in result.code

    @pytest.mark.parametrize("bad", [None, 42, {"message": "m", "line": "seven"}])
    def test_uninterpretable_entries_are_skipped(self, bad):
        result = VueFixer(name_factory=_fixed_name).fix(
            DIRTY_COMPONENT, ["addComponentName", bad]
        )
        assert result.success
        assert [r.fix for r in result.repairs] == ["addComponentName"]

    def test_string_line_from_wire_dict(self):
        long_line = '  <input type="text" name="email" placeholder="Your email address">'
        source = (
            f"<template>\n<div>\n{long_line}\n</div>\n</template>\n"
            "<script>\nexport default {\n  name: 'Form'\n}\n</script>"
        )
        issue = {
            "type": "style",
            "message": "Line 2 is too long",
            "fix": "formatLongLine",
            "line": "2",
        }
        result = VueFixer(RuleOptions(max_line_length=40)).fix(source, [issue])
        assert result.success
        assert [r.message for r in result.repairs] == ["Wrapped long line(s) 2"]
        assert '    placeholder="Your email address">' in result.code
