"""Tests for the report-level API (analyze_component / fix_component)."""

import json

import pytest

from vue_audit.api import analyze_component, fix_component, report_json

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

DEEP_COMPONENT = """<template>
<div><section><article><p><img src="a.png"></p></article></section></div>
</template>
<script>
export default {
  name: 'Deep'
}
</script>
"""

ALL_FIXES = ["addVForKey", "addComponentName", "addScopedStyle"]


def _name():
    return "VueApi001"


class TestAnalyzeComponent:
    """Tests for analyze_component."""

    def test_summary_block(self):
        report = analyze_component(DIRTY_COMPONENT, ci_mode=True)
        assert report["success"] is False
        assert report["message"] == "Found 3 issues"
        assert report["timestamp"] == "2000-01-01T00:00:00+00:00"
        assert report["summary"] == {
            "totalIssues": 3,
            "categories": 1,
            "fixableIssues": 3,
            "qualityScore": 85,
            "hasAutoFixableIssues": True,
        }

    def test_issues_grouped_by_type(self):
        report = analyze_component(DIRTY_COMPONENT, ci_mode=True)
        (group,) = report["issues"]
        assert group["type"] == "warning"
        assert group["category"] == "Warnings"
        assert [i["autofix"]["type"] for i in group["issues"]] == ALL_FIXES
        assert all(i["severity"] == "warning" for i in group["issues"])
        assert report["recommendations"] == []

    def test_ci_mode_is_deterministic(self):
        assert analyze_component(DIRTY_COMPONENT, ci_mode=True) == analyze_component(
            DIRTY_COMPONENT, ci_mode=True
        )

    def test_recommendations(self):
        report = analyze_component(DEEP_COMPONENT, ci_mode=True)
        assert [r["category"] for r in report["recommendations"]] == [
            "Complexity",
            "Accessibility",
        ]
        assert report["summary"]["qualityScore"] == 90

    def test_invalid_component_report(self):
        report = analyze_component("<p>nope</p>", ci_mode=True)
        assert report["success"] is False
        assert report["message"] == "Invalid Vue component"
        assert report["summary"]["totalIssues"] == 1
        assert report["summary"]["hasAutoFixableIssues"] is False
        assert report["issues"][0]["issues"][0]["autofix"] is None


class TestFixComponent:
    """Tests for fix_component."""

    def test_verification(self):
        payload = fix_component(DIRTY_COMPONENT, ALL_FIXES, name_factory=_name)
        assert payload["success"] is True
        assert payload["verification"] == {
            "remainingIssues": 0,
            "newIssuesIntroduced": [],
            "qualityScore": 100,
            "qualityDelta": 15,
        }

    def test_repairs_carry_locations(self):
        payload = fix_component(DIRTY_COMPONENT, ALL_FIXES, name_factory=_name)
        assert [r["fix"] for r in payload["repairs"]] == ALL_FIXES
        for repair in payload["repairs"]:
            assert repair["location"]
            assert {c["type"] for c in repair["location"]} <= {"replace", "insert", "delete"}

    def test_artifacts_listed(self):
        payload = fix_component(DEEP_COMPONENT, ["extractComponent"], name_factory=_name)
        assert [a["filename"] for a in payload["artifacts"]] == ["VueApi001.vue"]

    def test_failure_payload(self):
        payload = fix_component("<p>nope</p>", ALL_FIXES)
        assert payload == {
            "success": False,
            "error": "Invalid Vue component",
            "originalCode": "<p>nope</p>",
        }

    @pytest.mark.parametrize("fixes", [[], ["noSuchFix"]])
    def test_nothing_to_apply(self, fixes):
        payload = fix_component(DIRTY_COMPONENT, fixes)
        assert payload["repairs"] == []
        assert payload["verification"]["qualityDelta"] == 0


class TestReportJson:
    """Tests for report_json."""

    def test_byte_identical_in_ci_mode(self):
        first = report_json(analyze_component(DIRTY_COMPONENT, ci_mode=True))
        second = report_json(analyze_component(DIRTY_COMPONENT, ci_mode=True))
        assert first == second
        assert first.endswith("}\n")
        assert json.loads(first)["summary"]["qualityScore"] == 85
