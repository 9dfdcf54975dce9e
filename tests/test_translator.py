"""Tests for the issue translator (report grouping, recommendations, diffs)."""

from vue_audit.insights.translator import (
    autofix_info,
    category_name,
    group_issues,
    recommendations,
    repair_locations,
)
from vue_audit.model.issue import Issue


class TestGrouping:
    """Tests for group_issues."""

    def test_first_seen_category_order(self):
        issues = [
            Issue("style", "long", fix="formatLongLine", line=4),
            Issue("warning", "w1"),
            Issue("style", "chain"),
        ]
        groups = group_issues(issues)
        assert [(g["type"], g["category"], len(g["issues"])) for g in groups] == [
            ("style", "Style", 2),
            ("warning", "Warnings", 1),
        ]

    def test_issue_entry_shape(self):
        (group,) = group_issues([Issue("style", "long", fix="formatLongLine", line=4)])
        assert group["issues"] == [
            {
                "type": "style",
                "severity": "warning",
                "message": "long",
                "autofix": {
                    "type": "formatLongLine",
                    "description": "Wrap an overlong template line",
                    "safe": True,
                },
                "line": 4,
            }
        ]

    def test_unknown_category_keeps_type(self):
        assert category_name("custom") == "custom"

    def test_no_autofix(self):
        assert autofix_info(None) is None
        assert autofix_info("extractComponent")["safe"] is False


class TestRecommendations:
    """Tests for recommendations."""

    def test_none_for_plain_warnings(self):
        assert recommendations([Issue("warning", "w", fix="addVForKey")]) == []

    def test_complexity_from_fix_ids(self):
        issues = [
            Issue("performance", "p"),
            Issue("warning", "m", fix="splitMethod"),
            Issue("accessibility", "a"),
        ]
        assert [r["category"] for r in recommendations(issues)] == [
            "Performance",
            "Complexity",
            "Accessibility",
        ]


class TestRepairLocations:
    """Tests for repair_locations."""

    def test_identical_code(self):
        assert repair_locations("a\nb", "a\nb") == []

    def test_replaced_line(self):
        assert repair_locations("a\nb\nc", "a\nB\nc") == [
            {
                "type": "replace",
                "oldStart": 2,
                "oldEnd": 2,
                "newStart": 2,
                "newEnd": 2,
                "oldContent": "b",
                "newContent": "B",
            }
        ]

    def test_inserted_line(self):
        (change,) = repair_locations("a\nc", "a\nb\nc")
        assert change["type"] == "insert"
        assert change["newContent"] == "b"
        assert change["oldContent"] == ""
