"""Tests for the fix id registry and its agreement with the catalogs."""

from vue_audit import fix_ids
from vue_audit.fixers import FIX_CATALOG, VueFixer
from vue_audit.model.issue import Issue


def test_supported_ids_have_fixers():
    assert set(FIX_CATALOG) == set(fix_ids.SUPPORTED_FIX_IDS)


def test_advisory_ids_are_not_applied():
    fixer = VueFixer()
    for fix_id in fix_ids.ADVISORY_FIX_IDS:
        assert not fixer.supports(fix_id)


def test_every_id_is_described():
    for fix_id in fix_ids.ALL_FIX_IDS:
        assert fix_ids.describe_fix(fix_id) != fix_id


def test_safe_ids():
    assert fix_ids.is_safe_fix("addVForKey")
    assert not fix_ids.is_safe_fix("splitMethod")


def test_issue_wire_round_trip():
    issue = Issue(
        type="warning",
        message="m",
        fix="updateLifecycle",
        old_hook="beforeDestroy",
        new_hook="beforeUnmount",
    )
    data = issue.to_dict()
    assert data == {
        "type": "warning",
        "message": "m",
        "fix": "updateLifecycle",
        "oldHook": "beforeDestroy",
        "newHook": "beforeUnmount",
    }
    assert Issue.from_dict(data) == issue
