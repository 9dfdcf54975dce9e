"""Tests for RuleOptions and the rc-file loader."""

import json

import pytest

from vue_audit.core.config import DEFAULT_RC_FILE, RuleOptions, load_options
from vue_audit.errors import ConfigError


class TestRuleOptions:
    """Tests for RuleOptions construction."""

    def test_defaults(self):
        opts = RuleOptions()
        assert opts.max_line_length == 80
        assert opts.max_method_lines == 20
        assert opts.max_methods == 10
        assert opts.max_nesting_depth == 3
        assert opts.max_watchers == 5
        assert opts.toggle_threshold == 3
        assert opts.check_i18n is False

    def test_camel_case_keys(self):
        opts = RuleOptions.from_mapping(
            {"maxLineLength": 120, "requireVForKey": False, "checkI18n": True}
        )
        assert opts.max_line_length == 120
        assert opts.require_vfor_key is False
        assert opts.check_i18n is True

    def test_snake_case_keys(self):
        assert RuleOptions.from_mapping({"max_watchers": 2}).max_watchers == 2

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="unknown rule option"):
            RuleOptions.from_mapping({"maxColumns": 1})

    @pytest.mark.parametrize(
        "data",
        [{"maxLineLength": "80"}, {"maxLineLength": True}, {"maxLineLength": -1}, {"checkI18n": 1}],
    )
    def test_bad_values_rejected(self, data):
        with pytest.raises(ConfigError):
            RuleOptions.from_mapping(data)

    def test_merged_leaves_original_untouched(self):
        base = RuleOptions()
        merged = base.merged({"maxMethods": 4})
        assert base.max_methods == 10
        assert merged.max_methods == 4


class TestLoadOptions:
    """Tests for load_options."""

    def test_flat_file(self, tmp_path):
        rc = tmp_path / "rc.json"
        rc.write_text(json.dumps({"maxNestingDepth": 5}), encoding="utf-8")
        assert load_options(rc).max_nesting_depth == 5

    def test_rules_section(self, tmp_path):
        rc = tmp_path / "rc.json"
        rc.write_text(json.dumps({"rules": {"checkSecurity": False}}), encoding="utf-8")
        assert load_options(rc).check_security is False

    def test_default_file_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_options() == RuleOptions()
        (tmp_path / DEFAULT_RC_FILE).write_text('{"maxWatchers": 9}', encoding="utf-8")
        assert load_options().max_watchers == 9

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_options(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        rc = tmp_path / "rc.json"
        rc.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="could not read"):
            load_options(rc)

    def test_top_level_must_be_object(self, tmp_path):
        rc = tmp_path / "rc.json"
        rc.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            load_options(rc)
