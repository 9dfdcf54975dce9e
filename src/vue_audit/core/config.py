"""Rule configuration dataclass and rc-file loader."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from vue_audit.errors import ConfigError

DEFAULT_RC_FILE = ".vueauditrc.json"


@dataclass(frozen=True)
class RuleOptions:
    """Immutable rule thresholds and toggles, held per engine instance.

    Defaults match the documented rule catalog.  Keys may also be given in
    the camelCase spelling used by existing rc files (``maxLineLength``,
    ``requireVForKey``, ...).
    """

    # thresholds
    max_line_length: int = 80
    max_method_lines: int = 20
    max_methods: int = 10
    max_nesting_depth: int = 3
    max_watchers: int = 5
    toggle_threshold: int = 3
    max_reactive_state: int = 10

    # core toggles
    require_vfor_key: bool = True
    require_component_name: bool = True
    require_props_type: bool = True
    require_props_default: bool = True
    require_scoped_style: bool = True
    check_lifecycle: bool = True
    check_complexity: bool = True
    check_performance: bool = True

    # supplemental rule groups
    check_composition_api: bool = True
    check_accessibility: bool = True
    check_security: bool = True
    check_code_style: bool = True
    check_i18n: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RuleOptions":
        """Build options from a flat mapping; unknown keys are rejected."""
        return cls().merged(data)

    def merged(self, data: Mapping[str, Any]) -> "RuleOptions":
        known = {f.name: f for f in fields(self)}
        updates: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = _snake_case(raw_key)
            if key not in known:
                raise ConfigError(f"unknown rule option: {raw_key!r}")
            expected = bool if known[key].type in (bool, "bool") else int
            if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigError(f"rule option {raw_key!r} must be an integer, got {value!r}")
            if expected is int and value < 0:
                raise ConfigError(f"rule option {raw_key!r} must not be negative")
            if expected is bool and not isinstance(value, bool):
                raise ConfigError(f"rule option {raw_key!r} must be a boolean, got {value!r}")
            updates[key] = value
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_CAMEL_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")

# camelCase spellings the generic conversion gets wrong
_KEY_ALIASES = {
    "requireVForKey": "require_vfor_key",
}


def _snake_case(key: str) -> str:
    if key in _KEY_ALIASES:
        return _KEY_ALIASES[key]
    return _CAMEL_RE.sub(r"_\1", key).lower()


def load_options(path: str | Path | None = None) -> RuleOptions:
    """Load rule options from a JSON rc file.

    The file may be flat (``{"maxLineLength": 100}``) or nest the options
    under a ``"rules"`` key.  ``path=None`` looks for ``.vueauditrc.json``
    in the current directory and falls back to defaults when it is absent.
    """
    rc = Path(path) if path is not None else Path.cwd() / DEFAULT_RC_FILE
    if not rc.exists():
        if path is not None:
            raise ConfigError(f"config file not found: {rc}")
        return RuleOptions()

    try:
        data = json.loads(rc.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"could not read config file {rc}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{rc}: expected a JSON object at top level")
    section = data.get("rules", data)
    if not isinstance(section, dict):
        raise ConfigError(f"{rc}: 'rules' must be a JSON object")
    return RuleOptions.from_mapping(section)
