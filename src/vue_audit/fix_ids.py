"""Canonical fix id registry.

Single source of truth for every ``Issue.fix`` value the rule catalog emits.
Fix dispatch keys on these ids, never on issue messages.

Structure:
  SUPPORTED_FIX_IDS   - ids with a Fix Catalog entry
  ADVISORY_FIX_IDS    - ids emitted by rules but without an automatic fix
  SAFE_FIX_IDS        - supported fixes that never change runtime behaviour
  ALL_FIX_IDS         - union of supported and advisory ids
"""

from __future__ import annotations

# ── Template ────────────────────────────────────────────────────────
ADD_VFOR_KEY = "addVForKey"
FORMAT_LONG_LINE = "formatLongLine"
EXTRACT_COMPONENT = "extractComponent"
OPTIMIZE_TOGGLE = "optimizeToggle"
ADD_IMG_ALT = "addImgAlt"
ADD_ARIA_LABEL = "addAriaLabel"
ADD_INPUT_ID = "addInputId"
REPLACE_V_HTML = "replaceVHtml"
EXTRACT_I18N_KEY = "extractI18nKey"

# ── Script ──────────────────────────────────────────────────────────
ADD_COMPONENT_NAME = "addComponentName"
ADD_PROPS_TYPE = "addPropsType"
ADD_PROPS_DEFAULT = "addPropsDefault"
UPDATE_LIFECYCLE = "updateLifecycle"
REFACTOR_ASYNC_MOUNT = "refactorAsyncMount"
SPLIT_METHOD = "splitMethod"
EXTRACT_MIXIN = "extractMixin"
OPTIMIZE_COMPUTED = "optimizeComputed"
OPTIMIZE_WATCH = "optimizeWatch"
MERGE_STATE = "mergeState"
OPTIMIZE_WATCHERS = "optimizeWatchers"
MERGE_LIFECYCLE_HOOKS = "mergeLifecycleHooks"
ADD_PROVIDE_COMMENT = "addProvideComment"
USE_ENV_VARIABLE = "useEnvVariable"
FIX_METHOD_NAME = "fixMethodName"
SPLIT_METHOD_CHAIN = "splitMethodChain"

# ── Style ───────────────────────────────────────────────────────────
ADD_SCOPED_STYLE = "addScopedStyle"

# ── Buckets ─────────────────────────────────────────────────────────

SUPPORTED_FIX_IDS: list[str] = sorted([
    ADD_VFOR_KEY,
    FORMAT_LONG_LINE,
    EXTRACT_COMPONENT,
    OPTIMIZE_TOGGLE,
    ADD_IMG_ALT,
    ADD_ARIA_LABEL,
    ADD_INPUT_ID,
    REPLACE_V_HTML,
    ADD_COMPONENT_NAME,
    ADD_PROPS_TYPE,
    ADD_PROPS_DEFAULT,
    UPDATE_LIFECYCLE,
    REFACTOR_ASYNC_MOUNT,
    SPLIT_METHOD,
    EXTRACT_MIXIN,
    OPTIMIZE_COMPUTED,
    ADD_PROVIDE_COMMENT,
    ADD_SCOPED_STYLE,
])

ADVISORY_FIX_IDS: list[str] = sorted([
    EXTRACT_I18N_KEY,
    OPTIMIZE_WATCH,
    MERGE_STATE,
    OPTIMIZE_WATCHERS,
    MERGE_LIFECYCLE_HOOKS,
    USE_ENV_VARIABLE,
    FIX_METHOD_NAME,
    SPLIT_METHOD_CHAIN,
])

SAFE_FIX_IDS: list[str] = sorted([
    ADD_VFOR_KEY,
    ADD_COMPONENT_NAME,
    ADD_PROPS_TYPE,
    ADD_SCOPED_STYLE,
    FORMAT_LONG_LINE,
])

ALL_FIX_IDS: list[str] = sorted(set(SUPPORTED_FIX_IDS + ADVISORY_FIX_IDS))

# Human-readable descriptions surfaced next to fixable issues.
FIX_DESCRIPTIONS: dict[str, str] = {
    ADD_VFOR_KEY: "Add a :key binding to v-for",
    FORMAT_LONG_LINE: "Wrap an overlong template line",
    EXTRACT_COMPONENT: "Extract a deeply nested subtree into a child component",
    OPTIMIZE_TOGGLE: "Switch frequently toggled v-if directives to v-show",
    ADD_IMG_ALT: "Add an alt attribute to images",
    ADD_ARIA_LABEL: "Add an aria-label to empty buttons",
    ADD_INPUT_ID: "Add an id to form inputs",
    REPLACE_V_HTML: "Replace v-html with v-text",
    EXTRACT_I18N_KEY: "Move hard-coded text to an i18n key",
    ADD_COMPONENT_NAME: "Add a component name",
    ADD_PROPS_TYPE: "Add props type definitions",
    ADD_PROPS_DEFAULT: "Add props default values",
    UPDATE_LIFECYCLE: "Rename a deprecated lifecycle hook",
    REFACTOR_ASYNC_MOUNT: "Refactor async work out of mounted",
    SPLIT_METHOD: "Split an overlong method",
    EXTRACT_MIXIN: "Move methods into a mixin",
    OPTIMIZE_COMPUTED: "Cache complex computed properties",
    OPTIMIZE_WATCH: "Reduce the number of watchers",
    MERGE_STATE: "Merge related reactive state",
    OPTIMIZE_WATCHERS: "Reduce the number of watch/watchEffect calls",
    MERGE_LIFECYCLE_HOOKS: "Merge repeated lifecycle hook calls",
    ADD_PROVIDE_COMMENT: "Annotate provide() calls",
    USE_ENV_VARIABLE: "Read secrets from environment variables",
    FIX_METHOD_NAME: "Rename a method to camelCase",
    SPLIT_METHOD_CHAIN: "Split a long method chain",
    ADD_SCOPED_STYLE: "Add scoped styles",
}


def describe_fix(fix_id: str) -> str:
    return FIX_DESCRIPTIONS.get(fix_id, fix_id)


def is_safe_fix(fix_id: str) -> bool:
    return fix_id in SAFE_FIX_IDS


def _assert_fix_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so a malformed registry never ships.
    """
    import re

    fix_re = re.compile(r"^[a-z][A-Za-z0-9]*$")

    for fix_id in ALL_FIX_IDS:
        if not fix_re.match(fix_id):
            raise ValueError(f"fix id {fix_id!r} is not lowerCamelCase")

    overlap = set(SUPPORTED_FIX_IDS) & set(ADVISORY_FIX_IDS)
    if overlap:
        raise ValueError(f"fix ids both supported and advisory: {sorted(overlap)}")

    unsupported_safe = set(SAFE_FIX_IDS) - set(SUPPORTED_FIX_IDS)
    if unsupported_safe:
        raise ValueError(f"safe fix ids without a fixer: {sorted(unsupported_safe)}")

    undocumented = set(ALL_FIX_IDS) - set(FIX_DESCRIPTIONS)
    if undocumented:
        raise ValueError(f"fix ids without a description: {sorted(undocumented)}")


_assert_fix_registry_invariants()
