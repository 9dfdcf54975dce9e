"""Bundled JSON Schemas for engine results and report payloads.

Schemas ship as package data under ``vue_audit/data/schemas``.  Each one is
compiled once into a Draft 2020-12 validator and reused.

Usage::

    from vue_audit.contracts.load import ANALYSIS_REPORT_SCHEMA, validate_instance

    validate_instance(report, ANALYSIS_REPORT_SCHEMA)
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

import jsonschema

SCHEMA_PACKAGE = "vue_audit"
SCHEMA_DIR = "data/schemas"

ANALYSIS_RESULT_SCHEMA = "analysis_result.schema.json"
FIX_RESULT_SCHEMA = "fix_result.schema.json"
ANALYSIS_REPORT_SCHEMA = "analysis_report.schema.json"
FIX_REPORT_SCHEMA = "fix_report.schema.json"

BUNDLED_SCHEMAS = (
    ANALYSIS_RESULT_SCHEMA,
    FIX_RESULT_SCHEMA,
    ANALYSIS_REPORT_SCHEMA,
    FIX_REPORT_SCHEMA,
)


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """Parsed schema document for one of ``BUNDLED_SCHEMAS``."""
    if name not in BUNDLED_SCHEMAS:
        raise KeyError(f"unknown schema: {name!r}")
    resource = resources.files(SCHEMA_PACKAGE) / SCHEMA_DIR / name
    return json.loads(resource.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def _validator(name: str) -> jsonschema.Draft202012Validator:
    schema = load_schema(name)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


def schema_errors(instance: Any, schema_name: str) -> list[str]:
    """Every violation as ``"<json path>: <message>"``, sorted by path."""
    errors = _validator(schema_name).iter_errors(instance)
    return sorted(f"{e.json_path}: {e.message}" for e in errors)


def validate_instance(instance: Any, schema_name: str) -> None:
    """Raise ``jsonschema.ValidationError`` when *instance* violates the schema."""
    _validator(schema_name).validate(instance)
