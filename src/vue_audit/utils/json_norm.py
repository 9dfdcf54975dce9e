"""Canonical JSON text for engine payloads.

Output is key-sorted, indented and newline-terminated so two dumps of equal
payloads are byte-identical.  Engine objects are written in their wire shape
(``to_dict()``); enums as their values, paths as POSIX strings, sets as
sorted lists.  Anything else is a ``TypeError``.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import PurePath
from typing import IO, Any, Mapping


def _encode(obj: Any) -> Any:
    """``json.dumps`` fallback for values the encoder does not know."""
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, PurePath):
        return obj.as_posix()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if isinstance(obj, Mapping):
        return dict(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"cannot serialise {type(obj).__name__} to JSON")


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    text = json.dumps(
        obj,
        default=_encode,
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return text + "\n"


def stable_json_dump(obj: Any, fp: IO[str], *, indent: int | None = 2) -> None:
    fp.write(stable_json_dumps(obj, indent=indent))
