"""Transparent interchange of sizes as plain byte counts.

A ``Size`` travels as a single integer. On the way in, strings are parsed
(``"12.92 gigabytes"``) and floats are rounded like any other construction.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from prettysize.models._base import IntegralSize
from prettysize.models.size import Size
from prettysize.services.parsing import parse_size


def to_raw(size: IntegralSize) -> int:
    return size.bytes()


def from_raw(value: object) -> Size:
    if isinstance(value, Size):
        return value
    if isinstance(value, IntegralSize):
        return Size(value.bytes())
    if isinstance(value, bool):
        raise TypeError("a boolean is not a size")
    if isinstance(value, (int, float)):
        return Size.from_bytes(value)
    if isinstance(value, str):
        return parse_size(value)
    raise TypeError(f"cannot read a size from {type(value).__name__}")


class SizeJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, IntegralSize):
            return to_raw(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    kwargs.setdefault("cls", SizeJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str, fields: Iterable[str] = ()) -> Any:
    """Decode JSON, turning the named top-level fields into ``Size`` values."""
    payload = json.loads(text)
    wanted = list(fields)
    if not wanted:
        return payload
    if not isinstance(payload, dict):
        raise TypeError("size fields can only be read from a JSON object")
    for name in wanted:
        if name in payload:
            payload[name] = from_raw(payload[name])
    return payload
