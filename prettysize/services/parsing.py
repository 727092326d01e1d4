from __future__ import annotations

import re
from decimal import Decimal

from result import Err, Ok, Result

from prettysize.models.enums import Unit
from prettysize.models.errors import ParseSizeError, SizeError, SizeOverflowError
from prettysize.models.size import Size

_SIZE_RE = re.compile(
    r"""
    ^\s*
    (?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    \s*
    (?P<unit>[A-Za-z]*)
    \s*$
    """,
    re.VERBOSE,
)


def _unit_names() -> dict[str, Unit]:
    names: dict[str, Unit] = {"": Unit.BYTE}
    for unit in Unit:
        names[unit.symbol.lower()] = unit
        names[unit.full_name] = unit
    return names


_UNIT_NAMES = _unit_names()
_FULL_NAMES: dict[str, Unit] = {unit.full_name: unit for unit in Unit}


def lookup_unit(name: str) -> Unit | None:
    """Resolve a unit name case-insensitively.

    Only spelled-out names take a plural ``s`` (``"kibibytes"``); symbols do not.
    """
    key = name.strip().lower()
    if key in _UNIT_NAMES:
        return _UNIT_NAMES[key]
    if key.endswith("s"):
        return _FULL_NAMES.get(key[:-1])
    return None


def parse_size(text: str) -> Size:
    """Parse text such as ``"12.34 KB"``, ``"1234KiB"`` or ``"2 gibibytes"``.

    A bare number is a byte count. Scientific notation is accepted, with or
    without a space before the unit (``"423E-3 mb"``, ``"0.423e3kb"``).
    """
    match = _SIZE_RE.match(text)
    if match is None:
        raise ParseSizeError(text, "expected a number optionally followed by a unit")

    unit = lookup_unit(match["unit"])
    if unit is None:
        raise ParseSizeError(text, f"unknown unit {match['unit']!r}")

    number = Decimal(match["number"])
    # keep absurd exponents away from exact rational arithmetic
    if number and number.adjusted() >= 19:
        raise SizeOverflowError(f"{text!r} is outside the signed 64-bit range")
    if number.adjusted() < -19:
        number = Decimal(0)

    return Size.from_unit(number, unit)


def try_parse_size(text: str) -> Result[Size, SizeError]:
    try:
        return Ok(parse_size(text))
    except SizeError as exc:
        return Err(exc)
