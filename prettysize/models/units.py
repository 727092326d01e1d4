"""Byte multipliers for every named unit, as plain integers.

These are raw byte counts, not ``Size`` values: ``42 * KiB == 43008``.
"""

from __future__ import annotations

from prettysize.models.enums import Base, Unit

BYTE = 1
KILOBYTE = 1000 * BYTE
MEGABYTE = 1000 * KILOBYTE
GIGABYTE = 1000 * MEGABYTE
TERABYTE = 1000 * GIGABYTE
PETABYTE = 1000 * TERABYTE
EXABYTE = 1000 * PETABYTE

KIBIBYTE = 1 << 10
MEBIBYTE = 1 << 20
GIBIBYTE = 1 << 30
TEBIBYTE = 1 << 40
PEBIBYTE = 1 << 50
EXBIBYTE = 1 << 60

B = BYTE
KB = KILOBYTE
MB = MEGABYTE
GB = GIGABYTE
TB = TERABYTE
PB = PETABYTE
EB = EXABYTE

KiB = KIBIBYTE  # noqa: N816
MiB = MEBIBYTE  # noqa: N816
GiB = GIBIBYTE  # noqa: N816
TiB = TEBIBYTE  # noqa: N816
PiB = PEBIBYTE  # noqa: N816
EiB = EXBIBYTE  # noqa: N816


def multiplier(unit: Unit) -> int:
    return unit.multiplier


def ladder(base: Base) -> tuple[Unit, ...]:
    """Units of one base, smallest first. ``Unit.BYTE`` always leads."""
    rungs = sorted((unit for unit in Unit if unit.base is base), key=lambda unit: unit.exponent)
    return (Unit.BYTE, *rungs)
