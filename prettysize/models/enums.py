from __future__ import annotations

from enum import Enum


class Base(str, Enum):
    BASE2 = "2"
    BASE10 = "10"

    @property
    def step(self) -> int:
        return 1024 if self is Base.BASE2 else 1000


class Style(str, Enum):
    SMART = "smart"
    ABBREVIATED = "abbreviated"
    FULL = "full"
    SMART_LOWER = "smart-lower"
    ABBREVIATED_LOWER = "abbreviated-lower"
    FULL_LOWER = "full-lower"

    @property
    def is_lower(self) -> bool:
        return self in (Style.SMART_LOWER, Style.ABBREVIATED_LOWER, Style.FULL_LOWER)


class Unit(str, Enum):
    BYTE = "B"
    KILOBYTE = "KB"
    MEGABYTE = "MB"
    GIGABYTE = "GB"
    TERABYTE = "TB"
    PETABYTE = "PB"
    EXABYTE = "EB"
    KIBIBYTE = "KiB"
    MEBIBYTE = "MiB"
    GIBIBYTE = "GiB"
    TEBIBYTE = "TiB"
    PEBIBYTE = "PiB"
    EXBIBYTE = "EiB"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @property
    def base(self) -> Base | None:
        """Unit ladder this unit belongs to; ``None`` for bytes, which sit on both."""
        return _UNIT_LADDER[self][0]

    @property
    def exponent(self) -> int:
        return _UNIT_LADDER[self][1]

    @property
    def multiplier(self) -> int:
        base = self.base
        if base is None:
            return 1
        return base.step**self.exponent


_UNIT_LADDER: dict[Unit, tuple[Base | None, int]] = {
    Unit.BYTE: (None, 0),
    Unit.KILOBYTE: (Base.BASE10, 1),
    Unit.MEGABYTE: (Base.BASE10, 2),
    Unit.GIGABYTE: (Base.BASE10, 3),
    Unit.TERABYTE: (Base.BASE10, 4),
    Unit.PETABYTE: (Base.BASE10, 5),
    Unit.EXABYTE: (Base.BASE10, 6),
    Unit.KIBIBYTE: (Base.BASE2, 1),
    Unit.MEBIBYTE: (Base.BASE2, 2),
    Unit.GIBIBYTE: (Base.BASE2, 3),
    Unit.TEBIBYTE: (Base.BASE2, 4),
    Unit.PEBIBYTE: (Base.BASE2, 5),
    Unit.EXBIBYTE: (Base.BASE2, 6),
}
