from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING

from prettysize.models._base import IntegralSize
from prettysize.models.enums import Base, Style, Unit
from prettysize.models.errors import NonFiniteSizeError
from prettysize.services.formatting import FormatSpec, format_bytes

if TYPE_CHECKING:
    from result import Result

    from prettysize.models.errors import SizeError


class Size(IntegralSize):
    """A count of bytes, constructible from any real number of any unit.

    Values converge on a single integer byte count at construction; fractional
    bytes round to the nearest integer with ties going to the even neighbour.
    Equality and ordering only look at that byte count, so
    ``Size.from_gigabytes(2) != Size.from_gibibytes(2)``.
    """

    __slots__ = ()

    @staticmethod
    def _exact(value: object) -> Fraction:
        if isinstance(value, bool):
            raise TypeError("expected a number, got bool")
        if isinstance(value, numbers.Rational):
            return Fraction(value.numerator, value.denominator)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise NonFiniteSizeError(f"{value} is not a finite number of bytes")
            return Fraction(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise NonFiniteSizeError(f"{value} is not a finite number of bytes")
            return Fraction(value)
        raise TypeError(f"expected a number, got {type(value).__name__}")

    @classmethod
    def parse(cls, text: str) -> Size:
        from prettysize.services.parsing import parse_size

        return parse_size(text)

    @classmethod
    def try_parse(cls, text: str) -> Result[Size, SizeError]:
        from prettysize.services.parsing import try_parse_size

        return try_parse_size(text)

    def as_unit(self, unit: Unit) -> float:
        return self.byte_count / unit.multiplier

    def as_kilobytes(self) -> float:
        return self.as_unit(Unit.KILOBYTE)

    def as_megabytes(self) -> float:
        return self.as_unit(Unit.MEGABYTE)

    def as_gigabytes(self) -> float:
        return self.as_unit(Unit.GIGABYTE)

    def as_terabytes(self) -> float:
        return self.as_unit(Unit.TERABYTE)

    def as_petabytes(self) -> float:
        return self.as_unit(Unit.PETABYTE)

    def as_exabytes(self) -> float:
        return self.as_unit(Unit.EXABYTE)

    def as_kibibytes(self) -> float:
        return self.as_unit(Unit.KIBIBYTE)

    def as_mebibytes(self) -> float:
        return self.as_unit(Unit.MEBIBYTE)

    def as_gibibytes(self) -> float:
        return self.as_unit(Unit.GIBIBYTE)

    def as_tebibytes(self) -> float:
        return self.as_unit(Unit.TEBIBYTE)

    def as_pebibytes(self) -> float:
        return self.as_unit(Unit.PEBIBYTE)

    def as_exbibytes(self) -> float:
        return self.as_unit(Unit.EXBIBYTE)

    as_kb = as_kilobytes
    as_mb = as_megabytes
    as_gb = as_gigabytes
    as_tb = as_terabytes
    as_pb = as_petabytes
    as_eb = as_exabytes
    as_kib = as_kibibytes
    as_mib = as_mebibytes
    as_gib = as_gibibytes
    as_tib = as_tebibytes
    as_pib = as_pebibytes
    as_eib = as_exbibytes

    def format(self, spec: FormatSpec | None = None) -> str:
        return (spec or FormatSpec()).format(self.byte_count)

    def to_string(self, base: Base = Base.BASE2, style: Style = Style.SMART) -> str:
        return format_bytes(self.byte_count, base, style)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return f"{self!s:{format_spec}}"
