from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Self

from prettysize.models.enums import Unit
from prettysize.models.errors import InvalidScalarError, SizeOverflowError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def round_bytes(value: Fraction) -> int:
    """Round an exact byte quantity to the nearest integer, ties to even."""
    return round(value)


@dataclass(slots=True, frozen=True, eq=False)
class IntegralSize:
    """A signed 64-bit byte count restricted to integer arithmetic.

    No floating-point input is accepted and nothing is rendered as text.
    ``Size`` builds real-number construction, conversion and formatting on top.
    """

    byte_count: int

    def __post_init__(self) -> None:
        if isinstance(self.byte_count, bool) or not isinstance(self.byte_count, int):
            raise TypeError(f"byte_count must be an int, got {type(self.byte_count).__name__}")
        if not I64_MIN <= self.byte_count <= I64_MAX:
            raise SizeOverflowError(f"{self.byte_count} bytes is outside the signed 64-bit range")

    @staticmethod
    def _exact(value: object) -> Fraction:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        return Fraction(value)

    @classmethod
    def from_unit(cls, value: object, unit: Unit) -> Self:
        return cls(round_bytes(cls._exact(value) * unit.multiplier))

    @classmethod
    def from_bytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.BYTE)

    @classmethod
    def from_kilobytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.KILOBYTE)

    @classmethod
    def from_megabytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.MEGABYTE)

    @classmethod
    def from_gigabytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.GIGABYTE)

    @classmethod
    def from_terabytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.TERABYTE)

    @classmethod
    def from_petabytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.PETABYTE)

    @classmethod
    def from_exabytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.EXABYTE)

    @classmethod
    def from_kibibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.KIBIBYTE)

    @classmethod
    def from_mebibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.MEBIBYTE)

    @classmethod
    def from_gibibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.GIBIBYTE)

    @classmethod
    def from_tebibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.TEBIBYTE)

    @classmethod
    def from_pebibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.PEBIBYTE)

    @classmethod
    def from_exbibytes(cls, value: object) -> Self:
        return cls.from_unit(value, Unit.EXBIBYTE)

    from_b = from_bytes
    from_kb = from_kilobytes
    from_mb = from_megabytes
    from_gb = from_gigabytes
    from_tb = from_terabytes
    from_pb = from_petabytes
    from_eb = from_exabytes
    from_kib = from_kibibytes
    from_mib = from_mebibytes
    from_gib = from_gibibytes
    from_tib = from_tebibytes
    from_pib = from_pebibytes
    from_eib = from_exbibytes

    @classmethod
    def zero(cls) -> Self:
        return cls(0)

    def bytes(self) -> int:
        return self.byte_count

    def __bool__(self) -> bool:
        return self.byte_count != 0

    # compared by byte count across Size and IntegralSize alike
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return self.byte_count == other.byte_count

    def __hash__(self) -> int:
        return hash(self.byte_count)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return self.byte_count < other.byte_count

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return self.byte_count <= other.byte_count

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return self.byte_count > other.byte_count

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return self.byte_count >= other.byte_count

    def __add__(self, other: object) -> Self:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return type(self)(self.byte_count + other.byte_count)

    def __radd__(self, other: object) -> Self:
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, IntegralSize):
            return NotImplemented
        return type(self)(self.byte_count - other.byte_count)

    def __neg__(self) -> Self:
        return type(self)(-self.byte_count)

    def __abs__(self) -> Self:
        return type(self)(abs(self.byte_count))

    def __mul__(self, other: object) -> Self:
        try:
            factor = self._exact(other)
        except TypeError:
            return NotImplemented
        return type(self)(round_bytes(self.byte_count * factor))

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Self:
        try:
            divisor = self._exact(other)
        except TypeError:
            return NotImplemented
        if divisor == 0:
            raise InvalidScalarError(f"cannot divide {self.byte_count} bytes by zero")
        return type(self)(round_bytes(self.byte_count / divisor))
