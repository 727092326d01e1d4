from __future__ import annotations

from dataclasses import dataclass, replace

from prettysize.models.enums import Base, Style, Unit
from prettysize.models.units import ladder

ZERO = "0 B"


@dataclass(slots=True, frozen=True)
class FormatSpec:
    base: Base = Base.BASE2
    style: Style = Style.SMART
    scale: int | None = None

    def __post_init__(self) -> None:
        if self.scale is not None and self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")

    def with_base(self, base: Base) -> FormatSpec:
        return replace(self, base=base)

    def with_style(self, style: Style) -> FormatSpec:
        return replace(self, style=style)

    def with_scale(self, scale: int | None) -> FormatSpec:
        return replace(self, scale=scale)

    def format(self, size: int) -> str:
        return format_bytes(size, self.base, self.style, self.scale)


def pick_unit(magnitude: int, base: Base) -> Unit:
    """Largest unit of *base* that fits at least once into *magnitude*."""
    for unit in reversed(ladder(base)):
        if unit.multiplier <= magnitude:
            return unit
    return Unit.BYTE


def _decimals(quotient: float, scale: int | None) -> int:
    if scale is not None:
        return scale
    if quotient < 10:
        return 2
    if quotient < 100:
        return 1
    return 0


def _numeral(magnitude: int, unit: Unit, scale: int | None) -> str:
    if unit is Unit.BYTE:
        return str(magnitude)
    quotient = magnitude / unit.multiplier
    text = f"{quotient:.{_decimals(quotient, scale)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def unit_label(unit: Unit, style: Style, numeral: str) -> str:
    """Name ``unit`` in ``style`` as it reads after ``numeral``.

    Full names are singular whenever the rendered numeral is exactly ``"1"``,
    for any unit (``"1 Kibibyte"``, ``"1 byte"``). Any other numeral, such as
    ``"1.5"`` or ``"2"``, takes the plural.
    """
    if style in (Style.SMART, Style.SMART_LOWER):
        if unit is Unit.BYTE:
            style = Style.FULL_LOWER
        else:
            style = Style.ABBREVIATED_LOWER if style.is_lower else Style.ABBREVIATED

    if style is Style.ABBREVIATED:
        return unit.symbol
    if style is Style.ABBREVIATED_LOWER:
        return unit.symbol.lower()

    name = unit.full_name if numeral == "1" else f"{unit.full_name}s"
    return name if style.is_lower else name.capitalize()


def format_bytes(
    size: int,
    base: Base = Base.BASE2,
    style: Style = Style.SMART,
    scale: int | None = None,
) -> str:
    if size == 0:
        return ZERO
    sign = "-" if size < 0 else ""
    magnitude = abs(size)
    unit = pick_unit(magnitude, base)
    numeral = _numeral(magnitude, unit, scale)
    return f"{sign}{numeral} {unit_label(unit, style, numeral)}"


def relative_bar(size: int, total: int, width: int = 16) -> str:
    if width <= 0 or total <= 0:
        return ""
    ratio = min(1.0, max(0.0, size / total))
    filled = int(round(ratio * width))
    return "█" * filled + "░" * max(0, width - filled)
