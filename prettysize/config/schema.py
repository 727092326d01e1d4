from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from prettysize.models.enums import Base, Style
from prettysize.services.formatting import FormatSpec


@dataclass(slots=True)
class FormatConfig:
    base: Base = Base.BASE2
    style: Style = Style.SMART
    scale: int | None = None
    bar_width: int = 16

    def to_format_spec(self) -> FormatSpec:
        return FormatSpec(base=self.base, style=self.style, scale=self.scale)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base.value,
            "style": self.style.value,
            "scale": self.scale,
            "barWidth": self.bar_width,
        }


def from_dict(data: dict[str, Any], defaults: FormatConfig) -> FormatConfig:
    scale_raw = data.get("scale", defaults.scale)

    return FormatConfig(
        base=Base(str(data.get("base", defaults.base.value))),
        style=Style(str(data.get("style", defaults.style.value))),
        scale=max(0, int(scale_raw)) if scale_raw is not None else None,
        bar_width=max(0, int(data.get("barWidth", defaults.bar_width))),
    )
