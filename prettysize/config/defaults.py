from __future__ import annotations

from prettysize.config.schema import FormatConfig
from prettysize.models.enums import Base, Style


def default_config() -> FormatConfig:
    return FormatConfig(
        base=Base.BASE2,
        style=Style.SMART,
        scale=None,
        bar_width=16,
    )
