from __future__ import annotations

from prettysize.models._base import IntegralSize
from prettysize.models.enums import Base, Style, Unit
from prettysize.models.errors import (
    InvalidScalarError,
    NonFiniteSizeError,
    ParseSizeError,
    SizeError,
    SizeErrorCode,
    SizeOverflowError,
)
from prettysize.models.size import Size
from prettysize.models.units import (
    B,
    BYTE,
    EB,
    EXABYTE,
    EXBIBYTE,
    GB,
    GIBIBYTE,
    GIGABYTE,
    KB,
    KIBIBYTE,
    KILOBYTE,
    MB,
    MEBIBYTE,
    MEGABYTE,
    PB,
    PEBIBYTE,
    PETABYTE,
    TB,
    TEBIBYTE,
    TERABYTE,
    EiB,
    GiB,
    KiB,
    MiB,
    PiB,
    TiB,
    ladder,
    multiplier,
)
from prettysize.services.formatting import FormatSpec, format_bytes
from prettysize.services.parsing import parse_size, try_parse_size
from prettysize.services.serialization import SizeJSONEncoder, from_raw, to_raw

__all__ = [
    "B",
    "BYTE",
    "EB",
    "EXABYTE",
    "EXBIBYTE",
    "GB",
    "GIBIBYTE",
    "GIGABYTE",
    "KB",
    "KIBIBYTE",
    "KILOBYTE",
    "MB",
    "MEBIBYTE",
    "MEGABYTE",
    "PB",
    "PEBIBYTE",
    "PETABYTE",
    "TB",
    "TEBIBYTE",
    "TERABYTE",
    "Base",
    "EiB",
    "FormatSpec",
    "GiB",
    "IntegralSize",
    "InvalidScalarError",
    "KiB",
    "MiB",
    "NonFiniteSizeError",
    "ParseSizeError",
    "PiB",
    "Size",
    "SizeError",
    "SizeErrorCode",
    "SizeJSONEncoder",
    "SizeOverflowError",
    "Style",
    "TiB",
    "Unit",
    "format_bytes",
    "from_raw",
    "ladder",
    "multiplier",
    "parse_size",
    "to_raw",
    "try_parse_size",
]
