from __future__ import annotations

import pytest
from result import Err, Ok

from prettysize.models.enums import Unit
from prettysize.models.errors import ParseSizeError, SizeOverflowError
from prettysize.models.size import Size
from prettysize.models.units import GB, KB, KiB
from prettysize.services.parsing import lookup_unit, parse_size, try_parse_size


def test_bare_numbers_are_bytes() -> None:
    assert parse_size("1234") == Size.from_bytes(1234)
    assert parse_size(" 1234 ") == Size.from_bytes(1234)
    assert parse_size("42.0") == Size.from_bytes(42)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1234B", 1234),
        ("1234 KB", 1234 * KB),
        ("1234KiB", 1234 * KiB),
        ("12.34 MB", 12_340_000),
        ("12.34MiB", 12_939_428),
        (" 1234 GB ", 1234 * GB),
        ("42.0kib ", 42 * KiB),
    ],
)
def test_abbreviated_units(text: str, expected: int) -> None:
    assert parse_size(text).bytes() == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1234 bytes", 1234),
        ("1 byte", 1),
        ("1234 kilobytes", 1234 * KB),
        ("1234 kibibytes", 1234 * KiB),
        ("12.34 gigabytes", 12_340_000_000),
        ("12.34   gibibytes", 13_249_974_108),
        ("12.34 kIloByte", 12_340),
        ("2 Exabytes", 2 * 10**18),
    ],
)
def test_full_unit_names(text: str, expected: int) -> None:
    assert parse_size(text).bytes() == expected


def test_scientific_notation() -> None:
    assert parse_size("0.423E3") == Size.from_bytes(423)
    assert parse_size("423E-3 mb") == Size.from_bytes(423_000)
    assert parse_size("0.423e3kb") == Size.from_bytes(423_000)


def test_signed_and_fractional_values() -> None:
    assert parse_size("-1.5 KiB") == Size.from_bytes(-1536)
    assert parse_size(".5kb") == Size.from_bytes(500)
    assert parse_size("43.008 KB") == Size.from_kib(42.0)
    assert parse_size("2.5") == Size.from_bytes(2)


@pytest.mark.parametrize(
    "text",
    ["Not a number", "1234 XB", "12..34 MB", "", "   ", "KB", "1 2 KB", "5e", "5 s", "5S", "12 kbs"],
)
def test_invalid_inputs(text: str) -> None:
    with pytest.raises(ParseSizeError):
        parse_size(text)


def test_parse_error_is_a_value_error_and_keeps_the_input() -> None:
    with pytest.raises(ValueError) as exc_info:
        parse_size("1234 XB")
    assert isinstance(exc_info.value, ParseSizeError)
    assert exc_info.value.text == "1234 XB"
    assert "XB" in str(exc_info.value)


def test_out_of_range_values_overflow() -> None:
    with pytest.raises(SizeOverflowError):
        parse_size("8 EiB")
    with pytest.raises(SizeOverflowError):
        parse_size("1e30")
    with pytest.raises(SizeOverflowError):
        parse_size("1e999999999 kb")


def test_vanishing_values_round_to_zero() -> None:
    assert parse_size("1e-999999999 EiB") == Size.zero()
    assert parse_size("0e50") == Size.zero()


def test_try_parse_size_returns_result() -> None:
    ok = try_parse_size("1 KiB")
    assert isinstance(ok, Ok)
    assert ok.unwrap() == Size.from_kib(1)

    err = try_parse_size("lots")
    assert isinstance(err, Err)
    assert isinstance(err.unwrap_err(), ParseSizeError)

    overflow = try_parse_size("9 EiB")
    assert isinstance(overflow, Err)
    assert isinstance(overflow.unwrap_err(), SizeOverflowError)


def test_size_parse_classmethods() -> None:
    assert Size.parse("2 MiB") == Size.from_mib(2)
    assert isinstance(Size.try_parse("2 MiB"), Ok)


def test_lookup_unit() -> None:
    assert lookup_unit("Kibibytes") is Unit.KIBIBYTE
    assert lookup_unit("GB") is Unit.GIGABYTE
    assert lookup_unit("bytes") is Unit.BYTE
    assert lookup_unit("") is Unit.BYTE
    assert lookup_unit("xb") is None
    assert lookup_unit("s") is None
    assert lookup_unit("kbs") is None
    assert lookup_unit("KiBs") is None
    assert lookup_unit("MEGABYTES") is Unit.MEGABYTE
