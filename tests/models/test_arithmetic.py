from __future__ import annotations

import pytest

from prettysize.models._base import I64_MAX, I64_MIN
from prettysize.models.errors import InvalidScalarError, NonFiniteSizeError, SizeOverflowError
from prettysize.models.size import Size


def test_addition_works_on_bytes_regardless_of_units() -> None:
    assert (Size.from_mb(1.0) + Size.from_kb(200)).bytes() == 1_200_000
    assert (Size.from_kb(42) + Size.from_bytes(200)).bytes() == 42_200
    assert Size.from_kb(42) + Size.from_b(0) == Size.from_kb(42)


def test_mixed_operations_from_readme() -> None:
    double = Size.from_kb(0.668) * 2 + Size.from_bytes(1)
    assert double.bytes() == 1337


def test_subtraction_can_go_negative() -> None:
    diff = Size.from_mb(1) - Size.from_mb(2)
    assert diff.bytes() == -1_000_000
    assert diff < Size.zero()


def test_scalar_multiplication() -> None:
    assert Size.from_mib(2) * 2 == Size.from_mib(4)
    assert 2 * Size.from_mib(2) == Size.from_mib(4)
    assert Size.from_kib(1) * 1.5 == Size.from_bytes(1536)
    assert Size.from_kib(1) * -1 == Size.from_kib(-1)


def test_scalar_multiplication_rounds_half_to_even() -> None:
    assert (Size.from_bytes(5) * 0.5).bytes() == 2
    assert (Size.from_bytes(3) * 0.5).bytes() == 2
    assert (Size.from_bytes(7) * 0.5).bytes() == 4


def test_scalar_division() -> None:
    assert Size.from_kib(3) / 2 == Size.from_bytes(1536)
    assert Size.from_mib(4) / 2.0 == Size.from_mib(2)
    assert (Size.from_bytes(5) / 2).bytes() == 2
    assert (Size.from_bytes(7) / 2).bytes() == 4
    assert (Size.from_bytes(-7) / 2).bytes() == -4
    assert (Size.from_bytes(10) / 3).bytes() == 3


@pytest.mark.parametrize("divisor", [0, 0.0, -0.0])
def test_division_by_zero_is_rejected(divisor: float) -> None:
    with pytest.raises(InvalidScalarError):
        Size.from_kib(1) / divisor


def test_division_by_zero_is_a_zero_division_error() -> None:
    with pytest.raises(ZeroDivisionError):
        Size.from_kib(1) / 0


def test_non_finite_scalar_is_rejected() -> None:
    with pytest.raises(NonFiniteSizeError):
        Size.from_kib(1) * float("nan")
    with pytest.raises(NonFiniteSizeError):
        Size.from_kib(1) / float("inf")


def test_overflow_is_reported_not_wrapped() -> None:
    with pytest.raises(SizeOverflowError):
        Size.from_bytes(I64_MAX) + Size.from_bytes(1)
    with pytest.raises(SizeOverflowError):
        Size.from_bytes(I64_MIN) - Size.from_bytes(1)
    with pytest.raises(SizeOverflowError):
        Size.from_eib(4) * 2
    with pytest.raises(SizeOverflowError):
        Size.from_bytes(1) / 1e-30
    with pytest.raises(OverflowError):
        -Size.from_bytes(I64_MIN)


def test_negation_and_absolute_value() -> None:
    assert -Size.from_kb(3) == Size.from_kb(-3)
    assert abs(Size.from_kb(-3)) == Size.from_kb(3)


def test_sum_of_sizes() -> None:
    sizes = [Size.from_kib(1), Size.from_kib(2), Size.from_bytes(-1024)]
    assert sum(sizes) == Size.from_kib(2)
    assert sum([], Size.zero()) == Size.zero()


class TestUnsupportedOperands:
    def test_adding_a_number_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            Size.from_kib(1) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            5 + Size.from_kib(1)  # type: ignore[operator]

    def test_multiplying_two_sizes_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            Size.from_kib(1) * Size.from_kib(1)  # type: ignore[operator]

    def test_dividing_by_a_string_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            Size.from_kib(1) / "2"  # type: ignore[operator]
