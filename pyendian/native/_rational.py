# Copyright (c) 2026 PyEndian Development Team
# This software is distributed under the terms of the MIT License.

"""
Exact conversion of rational numbers into binary floating-point values.

The conversion is performed entirely in integer arithmetic, so the result is correctly rounded
(round to nearest, ties to even) for any numerator and denominator, including the halfway cases
where going through an intermediate double would round twice.
This is why the codecs do not simply use ``numpy.float32(float(Fraction(n, d)))``: that rounds first to binary64
and then to binary32, which can land on the wrong binary32 neighbor when the first rounding creates a tie.

>>> round_rational(1, 3, BINARY32)
0.3333333432674408
>>> round_rational(1, 3, BINARY64)
0.3333333333333333
>>> round_rational(-7, -2, BINARY32)
3.5
>>> round_rational(10**40, 1, BINARY32)
inf
"""

from __future__ import annotations
import math
import typing
import dataclasses


@dataclasses.dataclass(frozen=True)
class BinaryFormat:
    """
    Parameters of an IEEE 754 binary interchange format.
    """

    precision: int
    """Significand width in bits, including the implicit leading bit."""

    min_exponent: int
    """Exponent of the smallest normal number; values below it lose precision gradually (subnormals)."""

    max_exponent: int
    """Exponent of the largest finite number."""

    @property
    def min_lsb_exponent(self) -> int:
        """Exponent of the least significant bit of the smallest subnormal number."""
        return self.min_exponent - self.precision + 1


BINARY32 = BinaryFormat(precision=24, min_exponent=-126, max_exponent=127)
BINARY64 = BinaryFormat(precision=53, min_exponent=-1022, max_exponent=1023)


def round_rational(numerator: int, denominator: int, fmt: BinaryFormat) -> float:
    """
    Returns the value of the specified format nearest to ``numerator / denominator`` as a Python float.
    Since the formats supported here are not wider than the Python float, the returned value is exact.
    Magnitudes that round beyond the largest finite number of the format produce an infinity of the matching sign.

    :raises: :class:`ZeroDivisionError` if the denominator is zero.
    """
    numerator, denominator = int(numerator), int(denominator)
    if denominator == 0:
        raise ZeroDivisionError(f"Cannot convert {numerator}/0 to a binary floating-point value")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if numerator == 0:
        return 0.0
    negative = numerator < 0
    numerator = abs(numerator)

    # Find the exponent of the LSB such that the quotient has exactly `precision` bits.
    # The initial estimate is either exact or one too small.
    exponent = numerator.bit_length() - denominator.bit_length() - fmt.precision
    if _scaled_divmod(numerator, denominator, exponent)[0].bit_length() > fmt.precision:
        exponent += 1
    exponent = max(exponent, fmt.min_lsb_exponent)

    significand, remainder, divisor = _scaled_divmod(numerator, denominator, exponent)
    if remainder * 2 > divisor or (remainder * 2 == divisor and significand & 1):
        significand += 1  # Rounding may carry into a new bit; the result is still exact, being a power of two.

    if significand.bit_length() + exponent > fmt.max_exponent + 1:
        out = math.inf
    else:
        out = math.ldexp(significand, exponent)
    return -out if negative else out


def _scaled_divmod(numerator: int, denominator: int, exponent: int) -> typing.Tuple[int, int, int]:
    """Computes ``divmod(numerator / 2**exponent, denominator)`` without leaving the integer domain."""
    if exponent >= 0:
        divisor = denominator << exponent
        quotient, remainder = divmod(numerator, divisor)
    else:
        divisor = denominator
        quotient, remainder = divmod(numerator << -exponent, divisor)
    return quotient, remainder, divisor


def _unittest_round_rational_ties_to_even() -> None:
    # 2**24 + 1 lies exactly halfway between 2**24 and 2**24 + 2; the even significand wins.
    assert round_rational(2**24 + 1, 1, BINARY32) == 2.0**24
    assert round_rational(2**24 + 3, 1, BINARY32) == 2.0**24 + 4
    assert round_rational(-(2**24 + 1), 1, BINARY32) == -(2.0**24)
    # Slightly above the halfway point must round up.
    assert round_rational(2 * (2**24 + 1) + 1, 2, BINARY32) == 2.0**24 + 2
    assert round_rational(2**53 + 1, 1, BINARY64) == 2.0**53


def _unittest_round_rational_subnormal() -> None:
    assert round_rational(1, 2**149, BINARY32) == math.ldexp(1, -149)
    assert round_rational(1, 2**150, BINARY32) == 0.0  # Halfway to the smallest subnormal, ties to even (zero).
    assert round_rational(3, 2**151, BINARY32) == math.ldexp(1, -149)
    assert round_rational(1, 2**1074, BINARY64) == 5e-324
    assert round_rational(3, 2**1076, BINARY64) == 5e-324


def _unittest_round_rational_overflow() -> None:
    largest = (2**24 - 1) * 2**104
    assert round_rational(largest, 1, BINARY32) == math.ldexp(2**24 - 1, 104)
    assert round_rational(largest + 2**103, 1, BINARY32) == math.inf  # Halfway to 2**128, ties to even.
    assert round_rational(-(10**400), 3, BINARY64) == -math.inf


def _unittest_round_rational_invalid() -> None:
    from pytest import raises

    with raises(ZeroDivisionError):
        round_rational(1, 0, BINARY32)
    with raises(ZeroDivisionError):
        round_rational(0, 0, BINARY64)
    assert round_rational(0, -5, BINARY64) == 0.0


def _unittest_round_rational_no_double_rounding() -> None:
    import numpy

    # Just above the midpoint between 1 and the next binary32 value. Going through binary64 loses the excess,
    # leaving an exact tie that then rounds down to the even neighbor.
    numerator, denominator = 2**80 + 2**56 + 1, 2**80
    assert numerator / denominator == 1 + 2**-24
    assert float(numpy.float32(numerator / denominator)) == 1.0
    assert round_rational(numerator, denominator, BINARY32) == 1 + 2**-23
    assert round_rational(numerator - 2, denominator, BINARY32) == 1.0
