"""
Byteunit helpers shared across the package.

Exact rounding and decimal rendering primitives, plus compact type/value
formatters for exception messages. Kept free of package imports to avoid
circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal
from fractions import Fraction
from typing import Any

MAX_REPR = 64


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Format the type of an object (or a type itself) for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(Decimal)
        '<type: Decimal>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return f"<type: {cls.__name__}>"


def fmt_value(obj: Any, max_repr: int = MAX_REPR) -> str:
    """
    Format a value as a type-value pair for exception messages.

    Long reprs are truncated with an ellipsis, broken __repr__ is tolerated.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("50.84 MB")
        "<str: '50.84 MB'>"
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"

    if len(repr_) > max_repr:
        repr_ = repr_[:max(1, max_repr)] + "..."
    return f"<{type(obj).__name__}: {repr_}>"


def round_half_up(value: Fraction | int) -> int:
    """
    Round an exact rational to the nearest integer, halves away from zero.

    Examples:
        >>> round_half_up(Fraction(5, 2))
        3
        >>> round_half_up(Fraction(-5, 2))
        -3
        >>> round_half_up(Fraction(49, 20))
        2
    """
    if value >= 0:
        return math.floor(value + Fraction(1, 2))
    return -math.floor(-value + Fraction(1, 2))


def round_fraction(value: Fraction | int, digits: int) -> Fraction:
    """Round an exact rational to `digits` fractional digits, halves away from zero."""
    scale = 10 ** digits
    return Fraction(round_half_up(Fraction(value) * scale), scale)


def scaled_decimal(coefficient: int, digits: int) -> Decimal:
    """
    Build Decimal(coefficient × 10^-digits) exactly, independent of the decimal context.

    Examples:
        >>> scaled_decimal(5084, 2)
        Decimal('50.84')
        >>> scaled_decimal(7, 0)
        Decimal('7')
    """
    sign = 1 if coefficient < 0 else 0
    digit_tuple = tuple(int(c) for c in str(abs(coefficient)))
    return Decimal((sign, digit_tuple, -digits))


def exact_decimal(numerator: int, denominator: int) -> Decimal:
    """
    Divide two integers into an exact Decimal, trailing zeros trimmed.

    The denominator must have no prime factors other than 2 and 5, which holds for
    every unit multiplier (powers of 1000, 1024 and 8).

    Raises:
        ZeroDivisionError: If denominator is zero.
        ValueError: If the quotient has no finite decimal expansion.

    Examples:
        >>> exact_decimal(1500000, 1048576)
        Decimal('1.430511474609375')
        >>> exact_decimal(50840000, 1000)
        Decimal('50840')
    """
    if denominator == 0:
        raise ZeroDivisionError("exact_decimal() denominator is zero")

    twos = fives = 0
    rest = abs(denominator)
    while rest % 2 == 0:
        rest //= 2
        twos += 1
    while rest % 5 == 0:
        rest //= 5
        fives += 1
    if rest != 1:
        raise ValueError(f"{numerator}/{denominator} has no finite decimal expansion")

    digits = max(twos, fives)
    coefficient = numerator * 10 ** digits // denominator
    return trim_decimal(scaled_decimal(coefficient, digits))


def fraction_to_decimal(value: Fraction) -> Decimal:
    """Convert a terminating rational to an exact Decimal, see exact_decimal()."""
    return exact_decimal(value.numerator, value.denominator)


def trim_decimal(value: Decimal) -> Decimal:
    """
    Drop trailing fractional zeros without switching to exponent notation.

    Unlike Decimal.normalize() the result never carries a positive exponent,
    so 50840 stays '50840' instead of becoming '5.084E+4'.

    Examples:
        >>> trim_decimal(Decimal("50.840"))
        Decimal('50.84')
        >>> trim_decimal(Decimal("5.084E+4"))
        Decimal('50840')
        >>> trim_decimal(Decimal("0.000"))
        Decimal('0')
    """
    sign, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"finite Decimal expected, got {fmt_value(value)}")

    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    if exponent < 0 and digits == [0]:
        exponent = 0
    if exponent > 0:
        digits.extend([0] * exponent)
        exponent = 0
    return Decimal((sign, tuple(digits), exponent))


def quantize_half_up(value: Decimal, digits: int) -> Decimal:
    """
    Round a Decimal to exactly `digits` fractional digits, halves away from zero.

    Exact for any magnitude, the decimal context precision is not involved.

    Examples:
        >>> quantize_half_up(Decimal("1.430511474609375"), 2)
        Decimal('1.43')
        >>> quantize_half_up(Decimal("2.5"), 0)
        Decimal('3')
        >>> quantize_half_up(Decimal("10"), 2)
        Decimal('10.00')
    """
    coefficient = round_half_up(Fraction(value) * 10 ** digits)
    return scaled_decimal(coefficient, digits)


def validate_precision(precision: int) -> int:
    """
    Check a fractional-digit count.

    Raises:
        TypeError: If precision is not an int (bool included).
        ValueError: If precision is negative.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int, got {fmt_type(precision)}")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return precision
