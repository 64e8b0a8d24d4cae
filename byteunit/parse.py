"""
Parse size strings such as "50.84 MB", "123KiB" or "16 Mbit" into integer base-unit counts.

Grammar: optional whitespace, a non-negative decimal literal (digits with an optional
fractional part, no sign, no exponent, no group separators), optional whitespace, an
optional unit token, optional whitespace. Scaling is exact and rounds half away from
zero to a whole count of base units.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ExceededBoundsError, FractionalBaseUnitError, InvalidNumberError
from .tools import fmt_type, fmt_value, round_half_up
from .units import Category, Unit, byteunit_conf

_SIZE_RE = re.compile(r"\s*(?P<number>[^\sA-Za-z]*)\s*(?P<unit>.*?)\s*", re.DOTALL)
_NUMBER_RE = re.compile(r"(?P<whole>[0-9]+)(?:\.(?P<fraction>[0-9]+))?")


# Methods --------------------------------------------------------------------------------------------------------------

def split_size(text: str) -> tuple[str, str]:
    """
    Split a size string into its numeric literal and unit token.

    Examples:
        >>> split_size(" 50.84 MB ")
        ('50.84', 'MB')
        >>> split_size("123KiB")
        ('123', 'KiB')
        >>> split_size("15000")
        ('15000', '')
    """
    if not isinstance(text, str):
        raise TypeError(f"size must be str, got {fmt_type(text)}")
    match = _SIZE_RE.fullmatch(text)
    return match.group("number"), match.group("unit")


def parse_literal(number: str, text: str | None = None) -> Fraction:
    """
    Parse a non-negative decimal literal into an exact Fraction.

    Raises:
        InvalidNumberError: If the literal is empty or malformed.

    Examples:
        >>> parse_literal("50.84")
        Fraction(1271, 25)
    """
    text = number if text is None else text
    if not number:
        raise InvalidNumberError(text, "missing numeric value")

    match = _NUMBER_RE.fullmatch(number)
    if match is None:
        raise InvalidNumberError(text)

    # Decimal reads any number of digits exactly, int() stops at sys.get_int_max_str_digits()
    return Fraction(Decimal(number))


def parse_size(
        text: str,
        *,
        category: Category | str = Category.BYTE,
        max_value: int | None = None,
        max_exponent: int = byteunit_conf.MAX_EXPONENT,
        case_sensitive: bool = True,
) -> int:
    """
    Parse a size string into a whole count of base units of the given category.

    Args:
        text: Size string, e.g. "50.84 MB", "1 KiB", "16 Mbit", "15000".
        category: Category of the result count; also the default category of a
            unit token without a B/b/bit suffix.
        max_value: Largest accepted result, None for no bound.
        max_exponent: Largest unit exponent accepted in the unit token.
        case_sensitive: Unit token case policy, see Unit.parse().

    Returns:
        int: Count of base units, rounded half away from zero.

    Raises:
        TypeError: If text is not a str.
        InvalidNumberError: If the numeric literal is malformed.
        UnknownUnitError: If the unit token does not resolve.
        FractionalBaseUnitError: If a fractional literal has no unit.
        ExceededBoundsError: If the result exceeds max_value.

    Examples:
        >>> parse_size("50.84 MB")
        50840000
        >>> parse_size("16 Mbit")
        2000000
        >>> parse_size("1 KiB", category=Category.BIT)
        8192
    """
    category = Category(category)
    number, token = split_size(text)
    if max_value is not None:
        _check_literal_bound(number, max_value)
    literal = parse_literal(number, text)

    if not token:
        if literal.denominator != 1:
            raise FractionalBaseUnitError(text)
        unit = Unit.base_unit(category)
    else:
        unit = Unit.parse(
            token,
            case_sensitive=case_sensitive,
            prefer_byte=category is Category.BYTE,
            max_exponent=max_exponent,
        )

    value = round_half_up(literal * Fraction(unit.bits, category.bits))
    if max_value is not None and value > max_value:
        raise ExceededBoundsError(value, max_value)
    return value


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_literal_bound(number: str, max_value: int):
    """
    Fail early on a literal too long to fit max_value under any unit.

    A whole part of d significant digits is at least 10^(d-1), which stays above
    10^(d-2) even after the bits-to-bytes division by 8.
    """
    match = _NUMBER_RE.fullmatch(number)
    if match is None:
        return
    digits = len(match.group("whole").lstrip("0"))
    if digits > len(str(max_value)) + 1:
        raise ExceededBoundsError(fmt_value(number), max_value)
