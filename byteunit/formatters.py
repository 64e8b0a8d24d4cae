"""
Render quantities and adjusted quantities as human-readable size strings.

Three display modes cover raw counts, base-unit fixed precision and automatically
adjusted units. Fixed-precision rendering rounds half away from zero, and no renderer
ever falls back to exponent notation. The inverse direction is parse.parse_size().
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from decimal import Decimal
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .selection import appropriate_unit, exact_unit, recoverable_unit
from .tools import fmt_type, fmt_value, quantize_half_up, trim_decimal, validate_precision
from .units import Category, Unit, UnitType, byteunit_conf

_SPEC_RE = re.compile(
    r"(?P<align>[<>])?(?P<sign>[-+])?(?P<alternate>#)?(?P<width>[0-9]+)?(?:\.(?P<precision>[0-9]+))?"
)


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class DisplayMode(StrEnum):
    """
    Modes for quantity display.

    Attributes:
        RAW (str)        : Integer count of base units, no unit - 1500000
        BASE_FIXED (str) : Base unit with N zero fractional digits - 1500000.00 B
        ADJUSTED (str)   : Appropriate unit, trimmed or N digits - 1.43 MiB
    """
    RAW = "raw"
    BASE_FIXED = "base_fixed"
    ADJUSTED = "adjusted"
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_decimal(value: Decimal, precision: int | None = None, *, trim: bool = False) -> str:
    """
    Render a decimal magnitude in positional notation.

    Args:
        value: Magnitude to render.
        precision: Fractional digits, rounded half away from zero; None renders
            the exact value trimmed of trailing zeros.
        trim: Strip trailing zeros after rounding to precision.

    Examples:
        >>> fmt_decimal(Decimal("1.430511474609375"), 2)
        '1.43'
        >>> fmt_decimal(Decimal("5.084E+4"))
        '50840'
        >>> fmt_decimal(Decimal("1.50"), 3)
        '1.500'
        >>> fmt_decimal(Decimal("1.50"), 3, trim=True)
        '1.5'
    """
    if not isinstance(value, Decimal):
        raise TypeError(f"value must be Decimal, got {fmt_type(value)}")
    if precision is None:
        return format(trim_decimal(value), "f")

    precision = validate_precision(precision)
    rounded = quantize_half_up(value, precision)
    if trim:
        rounded = trim_decimal(rounded)
    return format(rounded, "f")


def fmt_pair(
        magnitude: Decimal,
        unit: Unit,
        precision: int | None = None,
        *,
        trim: bool = False,
        separator: str = byteunit_conf.SEPARATOR,
) -> str:
    """Render a magnitude followed by a unit symbol."""
    return f"{fmt_decimal(magnitude, precision, trim=trim)}{separator}{Unit.from_symbol(unit).symbol}"


def fmt_quantity(
        quantity,
        mode: DisplayMode | str = DisplayMode.ADJUSTED,
        precision: int | None = None,
        *,
        unit_type: UnitType | str = UnitType.BINARY,
        separator: str = byteunit_conf.SEPARATOR,
) -> str:
    """
    Render a Quantity in one of the display modes.

    Args:
        quantity: Byte, Bit or any other Quantity.
        mode: RAW renders the integer count only. BASE_FIXED renders the count with
            the base unit and `precision` zero fractional digits. ADJUSTED selects the
            appropriate unit of `unit_type` and renders the magnitude trimmed
            (precision None) or with exactly `precision` digits.
        precision: Fractional digits, None or a non-negative int.
        unit_type: Unit system used by ADJUSTED.
        separator: Text between the magnitude and the unit symbol.

    Raises:
        TypeError: If precision is not an int or None.
        ValueError: If mode is unknown or precision is negative.

    Examples:
        >>> fmt_quantity(Byte(1500000), DisplayMode.RAW)
        '1500000'
        >>> fmt_quantity(Byte(1500000), DisplayMode.BASE_FIXED, 2)
        '1500000.00 B'
        >>> fmt_quantity(Byte(1500000), precision=2)
        '1.43 MiB'
        >>> fmt_quantity(Byte(1500000), unit_type=UnitType.DECIMAL)
        '1.5 MB'
    """
    mode = DisplayMode(mode)
    if precision is not None:
        precision = validate_precision(precision)

    if mode is DisplayMode.RAW:
        return str(quantity.value)

    if mode is DisplayMode.BASE_FIXED:
        base = Unit.base_unit(quantity.category)
        return fmt_pair(Decimal(quantity.value), base, precision or 0, separator=separator)

    magnitude, unit = appropriate_unit(quantity, unit_type)
    return fmt_pair(magnitude, unit, precision, separator=separator)


def fmt_exact(
        quantity,
        allow_binary: bool = True,
        *,
        separator: str = byteunit_conf.SEPARATOR,
) -> str:
    """
    Render a Quantity at its exact unit; parsing the result gives back the same value.

    Examples:
        >>> fmt_exact(Byte(50840000))
        '50840 KB'
    """
    magnitude, unit = exact_unit(quantity, allow_binary)
    return fmt_pair(magnitude, unit, separator=separator)


def fmt_recoverable(
        quantity,
        precision: int = byteunit_conf.DEFAULT_PRECISION,
        *,
        allow_binary: bool = True,
        separator: str = byteunit_conf.SEPARATOR,
) -> str:
    """
    Render a Quantity at its recoverable unit; parsing the result gives back the same value.

    Examples:
        >>> fmt_recoverable(Byte(50840000), 2)
        '50.84 MB'
        >>> fmt_recoverable(Byte(50840000), 0)
        '50840 KB'
    """
    magnitude, unit = recoverable_unit(quantity, allow_binary, precision)
    return fmt_pair(magnitude, unit, separator=separator)


def fmt_adjusted(
        adjusted,
        precision: int | None = None,
        *,
        trim: bool = False,
        separator: str = byteunit_conf.SEPARATOR,
) -> str:
    """
    Render an AdjustedQuantity with its own unit.

    Examples:
        >>> fmt_adjusted(AdjustedQuantity(Decimal("1.430511474609375"), Unit.MiB), 2)
        '1.43 MiB'
        >>> fmt_adjusted(AdjustedQuantity(Decimal("1.5"), Unit.MB), 2, trim=True)
        '1.5 MB'
    """
    return fmt_pair(adjusted.magnitude, adjusted.unit, precision, trim=trim, separator=separator)


def fmt_spec_quantity(quantity, spec: str) -> str:
    """
    Python format() protocol for quantities.

    "" renders the raw count. "#" and "#.N" render the recoverable form at N digits
    (default 3). With "#", a "-" flag drops the separator, a "+" flag pads the separator
    so unit symbols line up, and a width pads the magnitude, left-aligned unless ">"
    is given. Any spec without "#" is passed to int.__format__.

    Examples:
        >>> format(Byte(10240), "#")
        '10 KiB'
        >>> format(Byte(10240), "#10")
        '10     KiB'
        >>> format(Byte(50840000), ">+#12")
        '   50.84  MB'
    """
    match = _SPEC_RE.fullmatch(spec)
    if match is None or not match.group("alternate"):
        return format(quantity.value, spec)

    precision = match.group("precision")
    precision = byteunit_conf.DEFAULT_PRECISION if precision is None else int(precision)
    magnitude, unit = recoverable_unit(quantity, precision=precision)
    return _fmt_spec_pair(fmt_decimal(magnitude), unit, match)


def fmt_spec_adjusted(adjusted, spec: str) -> str:
    """
    Python format() protocol for adjusted quantities.

    ".N" renders exactly N digits, "#.N" rounds to N digits and trims trailing zeros.
    A "-" flag drops the separator, a "+" flag pads the separator so unit symbols line
    up, and a width pads the magnitude, left-aligned unless ">" is given.

    Raises:
        ValueError: For any other format spec.

    Examples:
        >>> a = Byte(10000).adjusted()
        >>> format(a, "10.2")
        '9.77   KiB'
        >>> format(a, ">10.2")
        '  9.77 KiB'
    """
    match = _SPEC_RE.fullmatch(spec)
    if match is None:
        raise ValueError(f"invalid format specifier {fmt_value(spec)} for {fmt_type(adjusted)}")

    precision = match.group("precision")
    precision = None if precision is None else int(precision)
    number = fmt_decimal(adjusted.magnitude, precision, trim=bool(match.group("alternate")))
    return _fmt_spec_pair(number, adjusted.unit, match)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_spec_pair(number: str, unit: Unit, match: re.Match) -> str:
    symbol = unit.symbol
    sign = match.group("sign")
    if sign == "-":
        separator = ""
    elif sign == "+":
        separator = " " * (1 + _SYMBOL_COLUMN[unit.category] - len(symbol))
    else:
        separator = byteunit_conf.SEPARATOR

    width = match.group("width")
    if width is not None:
        # the width covers the whole rendering, the magnitude takes what the unit leaves
        width = int(width) - len(separator) - len(symbol)
        if width > 1:
            number = number.rjust(width) if match.group("align") == ">" else number.ljust(width)
    return f"{number}{separator}{symbol}"


# Constants ------------------------------------------------------------------------------------------------------------

_SYMBOL_COLUMN = {c: max(len(u.symbol) for u in Unit if u.category is c) for c in Category}
