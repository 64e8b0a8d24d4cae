"""
Unit selection strategies over a Quantity.

Every strategy returns a ``(Decimal, Unit)`` pair, the magnitude being exact and trimmed
of trailing zeros. Candidates are the units of the quantity's category up to its
max_exponent, and only units whose multiplier does not exceed the value are considered,
so a zero quantity always maps to the base unit.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import exact_decimal, fraction_to_decimal, round_fraction, round_half_up, validate_precision
from .units import Unit, UnitType, byteunit_conf


# Methods --------------------------------------------------------------------------------------------------------------

def exact_unit(quantity, allow_binary: bool = True) -> tuple[Decimal, Unit]:
    """
    Largest unit that divides the quantity value with zero remainder.

    Args:
        quantity: Byte, Bit or any other Quantity.
        allow_binary: If False only decimal units are considered.

    Returns:
        tuple[Decimal, Unit]: Integer-valued magnitude and the unit; the base unit when
            no larger unit divides the value.

    Examples:
        >>> exact_unit(Byte(50840000))
        (Decimal('50840'), <Unit.KB: 'KB'>)
        >>> exact_unit(Byte(3 * 1024 ** 2))
        (Decimal('3'), <Unit.MiB: 'MiB'>)
    """
    value = quantity.value
    unit_type = UnitType.BOTH if allow_binary else UnitType.DECIMAL

    for unit in reversed(_candidates(quantity, unit_type)):
        if value >= unit.multiplier and value % unit.multiplier == 0:
            return Decimal(value // unit.multiplier), unit
    return Decimal(value), Unit.base_unit(quantity.category)


def recoverable_unit(
        quantity,
        allow_binary: bool = True,
        precision: int = byteunit_conf.DEFAULT_PRECISION,
) -> tuple[Decimal, Unit]:
    """
    Largest unit whose display at `precision` fractional digits parses back to the same value.

    The quotient value / multiplier is rounded half away from zero to `precision` digits,
    multiplied back and rounded to the nearest integer; the unit is accepted when that
    reproduces the value exactly.

    Raises:
        TypeError: If precision is not an int.
        ValueError: If precision is negative.

    Examples:
        >>> recoverable_unit(Byte(50840000), precision=2)
        (Decimal('50.84'), <Unit.MB: 'MB'>)
        >>> recoverable_unit(Byte(50840000), precision=0)
        (Decimal('50840'), <Unit.KB: 'KB'>)
    """
    precision = validate_precision(precision)
    value = quantity.value
    unit_type = UnitType.BOTH if allow_binary else UnitType.DECIMAL

    for unit in reversed(_candidates(quantity, unit_type)):
        if value < unit.multiplier:
            continue
        rounded = round_fraction(Fraction(value, unit.multiplier), precision)
        if round_half_up(rounded * unit.multiplier) == value:
            return fraction_to_decimal(rounded), unit
    return Decimal(value), Unit.base_unit(quantity.category)


def appropriate_unit(quantity, unit_type: UnitType | str = UnitType.BINARY) -> tuple[Decimal, Unit]:
    """
    Largest unit of the system whose multiplier does not exceed the value.

    Keeps the integer part of the magnitude below the system base, except past the
    largest available unit, where the selection clamps to that unit.

    Examples:
        >>> appropriate_unit(Byte(1500000))
        (Decimal('1.430511474609375'), <Unit.MiB: 'MiB'>)
        >>> appropriate_unit(Byte(1500000), UnitType.DECIMAL)
        (Decimal('1.5'), <Unit.MB: 'MB'>)
        >>> appropriate_unit(Byte(999))
        (Decimal('999'), <Unit.B: 'B'>)
    """
    value = quantity.value
    for unit in reversed(_candidates(quantity, UnitType(unit_type))):
        if value >= unit.multiplier:
            return exact_decimal(value, unit.multiplier), unit
    return Decimal(value), Unit.base_unit(quantity.category)


def adjusted_unit(quantity, unit: Unit | str) -> tuple[Decimal, Unit]:
    """
    Exact magnitude of the quantity expressed in a caller-chosen unit.

    The unit may belong to the other category, 1 byte being 8 bits.

    Examples:
        >>> adjusted_unit(Byte(1500000), Unit.KiB)
        (Decimal('1464.84375'), <Unit.KiB: 'KiB'>)
        >>> adjusted_unit(Byte(1000), Unit.Kbit)
        (Decimal('8'), <Unit.Kbit: 'Kbit'>)
    """
    unit = Unit.from_symbol(unit)
    bits = quantity.value * quantity.category.bits
    return exact_decimal(bits, unit.bits), unit


# Private Methods ------------------------------------------------------------------------------------------------------

def _candidates(quantity, unit_type: UnitType) -> tuple[Unit, ...]:
    return Unit.ladder(quantity.category, unit_type, quantity.max_exponent)
