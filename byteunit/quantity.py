#
# Byteunit Quantities
#

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .adjusted import AdjustedQuantity
from .errors import DivisionByZeroError, ExceededBoundsError, InvalidMagnitudeError, UnderflowError, UnknownUnitError
from .formatters import fmt_spec_quantity
from .numeric import std_decimal
from .parse import parse_size
from .selection import adjusted_unit, appropriate_unit, exact_unit, recoverable_unit
from .tools import fmt_type, fmt_value, round_half_up
from .units import Category, Unit, UnitType, byteunit_conf, max_exponent_for

_QUANTITY_TYPES: dict[tuple[Category, int], type] = {}


# Classes --------------------------------------------------------------------------------------------------------------

@total_ordering
@dataclass(frozen=True, eq=False)
class Quantity:
    """
    Immutable non-negative whole count of bytes or bits, bounded by an unsigned integer width.

    Concrete classes are declared through class keywords, e.g.
    ``class Byte(Quantity, category=Category.BYTE, width=64)``, which set the
    class-level category, width, max_value and max_exponent. Subclasses inherit
    both unless they override them.

    Quantities of one category compare with each other and with plain ints by value.
    Ordering or arithmetic across categories raises TypeError.
    """

    value: int

    category: ClassVar[Category]
    width: ClassVar[int]
    max_value: ClassVar[int]
    max_exponent: ClassVar[int]

    def __init_subclass__(cls, *, category: Category | str | None = None, width: int | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if category is not None:
            cls.category = Category(category)
        if width is not None:
            if width not in byteunit_conf.INT_WIDTHS:
                raise ValueError(f"width must be one of {byteunit_conf.INT_WIDTHS}, got {fmt_value(width)}")
            cls.width = width
            cls.max_value = (1 << width) - 1
            cls.max_exponent = max_exponent_for(cls.max_value)
        if hasattr(cls, "category") and hasattr(cls, "width"):
            _QUANTITY_TYPES.setdefault((cls.category, cls.width), cls)

    def __post_init__(self):
        cls = type(self)
        if not (hasattr(cls, "category") and hasattr(cls, "width")):
            raise TypeError(f"{cls.__name__} has no category or width, use Byte, Bit, Byte128 or Bit128")

        value = self.value
        if isinstance(value, bool) or not hasattr(value, "__index__"):
            raise TypeError(f"value must be int, got {fmt_type(value)}")
        value = operator.index(value)
        if not 0 <= value <= cls.max_value:
            raise ExceededBoundsError(value, cls.max_value)
        object.__setattr__(self, "value", value)

    # Construction

    @classmethod
    def from_unit(cls, size, unit: Unit | str = Unit.B) -> Self:
        """
        Build a quantity from a magnitude of any unit, rounding half away from zero.

        Args:
            size: int, float, Decimal, Fraction, numeric str or numpy-like scalar.
                Fractions scale exactly, without decimal rounding.
            unit: Unit or canonical symbol, of either category.

        Raises:
            InvalidMagnitudeError: If size is negative or non-finite.
            UnknownUnitError: If the unit is beyond the class width.
            ExceededBoundsError: If the result does not fit the class width.

        Examples:
            >>> Byte.from_unit(15, Unit.KB)
            Byte(value=15000)
            >>> Byte.from_unit(1.5, "MiB")
            Byte(value=1572864)
            >>> Bit.from_unit(1, Unit.KiB)
            Bit(value=8192)
        """
        unit = Unit.from_symbol(unit)
        if unit.exponent > cls.max_exponent:
            raise UnknownUnitError(unit.symbol, f"not available for {cls.width}-bit quantities")

        if isinstance(size, Fraction):
            if size < 0:
                raise InvalidMagnitudeError(f"magnitude must be non-negative, got {fmt_value(size)}")
        else:
            size = Fraction(std_decimal(size))
        value = round_half_up(size * Fraction(unit.bits, cls.category.bits))
        if value > cls.max_value:
            raise ExceededBoundsError(value, cls.max_value)
        return cls(value)

    @classmethod
    def _parse(cls, text: str, case_sensitive: bool) -> Self:
        return cls(parse_size(
            text,
            category=cls.category,
            max_value=cls.max_value,
            max_exponent=cls.max_exponent,
            case_sensitive=case_sensitive,
        ))

    # Accessors

    def as_int(self, width: int | None = None) -> int:
        """
        Raw count of base units, optionally checked against a narrower unsigned width.

        Raises:
            ValueError: If width is not one of 8, 16, 32, 64, 128.
            ExceededBoundsError: If the value does not fit the width.

        Examples:
            >>> Byte(255).as_int(8)
            255
            >>> Byte(256).as_int(8)
            Traceback (most recent call last):
                ...
            byteunit.errors.ExceededBoundsError: value 256 exceeds the valid range [0, 255]
        """
        if width is None:
            return self.value
        if isinstance(width, bool) or width not in byteunit_conf.INT_WIDTHS:
            raise ValueError(f"width must be one of {byteunit_conf.INT_WIDTHS}, got {fmt_value(width)}")
        limit = (1 << width) - 1
        if self.value > limit:
            raise ExceededBoundsError(self.value, limit)
        return self.value

    # Arithmetic

    def add(self, other: Self) -> Self:
        """Sum of two quantities of one category, ExceededBoundsError past max_value."""
        other = self._same_category(other, "add")
        result = self.value + other.value
        if result > self.max_value:
            raise ExceededBoundsError(result, self.max_value)
        return type(self)(result)

    def subtract(self, other: Self) -> Self:
        """Difference of two quantities of one category, UnderflowError if other is larger."""
        other = self._same_category(other, "subtract")
        if other.value > self.value:
            raise UnderflowError(self.value, other.value)
        return type(self)(self.value - other.value)

    def multiply(self, factor: int) -> Self:
        """Quantity times a non-negative int, ExceededBoundsError past max_value."""
        factor = _check_factor(factor)
        result = self.value * factor
        if result > self.max_value:
            raise ExceededBoundsError(result, self.max_value)
        return type(self)(result)

    def divide(self, divisor: int) -> Self:
        """Quantity divided by a positive int, truncating."""
        divisor = _check_factor(divisor)
        if divisor == 0:
            raise DivisionByZeroError()
        return type(self)(self.value // divisor)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.divide(other)

    # Unit selection

    def exact_unit(self, allow_binary: bool = True):
        return exact_unit(self, allow_binary)

    def recoverable_unit(self, allow_binary: bool = True, precision: int = byteunit_conf.DEFAULT_PRECISION):
        return recoverable_unit(self, allow_binary, precision)

    def appropriate_unit(self, unit_type: UnitType | str = UnitType.BINARY):
        return appropriate_unit(self, unit_type)

    def adjusted(self, unit_type: UnitType | str = UnitType.BINARY) -> AdjustedQuantity:
        """
        The quantity at its appropriate unit.

        Examples:
            >>> str(Byte(1500000).adjusted())
            '1.430511474609375 MiB'
            >>> format(Byte(1500000).adjusted(), ".2")
            '1.43 MiB'
        """
        return AdjustedQuantity(*appropriate_unit(self, unit_type))

    def adjusted_to(self, unit: Unit | str) -> AdjustedQuantity:
        """The quantity at a caller-chosen unit, of either category."""
        return AdjustedQuantity(*adjusted_unit(self, unit))

    # Comparison and conversion

    def __eq__(self, other):
        if isinstance(other, Quantity):
            return self.category is other.category and self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Quantity):
            return self.value < self._same_category(other, "compare").value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value < other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return fmt_spec_quantity(self, format_spec)

    # Private

    def _same_category(self, other, operation: str):
        if not isinstance(other, Quantity):
            raise TypeError(f"cannot {operation} {fmt_type(self)} and {fmt_type(other)}")
        if other.category is not self.category:
            raise TypeError(
                f"cannot {operation} {self.category} and {other.category} quantities, "
                f"convert with to_bits() or to_bytes() first"
            )
        return other


class Byte(Quantity, category=Category.BYTE, width=byteunit_conf.DEFAULT_WIDTH):
    """
    Count of bytes, 64-bit unsigned range.

    Examples:
        >>> Byte(15000)
        Byte(value=15000)
        >>> Byte.parse("50.84 MB")
        Byte(value=50840000)
        >>> Byte(15500) + Byte(500)
        Byte(value=16000)
        >>> format(Byte(50840000), "#.2")
        '50.84 MB'
    """

    @classmethod
    def parse(cls, text: str, case_sensitive: bool = False) -> Self:
        """
        Parse a size string such as "50.84 MB", "123KiB" or "16 Mbit".

        A unit token without B/b/bit suffix ("K", "Mi") is a byte unit. A trailing "b"
        and "bit"/"bits" denote bit units, converted at 8 bits per byte and rounded half
        away from zero. With case_sensitive disabled, prefixes and the "i" marker match
        in any case while "B" and "b" keep their byte and bit meaning.

        Raises:
            InvalidNumberError, UnknownUnitError, FractionalBaseUnitError: On malformed input.
            ExceededBoundsError: If the result does not fit the class width.
        """
        return cls._parse(text, case_sensitive)

    def to_bits(self) -> "Bit":
        """
        Same amount as a bit quantity of equal width.

        Raises:
            ExceededBoundsError: If the bit count does not fit the width.
        """
        return quantity_type(Category.BIT, self.width)(self.value * 8)


class Bit(Quantity, category=Category.BIT, width=byteunit_conf.DEFAULT_WIDTH):
    """
    Count of bits, 64-bit unsigned range.

    Examples:
        >>> Bit.parse("16 Mbit")
        Bit(value=16000000)
        >>> Bit.parse("1 KiB")
        Bit(value=8192)
    """

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a size string such as "16 Mbit", "123 Kib" or "2 MiB"; always case-sensitive.

        A unit token without B/b/bit suffix ("K", "Mi") is a bit unit.
        """
        return cls._parse(text, case_sensitive=True)

    def to_bytes(self) -> Byte:
        """Same amount as a byte quantity of equal width, rounded half away from zero."""
        return quantity_type(Category.BYTE, self.width)(round_half_up(Fraction(self.value, 8)))


class Byte128(Byte, width=byteunit_conf.WIDE_WIDTH):
    """Count of bytes, 128-bit unsigned range, units up to YB and YiB."""


class Bit128(Bit, width=byteunit_conf.WIDE_WIDTH):
    """Count of bits, 128-bit unsigned range, units up to Ybit and Yibit."""


# Methods --------------------------------------------------------------------------------------------------------------

def quantity_type(category: Category | str, width: int = byteunit_conf.DEFAULT_WIDTH) -> type[Quantity]:
    """
    Concrete Quantity class of a category and width.

    Examples:
        >>> quantity_type("bit", 128)
        <class 'byteunit.quantity.Bit128'>
    """
    try:
        return _QUANTITY_TYPES[(Category(category), width)]
    except KeyError:
        raise ValueError(f"no quantity type for {category} at width {fmt_value(width)}") from None


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_factor(factor: int) -> int:
    if isinstance(factor, bool) or not hasattr(factor, "__index__"):
        raise TypeError(f"factor must be int, got {fmt_type(factor)}")
    factor = operator.index(factor)
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    return factor
