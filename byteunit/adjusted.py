#
# Byteunit Adjusted Quantity
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_adjusted, fmt_spec_adjusted
from .numeric import std_decimal
from .units import Category, Unit, UnitType, byteunit_conf


# Classes --------------------------------------------------------------------------------------------------------------

@total_ordering
@dataclass(frozen=True, eq=False)
class AdjustedQuantity:
    """
    A quantity expressed as an exact decimal magnitude of a chosen unit, such as 1.5 MiB.

    The magnitude is any numeric accepted by numeric.std_decimal(): int, float (through
    its shortest repr), Decimal, Fraction, numeric str or numpy-like scalar. It must be
    finite and non-negative.

    Equality and ordering compare the exact amount in bits, so AdjustedQuantity(1, "KiB")
    equals AdjustedQuantity(1024, "B") and AdjustedQuantity(1, "B") equals
    AdjustedQuantity(8, "bit").

    Examples:
        >>> a = AdjustedQuantity(Decimal("1.5"), Unit.MiB)
        >>> str(a)
        '1.5 MiB'
        >>> format(a, ".2")
        '1.50 MiB'
        >>> a.to_quantity()
        Byte(value=1572864)
    """

    magnitude: Decimal
    unit: Unit

    def __post_init__(self):
        object.__setattr__(self, "unit", Unit.from_symbol(self.unit))
        object.__setattr__(self, "magnitude", std_decimal(self.magnitude))

    @classmethod
    def parse(
            cls,
            text: str,
            case_sensitive: bool = False,
            unit_type: UnitType | str = UnitType.BOTH,
            quantity_type: type | None = None,
    ) -> Self:
        """
        Parse a size string and re-express it at its appropriate unit.

        Args:
            text: Size string, e.g. "1.5 MiB".
            case_sensitive: Unit token case policy of Byte.parse().
            unit_type: System used for the appropriate unit selection.
            quantity_type: Quantity class to parse with, Byte by default.

        Examples:
            >>> AdjustedQuantity.parse("1.5 MiB")
            AdjustedQuantity(magnitude=Decimal('1.5'), unit=<Unit.MiB: 'MiB'>)
            >>> AdjustedQuantity.parse("1.5 MB")
            AdjustedQuantity(magnitude=Decimal('1.430511474609375'), unit=<Unit.MiB: 'MiB'>)
        """
        from .quantity import Byte

        quantity_type = Byte if quantity_type is None else quantity_type
        if quantity_type.category is Category.BIT:
            quantity = quantity_type.parse(text)
        else:
            quantity = quantity_type.parse(text, case_sensitive=case_sensitive)
        return quantity.adjusted(unit_type)

    @property
    def bits(self) -> Fraction:
        """Exact amount in bits."""
        return Fraction(self.magnitude) * self.unit.bits

    def to_quantity(self, quantity_type: type | None = None):
        """
        Reconstruct a whole base-unit Quantity, rounding half away from zero.

        Args:
            quantity_type: Target Quantity class. If None, Byte or Bit by the unit category,
                or Byte128 or Bit128 for units beyond the 64-bit classes (ZB, YiB, Zbit...).

        Raises:
            ExceededBoundsError: If the result does not fit the target width.
            UnknownUnitError: If the unit is beyond an explicit target width.
        """
        from .quantity import Bit, Byte, quantity_type as lookup

        if quantity_type is None:
            quantity_type = Bit if self.unit.is_bit else Byte
            if self.unit.exponent > quantity_type.max_exponent:
                quantity_type = lookup(self.unit.category, byteunit_conf.WIDE_WIDTH)
        return quantity_type.from_unit(self.magnitude, self.unit)

    def __eq__(self, other):
        if not isinstance(other, AdjustedQuantity):
            return NotImplemented
        return self.bits == other.bits

    def __lt__(self, other):
        if not isinstance(other, AdjustedQuantity):
            return NotImplemented
        return self.bits < other.bits

    def __hash__(self):
        return hash(self.bits)

    def __float__(self) -> float:
        return float(self.magnitude)

    def __str__(self) -> str:
        return fmt_adjusted(self)

    def __format__(self, format_spec: str) -> str:
        return fmt_spec_adjusted(self, format_spec)
