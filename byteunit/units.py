#
# Byteunit Unit Table
#

# Standard library -----------------------------------------------------------------------------------------------------
import re
from enum import StrEnum, unique
from functools import lru_cache
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UnknownUnitError
from .tools import fmt_type


# @formatter:off

class ByteUnitConf:
    DEFAULT_PRECISION = 3
    SEPARATOR = " "
    DEFAULT_WIDTH = 64
    WIDE_WIDTH = 128
    INT_WIDTHS = (8, 16, 32, 64, 128)
    FRACTION_DIGITS = 34
    PREFIXES = "KMGTPEZY"
    MAX_EXPONENT = 8


byteunit_conf = ByteUnitConf()

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Category(StrEnum):
    """Quantity category, a count of bytes or a count of bits."""
    BYTE = "byte"
    BIT = "bit"

    @property
    def bits(self) -> int:
        """Bits per base unit of the category."""
        return 8 if self is Category.BYTE else 1


@unique
class UnitType(StrEnum):
    """
    Unit system used by unit selection.

    Attributes:
        DECIMAL (str) : SI prefixes, powers of 1000 - KB, MB, Kbit
        BINARY (str)  : IEC prefixes, powers of 1024 - KiB, MiB, Kibit
        BOTH (str)    : Both systems considered together
    """
    DECIMAL = "decimal"
    BINARY = "binary"
    BOTH = "both"


# @formatter:off
@unique
class Unit(StrEnum):
    """
    Byte and bit units of the decimal and binary systems.

    Member value is the canonical symbol, so ``str(Unit.MiB) == "MiB"`` and
    ``Unit("MiB") is Unit.MiB``. Base units B and bit have exponent 0 and
    belong to every system.
    """
    exponent: int
    base: int
    category: Category

    def __new__(cls, symbol: str, exponent: int, base: int, category: Category):
        obj = str.__new__(cls, symbol)
        obj._value_ = symbol
        obj.exponent = exponent
        obj.base = base
        obj.category = category
        return obj

    Bit   = "bit",   0, 1000, Category.BIT
    B     = "B",     0, 1000, Category.BYTE
    Kbit  = "Kbit",  1, 1000, Category.BIT
    Kibit = "Kibit", 1, 1024, Category.BIT
    KB    = "KB",    1, 1000, Category.BYTE
    KiB   = "KiB",   1, 1024, Category.BYTE
    Mbit  = "Mbit",  2, 1000, Category.BIT
    Mibit = "Mibit", 2, 1024, Category.BIT
    MB    = "MB",    2, 1000, Category.BYTE
    MiB   = "MiB",   2, 1024, Category.BYTE
    Gbit  = "Gbit",  3, 1000, Category.BIT
    Gibit = "Gibit", 3, 1024, Category.BIT
    GB    = "GB",    3, 1000, Category.BYTE
    GiB   = "GiB",   3, 1024, Category.BYTE
    Tbit  = "Tbit",  4, 1000, Category.BIT
    Tibit = "Tibit", 4, 1024, Category.BIT
    TB    = "TB",    4, 1000, Category.BYTE
    TiB   = "TiB",   4, 1024, Category.BYTE
    Pbit  = "Pbit",  5, 1000, Category.BIT
    Pibit = "Pibit", 5, 1024, Category.BIT
    PB    = "PB",    5, 1000, Category.BYTE
    PiB   = "PiB",   5, 1024, Category.BYTE
    Ebit  = "Ebit",  6, 1000, Category.BIT
    Eibit = "Eibit", 6, 1024, Category.BIT
    EB    = "EB",    6, 1000, Category.BYTE
    EiB   = "EiB",   6, 1024, Category.BYTE
    Zbit  = "Zbit",  7, 1000, Category.BIT
    Zibit = "Zibit", 7, 1024, Category.BIT
    ZB    = "ZB",    7, 1000, Category.BYTE
    ZiB   = "ZiB",   7, 1024, Category.BYTE
    Ybit  = "Ybit",  8, 1000, Category.BIT
    Yibit = "Yibit", 8, 1024, Category.BIT
    YB    = "YB",    8, 1000, Category.BYTE
    YiB   = "YiB",   8, 1024, Category.BYTE
# @formatter:on

    @property
    def symbol(self) -> str:
        return self._value_

    @property
    def multiplier(self) -> int:
        """Size of the unit in base units of its own category."""
        return self.base ** self.exponent

    @property
    def bits(self) -> int:
        """Size of the unit in bits."""
        return self.multiplier * self.category.bits

    @property
    def is_base(self) -> bool:
        return self.exponent == 0

    @property
    def is_binary(self) -> bool:
        return self.base == 1024

    @property
    def is_bit(self) -> bool:
        return self.category is Category.BIT

    @property
    def prefix(self) -> str:
        """Prefix letter, empty for base units."""
        return byteunit_conf.PREFIXES[self.exponent - 1] if self.exponent else ""

    def in_system(self, unit_type: UnitType) -> bool:
        """True if the unit belongs to the given system; base units belong to all systems."""
        unit_type = UnitType(unit_type)
        if self.is_base or unit_type is UnitType.BOTH:
            return True
        return self.is_binary == (unit_type is UnitType.BINARY)

    @classmethod
    def base_unit(cls, category: Category | str) -> Self:
        return cls.B if Category(category) is Category.BYTE else cls.Bit

    @classmethod
    def ladder(
            cls,
            category: Category | str,
            unit_type: UnitType | str = UnitType.BOTH,
            max_exponent: int = byteunit_conf.MAX_EXPONENT,
    ) -> tuple[Self, ...]:
        """
        Units of a category and system in ascending multiplier order, base unit first.

        Examples:
            >>> Unit.ladder(Category.BYTE, UnitType.DECIMAL, max_exponent=2)
            (<Unit.B: 'B'>, <Unit.KB: 'KB'>, <Unit.MB: 'MB'>)
        """
        return _ladder(Category(category), UnitType(unit_type), max_exponent)

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        """
        Exact canonical symbol lookup.

        Raises:
            TypeError: If symbol is not a str.
            UnknownUnitError: If symbol is not a canonical unit symbol.
        """
        if isinstance(symbol, cls):
            return symbol
        if not isinstance(symbol, str):
            raise TypeError(f"unit symbol must be str, got {fmt_type(symbol)}")
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownUnitError(symbol, "not a canonical unit symbol") from None

    @classmethod
    def parse(
            cls,
            token: str,
            case_sensitive: bool = True,
            prefer_byte: bool = True,
            max_exponent: int = byteunit_conf.MAX_EXPONENT,
    ) -> Self:
        """
        Resolve a unit token such as "MB", "kib", "Gbit" or "Ki" to a Unit.

        With case_sensitive enabled the prefix letter must be uppercase, the binary
        marker must be a lowercase "i", and bit/bits must be lowercase. With it disabled
        the prefix and marker match in any case. The trailing B or b always keeps its
        meaning, byte and bit respectively. A token without any B/b/bit suffix takes the
        default category given by prefer_byte, and an empty token yields its base unit.

        Raises:
            TypeError: If token is not a str.
            UnknownUnitError: If the token does not name a unit, or names a unit with
                an exponent above max_exponent.

        Examples:
            >>> Unit.parse("Kib")
            <Unit.Kibit: 'Kibit'>
            >>> Unit.parse("kib", case_sensitive=False)
            <Unit.Kibit: 'Kibit'>
            >>> Unit.parse("Mi", prefer_byte=False)
            <Unit.Mibit: 'Mibit'>
        """
        if not isinstance(token, str):
            raise TypeError(f"unit token must be str, got {fmt_type(token)}")

        token = token.strip()
        pattern = _TOKEN_SENSITIVE if case_sensitive else _TOKEN_INSENSITIVE
        match = pattern.fullmatch(token)
        if match is None:
            raise UnknownUnitError(token)

        prefix, marker, suffix = match.group("prefix", "marker", "suffix")
        if marker and not prefix:
            raise UnknownUnitError(token, "binary marker without a prefix")

        if suffix is None:
            category = Category.BYTE if prefer_byte else Category.BIT
        elif suffix == "B":
            category = Category.BYTE
        else:
            category = Category.BIT

        exponent = byteunit_conf.PREFIXES.index(prefix.upper()) + 1 if prefix else 0
        if exponent > max_exponent:
            raise UnknownUnitError(token, f"exponent {exponent} exceeds the maximum {max_exponent} of this width")

        if exponent == 0:
            return cls.base_unit(category)
        return _UNIT_INDEX[(category, exponent, 1024 if marker else 1000)]


# Private Methods ------------------------------------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _ladder(category: Category, unit_type: UnitType, max_exponent: int) -> tuple[Unit, ...]:
    units = (u for u in Unit
             if u.category is category and u.exponent <= max_exponent and u.in_system(unit_type))
    return tuple(sorted(units, key=lambda u: u.multiplier))


def max_exponent_for(max_value: int) -> int:
    """Largest unit exponent whose size in bits fits in max_value."""
    return max(u.exponent for u in Unit if u.bits <= max_value)


# Constants ------------------------------------------------------------------------------------------------------------

_TOKEN_SENSITIVE = re.compile(r"(?P<prefix>[KMGTPEZY])?(?P<marker>i)?(?P<suffix>bits?|B|b)?")
_TOKEN_INSENSITIVE = re.compile(
    r"(?P<prefix>[KMGTPEZYkmgtpezy])?(?P<marker>[iI])?(?P<suffix>[bB][iI][tT][sS]?|B|b)?"
)

_UNIT_INDEX = {(u.category, u.exponent, u.base): u for u in Unit if not u.is_base}

# Module Sanity Checks -------------------------------------------------------------------------------------------------

assert len(_UNIT_INDEX) == 2 * 2 * len(byteunit_conf.PREFIXES), "Unit table must hold every prefix in both systems"
assert all(
    Unit.ladder(c)[i].multiplier < Unit.ladder(c)[i + 1].multiplier
    for c in Category for i in range(len(Unit.ladder(c)) - 1)
), "Units of one category must be strictly ordered by multiplier"
