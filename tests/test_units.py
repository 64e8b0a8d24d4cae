#
# Byteunit - Unit Table Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from byteunit.errors import ParseError, UnknownUnitError
from byteunit.units import Category, Unit, UnitType, max_exponent_for


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitAttributes:

    @pytest.mark.parametrize(
        "unit, multiplier, bits",
        [
            pytest.param(Unit.B, 1, 8, id="B"),
            pytest.param(Unit.Bit, 1, 1, id="bit"),
            pytest.param(Unit.KB, 1000, 8000, id="KB"),
            pytest.param(Unit.KiB, 1024, 8192, id="KiB"),
            pytest.param(Unit.Mbit, 10 ** 6, 10 ** 6, id="Mbit"),
            pytest.param(Unit.Mibit, 2 ** 20, 2 ** 20, id="Mibit"),
            pytest.param(Unit.EiB, 2 ** 60, 2 ** 63, id="EiB"),
            pytest.param(Unit.YB, 10 ** 24, 8 * 10 ** 24, id="YB"),
        ],
    )
    def test_multiplier_and_bits(self, unit, multiplier, bits):
        """Expose multiplier in own base units and size in bits."""
        assert unit.multiplier == multiplier
        assert unit.bits == bits

    def test_symbol_is_value(self):
        """Use the canonical symbol as the enum value."""
        assert str(Unit.MiB) == "MiB"
        assert Unit("Kibit") is Unit.Kibit
        assert Unit.Gbit.symbol == "Gbit"

    def test_flags(self):
        """Report base, binary and bit flags."""
        assert Unit.B.is_base and Unit.Bit.is_base
        assert Unit.KiB.is_binary and not Unit.KB.is_binary
        assert Unit.Tibit.is_bit and not Unit.TiB.is_bit
        assert Unit.PiB.prefix == "P"
        assert Unit.B.prefix == ""

    def test_base_units_belong_to_every_system(self):
        """Include base units in decimal, binary and both systems."""
        for unit_type in UnitType:
            assert Unit.B.in_system(unit_type)
            assert Unit.Bit.in_system(unit_type)

    def test_bit_and_byte_units_never_equal(self):
        """Keep bit and byte units distinct."""
        assert Unit.KB != Unit.Kbit
        assert Unit.B != Unit.Bit

    def test_category_bits(self):
        """Count 8 bits per byte and 1 per bit."""
        assert Category.BYTE.bits == 8
        assert Category.BIT.bits == 1


class TestUnitLadder:

    def test_decimal_bytes_ascending(self):
        """List decimal byte units base first, ascending."""
        assert Unit.ladder(Category.BYTE, UnitType.DECIMAL, max_exponent=3) == (Unit.B, Unit.KB, Unit.MB, Unit.GB)

    def test_binary_bits_ascending(self):
        """List binary bit units base first, ascending."""
        assert Unit.ladder("bit", "binary", max_exponent=2) == (Unit.Bit, Unit.Kibit, Unit.Mibit)

    def test_both_systems_interleave(self):
        """Order both systems together by multiplier."""
        assert Unit.ladder(Category.BYTE, UnitType.BOTH, max_exponent=2) == (
            Unit.B, Unit.KB, Unit.KiB, Unit.MB, Unit.MiB
        )

    @pytest.mark.parametrize("category", list(Category))
    @pytest.mark.parametrize("unit_type", list(UnitType))
    def test_strictly_ordered(self, category, unit_type):
        """Keep multipliers strictly increasing within a category."""
        ladder = Unit.ladder(category, unit_type)
        multipliers = [u.multiplier for u in ladder]
        assert multipliers == sorted(set(multipliers))
        assert all(u.category is category for u in ladder)

    def test_full_ladder_size(self):
        """Hold base plus 8 prefixes in each system."""
        assert len(Unit.ladder(Category.BYTE)) == 17
        assert len(Unit.ladder(Category.BIT, UnitType.DECIMAL)) == 9

    @pytest.mark.parametrize(
        "max_value, expected",
        [
            pytest.param(2 ** 64 - 1, 6, id="64-bit"),
            pytest.param(2 ** 128 - 1, 8, id="128-bit"),
            pytest.param(2 ** 32 - 1, 3, id="32-bit"),
        ],
    )
    def test_max_exponent_for_width(self, max_value, expected):
        """Cap unit exponent by the width."""
        assert max_exponent_for(max_value) == expected


class TestUnitFromSymbol:

    def test_canonical(self):
        """Resolve canonical symbols exactly."""
        assert Unit.from_symbol("MB") is Unit.MB
        assert Unit.from_symbol(Unit.KiB) is Unit.KiB

    @pytest.mark.parametrize("symbol", ["mb", "Kb", "kib", "bits", ""])
    def test_non_canonical(self, symbol):
        """Reject anything but the canonical spelling."""
        with pytest.raises(UnknownUnitError):
            Unit.from_symbol(symbol)

    def test_type_error(self):
        """Reject non-str symbols."""
        with pytest.raises(TypeError, match=r"must be str"):
            Unit.from_symbol(1000)


class TestUnitParse:

    @pytest.mark.parametrize(
        "token, expected",
        [
            pytest.param("B", Unit.B, id="B"),
            pytest.param("b", Unit.Bit, id="b"),
            pytest.param("bit", Unit.Bit, id="bit"),
            pytest.param("bits", Unit.Bit, id="bits"),
            pytest.param("KB", Unit.KB, id="KB"),
            pytest.param("Kb", Unit.Kbit, id="Kb"),
            pytest.param("Kbit", Unit.Kbit, id="Kbit"),
            pytest.param("KiB", Unit.KiB, id="KiB"),
            pytest.param("Kib", Unit.Kibit, id="Kib"),
            pytest.param("Kibit", Unit.Kibit, id="Kibit"),
            pytest.param("Kibits", Unit.Kibit, id="Kibits"),
            pytest.param("MiB", Unit.MiB, id="MiB"),
            pytest.param("Gbits", Unit.Gbit, id="Gbits"),
            pytest.param(" EiB ", Unit.EiB, id="padded"),
        ],
    )
    def test_case_sensitive(self, token, expected):
        """Resolve canonical-case tokens."""
        assert Unit.parse(token) is expected

    @pytest.mark.parametrize(
        "token",
        [
            pytest.param("kB", id="lower-prefix"),
            pytest.param("KIB", id="upper-marker"),
            pytest.param("KBit", id="upper-bit"),
            pytest.param("bi", id="bi"),
            pytest.param("bc", id="bc"),
            pytest.param("Kc", id="Kc"),
            pytest.param("i", id="marker-only"),
            pytest.param("iB", id="marker-without-prefix"),
            pytest.param("XB", id="unknown-prefix"),
            pytest.param("KBB", id="double-suffix"),
        ],
    )
    def test_case_sensitive_rejects(self, token):
        """Reject tokens off the canonical case or grammar."""
        with pytest.raises(UnknownUnitError):
            Unit.parse(token)

    @pytest.mark.parametrize(
        "token, expected",
        [
            pytest.param("kB", Unit.KB, id="kB"),
            pytest.param("kb", Unit.Kbit, id="kb"),
            pytest.param("KIB", Unit.KiB, id="KIB"),
            pytest.param("kib", Unit.Kibit, id="kib"),
            pytest.param("mIb", Unit.Mibit, id="mIb"),
            pytest.param("GBIT", Unit.Gbit, id="GBIT"),
            pytest.param("Bits", Unit.Bit, id="Bits"),
        ],
    )
    def test_case_insensitive_keeps_b_meaning(self, token, expected):
        """Match prefix and marker in any case, keep B as byte and b as bit."""
        assert Unit.parse(token, case_sensitive=False) is expected

    @pytest.mark.parametrize(
        "token, prefer_byte, expected",
        [
            pytest.param("K", True, Unit.KB, id="K-byte"),
            pytest.param("K", False, Unit.Kbit, id="K-bit"),
            pytest.param("Ki", True, Unit.KiB, id="Ki-byte"),
            pytest.param("Ki", False, Unit.Kibit, id="Ki-bit"),
            pytest.param("", True, Unit.B, id="empty-byte"),
            pytest.param("", False, Unit.Bit, id="empty-bit"),
            pytest.param("KB", False, Unit.KB, id="explicit-byte"),
            pytest.param("Kbit", True, Unit.Kbit, id="explicit-bit"),
        ],
    )
    def test_default_category(self, token, prefer_byte, expected):
        """Apply the default category only to tokens without a B/b/bit suffix."""
        assert Unit.parse(token, prefer_byte=prefer_byte) is expected

    def test_max_exponent(self):
        """Reject prefixes above the width's largest exponent."""
        assert Unit.parse("EiB", max_exponent=6) is Unit.EiB
        with pytest.raises(UnknownUnitError, match=r"exponent 7"):
            Unit.parse("ZB", max_exponent=6)
        assert Unit.parse("YiB", max_exponent=8) is Unit.YiB

    def test_unknown_unit_is_parse_error(self):
        """Catch unknown units as ParseError and ValueError."""
        with pytest.raises(ParseError):
            Unit.parse("parsec")
        with pytest.raises(ValueError):
            Unit.parse("parsec")

    def test_type_error(self):
        """Reject non-str tokens."""
        with pytest.raises(TypeError):
            Unit.parse(None)
