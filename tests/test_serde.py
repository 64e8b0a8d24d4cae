#
# Byteunit - Serialization Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import json
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from byteunit.adjusted import AdjustedQuantity
from byteunit.errors import ExceededBoundsError, ParseError, UnknownUnitError
from byteunit.quantity import Bit, Byte, Byte128
from byteunit.serde import QuantityJSONEncoder, from_primitive, to_primitive
from byteunit.units import Unit


# Classes --------------------------------------------------------------------------------------------------------------

class RawEncoder(QuantityJSONEncoder):
    human_readable = False


# Tests ----------------------------------------------------------------------------------------------------------------

class TestToPrimitive:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(Byte(50840000), "50.84 MB", id="byte"),
            pytest.param(Byte(0), "0 B", id="zero"),
            pytest.param(Bit(16000000), "16 Mbit", id="bit"),
            pytest.param(AdjustedQuantity(Decimal("1.50"), Unit.MiB), "1.5 MiB", id="adjusted"),
            pytest.param(Unit.KiB, "KiB", id="unit"),
        ],
    )
    def test_human_readable(self, obj, expected):
        assert to_primitive(obj) == expected

    def test_raw(self):
        """Serialize quantities as integer counts."""
        assert to_primitive(Byte(50840000), human_readable=False) == 50840000
        assert to_primitive(Byte128(2 ** 100), human_readable=False) == 2 ** 100

    def test_unsupported(self):
        with pytest.raises(TypeError, match=r"cannot serialize"):
            to_primitive(50840000)


class TestFromPrimitive:

    @pytest.mark.parametrize(
        "target, data, expected",
        [
            pytest.param(Byte, "50.84 MB", Byte(50840000), id="byte-str"),
            pytest.param(Byte, 15000, Byte(15000), id="byte-int"),
            pytest.param(Bit, "16 Mbit", Bit(16000000), id="bit-str"),
            pytest.param(Unit, "GiB", Unit.GiB, id="unit"),
        ],
    )
    def test_basic(self, target, data, expected):
        result = from_primitive(target, data)
        assert result == expected
        assert type(result) is type(expected)

    def test_adjusted(self):
        """Accept size strings and raw byte counts."""
        a = from_primitive(AdjustedQuantity, "1.5 MiB")
        assert (a.magnitude, a.unit) == (Decimal("1.5"), Unit.MiB)
        b = from_primitive(AdjustedQuantity, 1024)
        assert (b.magnitude, b.unit) == (Decimal(1), Unit.KiB)

    @pytest.mark.parametrize(
        "target, data",
        [
            pytest.param(Byte, True, id="bool"),
            pytest.param(Byte, 1.5, id="float"),
            pytest.param(Byte, None, id="none"),
            pytest.param(Unit, 3, id="unit-int"),
            pytest.param(dict, "50 MB", id="bad-target"),
        ],
    )
    def test_type_errors(self, target, data):
        with pytest.raises(TypeError):
            from_primitive(target, data)

    def test_errors_propagate(self):
        """Surface parse and bounds errors unchanged."""
        with pytest.raises(ParseError):
            from_primitive(Byte, "fifty MB")
        with pytest.raises(ExceededBoundsError):
            from_primitive(Byte, 2 ** 64)
        with pytest.raises(UnknownUnitError):
            from_primitive(Unit, "kib")

    def test_round_trip(self, quantity_cls, sample_value):
        """Restore the value from either form."""
        q = quantity_cls(sample_value)
        assert from_primitive(quantity_cls, to_primitive(q)) == q
        assert from_primitive(quantity_cls, to_primitive(q, human_readable=False)) == q


class TestJSONEncoder:

    def test_dumps(self):
        payload = {"size": Byte(50840000), "unit": Unit.MB, "count": 3}
        assert json.dumps(payload, cls=QuantityJSONEncoder) == '{"size": "50.84 MB", "unit": "MB", "count": 3}'

    def test_dumps_raw(self):
        assert json.dumps([Byte(1500)], cls=RawEncoder) == "[1500]"

    def test_loads_round_trip(self):
        text = json.dumps({"size": Byte(50840000)}, cls=QuantityJSONEncoder)
        assert from_primitive(Byte, json.loads(text)["size"]) == Byte(50840000)

    def test_unsupported(self):
        with pytest.raises(TypeError):
            json.dumps({"size": Decimal(1)}, cls=QuantityJSONEncoder)
