"""
Map byteunit values to and from JSON-friendly primitives.

Quantities serialize to their recoverable size string ("50.84 MB") in human-readable
form or to their raw integer count otherwise; adjusted quantities serialize to their
trimmed string and units to their canonical symbol. Deserialization accepts either
form. Errors propagate unchanged, nothing is replaced by a default.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import json

# Local ----------------------------------------------------------------------------------------------------------------
from .adjusted import AdjustedQuantity
from .formatters import fmt_recoverable
from .quantity import Byte, Quantity
from .tools import fmt_type
from .units import Unit, UnitType


# Classes --------------------------------------------------------------------------------------------------------------

class QuantityJSONEncoder(json.JSONEncoder):
    """
    JSON encoder for Quantity, AdjustedQuantity and Unit values.

    Examples:
        >>> json.dumps({"size": Byte(50840000)}, cls=QuantityJSONEncoder)
        '{"size": "50.84 MB"}'
    """
    human_readable = True

    def default(self, o):
        if isinstance(o, (Quantity, AdjustedQuantity, Unit)):
            return to_primitive(o, human_readable=self.human_readable)
        return super().default(o)


# Methods --------------------------------------------------------------------------------------------------------------

def to_primitive(obj, human_readable: bool = True) -> int | str:
    """
    Convert a byteunit value to an int or str.

    Examples:
        >>> to_primitive(Byte(50840000))
        '50.84 MB'
        >>> to_primitive(Byte(50840000), human_readable=False)
        50840000
        >>> to_primitive(Unit.KiB)
        'KiB'
    """
    if isinstance(obj, Quantity):
        return fmt_recoverable(obj) if human_readable else obj.value
    if isinstance(obj, AdjustedQuantity):
        return str(obj)
    if isinstance(obj, Unit):
        return obj.symbol
    raise TypeError(f"cannot serialize {fmt_type(obj)}, expected Quantity, AdjustedQuantity or Unit")


def from_primitive(target: type, data):
    """
    Build a byteunit value of the target class from an int or str.

    Quantity classes accept a raw count or a size string, AdjustedQuantity accepts a
    size string or a raw byte count, Unit accepts a canonical symbol.

    Raises:
        TypeError: For unsupported targets or data types, bool included.
        ParseError, ExceededBoundsError: From parsing and construction.

    Examples:
        >>> from_primitive(Byte, "50.84 MB")
        Byte(value=50840000)
        >>> from_primitive(Byte, 15000)
        Byte(value=15000)
    """
    if isinstance(data, bool) or not isinstance(data, (int, str)):
        raise TypeError(f"expected int or str, got {fmt_type(data)}")

    if isinstance(target, type) and issubclass(target, Quantity):
        if isinstance(data, int):
            return target(data)
        return target.parse(data)

    if target is AdjustedQuantity:
        if isinstance(data, int):
            return Byte(data).adjusted(UnitType.BOTH)
        return AdjustedQuantity.parse(data)

    if target is Unit:
        if not isinstance(data, str):
            raise TypeError(f"unit symbol must be str, got {fmt_type(data)}")
        return Unit.from_symbol(data)

    raise TypeError(f"cannot deserialize into {fmt_type(target)}")
