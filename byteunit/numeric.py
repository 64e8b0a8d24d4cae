"""
Standardize numeric magnitudes from Python stdlib and third-party libraries to Decimal.

Used wherever byteunit accepts an externally supplied magnitude (AdjustedQuantity,
Quantity.from_unit), so that every later computation runs on exact decimals.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
import warnings
from decimal import Decimal, InvalidOperation, localcontext
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidMagnitudeError
from .tools import fmt_type, fmt_value, fraction_to_decimal
from .units import byteunit_conf


def std_decimal(value, *, allow_bool: bool = False, allow_negative: bool = False) -> Decimal:
    """
    Convert a numeric value to an exact, finite decimal.Decimal.

    Detection Priority:
        1. bool, rejected unless allow_bool
        2. Decimal, int, float, Fraction, str (fast paths)
        3. __index__() → exact int (NumPy integers)
        4. .item() → Python scalar (array scalars), converted recursively
        5. __float__() → float (general fallback)

    Floats convert through their shortest repr, so 1.1 becomes Decimal('1.1') and not the
    binary expansion of the double. A Fraction without a finite decimal expansion is
    rounded to ByteUnitConf.FRACTION_DIGITS significant digits with a UserWarning.

    Args:
        value: Numeric value to convert.
        allow_bool: If True, convert bool to 0/1 instead of raising TypeError.
        allow_negative: If True, negative values are accepted.

    Returns:
        Decimal: Finite decimal equal to the input (or to its shortest repr for floats).
            Zero is returned unsigned.

    Raises:
        TypeError: For unsupported types, or bool when allow_bool is False.
        InvalidMagnitudeError: For NaN, infinity, malformed numeric strings, or
            negative values when allow_negative is False.

    Examples:
        >>> std_decimal(42)
        Decimal('42')
        >>> std_decimal(1.1)
        Decimal('1.1')
        >>> std_decimal(Fraction(3, 8))
        Decimal('0.375')
        >>> std_decimal("50.84")
        Decimal('50.84')
    """
    result = _to_decimal(value, allow_bool=allow_bool)

    if not result.is_finite():
        raise InvalidMagnitudeError(f"magnitude must be finite, got {fmt_value(value)}")
    if result < 0 and not allow_negative:
        raise InvalidMagnitudeError(f"magnitude must be non-negative, got {fmt_value(value)}")
    if result.is_zero():
        # -0.0 and Decimal("-0") pass the sign check above
        result = result.copy_abs()
    return result


# Private Methods ------------------------------------------------------------------------------------------------------

def _to_decimal(value, *, allow_bool: bool) -> Decimal:
    if isinstance(value, bool):
        if allow_bool:
            return Decimal(int(value))
        raise TypeError(
            f"boolean values not supported, got {value}. "
            f"Set allow_bool=True to convert booleans to int (True→1, False→0)"
        )

    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, Fraction):
        return _fraction_to_decimal(value)
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise InvalidMagnitudeError(f"not a numeric string: {fmt_value(value)}") from None

    # NumPy integers and similar exact integer types
    if hasattr(value, "__index__"):
        try:
            return Decimal(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array/tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)):
            return _to_decimal(result, allow_bool=allow_bool)

    if hasattr(value, "__float__"):
        try:
            return Decimal(repr(float(value)))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, Decimal, Fraction, numeric str, or types implementing "
        f"__index__, __float__ or .item()"
    )


def _fraction_to_decimal(value: Fraction) -> Decimal:
    try:
        return fraction_to_decimal(value)
    except ValueError:
        pass

    digits = byteunit_conf.FRACTION_DIGITS
    with localcontext() as ctx:
        ctx.prec = digits
        result = Decimal(value.numerator) / Decimal(value.denominator)
    warnings.warn(
        f"{value} has no finite decimal expansion, rounded to {digits} significant digits",
        UserWarning,
        stacklevel=3,
    )
    return result

