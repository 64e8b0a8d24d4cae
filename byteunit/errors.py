"""
Exceptions raised by byteunit.

Every error derives from ByteUnitError and also from the closest builtin
exception, so callers may catch either ``ByteUnitError`` or, for example,
``ValueError`` / ``OverflowError`` / ``ZeroDivisionError``.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class ByteUnitError(Exception):
    """Base exception for all byteunit errors."""


class ParseError(ByteUnitError, ValueError):
    """Raised when a size string cannot be parsed."""


class InvalidNumberError(ParseError):
    """Raised when the numeric literal of a size string is malformed."""

    def __init__(self, text: str, reason: str = "not a valid non-negative decimal literal"):
        self.text = text
        super().__init__(f"invalid number in {text!r}: {reason}")


class UnknownUnitError(ParseError):
    """Raised when a unit token does not resolve to a known unit."""

    def __init__(self, token: str, reason: str | None = None):
        self.token = token
        message = f"unknown unit {token!r}"
        super().__init__(f"{message}: {reason}" if reason else message)


class FractionalBaseUnitError(ParseError):
    """Raised when a fractional literal is given without a unit."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"fractional value {text!r} requires a unit, a bare number is an integer count of base units"
        )


class ExceededBoundsError(ByteUnitError, OverflowError):
    """Raised when a value exceeds the representable range of the target width."""

    def __init__(self, value, max_value: int | None = None):
        self.value = value
        self.max_value = max_value
        shown = _fmt_bound(value)
        if max_value is None:
            super().__init__(f"value {shown} exceeds the valid range")
        else:
            super().__init__(f"value {shown} exceeds the valid range [0, {max_value}]")


class UnderflowError(ByteUnitError, ArithmeticError):
    """Raised when a subtraction would produce a negative quantity."""

    def __init__(self, minuend: int, subtrahend: int):
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(f"cannot subtract {subtrahend} from {minuend}, result would be negative")


class DivisionByZeroError(ByteUnitError, ZeroDivisionError):
    """Raised when a quantity is divided by zero."""

    def __init__(self):
        super().__init__("quantity division by zero")


class InvalidMagnitudeError(ByteUnitError, ValueError):
    """Raised when a magnitude is negative, NaN or infinite."""


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_bound(value) -> str:
    # str() of an int past sys.get_int_max_str_digits() raises ValueError
    if isinstance(value, int) and value.bit_length() > _MAX_SHOWN_BITS:
        return f"of {value.bit_length()} bits"
    return str(value)


# Constants ------------------------------------------------------------------------------------------------------------

_MAX_SHOWN_BITS = 1024
