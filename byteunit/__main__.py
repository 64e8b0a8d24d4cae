"""
CLI interface for size conversion.

Usage:
    python -m byteunit "50.84 MB"
    python -m byteunit 1500000 --precision 2
    python -m byteunit "16 Mbit" --bits --mode exact
    python -m byteunit --help
"""

import sys
import argparse

from .errors import ByteUnitError
from .formatters import DisplayMode, fmt_exact, fmt_quantity, fmt_recoverable
from .quantity import quantity_type
from .units import Category, UnitType, byteunit_conf

MODES = [m.value for m in DisplayMode] + ["exact", "recoverable"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between raw byte/bit counts and human-readable sizes",
        prog="python -m byteunit",
    )
    parser.add_argument("size", help='Size to convert, e.g. "50.84 MB", "123KiB", "15000"')
    parser.add_argument(
        "--bits", action="store_true", help="Treat the size as a bit quantity (default: bytes)"
    )
    parser.add_argument(
        "--wide", action="store_true", help="Use 128-bit quantities, enables ZB/ZiB/YB/YiB units"
    )
    parser.add_argument(
        "--case-sensitive", action="store_true", help="Match unit prefixes case-sensitively (always on for bits)"
    )
    parser.add_argument(
        "--mode", choices=MODES, default=DisplayMode.ADJUSTED.value, help="Rendering mode (default: adjusted)"
    )
    parser.add_argument(
        "--unit-type", choices=[t.value for t in UnitType], default=UnitType.BINARY.value,
        help="Unit system for adjusted mode (default: binary)"
    )
    parser.add_argument(
        "--precision", type=int, default=None,
        help=f"Fractional digits (default: trimmed; {byteunit_conf.DEFAULT_PRECISION} for recoverable)"
    )
    parser.add_argument(
        "--compact", action="store_true", help="No space between magnitude and unit"
    )
    return parser


def render(args: argparse.Namespace) -> str:
    """Parse args.size and render it according to the remaining options."""
    category = Category.BIT if args.bits else Category.BYTE
    width = byteunit_conf.WIDE_WIDTH if args.wide else byteunit_conf.DEFAULT_WIDTH
    cls = quantity_type(category, width)
    quantity = cls.parse(args.size) if args.bits else cls.parse(args.size, case_sensitive=args.case_sensitive)
    separator = "" if args.compact else byteunit_conf.SEPARATOR

    if args.mode == "exact":
        return fmt_exact(quantity, separator=separator)
    if args.mode == "recoverable":
        precision = byteunit_conf.DEFAULT_PRECISION if args.precision is None else args.precision
        return fmt_recoverable(quantity, precision, separator=separator)
    return fmt_quantity(quantity, args.mode, args.precision, unit_type=args.unit_type, separator=separator)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point, returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        print(render(args))
    except (ByteUnitError, ValueError) as e:
        parser.exit(2, f"{parser.prog}: error: {e}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
