#!/usr/bin/env python3
"""
BitInt command line interface.

Evaluates a single bitwise or arithmetic operation on two positive integers
and prints the operands and the result as bit strings and integers.

Usage:
    python cli.py <a> <op> <b>

Examples:
    python cli.py 6 mul 7        # 42
    python cli.py 4 sub 9        # saturates to 0
"""

import sys

from bitint import BitInt, __version__, add, and_, mul, or_, sub, xor

OPERATIONS = {
    "and": and_,
    "or": or_,
    "xor": xor,
    "add": add,
    "sub": sub,
    "mul": mul,
}


def print_version() -> None:
    """Print version information."""
    print(f"bitint {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"BitInt bit-array unsigned integers (v{__version__})")
    print("=" * 43)
    print()
    print("Usage:")
    print(f"  {prog_name} <a> <op> <b>")
    print()
    print("Options:")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Arguments:")
    print("  a, b           Positive integers")
    print("  op             One of: " + ", ".join(OPERATIONS))
    print()
    print("Notes:")
    print("  sub saturates to zero when b > a")
    print("  add widens by two bits, mul to len(a) + len(b) bits")
    print()
    print("Examples:")
    print(f"  {prog_name} 6 mul 7")
    print(f"  {prog_name} 5 and 3")
    print()


def format_value(label: str, value: BitInt) -> str:
    """Format one line of the result summary."""
    return f"{label:<8} {value.to_string():<24} = {value.to_int()} ({value.length} bits)"


def do_operation(a_value: int, op_name: str, b_value: int) -> int:
    """Evaluate one operation and print the summary.

    Args:
        a_value: First operand.
        op_name: Operation name (key of OPERATIONS).
        b_value: Second operand.

    Operands are expected to be positive; main() validates them.

    Returns:
        0 on success.
    """
    a = BitInt(a_value)
    b = BitInt(b_value)
    result = OPERATIONS[op_name](a, b)

    print(format_value("a:", a))
    print(format_value("b:", b))
    print(format_value(f"{op_name}:", result))
    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    if len(args) != 4:
        print("Error: Expected 3 arguments", file=sys.stderr)
        print(f"Usage: {prog_name} <a> <op> <b>", file=sys.stderr)
        return 1

    op_name = args[2].lower()
    if op_name not in OPERATIONS:
        print(f"Error: Unknown operation: {args[2]}", file=sys.stderr)
        print("Valid operations: " + ", ".join(OPERATIONS), file=sys.stderr)
        return 1

    try:
        a_value = int(args[1], 0)
        b_value = int(args[3], 0)
    except ValueError:
        print("Error: Operands must be integers", file=sys.stderr)
        return 1

    if a_value <= 0 or b_value <= 0:
        print("Error: Operands must be positive", file=sys.stderr)
        return 1

    return do_operation(a_value, op_name, b_value)


if __name__ == "__main__":
    sys.exit(main())
