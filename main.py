"""Command line front end for numeric tower operations."""

import argparse
import logging
import sys
from typing import Any, List, Optional

from numeric_tower import ArbitraryInteger, ArbitraryRational, ArbitraryFloat, NumericTowerError
from numeric_tower.utils import EnvironmentManager, EnvironmentVariables

OPERATIONS = ("add", "sub", "mul", "addmul", "neg", "abs", "sqrt", "sqrtrem", "root")


def parse_operand(text: str) -> Any:
    """Parse an integer, a p/q rational or a decimal float.

    Integers stay native so the tower classifies them by magnitude.
    """
    if "/" in text:
        numerator, denominator = text.split("/", 1)
        return ArbitraryRational(int(numerator), int(denominator))
    try:
        return int(text, 0)
    except ValueError:
        return ArbitraryFloat(text)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Apply an arithmetic operation to an arbitrary-precision integer."
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Operation to apply")
    parser.add_argument("receiver", type=int, help="The receiving integer")
    parser.add_argument(
        "operands",
        nargs="*",
        help="Operands: integers, p/q rationals or decimal floats",
    )
    return parser.parse_args(argv)


def run(operation: str, receiver: ArbitraryInteger, operands: List[Any]) -> str:
    """Apply operation and render the result."""
    if operation == "add":
        return str(receiver.add(*operands))
    if operation == "sub":
        return str(receiver.subtract(*operands))
    if operation == "mul":
        return str(receiver.multiply(*operands))
    if operation == "addmul":
        receiver.addmul_inplace(*operands)
        return str(receiver)
    if operation == "neg":
        return str(receiver.negate())
    if operation == "abs":
        return str(receiver.absolute_value())
    if operation == "sqrt":
        return str(receiver.sqrt())
    if operation == "sqrtrem":
        root, rem = receiver.sqrt_with_remainder()
        return f"{root} {rem}"
    return str(receiver.kth_root(*operands))


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the command, apply it and print the result."""
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    )
    args = parse_args(argv)

    try:
        receiver = ArbitraryInteger(args.receiver)
        operands = [parse_operand(text) for text in args.operands]
        result = run(args.operation, receiver, operands)
    except (NumericTowerError, TypeError, ValueError, ZeroDivisionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
