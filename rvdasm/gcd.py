"""Greatest common divisor of unsigned 64-bit integers, with a small command."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from functools import reduce

U64_MAX = (1 << 64) - 1

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise ValueError(f"number too large for 64 bits: {text!r}")
    return value


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of two non-zero integers."""
    if n == 0 or m == 0:
        raise ValueError("gcd is undefined when an operand is zero")
    while m != 0:
        if m < n:
            n, m = m, n
        m %= n
    return n


def gcd_all(numbers: Iterable[int]) -> int:
    """Return the greatest common divisor of one or more non-zero integers."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is required")
    return reduce(gcd, values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    numbers = []
    for arg in args:
        try:
            numbers.append(_parse_u64(arg))
        except ValueError as exc:
            print(f"Error parsing argument: {exc}", file=sys.stderr)
            return 1

    if not numbers:
        print("Usage: gcd NUBER ...", file=sys.stderr)
        return 1

    try:
        result = gcd_all(numbers)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"The greatest common divisor of {numbers} is {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())