"""ANSI terminal helpers: clearing, cursor moves and box drawing."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import TextIO

ESC = "\x1b"
_U8_MAX = 255
_BALL = "☻"


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} out of range 0..255: {value!r}")


def locate(x: int, y: int) -> str:
    """Return the sequence that puts the cursor at column x, row y."""
    _check_u8("x", x)
    _check_u8("y", y)
    return f"{ESC}[{y};{x}H"


def cls() -> str:
    """Return the sequence that clears the terminal and homes the cursor."""
    return f"{ESC}[2J" + locate(1, 1)


def cursor_on() -> str:
    """Return the sequence that shows the cursor, followed by a newline."""
    return f"{ESC}[?25h\n"


def cursor_off() -> str:
    """Return the sequence that hides the cursor, followed by a newline."""
    return f"{ESC}[?25l\n"


def draw_box(x: int, y: int, h: int, w: int) -> str:
    """Return the sequence drawing a box of h rows and w columns at (x, y)."""
    for name, value in (("x", x), ("y", y), ("h", h), ("w", w)):
        _check_u8(name, value)
    if h < 1 or w < 1:
        raise ValueError("box height and width must be at least 1")
    if x + w > _U8_MAX or y + h > _U8_MAX:
        raise ValueError("box does not fit in the coordinate range")

    right = x + w - 1
    bottom = y + h - 1
    parts = [locate(x, y), "┌"]
    parts.extend(locate(i, y) + "─" for i in range(x + 1, right))
    parts.append("┐")

    for row in range(y + 1, bottom):
        parts.extend((locate(x, row), "│", locate(right, row), "│"))

    parts.extend((locate(x, bottom), "└"))
    parts.extend(locate(i, bottom) + "─" for i in range(x + 1, right))
    parts.append("┘")
    return "".join(parts)


def animate(out: TextIO, delay: float) -> None:
    """Draw a frame and move a ball across it, pausing ``delay`` seconds per step."""
    out.write(cls())
    out.write(cursor_off())
    out.write(draw_box(1, 1, 23, 80))

    y = 2
    previous = (2, y)
    out.write(locate(*previous) + _BALL + "\n")
    out.flush()

    for x in range(2, 79):
        out.write(locate(*previous) + " ")
        out.write(locate(x, y) + _BALL + "\n")
        out.flush()
        previous = (x, y)
        time.sleep(delay)

    out.write(locate(1, 24))
    out.write(cursor_on())
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the animation on standard output."""
    parser = argparse.ArgumentParser(
        prog="rvdasm-screen", description="Animate a ball inside a frame."
    )
    parser.add_argument("--delay", type=float, default=0.05, help="seconds per step")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("delay must not be negative")
    animate(sys.stdout, args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())