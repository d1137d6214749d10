"""A number guessing game played over text streams."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

U32_MAX = (1 << 32) - 1

_UNSIGNED = re.compile(r"\+?[0-9]+")


class Outcome(Enum):
    """Result of comparing a guess with the secret number."""

    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    WIN = "You win!"

    @property
    def message(self) -> str:
        return self.value


def compare_guess(guess: int, secret: int) -> Outcome:
    """Compare a guess with the secret number."""
    if guess < secret:
        return Outcome.TOO_SMALL
    if guess > secret:
        return Outcome.TOO_BIG
    return Outcome.WIN


def _parse_guess(line: str) -> int | None:
    text = line.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= U32_MAX else None


def play(secret: int, stdin: TextIO, stdout: TextIO) -> int:
    """Play until the secret is guessed; return the number of guesses made.

    Lines that are not unsigned numbers are ignored. Raises EOFError if the
    input ends before the secret is found.
    """
    print("Guess the nuber!", file=stdout)
    print(f"The secret number is: {secret}", file=stdout)

    guesses = 0
    while True:
        print("Please input your guess.", file=stdout)
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before the number was guessed")
        guess = _parse_guess(line)
        if guess is None:
            continue

        guesses += 1
        print(f"You guessed: {guess}", file=stdout)
        outcome = compare_guess(guess, secret)
        print(outcome.message, file=stdout)
        if outcome is Outcome.WIN:
            return guesses


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on the terminal with a secret between 1 and 100."""
    parser = argparse.ArgumentParser(
        prog="rvdasm-guess", description="Guess the secret number."
    )
    parser.parse_args(argv)
    secret = random.randint(1, 100)
    try:
        play(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())