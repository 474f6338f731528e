"""Guess the number game."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import Iterable

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_guess(text: str) -> int | None:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def play(secret: int, guesses: Iterable[str]) -> int | None:
    """Play against the secret; return the number of valid guesses to win, or None if input ends."""
    attempts = 0
    lines = iter(guesses)
    while True:
        print("Please input your guess.")
        line = next(lines, None)
        if line is None:
            return None
        guess = _parse_guess(line)
        if guess is None:
            continue
        attempts += 1
        print(f"You guessed: {guess}")
        if guess < secret:
            print("Too small!")
        elif guess > secret:
            print("Too big!")
        else:
            print("You win!")
            return attempts


def main(argv: Iterable[str] | None = None) -> int:
    """Play a game on standard input with a secret between 1 and 100."""
    parser = argparse.ArgumentParser(prog="guessing-game", description="Guess the number!")
    parser.parse_args(None if argv is None else list(argv))
    print("Guess the number!")
    secret = random.randint(1, 100)
    play(secret, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())