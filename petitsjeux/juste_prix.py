"""Le juste prix: guess the hidden number between 1 and 100."""

from __future__ import annotations

import random
import re
import sys
from enum import Enum
from typing import Optional, Sequence, TextIO

LOWEST = 1
HIGHEST = 100
_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


class Hint(Enum):
    """Answer given to a guess."""

    MORE = "C'est plus !"
    LESS = "C'est moins !"
    FOUND = "Gagné !"


def generate_random_number_between(
    low: int, high: int, rng: Optional[random.Random] = None
) -> int:
    """Return a random integer between ``low`` and ``high`` included."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    rng = rng if rng is not None else random.Random()
    return rng.randint(low, high)


def compare_guess(guess: int, target: int) -> Hint:
    """Tell the player how the guess relates to the target."""
    if guess < target:
        return Hint.MORE
    if guess > target:
        return Hint.LESS
    return Hint.FOUND


def _parse_guess(line: str) -> Optional[int]:
    text = line.strip()
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def play(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Run one game and return the number that was found.

    Raises EOFError if the input ends before the number is found.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    print("== Le juste prix ==", file=stdout)
    target = generate_random_number_between(LOWEST, HIGHEST, rng)

    while True:
        print("Quel est le juste prix ?", file=stdout)
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before the price was found")
        guess = _parse_guess(line)
        if guess is None:
            print("ERREUR: saisie invalide !", file=stdout)
            continue
        hint = compare_guess(guess, target)
        print(f"Vous proposez : {guess} -> {hint.value}", file=stdout)
        if hint is Hint.FOUND:
            return target


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stdout)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())