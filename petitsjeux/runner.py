"""Interactive Mastermind game in the terminal."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence, TextIO

from petitsjeux import display
from petitsjeux.game import CODE_LENGTH, Game, is_valid_char, new_game


class InvalidInput(ValueError):
    """The player's guess is not a valid code."""


def validate_input(text: str) -> tuple[str, ...]:
    """Turn the player's text into a code, raising InvalidInput if it is not one."""
    lowered = text.lower()
    if len(lowered.encode("utf-8")) != CODE_LENGTH:
        raise InvalidInput("Please enter exactly 4 letters!")
    if not all(is_valid_char(c) for c in lowered):
        raise InvalidInput("Invalid color! Use only: g, r, b, y, k, w")
    return tuple(lowered)


def _read_guess(stdin: TextIO, stdout: TextIO) -> tuple[str, ...]:
    stdout.write("Your guess: ")
    stdout.flush()
    try:
        line = stdin.readline()
    except OSError as exc:
        raise InvalidInput(f"Failed to read input: {exc}") from exc
    if not line:
        raise EOFError("input ended before the code was found")
    return validate_input(line.strip())


def run_game(
    debug_mode: bool = False,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """Play until the code is found and return the finished game.

    Raises EOFError if the input ends first.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    stdout.write(display.welcome_text())
    game = new_game(True, rng)
    if debug_mode:
        stdout.write(display.debug_code_text(game.code))

    while True:
        stdout.write(display.turn_text(len(game.attempts) + 1))
        stdout.write(display.attempts_text(game.attempts))
        try:
            attempt = _read_guess(stdin, stdout)
        except InvalidInput as err:
            stdout.write(display.error_text(str(err)))
        else:
            game = game.process_code_attempt(attempt)
            if game.is_game_over:
                stdout.write(display.victory_text(len(game.attempts), game.code))
                return game
        stdout.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="Mastermind CLI", description="Play Mastermind in your terminal"
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug mode (shows the secret code)",
    )
    args = parser.parse_args(argv)
    try:
        run_game(args.debug)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())