"""Mastermind game engine shared by the terminal and web front-ends."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional

CODE_LENGTH = 4

# g -> green, r -> red, b -> blue, y -> yellow, k -> black, w -> white
AVAILABLE_BALLS: tuple[str, ...] = ("g", "r", "b", "y", "k", "w")


class Flag(Enum):
    """Outcome of comparing one proposed ball with the secret code."""

    RIGHT_POSITION = "right_position"
    MISPLACED = "misplaced"
    INVALID = "invalid"

    def is_right_position(self) -> bool:
        """True if the ball is the right colour in the right place."""
        return self is Flag.RIGHT_POSITION


@dataclass(frozen=True)
class CodeAttempt:
    """A guess and the flag given to each of its balls."""

    attempt: tuple[str, ...]
    result: tuple[Flag, ...]

    def is_game_over(self) -> bool:
        """True if every ball of the guess is in the right position."""
        return all(flag.is_right_position() for flag in self.result)


def _as_code(balls: Iterable[str]) -> tuple[str, ...]:
    code = tuple(balls)
    if len(code) != CODE_LENGTH:
        raise ValueError(f"a code has exactly {CODE_LENGTH} balls, got {len(code)}")
    return code


@dataclass(frozen=True)
class Game:
    """State of a Mastermind game; every move yields a new instance."""

    code: tuple[str, ...]
    attempts: tuple[CodeAttempt, ...] = field(default_factory=tuple)
    is_game_over: bool = False
    is_game_active: bool = False

    def process_code_attempt(self, attempt: Iterable[str]) -> "Game":
        """Evaluate a guess and return the game with it added to the history."""
        guess = _as_code(attempt)
        result = tuple(
            Flag.RIGHT_POSITION
            if ball == secret
            else Flag.MISPLACED
            if ball in self.code
            else Flag.INVALID
            for ball, secret in zip(guess, self.code)
        )
        evaluated = CodeAttempt(guess, result)
        return replace(
            self,
            attempts=self.attempts + (evaluated,),
            is_game_over=evaluated.is_game_over(),
        )


def create_random_code(rng: Optional[random.Random] = None) -> tuple[str, ...]:
    """Draw a secret code of four distinct balls."""
    rng = rng if rng is not None else random.Random()
    balls = list(AVAILABLE_BALLS)
    rng.shuffle(balls)
    return tuple(balls[:CODE_LENGTH])


def is_valid_char(c: str) -> bool:
    """True if ``c`` names one of the available balls."""
    return c in AVAILABLE_BALLS


def new_game(is_game_active: bool = False, rng: Optional[random.Random] = None) -> Game:
    """Start a game with a fresh secret code and no history."""
    return Game(code=create_random_code(rng), is_game_active=is_game_active)