"""HTML fragments that make up the Mastermind web page."""

from __future__ import annotations

from html import escape
from typing import Iterable, Optional

from petitsjeux.game import (
    AVAILABLE_BALLS,
    CODE_LENGTH,
    CodeAttempt,
    Flag,
    Game,
    is_valid_char,
)

GUESS_ACTION = "/guess"
START_ACTION = "/start"
BALL_FIELD_PREFIX = "ball"
DEFAULT_SELECTION: tuple[str, ...] = ("k",) * CODE_LENGTH

_BALL_EMOJIS = {
    "g": "🟢",
    "r": "🔴",
    "b": "🔵",
    "y": "🟡",
    "k": "⚫",
    "w": "⚪",
}

_FLAG_COLORS = {
    Flag.RIGHT_POSITION: "red",
    Flag.MISPLACED: "white",
    Flag.INVALID: "black",
}

_FLAG_HINTS = {
    Flag.RIGHT_POSITION: "Right position",
    Flag.MISPLACED: "Misplaced",
    Flag.INVALID: "Invalid",
}

_FLAG_PATH = (
    "M14.778.085A.5.5 0 0 1 15 .5V8a.5.5 0 0 1-.314.464L14.5 8l.186.464-.003.001"
    "-.006.003-.023.009a12 12 0 0 1-.397.15c-.264.095-.631.223-1.047.35-.816.252"
    "-1.879.523-2.71.523-.847 0-1.548-.28-2.158-.525l-.028-.01C7.68 8.71 7.14 8.5"
    " 6.5 8.5c-.7 0-1.638.23-2.437.477A20 20 0 0 0 3 9.342V15.5a.5.5 0 0 1-1 0V.5"
    "a.5.5 0 0 1 1 0v.282c.226-.079.496-.17.79-.26C4.606.272 5.67 0 6.5 0c.84 0"
    " 1.524.277 2.121.519l.043.018C9.286.788 9.828 1 10.5 1c.7 0 1.638-.23"
    " 2.437-.477a20 20 0 0 0 1.349-.476l.019-.007.004-.002h.001"
)

_BUTTON_PARTS = '<div class="button-bottom"></div><div class="button-base"></div>'


def _check_ball(c: str) -> str:
    if not is_valid_char(c):
        raise ValueError(f"not a ball colour: {c!r}")
    return c


def ball(c: str) -> str:
    """A single ball; raises ValueError for an unknown colour."""
    return f'<p class="ball">{_BALL_EMOJIS[_check_ball(c)]}</p>'


def flag(flag: Flag) -> str:
    """The coloured flag that shows how one ball of a guess scored."""
    color = _FLAG_COLORS[flag]
    hint = _FLAG_HINTS[flag]
    return (
        f'<div class="flag" title="{escape(hint)}">'
        f'<svg fill="{color}" class="bi bi-flag-fill" viewBox="0 0 16 16">'
        f'<path d="{_FLAG_PATH}"/>'
        "</svg></div>"
    )


def code_attempt(attempt: CodeAttempt) -> str:
    """One previous guess with its flags."""
    guess = "".join(ball(c) for c in attempt.attempt)
    answer = "".join(flag(f) for f in attempt.result)
    return (
        '<div class="code-attempt"><div class="guess">'
        f'{guess}<div class="answer">{answer}</div>'
        "</div></div>"
    )


def game_over(game: Game) -> str:
    """The end-of-game message and, if any, the winning code."""
    heading = (
        f"<h2>You have guessed the right code in {len(game.attempts)} turns !</h2>"
    )
    if not game.attempts:
        return heading
    solution = "".join(ball(c) for c in game.attempts[-1].attempt)
    return f'{heading}<div class="solution">{solution}</div>'


def guess_ball(index: int, value: str) -> str:
    """A drop-down to pick the ball at ``index``; raises ValueError if ``value`` is unknown."""
    _check_ball(value)
    options = "".join(
        f'<option value="{c}"{" selected" if c == value else ""}>{_BALL_EMOJIS[c]}</option>'
        for c in AVAILABLE_BALLS
    )
    return (
        f'<select class="guess-ball" name="{BALL_FIELD_PREFIX}{index}">'
        f"{options}</select>"
    )


def parse_select_value(value: Optional[str]) -> Optional[str]:
    """Return the single character chosen in a drop-down, or None if there is none."""
    if value is None or len(value.encode("utf-8")) != 1:
        return None
    return value


def guess_code(selection: Iterable[str] = DEFAULT_SELECTION) -> str:
    """The form in which the player composes and submits a guess."""
    balls = tuple(selection)
    if len(balls) != CODE_LENGTH:
        raise ValueError(f"a code has exactly {CODE_LENGTH} balls, got {len(balls)}")
    selects = "".join(guess_ball(index, c) for index, c in enumerate(balls))
    return (
        f'<form class="guess-code" method="post" action="{GUESS_ACTION}">'
        f"{selects}"
        '<button type="submit" class="button">'
        f'<div class="button-top">Guess</div>{_BUTTON_PARTS}'
        "</button></form>"
    )


def start_game() -> str:
    """The button that starts a new game."""
    return (
        f'<form class="start-game" method="post" action="{START_ACTION}">'
        '<button type="submit" class="button large-button">'
        f'<div class="button-top">Start game</div>{_BUTTON_PARTS}'
        "</button></form>"
    )