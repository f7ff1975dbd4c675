"""Text shown by the terminal Mastermind game."""

from __future__ import annotations

from typing import Iterable, Sequence

from petitsjeux.game import CodeAttempt, Flag

_BALL_EMOJIS = {
    "g": "🟢",
    "r": "🔴",
    "b": "🔵",
    "y": "🟡",
    "k": "⚫",
    "w": "⚪",
}
_UNKNOWN_BALL = "❓"

_FLAG_EMOJIS = {
    Flag.RIGHT_POSITION: "✅",  # right colour, right position
    Flag.MISPLACED: "🟧",  # right colour, wrong position
    Flag.INVALID: "❌",  # wrong colour
}

_RULE = "-" * 42


def color_char(c: str) -> str:
    """Return the emoji for a ball letter, or a question mark if unknown."""
    return _BALL_EMOJIS.get(c, _UNKNOWN_BALL)


def flag_char(flag: Flag) -> str:
    """Return the emoji for a validation flag."""
    return _FLAG_EMOJIS[flag]


def _balls(code: Iterable[str]) -> str:
    return "".join(f"{color_char(c)} " for c in code)


def welcome_text() -> str:
    """Welcome message and game rules."""
    return (
        "🎮 Welcome to Mastermind!\n"
        "==========================================\n"
        "Available colors: (g)reen, (r)ed, (b)lue, (y)ellow, blac(k), (w)hite\n"
        "Enter 4 letters to make a guess (e.g., 'grbk')\n"
        "\n"
    )


def debug_code_text(code: Iterable[str]) -> str:
    """The secret code, shown in debug mode."""
    return f"🔍 DEBUG MODE - Secret code: {list(code)!r}\n\n"


def turn_text(turn_number: int) -> str:
    """Header for the given turn."""
    return f"Turn {turn_number}\n{_RULE}\n"


def attempts_text(attempts: Sequence[CodeAttempt]) -> str:
    """All previous attempts with their results; empty if there are none."""
    if not attempts:
        return ""
    lines = [
        f"  {number}. {_balls(attempt.attempt)} → "
        + "".join(f"{flag_char(flag)} " for flag in attempt.result)
        for number, attempt in enumerate(attempts, start=1)
    ]
    return "\nPrevious attempts:\n" + "".join(f"{line}\n" for line in lines) + "\n"


def victory_text(attempts_count: int, code: Iterable[str]) -> str:
    """Victory message revealing the secret code."""
    return (
        f"\n🎉 Congratulations! You found the code in {attempts_count} attempts!\n"
        f"Secret code was: {_balls(code)}\n\n"
    )


def error_text(message: str) -> str:
    """An error message."""
    return f"❌ {message}\n\n"