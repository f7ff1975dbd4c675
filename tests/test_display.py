from petitsjeux.display import (
    attempts_text,
    color_char,
    debug_code_text,
    error_text,
    flag_char,
    turn_text,
    victory_text,
    welcome_text,
)
from petitsjeux.game import AVAILABLE_BALLS, CodeAttempt, Flag, Game


def test_color_char_known_balls():
    assert color_char("g") == "🟢"
    assert color_char("r") == "🔴"
    assert color_char("b") == "🔵"
    assert color_char("y") == "🟡"
    assert color_char("k") == "⚫"
    assert color_char("w") == "⚪"


def test_color_char_distinct_for_all_balls():
    emojis = {color_char(c) for c in AVAILABLE_BALLS}
    assert len(emojis) == len(AVAILABLE_BALLS)
    assert "❓" not in emojis


def test_color_char_unknown():
    assert color_char("z") == "❓"


def test_flag_char():
    assert flag_char(Flag.RIGHT_POSITION) == "✅"
    assert flag_char(Flag.MISPLACED) == "🟧"
    assert flag_char(Flag.INVALID) == "❌"


def test_welcome_text():
    text = welcome_text()
    assert text.startswith("🎮 Welcome to Mastermind!\n")
    assert "Enter 4 letters to make a guess (e.g., 'grbk')\n" in text
    assert text.endswith("\n\n")


def test_debug_code_text_shows_code():
    text = debug_code_text(("g", "r", "b", "y"))
    assert text.startswith("🔍 DEBUG MODE - Secret code: ")
    assert repr(["g", "r", "b", "y"]) in text
    assert text.endswith("\n\n")


def test_turn_text():
    text = turn_text(3)
    first, rule, rest = text.split("\n")
    assert first == "Turn 3"
    assert set(rule) == {"-"}
    assert rest == ""


def test_attempts_text_empty():
    assert attempts_text([]) == ""


def test_attempts_text_lists_every_attempt():
    game = Game(code=("g", "r", "b", "y"))
    game = game.process_code_attempt("rgkk").process_code_attempt("grby")
    text = attempts_text(game.attempts)
    assert text.startswith("\nPrevious attempts:\n")
    assert "  1. " in text
    assert "  2. " in text
    assert text.count(" → ") == 2
    assert text.endswith("\n\n")


def test_attempts_text_line_content():
    attempt = CodeAttempt(
        ("b", "b", "b", "b"),
        (Flag.MISPLACED, Flag.RIGHT_POSITION, Flag.INVALID, Flag.INVALID),
    )
    line = attempts_text([attempt]).splitlines()[2]
    assert line.startswith("  1. ")
    balls, flags = line[len("  1. "):].split(" → ")
    assert balls.split() == [color_char("b")] * 4
    assert flags.split() == [
        flag_char(Flag.MISPLACED),
        flag_char(Flag.RIGHT_POSITION),
        flag_char(Flag.INVALID),
        flag_char(Flag.INVALID),
    ]


def test_victory_text():
    text = victory_text(5, ("w", "k", "y", "g"))
    assert "Congratulations! You found the code in 5 attempts!" in text
    reveal = text.split("Secret code was: ")[1]
    assert reveal.split() == [color_char(c) for c in "wkyg"]
    assert text.endswith("\n\n")


def test_error_text():
    assert error_text("boom") == "❌ boom\n\n"