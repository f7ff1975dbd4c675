import random

import pytest

from petitsjeux.game import (
    AVAILABLE_BALLS,
    CodeAttempt,
    Flag,
    Game,
    create_random_code,
    is_valid_char,
    new_game,
)


def test_is_valid_char():
    for c in AVAILABLE_BALLS:
        assert is_valid_char(c)
    assert not is_valid_char("i")


def test_is_valid_char_rejects_multiple_letters():
    assert not is_valid_char("gr")
    assert not is_valid_char("")


def test_flag():
    assert Flag.RIGHT_POSITION.is_right_position()
    assert not Flag.MISPLACED.is_right_position()
    assert not Flag.INVALID.is_right_position()


def test_code_attempt():
    won = CodeAttempt(("b", "b", "b", "b"), (Flag.RIGHT_POSITION,) * 4)
    assert won.is_game_over()

    not_won = CodeAttempt(
        ("b", "b", "b", "b"),
        (Flag.MISPLACED, Flag.RIGHT_POSITION, Flag.RIGHT_POSITION, Flag.RIGHT_POSITION),
    )
    assert not not_won.is_game_over()


def test_process_code_attempt_flags():
    game = Game(code=("g", "r", "b", "y"), is_game_active=True)
    after = game.process_code_attempt(("g", "b", "k", "y"))
    assert after.attempts[-1].result == (
        Flag.RIGHT_POSITION,
        Flag.MISPLACED,
        Flag.INVALID,
        Flag.RIGHT_POSITION,
    )
    assert after.is_game_over is False
    assert after.is_game_active is True


def test_process_code_attempt_win():
    game = Game(code=("g", "r", "b", "y"), is_game_active=True)
    after = game.process_code_attempt("grby")
    assert after.is_game_over is True
    assert after.attempts[-1].attempt == ("g", "r", "b", "y")


def test_process_code_attempt_keeps_original_unchanged():
    game = Game(code=("g", "r", "b", "y"))
    first = game.process_code_attempt("kkkk")
    second = first.process_code_attempt("wwww")
    assert game.attempts == ()
    assert len(first.attempts) == 1
    assert len(second.attempts) == 2
    assert second.attempts[0] == first.attempts[0]
    assert second.code == game.code


def test_process_code_attempt_wrong_length():
    game = Game(code=("g", "r", "b", "y"))
    with pytest.raises(ValueError):
        game.process_code_attempt("grb")
    with pytest.raises(ValueError):
        game.process_code_attempt("grbyk")


def test_create_random_code_distinct_valid_balls():
    rng = random.Random(7)
    for _ in range(50):
        code = create_random_code(rng)
        assert len(code) == 4
        assert len(set(code)) == 4
        assert all(is_valid_char(c) for c in code)


def test_create_random_code_reproducible_with_seed():
    codes = [create_random_code(random.Random(seed)) for seed in range(20)]
    again = [create_random_code(random.Random(seed)) for seed in range(20)]
    assert codes == again
    assert len({tuple(code) for code in codes}) > 1
    for code in codes:
        assert len(set(code)) == 4
        assert set(code) <= set(AVAILABLE_BALLS)


def test_new_game():
    game = new_game(True, random.Random(1))
    assert game.is_game_active is True
    assert game.is_game_over is False
    assert game.attempts == ()
    assert len(set(game.code)) == 4

    inactive = new_game(False, random.Random(1))
    assert inactive.is_game_active is False
    assert inactive.code == game.code