# petitsjeux

Two small guessing games: Le juste prix in the terminal, and Mastermind
in the terminal or in a web browser. The package uses only the Python
standard library.

## Installation

```
pip install .
```

## Le juste prix

The program picks a whole number between 1 and 100 and asks
"Quel est le juste prix ?". After each guess it answers
"C'est plus !" (higher), "C'est moins !" (lower) or "Gagné !".
A line that is not a non-negative whole number (an optional leading `+`
is allowed, up to 4294967295) is answered with
"ERREUR: saisie invalide !" and you are asked again.

```
petitsjeux-juste-prix
```

If the input ends before the number is found, the command exits with
status 1.

From Python, `petitsjeux.juste_prix.play(stdin, stdout, rng)` runs one
game on the given streams and returns the number that was found; it
raises `EOFError` if the input ends first. `compare_guess(guess, target)`
returns a `Hint` (`MORE`, `LESS` or `FOUND`).

## Mastermind

A secret code of four distinct balls is drawn from six colours:
(g)reen, (r)ed, (b)lue, (y)ellow, blac(k) and (w)hite. Each turn you
propose four balls. Every ball of your guess gets a flag:

- ✅ right colour, right position
- 🟧 colour present in the code, but elsewhere
- ❌ colour not in the code

The game ends when all four flags are ✅. There is no limit on the
number of turns.

### In the terminal

```
petitsjeux-mastermind
```

Type four letters, for example `grbk`; upper case is accepted. Anything
else is reported ("Please enter exactly 4 letters!" or
"Invalid color! Use only: g, r, b, y, k, w") and the turn is asked
again. Add `--debug` (or `-d`) to show the secret code at the start.
If the input ends before the code is found, the command exits with
status 1.

### In the browser

```
petitsjeux-mastermind-web
```

This starts a local web server, by default on `http://127.0.0.1:8000/`;
use `--host` and `--port` to change the address. Press "Start game",
choose a colour in each of the four drop-downs and press "Guess".

`petitsjeux.webapp.App` is a plain WSGI application and can be served
by any WSGI server. It answers `GET /`, `POST /start` and `POST /guess`
(form fields `ball0` to `ball3`, one colour letter each).

The web game keeps a single game in memory for the whole server: every
visitor plays the same game, and it is lost when the server stops. There
are no per-visitor sessions and no saved scores.

## Using the game logic

The rules live in `petitsjeux.game` and can be used on their own:

```python
import random
from petitsjeux.game import new_game, is_valid_char

game = new_game(True, random.Random(1))
game = game.process_code_attempt(("g", "r", "b", "k"))
print([flag.is_right_position() for flag in game.attempts[-1].result])
print(game.is_game_over)
print(is_valid_char("w"))
```

A `Game` is never modified in place: `process_code_attempt` returns a new
game with the attempt appended to its history, and raises `ValueError`
if the guess does not have exactly four balls. Each entry of
`game.attempts` is a `CodeAttempt` holding the guess and its `Flag`s.

`petitsjeux.runner.validate_input(text)` turns a typed guess into a code
or raises `InvalidInput`; `petitsjeux.runner.run_game(debug_mode, stdin,
stdout, rng)` plays a terminal game on the given streams and returns the
finished `Game`.

## Running the tests

```
pip install ".[test]"
pytest
```