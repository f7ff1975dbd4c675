"""Mastermind in the browser: game state, page rendering and a small WSGI app."""

from __future__ import annotations

import argparse
import random
import sys
import threading
from html import escape
from typing import Callable, Iterable, Optional, Sequence
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

from petitsjeux import components
from petitsjeux.game import CODE_LENGTH, Game, is_valid_char, new_game

_HTML_TYPE = ("Content-Type", "text/html; charset=utf-8")
_TEXT_TYPE = ("Content-Type", "text/plain; charset=utf-8")


class GameView:
    """The game panel: holds the current game and renders the matching screen."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.game: Game = new_game(False, rng)

    def start_game(self) -> None:
        """Replace the current game with a fresh, active one."""
        self.game = new_game(True, self._rng)

    def submit_code_guess(self, attempt: Iterable[str]) -> Game:
        """Evaluate a guess against the current game and keep the result."""
        self.game = self.game.process_code_attempt(attempt)
        return self.game

    def render(self) -> str:
        """HTML for the screen that fits the game's state."""
        game = self.game
        if not game.is_game_active:
            return components.start_game()
        if game.is_game_over:
            return components.game_over(game) + components.start_game()
        previous = "".join(components.code_attempt(a) for a in game.attempts)
        return (
            f"<h2>Guess the right code : Turn {len(game.attempts) + 1}</h2>"
            f'<div class="previous-attempts">{previous}</div>'
            f"{components.guess_code()}"
        )


class App:
    """The root of the web page, served as a WSGI application."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.view = GameView(rng)
        self._lock = threading.Lock()

    def render(self) -> str:
        """HTML of the Mastermind section."""
        return (
            '<section class="mastermind">'
            '<h1 class="title">Mastermind</h1>'
            f"{self.view.render()}"
            "</section>"
        )

    def _page(self) -> bytes:
        return (
            "<!DOCTYPE html>"
            '<html><head><meta charset="utf-8">'
            f"<title>{escape('Mastermind')}</title></head>"
            f"<body>{self.render()}</body></html>"
        ).encode("utf-8")

    @staticmethod
    def _read_form(environ: dict) -> dict[str, list[str]]:
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""
        return parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)

    @staticmethod
    def _selection(form: dict[str, list[str]]) -> Optional[tuple[str, ...]]:
        balls = []
        for index in range(CODE_LENGTH):
            values = form.get(f"{components.BALL_FIELD_PREFIX}{index}")
            value = components.parse_select_value(values[0] if values else None)
            if value is None or not is_valid_char(value):
                return None
            balls.append(value)
        return tuple(balls)

    def __call__(self, environ: dict, start_response: Callable) -> list[bytes]:
        method = environ.get("REQUEST_METHOD", "GET").upper()
        path = environ.get("PATH_INFO", "/") or "/"

        def respond(status: str, body: bytes, headers: list) -> list[bytes]:
            start_response(status, headers + [("Content-Length", str(len(body)))])
            return [body]

        def redirect() -> list[bytes]:
            return respond("303 See Other", b"", [("Location", "/"), _TEXT_TYPE])

        with self._lock:
            if path == "/":
                if method not in ("GET", "HEAD"):
                    return respond(
                        "405 Method Not Allowed",
                        b"Method not allowed",
                        [_TEXT_TYPE, ("Allow", "GET, HEAD")],
                    )
                body = self._page()
                if method == "HEAD":
                    start_response(
                        "200 OK", [_HTML_TYPE, ("Content-Length", str(len(body)))]
                    )
                    return [b""]
                return respond("200 OK", body, [_HTML_TYPE])

            if path in (components.START_ACTION, components.GUESS_ACTION):
                if method != "POST":
                    return respond(
                        "405 Method Not Allowed",
                        b"Method not allowed",
                        [_TEXT_TYPE, ("Allow", "POST")],
                    )
                if path == components.START_ACTION:
                    self.view.start_game()
                    return redirect()
                selection = self._selection(self._read_form(environ))
                if selection is None:
                    return respond("400 Bad Request", b"Invalid guess", [_TEXT_TYPE])
                game = self.view.game
                if game.is_game_active and not game.is_game_over:
                    self.view.submit_code_guess(selection)
                return redirect()

            return respond("404 Not Found", b"Not found", [_TEXT_TYPE])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the web game until interrupted."""
    parser = argparse.ArgumentParser(
        prog="mastermind-web", description="Play Mastermind in your browser"
    )
    parser.add_argument("--host", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", type=int, default=8000, help="port to listen on")
    args = parser.parse_args(argv)

    with make_server(args.host, args.port, App()) as server:
        print(f"Serving Mastermind on http://{args.host}:{args.port}/", file=sys.stderr)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())