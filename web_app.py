"""Web host for the Dragon's Quest using a browser terminal emulator."""

from __future__ import annotations

from dataclasses import dataclass, field
import html
import logging
import os
import re
from threading import Lock
from typing import Optional
from uuid import uuid4

from flask import Flask, jsonify, render_template, request, session

# Force ANSI color rendering before importing the game UI module.
os.environ.setdefault("DRAGONS_QUEST_FORCE_COLOR", "1")
os.environ.setdefault("DRAGONS_QUEST_NO_CLEAR", "1")

from game import ui
from game.engine import NAME_PROMPT, Engine
from game.state import GameState, create_initial_state


logger = logging.getLogger(__name__)

SESSION_KEY = "dragons_quest_session_id"
ANSI_COLOR_CLASSES = {
    "38;5;39": "ansi-blue",
    "93": "ansi-yellow",
    "91": "ansi-red",
    "38;5;82": "ansi-green",
    "38;5;120": "ansi-green",
}
ANSI_RE = re.compile(r"\x1b\[([0-9;]+)m")


@dataclass
class BrowserGame:
    """One browser tab's session. `state` is None until a name is entered."""

    state: Optional[GameState]
    screen: str
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def game_over(self) -> bool:
        return self.state is not None and self.state.game_over


app = Flask(__name__)
app.secret_key = os.getenv("SECRET_KEY", "dragons_quest_dev_secret")
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SAMESITE"] = "Lax"

_ENGINE = Engine()
_SESSIONS: dict[str, BrowserGame] = {}
_SESSIONS_LOCK = Lock()


def _ansi_to_html(text: str) -> str:
    # ANSI_RE.split alternates plain text with captured SGR codes.
    chunks = ANSI_RE.split(text.replace("\r", ""))
    parts: list[str] = []
    span_open = False

    for position, chunk in enumerate(chunks):
        if position % 2 == 0:
            parts.append(html.escape(chunk))
            continue
        if span_open:
            parts.append("</span>")
            span_open = False
        css_class = ANSI_COLOR_CLASSES.get(chunk)
        if css_class:
            parts.append(f'<span class="{css_class}">')
            span_open = True

    if span_open:
        parts.append("</span>")
    return "".join(parts)


def _new_browser_game() -> BrowserGame:
    return BrowserGame(state=None, screen="\n".join([ui.banner(), NAME_PROMPT]))


def _start_game(game: BrowserGame, name: str) -> None:
    game.state = create_initial_state(name)
    game.screen = _ENGINE.initial_screen(game.state)
    logger.info("Browser session started for %r", name)


def _run_command(game: BrowserGame, raw_command: str) -> dict:
    """Apply one submitted line. Requests for the same tab run one at a time."""
    with game.lock:
        if game.state is None:
            _start_game(game, raw_command)
        elif not game.state.game_over:
            game.screen = _ENGINE.process_raw_command(game.state, raw_command)
        return _payload(game)


def _session_id() -> str:
    session_id = session.get(SESSION_KEY)
    if isinstance(session_id, str) and session_id:
        return session_id
    session_id = uuid4().hex
    session[SESSION_KEY] = session_id
    return session_id


def _get_browser_game() -> BrowserGame:
    session_id = _session_id()
    with _SESSIONS_LOCK:
        game = _SESSIONS.get(session_id)
        if game is None:
            game = _new_browser_game()
            _SESSIONS[session_id] = game
        return game


def _payload(game: BrowserGame) -> dict:
    prompt = _ENGINE.prompt_text(game.state) if game.state else NAME_PROMPT
    return {
        "screen_html": _ansi_to_html(game.screen),
        "game_over": game.game_over,
        "prompt": prompt,
    }


@app.get("/")
def index() -> str:
    game = _get_browser_game()
    return render_template(
        "index.html",
        screen_html=_ansi_to_html(game.screen),
        game_over=game.game_over,
    )


@app.post("/command")
def command() -> object:
    payload = request.get_json(silent=True) or {}
    raw_command = str(payload.get("command", ""))
    game = _get_browser_game()
    return jsonify(_run_command(game, raw_command))


@app.post("/reset")
def reset() -> object:
    session_id = _session_id()
    with _SESSIONS_LOCK:
        _SESSIONS[session_id] = _new_browser_game()
        game = _SESSIONS[session_id]

    return jsonify(_payload(game))


@app.get("/health")
def health() -> object:
    return {"status": "ok"}


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("DRAGONS_QUEST_LOG_LEVEL", "WARNING").upper())
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port)
