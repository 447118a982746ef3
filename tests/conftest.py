from __future__ import annotations

from typing import Iterable, List, Tuple

import pytest

from game import ui
from game.engine import Engine
from game.state import GameState, create_initial_state


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Keep rendered text free of ANSI codes and terminal clears."""
    monkeypatch.setattr(ui, "_COLOR_ENABLED", False)
    monkeypatch.setenv("DRAGONS_QUEST_NO_CLEAR", "1")


@pytest.fixture
def state() -> GameState:
    return create_initial_state("Tester")


@pytest.fixture
def engine() -> Engine:
    return Engine(input_fn=lambda prompt: "", output_fn=lambda text: None)


def _scripted_input(lines: Iterable[str]):
    pending = iter(lines)

    def fake_input(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return fake_input


@pytest.fixture
def play():
    """Run a whole CLI session from a list of input lines."""

    def _play(lines: List[str], name: str = "Tester") -> Tuple[GameState, str]:
        outputs: List[str] = []
        engine = Engine(input_fn=_scripted_input([name, *lines]), output_fn=outputs.append)
        game_state = engine.start_session()
        engine.run(game_state)
        return game_state, "\n".join(outputs)

    return _play
