"""CLI entrypoint for the Dragon's Quest."""

import logging
import os

from game.engine import Engine


def configure_logging() -> None:
    """Send log records to stderr so they never mix with game text."""
    level = os.getenv("DRAGONS_QUEST_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Start the game loop."""
    configure_logging()
    engine = Engine()
    try:
        state = engine.start_session()
    except EOFError:
        return
    engine.run(state)


if __name__ == "__main__":
    main()
