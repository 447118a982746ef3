"""Movement between the village and the locations around it."""

from __future__ import annotations

import logging
from typing import List, Tuple

from content.world import LOCATIONS
from game.state import GameState


logger = logging.getLogger(__name__)


def _location(state: GameState) -> dict:
    return LOCATIONS[state.current_location_id]


def _requirement_met(state: GameState, requirement: dict) -> bool:
    if requirement.get("qualifying_loadout"):
        return state.player.inventory.has_qualifying_loadout()
    return True


def can_travel(state: GameState, destination: str) -> bool:
    """Whether `destination` is reachable right now. No side effects."""
    location = _location(state)
    if destination not in location.get("exits", {}):
        return False
    requirement = location.get("exit_requirements", {}).get(destination)
    return not requirement or _requirement_met(state, requirement)


def move(state: GameState, destination: str) -> Tuple[bool, List[str]]:
    """Move to an adjacent location if possible. Returns (moved, messages)."""
    location = _location(state)
    exits = location.get("exits", {})

    if not can_travel(state, destination):
        if destination not in exits:
            return False, [f"You cannot reach {LOCATIONS[destination]['name']} from here."]
        logger.info("Travel to %s refused", destination)
        requirement = location["exit_requirements"][destination]
        return False, [requirement.get("message", "That path is blocked for now.")]

    logger.info("Moving from %s to %s", state.current_location_id, destination)
    state.current_location_id = destination
    return True, [exits[destination]]
