"""Using items from the inventory."""

from __future__ import annotations

import logging
from typing import List, Tuple

from content.items import ARMOR, POTION, WEAPON
from game.state import GameState, adjust_health, health_lines


logger = logging.getLogger(__name__)


def item_list_lines(state: GameState) -> List[str]:
    lines = ["=== Inventory ==="]
    for index, item in enumerate(state.player.inventory, start=1):
        lines.append(f"{index}. {item.name}")
    return lines


def use_item_at(state: GameState, index: int) -> Tuple[List[str], bool]:
    """Use the item at a zero-based position. Returns (messages, used)."""
    player = state.player
    if index < 0 or index >= len(player.inventory):
        return ["Invalid item number!"], False

    item = player.inventory[index]

    if item.category == POTION:
        messages = [f"You drink the {item.name}."]
        restored = adjust_health(player, item.power)
        messages.extend(health_lines(player, overflowed=restored < item.power))
        player.inventory.remove_at(index)
        messages.append(f"Health restored to: {player.hp}")
        logger.info("%s drank %s; hp now %d", player.name, item.name, player.hp)
        return messages, True

    if item.category in {WEAPON, ARMOR}:
        return [f"You ready your {item.name} for battle."], True

    return ["Nothing happens."], False
