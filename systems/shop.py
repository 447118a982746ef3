"""Blacksmith and market purchases."""

from __future__ import annotations

import logging
from typing import List, Tuple

from content.items import ITEMS
from content.world import VENDOR_LINES
from game.state import Player


logger = logging.getLogger(__name__)


def can_afford(player: Player, item_id: str) -> bool:
    return player.gold >= ITEMS[item_id].cost


def purchase(player: Player, item_id: str, vendor: str = "blacksmith") -> Tuple[List[str], bool]:
    """Buy one copy of a catalog item. Returns (messages, bought).

    Gold and inventory change together or not at all.
    """
    item = ITEMS[item_id]
    lines = VENDOR_LINES[vendor]

    if not can_afford(player, item_id):
        logger.info("Purchase of %s refused: %d gold, costs %d", item.name, player.gold, item.cost)
        return [lines["refusal"]], False

    player.gold -= item.cost
    player.inventory.add(item)
    logger.info("Bought %s for %d gold; %d left", item.name, item.cost, player.gold)
    return [
        lines["sale"].format(item=item.name),
        f"You bought a {item.name} for {item.cost} gold!",
        f"Gold remaining: {player.gold}",
    ], True
