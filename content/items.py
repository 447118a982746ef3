"""Item definitions for the Dragon's Quest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


POTION = "potion"
WEAPON = "weapon"
ARMOR = "armor"


@dataclass(frozen=True)
class Item:
    """One item template or owned copy.

    `category` selects the behavior: heal amount for potions, damage for
    weapons, damage reduction for armor. All three share `power`.
    """

    name: str
    category: str
    cost: int
    power: int
    description: str


ITEMS: Dict[str, Item] = {
    "potion": Item(
        name="Health Potion",
        category=POTION,
        cost=5,
        power=30,
        description="Restores 30 health points",
    ),
    "sword": Item(
        name="Sword",
        category=WEAPON,
        cost=10,
        power=10,
        description="A sturdy blade for combat",
    ),
    "steel_sword": Item(
        name="Steel Sword",
        category=WEAPON,
        cost=25,
        power=20,
        description="A sharp steel sword, more powerful than basic swords",
    ),
    "wooden_shield": Item(
        name="Wooden Shield",
        category=ARMOR,
        cost=8,
        power=5,
        description="Reduces damage taken in combat",
    ),
    "iron_shield": Item(
        name="Iron Shield",
        category=ARMOR,
        cost=20,
        power=10,
        description="A sturdy iron shield, better protection than wooden shield",
    ),
}

# Exact name the dragon's lair checks for.
BOSS_WEAPON_NAME = ITEMS["steel_sword"].name

