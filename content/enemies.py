"""Monster archetypes for the Dragon's Quest."""

from __future__ import annotations

from typing import Dict


NORMAL = "normal"
BOSS = "boss"


ENEMIES: Dict[str, dict] = {
    NORMAL: {
        "name": "Monster",
        "category": NORMAL,
        "hp": 20,
        "attack": 10,
    },
    BOSS: {
        "name": "Dragon",
        "category": BOSS,
        "hp": 50,
        "attack": 20,
    },
}

# Gold awarded for any win.
VICTORY_GOLD = 10

# Health lost when the player tries to fight without a weapon.
UNARMED_PENALTY = 20
