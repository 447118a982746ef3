"""World map and location menus for the Dragon's Quest."""

from __future__ import annotations

from typing import Dict, List


START_LOCATION_ID = "village"
HUB_LOCATION_ID = "village"

# Shared tail of every location menu.
_COMMON_OPTIONS: List[dict] = [
    {"action": "status", "label": "Check status"},
    {"action": "use", "label": "Use item"},
    {"action": "help", "label": "Help"},
    {"action": "quit", "label": "Quit game"},
]


LOCATIONS: Dict[str, dict] = {
    "village": {
        "name": "Village",
        "description": "You're in a bustling village. The blacksmith and market are nearby.",
        "exits": {
            "blacksmith": "You enter the blacksmith's shop.",
            "market": "You enter the market.",
            "forest": "You venture into the forest...",
            "dragons_lair": "You bravely enter the dragon's lair...",
        },
        "exit_requirements": {
            "dragons_lair": {
                "qualifying_loadout": True,
                "message": (
                    "You are not well-equipped enough to face the dragon yet! "
                    "Get a steel sword and armor first."
                ),
            }
        },
        "options": [
            {"action": "move", "target": "blacksmith", "label": "Go to blacksmith"},
            {"action": "move", "target": "market", "label": "Go to market"},
            {"action": "move", "target": "forest", "label": "Enter forest"},
            {
                "action": "move",
                "target": "dragons_lair",
                "label": "Attempt dragon's lair (Requires steel sword + armor)",
            },
            *_COMMON_OPTIONS,
        ],
    },
    "blacksmith": {
        "name": "Blacksmith",
        "description": "The heat from the forge fills the air. Weapons and armor line the walls.",
        "vendor": "blacksmith",
        "exits": {"village": "You return to the village center."},
        "options": [
            {"action": "buy", "item": "sword"},
            {"action": "buy", "item": "steel_sword"},
            {"action": "buy", "item": "wooden_shield"},
            {"action": "buy", "item": "iron_shield"},
            {"action": "move", "target": "village", "label": "Return to village"},
            *_COMMON_OPTIONS,
        ],
    },
    "market": {
        "name": "Market",
        "description": "Merchants sell their wares from colorful stalls. A potion seller catches your eye.",
        "vendor": "market",
        "exits": {"village": "You return to the village center."},
        "options": [
            {"action": "buy", "item": "potion"},
            {"action": "move", "target": "village", "label": "Return to village"},
            *_COMMON_OPTIONS,
        ],
    },
    "forest": {
        "name": "Forest",
        "description": "The forest is dark and foreboding. You hear strange noises all around you.",
        "exits": {"village": "You hurry back to the safety of the village."},
        "options": [
            {"action": "fight", "archetype": "normal", "label": "Fight a monster"},
            {"action": "move", "target": "village", "label": "Return to village"},
            *_COMMON_OPTIONS,
        ],
    },
    "dragons_lair": {
        "name": "Dragon's Lair",
        "description": "You stand in the dragon's lair, the air thick with smoke and danger.",
        "exits": {"village": "You flee back to the village."},
        "options": [
            {"action": "fight", "archetype": "boss", "label": "Fight the dragon"},
            {"action": "move", "target": "village", "label": "Flee to village"},
            *_COMMON_OPTIONS,
        ],
    },
}


VENDOR_LINES: Dict[str, dict] = {
    "blacksmith": {
        "sale": "Blacksmith: 'A fine {item} for a brave adventurer!'",
        "refusal": "Blacksmith: 'Come back when you have more gold!'",
    },
    "market": {
        "sale": "Merchant: 'This {item} will heal your wounds!'",
        "refusal": "Merchant: 'No gold, no potion!'",
    },
}


def menu_options(location_id: str) -> List[dict]:
    """Return the numbered option list for a location, in display order."""
    return LOCATIONS[location_id]["options"]


def max_choice(location_id: str) -> int:
    """Highest valid menu number at a location."""
    return len(menu_options(location_id))
