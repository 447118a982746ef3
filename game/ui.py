"""Rendering helpers for the Dragon's Quest CLI output."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterable, List

from content.enemies import BOSS, ENEMIES, NORMAL
from content.items import ITEMS
from content.world import LOCATIONS, menu_options


DIVIDER = "-" * 64
ACTION_SEPARATOR = "=" * 64
TITLE = "The Dragon's Quest"
MAX_HP = 100

ANSI_RESET = "\033[0m"
ANSI_YELLOW = "\033[93m"
ANSI_RED = "\033[91m"
ANSI_HEALTH_GREEN = "\033[38;5;82m"
ANSI_ITEM_GREEN = "\033[38;5;120m"
ANSI_BLUE = "\033[38;5;39m"


def _enable_windows_ansi() -> None:
    """Enable ANSI color support on Windows terminals that need it."""
    if os.name != "nt":
        return
    try:
        import ctypes

        kernel32 = ctypes.windll.kernel32
        handle = kernel32.GetStdHandle(-11)  # STD_OUTPUT_HANDLE
        mode = ctypes.c_uint()
        if kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            kernel32.SetConsoleMode(handle, mode.value | 0x0004)  # ENABLE_VIRTUAL_TERMINAL_PROCESSING
    except (AttributeError, OSError):
        # Fallback to plain text if terminal APIs are unavailable.
        pass


_enable_windows_ansi()
_FORCE_COLOR = os.getenv("DRAGONS_QUEST_FORCE_COLOR") == "1"
_COLOR_ENABLED = os.getenv("NO_COLOR") is None and (sys.stdout.isatty() or _FORCE_COLOR)


def _paint(text: str, color_code: str) -> str:
    if not _COLOR_ENABLED:
        return text
    return f"{color_code}{text}{ANSI_RESET}"


def _compile_name_pattern(names: Iterable[str]) -> re.Pattern[str] | None:
    filtered = [name for name in names if name]
    if not filtered:
        return None
    escaped = sorted((re.escape(name) for name in filtered), key=len, reverse=True)
    return re.compile(r"(?<!\w)(" + "|".join(escaped) + r")(?!\w)")


_ITEM_NAMES = {item.name for item in ITEMS.values()}
_CREATURE_NAMES = {enemy["name"] for enemy in ENEMIES.values() if enemy["category"] == NORMAL}
_BOSS_NAMES = {enemy["name"] for enemy in ENEMIES.values() if enemy["category"] == BOSS}

_COLOR_PATTERNS: list[tuple[re.Pattern[str] | None, str]] = [
    (_compile_name_pattern(_BOSS_NAMES), ANSI_RED),
    (_compile_name_pattern(_CREATURE_NAMES), ANSI_YELLOW),
    (_compile_name_pattern(_ITEM_NAMES), ANSI_ITEM_GREEN),
]


def _colorize_interactables(text: str) -> str:
    if not text or not _COLOR_ENABLED:
        return text
    rendered = text
    for pattern, color in _COLOR_PATTERNS:
        if pattern is None:
            continue
        rendered = pattern.sub(lambda match: _paint(match.group(0), color), rendered)
    return rendered


def health_bar(current_hp: int, max_hp: int = MAX_HP, width: int = 24) -> str:
    """Render an ASCII HP bar with green current HP and red missing HP."""
    max_hp = max(1, int(max_hp))
    current_hp = max(0, min(int(current_hp), max_hp))

    filled = int(round((current_hp / max_hp) * width))
    if current_hp > 0:
        filled = max(1, filled)
    filled = min(width, filled)
    empty = max(0, width - filled)

    fill_text = "#" * filled
    empty_text = "-" * empty

    if _COLOR_ENABLED:
        fill_text = _paint(fill_text, ANSI_HEALTH_GREEN) if fill_text else ""
        empty_text = _paint(empty_text, ANSI_RED) if empty_text else ""

    return f"[{fill_text}{empty_text}] {current_hp}/{max_hp}"


def combat_health_lines(player_hp: int, enemy_name: str, enemy_hp: int, enemy_max_hp: int) -> list[str]:
    """Return player/enemy HP bars for the end of a combat log."""
    return [
        "HP:",
        f"  You: {health_bar(player_hp)}",
        f"  {enemy_name}: {health_bar(enemy_hp, enemy_max_hp)}",
    ]


def banner() -> str:
    return "\n".join(
        [
            ACTION_SEPARATOR,
            TITLE.center(len(ACTION_SEPARATOR)).rstrip(),
            ACTION_SEPARATOR,
            "Your quest: Defeat the dragon in the mountains!",
        ]
    )


def welcome(name: str, gold: int) -> List[str]:
    return [f"Welcome, {name}!", f"You start with {gold} gold."]


def help_text() -> str:
    return "\n".join(
        [
            DIVIDER,
            "=== AVAILABLE COMMANDS ===",
            "Navigate locations and buy equipment to prepare for battles.",
            "Use items like potions to heal.",
            "Defeat monsters and ultimately the dragon to win!",
            "Use numbered choices to make selections.",
            "Good luck on your quest, brave adventurer!",
        ]
    )


def option_label(option: dict) -> str:
    if option["action"] == "buy":
        item = ITEMS[option["item"]]
        return f"Buy {item.name.lower()} ({item.cost} gold)"
    return option["label"]


def format_menu(location_id: str) -> str:
    location = LOCATIONS[location_id]
    lines = [
        DIVIDER,
        _paint(f"=== {location['name'].upper()} ===", ANSI_BLUE),
        location["description"],
        "",
        "What would you like to do?",
    ]
    for number, option in enumerate(menu_options(location_id), start=1):
        lines.append(f"{number}: {option_label(option)}")
    return "\n".join(lines)


def format_status(status: dict) -> str:
    lines = [
        DIVIDER,
        f"=== {status['name']}'s Status ===",
        f"Health: {status['hp']}  {health_bar(int(status['hp']))}",
        f"Gold: {status['gold']}",
        f"Location: {status['location']}",
        format_inventory(status["inventory"]),
    ]
    return "\n".join(lines)


def format_inventory(inventory: List[dict]) -> str:
    if not inventory:
        return "Inventory:\n   Nothing in inventory"
    lines = ["Inventory:"]
    for index, item in enumerate(inventory, start=1):
        lines.append(f"   {index}. {item['name']} - {item['description']}")
    return "\n".join(lines)


def format_victory(name: str, hp: int, gold: int) -> str:
    return "\n".join(
        [
            DIVIDER,
            "=== VICTORY! ===",
            "You have slain the dragon and saved the kingdom!",
            f"Final stats for {name}:",
            f"Health: {hp}",
            f"Gold: {gold}",
            f"Thank you for playing {TITLE}!",
        ]
    )


def format_input_error(reason: str) -> List[str]:
    return [f"Error: {reason}", "Please try again!"]


def format_messages(messages: Iterable[str]) -> str:
    formatted: list[str] = []
    for msg in messages:
        if not msg:
            continue
        formatted.append(_colorize_interactables(msg))
    return "\n".join(formatted)


def format_action_block(messages: Iterable[str]) -> str:
    """Render one command result as a visually separated CLI block."""
    body = format_messages(messages)
    if not body:
        return ""
    return "\n".join([ACTION_SEPARATOR, body, ACTION_SEPARATOR])
