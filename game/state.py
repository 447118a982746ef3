"""Game state containers and shared state helpers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional

from content.items import ARMOR, BOSS_WEAPON_NAME, WEAPON, Item
from content.world import START_LOCATION_ID


MAX_HP = 100
STARTING_GOLD = 20

PROMPT_CHOICE = "choice"
PROMPT_ITEM = "item"


class InventoryIndexError(IndexError):
    """Raised when an inventory position does not exist."""


class Inventory:
    """Owned items in acquisition order. Duplicates are allowed."""

    def __init__(self, items: Optional[List[Item]] = None):
        self._items: List[Item] = [replace(item) for item in items or []]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Inventory({[item.name for item in self._items]!r})"

    def is_empty(self) -> bool:
        return not self._items

    def add(self, item: Item) -> Item:
        """Append an independent copy of `item` and return the copy."""
        owned = replace(item)
        self._items.append(owned)
        return owned

    def remove_at(self, index: int) -> Item:
        """Remove the item at `index`; later items shift down by one."""
        if index < 0 or index >= len(self._items):
            raise InventoryIndexError(f"No inventory item at position {index}.")
        return self._items.pop(index)

    def items_of_category(self, category: str) -> List[Item]:
        return [item for item in self._items if item.category == category]

    def best_of_category(self, category: str) -> Optional[Item]:
        """Highest-power item of a category; the earliest acquired wins ties."""
        best: Optional[Item] = None
        for item in self.items_of_category(category):
            if best is None or item.power > best.power:
                best = item
        return best

    def has_qualifying_loadout(self) -> bool:
        """A weapon named exactly Steel Sword plus any armor at all."""
        has_steel_sword = any(
            item.category == WEAPON and item.name == BOSS_WEAPON_NAME for item in self._items
        )
        has_armor = any(item.category == ARMOR for item in self._items)
        return has_steel_sword and has_armor


@dataclass
class Player:
    """All mutable player state."""

    name: str = "Adventurer"
    hp: int = MAX_HP
    gold: int = STARTING_GOLD
    inventory: Inventory = field(default_factory=Inventory)


@dataclass
class GameState:
    """Single source of truth for one session."""

    player: Player
    current_location_id: str = START_LOCATION_ID
    turn_count: int = 0
    pending_prompt: str = PROMPT_CHOICE
    game_over: bool = False
    victory: bool = False


def create_initial_state(name: str = "Adventurer") -> GameState:
    """Create a fresh game state for a new run."""
    return GameState(player=Player(name=name))


def clamp_player_hp(player: Player) -> None:
    """Clamp hp to [0, MAX_HP]."""
    player.hp = max(0, min(player.hp, MAX_HP))


def adjust_health(player: Player, amount: int) -> int:
    """Apply a heal (positive) or damage (negative) and return the actual change."""
    before = player.hp
    player.hp += amount
    clamp_player_hp(player)
    return player.hp - before


def health_lines(player: Player, overflowed: bool = False) -> List[str]:
    """Messages shown after any health change.

    `overflowed` means the change would have pushed hp past MAX_HP before clamping.
    """
    messages: List[str] = []
    if overflowed:
        messages.append("You're at full health!")
    elif player.hp <= 0:
        messages.append("You're gravely wounded!")
    messages.append(f"Health is now: {player.hp}")
    return messages


def is_player_alive(player: Player) -> bool:
    return player.hp > 0
