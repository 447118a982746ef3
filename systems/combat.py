"""Deterministic turn-based combat."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import List, Optional, Tuple

from content.enemies import BOSS, ENEMIES, UNARMED_PENALTY, VICTORY_GOLD
from content.items import ARMOR, WEAPON, Item
from game import ui
from game.state import GameState, adjust_health, health_lines, is_player_alive


logger = logging.getLogger(__name__)


class CombatOutcome(str, Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"
    RETREATED = "retreated"
    UNPREPARED = "unprepared"


@dataclass
class Monster:
    """Live opponent for a single combat call."""

    kind: str
    name: str
    hp: int
    attack: int
    max_hp: int


def spawn_monster(archetype: str) -> Monster:
    enemy = ENEMIES[archetype]
    return Monster(
        kind=enemy["category"],
        name=enemy["name"],
        hp=int(enemy["hp"]),
        attack=int(enemy["attack"]),
        max_hp=int(enemy["hp"]),
    )


def damage_taken(monster: Monster, armor: Optional[Item]) -> int:
    """Armor soaks its power from each hit, but every hit lands for at least 1."""
    reduction = armor.power if armor else 0
    return max(1, monster.attack - reduction)


def _retreat(state: GameState) -> List[str]:
    adjust_health(state.player, -UNARMED_PENALTY)
    logger.info("%s fled without a weapon; hp now %d", state.player.name, state.player.hp)
    return ["Without a weapon, you must retreat!", *health_lines(state.player)]


def _loadout_lines(weapon: Item, armor: Optional[Item]) -> List[str]:
    lines = [f"You wield your {weapon.name} (Damage: {weapon.power})"]
    if armor:
        lines.append(f"You wear your {armor.name} (Protection: {armor.power})")
    else:
        lines.append("You have no armor for protection.")
    return lines


def _fight(state: GameState, monster: Monster, weapon: Item, armor: Optional[Item]) -> List[str]:
    player = state.player
    messages: List[str] = []
    round_number = 0

    while is_player_alive(player) and monster.hp > 0:
        round_number += 1
        monster.hp = max(0, monster.hp - weapon.power)
        messages.append(
            f"You strike the {monster.name} for {weapon.power} damage. {monster.name} health: {monster.hp}"
        )

        if monster.hp == 0:
            logger.debug("Round %d: %s falls", round_number, monster.name)
            break

        damage = damage_taken(monster, armor)
        messages.append(
            f"{monster.name} attacks you for {monster.attack} damage, "
            f"reduced by your armor to {damage} damage."
        )
        adjust_health(player, -damage)
        messages.extend(health_lines(player))
        logger.debug(
            "Round %d: %s at %d hp, %s at %d hp",
            round_number,
            monster.name,
            monster.hp,
            player.name,
            player.hp,
        )

    messages.extend(
        ui.combat_health_lines(
            player_hp=player.hp,
            enemy_name=monster.name,
            enemy_hp=monster.hp,
            enemy_max_hp=monster.max_hp,
        )
    )
    return messages


def resolve(state: GameState, archetype: str) -> Tuple[CombatOutcome, List[str]]:
    """Fight one monster of `archetype` to the end. Returns (outcome, messages)."""
    player = state.player
    inventory = player.inventory

    weapon = inventory.best_of_category(WEAPON)
    if weapon is None:
        return CombatOutcome.RETREATED, _retreat(state)

    if archetype == BOSS and not inventory.has_qualifying_loadout():
        logger.info("%s is not equipped for the %s", player.name, ENEMIES[archetype]["name"])
        return CombatOutcome.UNPREPARED, [
            "You are not equipped well enough to face the dragon! Get a steel sword and armor first."
        ]

    armor = inventory.best_of_category(ARMOR)
    monster = spawn_monster(archetype)

    messages = [f"You enter combat against the {monster.name}!"]
    messages.extend(_loadout_lines(weapon, armor))
    messages.extend(_fight(state, monster, weapon, armor))

    if is_player_alive(player):
        player.gold += VICTORY_GOLD
        logger.info("%s defeated the %s (%s); gold now %d", player.name, monster.name, monster.kind, player.gold)
        messages.append(f"Victory! You defeated the {monster.name}! You found {VICTORY_GOLD} gold!")
        return CombatOutcome.VICTORY, messages

    logger.info("%s was defeated by the %s (%s)", player.name, monster.name, monster.kind)
    messages.append(f"You were defeated by the {monster.name}...")
    return CombatOutcome.DEFEAT, messages
