"""Main game loop and menu dispatch."""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, List

from content.enemies import BOSS
from content.world import HUB_LOCATION_ID, LOCATIONS, max_choice, menu_options
from game import ui
from game.commands import parse_choice, parse_item_choice
from game.state import PROMPT_CHOICE, PROMPT_ITEM, GameState, create_initial_state, is_player_alive
from systems import combat, items, navigation, shop
from systems.combat import CombatOutcome


logger = logging.getLogger(__name__)

NAME_PROMPT = "What is your name, brave adventurer? "
CHOICE_PROMPT = "Enter choice (number): "
ITEM_PROMPT = "Use which item? (number or 'cancel'): "


class Engine:
    """CLI engine for the Dragon's Quest."""

    def __init__(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _emit_lines(self, messages: List[str]) -> None:
        text = ui.format_messages(messages)
        if text:
            self.output_fn(text)

    def _emit_action(self, messages: List[str]) -> None:
        text = ui.format_action_block(messages)
        if text:
            self.output_fn(text)

    def _clear_terminal(self) -> None:
        """Clear the terminal screen in interactive sessions."""
        if os.getenv("DRAGONS_QUEST_NO_CLEAR") == "1":
            return
        if not (sys.stdout.isatty() or os.getenv("DRAGONS_QUEST_FORCE_CLEAR") == "1"):
            return
        self.output_fn("\033[2J\033[H")

    def _build_status_payload(self, state: GameState) -> dict:
        return {
            "name": state.player.name,
            "hp": state.player.hp,
            "gold": state.player.gold,
            "location": LOCATIONS[state.current_location_id]["name"],
            "inventory": [
                {"name": item.name, "description": item.description} for item in state.player.inventory
            ],
        }

    def prompt_text(self, state: GameState) -> str:
        if state.pending_prompt == PROMPT_ITEM:
            return ITEM_PROMPT
        return CHOICE_PROMPT

    def _handle_fight(self, state: GameState, archetype: str) -> List[str]:
        outcome, messages = combat.resolve(state, archetype)
        if outcome == CombatOutcome.VICTORY:
            if archetype == BOSS:
                player = state.player
                messages.append(ui.format_victory(player.name, player.hp, player.gold))
                state.victory = True
                state.game_over = True
            return messages

        # A loss is survivable; at 0 hp the player simply stays where they are.
        if is_player_alive(state.player):
            if state.current_location_id == "dragons_lair":
                messages.append("You barely escaped with your life!")
            state.current_location_id = HUB_LOCATION_ID
        return messages

    def _handle_use(self, state: GameState) -> List[str]:
        if state.player.inventory.is_empty():
            return ["You have no items!"]
        state.pending_prompt = PROMPT_ITEM
        return items.item_list_lines(state)

    def _handle_option(self, state: GameState, option: dict) -> List[str]:
        action = option["action"]
        logger.debug("Turn %d at %s: %s", state.turn_count, state.current_location_id, action)

        if action == "move":
            _, messages = navigation.move(state, option["target"])
            return messages

        if action == "buy":
            vendor = LOCATIONS[state.current_location_id].get("vendor", "blacksmith")
            messages, _ = shop.purchase(state.player, option["item"], vendor)
            return messages

        if action == "fight":
            return self._handle_fight(state, option["archetype"])

        if action == "status":
            return [ui.format_status(self._build_status_payload(state))]

        if action == "use":
            return self._handle_use(state)

        if action == "help":
            return [ui.help_text()]

        if action == "quit":
            state.game_over = True
            return ["Thanks for playing!"]

        return [f"Unknown action: {action}."]

    def _resolve_item_choice(self, state: GameState, raw: str) -> List[str]:
        state.pending_prompt = PROMPT_CHOICE
        parsed = parse_item_choice(raw, len(state.player.inventory))
        if parsed.cancelled:
            return ["You put your pack away."]
        if not parsed.ok:
            return [parsed.error or "Invalid item number!"]
        messages, _ = items.use_item_at(state, parsed.value)
        return messages

    def _resolve_choice(self, state: GameState, raw: str) -> tuple[List[str], bool]:
        """Validate and apply one menu line. Returns (messages, accepted)."""
        location_id = state.current_location_id
        parsed = parse_choice(raw, max_choice(location_id))
        if not parsed.ok:
            logger.debug("Rejected input %r at %s: %s", raw, location_id, parsed.error)
            return ui.format_input_error(parsed.error or "Invalid choice."), False

        state.turn_count += 1
        option = menu_options(location_id)[parsed.value - 1]
        return self._handle_option(state, option), True

    def _render_screen(
        self,
        state: GameState,
        action_messages: List[str] | None = None,
        include_banner: bool = False,
    ) -> str:
        """Render the current game screen for terminal-like clients."""
        parts: List[str] = []
        if include_banner:
            parts.append(ui.banner())

        if action_messages:
            action_block = ui.format_action_block(action_messages)
            if action_block:
                parts.append(action_block)

        if not state.game_over and state.pending_prompt == PROMPT_CHOICE:
            parts.append(ui.format_menu(state.current_location_id))

        return "\n".join(part for part in parts if part)

    def initial_screen(self, state: GameState) -> str:
        """Render first screen content for a new game session."""
        intro = ui.welcome(state.player.name, state.player.gold)
        return self._render_screen(state, action_messages=intro, include_banner=True)

    def process_raw_command(self, state: GameState, raw_command: str) -> str:
        """Resolve one raw line of input and return rendered screen text."""
        if state.game_over:
            return self._render_screen(state)
        if state.pending_prompt == PROMPT_ITEM:
            messages = self._resolve_item_choice(state, raw_command)
        else:
            messages, _ = self._resolve_choice(state, raw_command)
        return self._render_screen(state, action_messages=messages)

    def start_session(self) -> GameState:
        """Show the title, ask for a name, and create the session state."""
        self._clear_terminal()
        self.output_fn(ui.banner())
        name = self.input_fn(NAME_PROMPT)
        state = create_initial_state(name)
        logger.info("New session for %r", name)
        self._emit_lines(ui.welcome(state.player.name, state.player.gold))
        return state

    def run(self, state: GameState) -> None:
        """Run the menu loop until quit or the dragon falls."""
        show_menu = True
        while not state.game_over:
            if show_menu and state.pending_prompt == PROMPT_CHOICE:
                self.output_fn(ui.format_menu(state.current_location_id))
            try:
                raw = self.input_fn(self.prompt_text(state))
            except EOFError:
                logger.info("Input closed; ending session")
                state.game_over = True
                break

            if state.pending_prompt == PROMPT_ITEM:
                self._emit_action(self._resolve_item_choice(state, raw))
                show_menu = True
                continue

            messages, accepted = self._resolve_choice(state, raw)
            if accepted:
                self._clear_terminal()
                self._emit_action(messages)
            else:
                self._emit_lines(messages)
            show_menu = accepted

        logger.info("Session over (victory=%s, turns=%d)", state.victory, state.turn_count)
