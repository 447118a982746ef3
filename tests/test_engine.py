from __future__ import annotations

from content.items import ITEMS
from game.state import PROMPT_CHOICE, PROMPT_ITEM


def test_quit_from_village(play):
    state, output = play(["8"])

    assert state.game_over
    assert not state.victory
    assert "Welcome, Tester!" in output
    assert "You start with 20 gold." in output
    assert "Thanks for playing!" in output


def test_invalid_input_is_retried_without_a_turn(play):
    state, output = play(["abc", "", "42", "8"])

    assert state.turn_count == 1
    assert state.current_location_id == "village"
    assert "Error: That's not a number!" in output
    assert "Error: Please enter a number!" in output
    assert "Error: Please enter a number between 1 and 8." in output
    assert output.count("Please try again!") == 3


def test_end_of_input_ends_the_session(play):
    state, _ = play(["1"])

    assert state.game_over
    assert state.current_location_id == "blacksmith"


def test_full_quest(play):
    script = [
        "1",  # blacksmith
        "1",  # sword
        "5",  # village
        "3",  # forest
        "1",
        "1",
        "1",  # three monsters
        "2",  # village
        "1",  # blacksmith
        "2",  # steel sword
        "3",  # wooden shield
        "5",  # village
        "4",  # dragon's lair
        "1",  # fight the dragon
    ]

    state, output = play(script, name="Aria")

    assert state.victory
    assert state.game_over
    assert state.player.hp == 40
    assert state.player.gold == 17
    assert "=== VICTORY! ===" in output
    assert "Final stats for Aria:" in output
    assert "Gold: 17" in output


def test_forest_retreat_sends_player_home(play):
    state, output = play(["3", "1", "8"])

    assert state.current_location_id == "village"
    assert state.player.hp == 80
    assert "Without a weapon, you must retreat!" in output
    assert "=== VILLAGE ===" in output.split("Without a weapon, you must retreat!", 1)[1]


def test_lair_gate_keeps_player_in_village(play):
    state, output = play(["4", "8"])

    assert state.current_location_id == "village"
    assert "not well-equipped enough to face the dragon" in output


def test_zero_health_is_not_terminal(engine, state):
    state.current_location_id = "forest"
    state.player.hp = 20

    engine.process_raw_command(state, "1")

    assert state.player.hp == 0
    assert state.current_location_id == "forest"
    assert not state.game_over

    screen = engine.process_raw_command(state, "2")
    assert state.current_location_id == "village"
    assert "You hurry back to the safety of the village." in screen


def test_failed_dragon_fight_escapes_to_village(engine, state):
    state.current_location_id = "dragons_lair"
    state.player.inventory.add(ITEMS["sword"])

    screen = engine.process_raw_command(state, "1")

    assert "You barely escaped with your life!" in screen
    assert state.current_location_id == "village"
    assert not state.game_over


def test_status_screen(engine, state):
    state.player.inventory.add(ITEMS["sword"])

    screen = engine.process_raw_command(state, "5")

    assert "=== Tester's Status ===" in screen
    assert "Gold: 20" in screen
    assert "Location: Village" in screen
    assert "1. Sword - A sturdy blade for combat" in screen


def test_status_with_empty_inventory(engine, state):
    screen = engine.process_raw_command(state, "5")
    assert "Nothing in inventory" in screen


def test_use_item_with_empty_inventory(engine, state):
    screen = engine.process_raw_command(state, "6")

    assert "You have no items!" in screen
    assert state.pending_prompt == PROMPT_CHOICE


def test_use_potion_through_the_menu(engine, state):
    state.player.hp = 50
    state.player.inventory.add(ITEMS["potion"])

    screen = engine.process_raw_command(state, "6")
    assert state.pending_prompt == PROMPT_ITEM
    assert "1. Health Potion" in screen
    assert "What would you like to do?" not in screen
    assert engine.prompt_text(state).startswith("Use which item?")

    screen = engine.process_raw_command(state, "1")
    assert state.pending_prompt == PROMPT_CHOICE
    assert state.player.hp == 80
    assert state.player.inventory.is_empty()
    assert "What would you like to do?" in screen


def test_cancel_and_bad_item_number(engine, state):
    state.player.hp = 50
    state.player.inventory.add(ITEMS["potion"])

    engine.process_raw_command(state, "6")
    engine.process_raw_command(state, "cancel")
    assert state.pending_prompt == PROMPT_CHOICE
    assert state.player.hp == 50

    engine.process_raw_command(state, "6")
    screen = engine.process_raw_command(state, "7")
    assert "Invalid item number!" in screen
    assert state.pending_prompt == PROMPT_CHOICE
    assert state.player.hp == 50
    assert len(state.player.inventory) == 1


def test_shopping_at_the_market(engine, state):
    engine.process_raw_command(state, "2")
    screen = engine.process_raw_command(state, "1")

    assert state.player.gold == 15
    assert "Merchant: 'This Health Potion will heal your wounds!'" in screen


def test_blacksmith_menu_shows_prices(engine, state):
    screen = engine.process_raw_command(state, "1")

    assert "1: Buy sword (10 gold)" in screen
    assert "2: Buy steel sword (25 gold)" in screen
    assert "3: Buy wooden shield (8 gold)" in screen
    assert "4: Buy iron shield (20 gold)" in screen
    assert "9: Quit game" in screen


def test_help(engine, state):
    screen = engine.process_raw_command(state, "7")
    assert "=== AVAILABLE COMMANDS ===" in screen


def test_commands_after_game_over_are_ignored(engine, state):
    engine.process_raw_command(state, "8")
    turns = state.turn_count

    engine.process_raw_command(state, "1")

    assert state.turn_count == turns
    assert state.current_location_id == "village"
