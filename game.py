#!/usr/bin/env python3
"""Core game state machine and console loop."""

from __future__ import annotations

import logging
from typing import Protocol

from player import PlayerState
from ui import ConsoleUI
from world import Location, World


logger = logging.getLogger(__name__)

STATE_DISPLAY = "displaying"
STATE_ITEMS = "awaiting_item_decision"
STATE_CHOICE = "awaiting_main_choice"
STATE_INVENTORY = "showing_inventory"
STATE_ENDED = "ended"

END_QUIT = "quit"
END_VICTORY = "victory"

WELCOME_TEXT = "Welcome to the Adventure Game!"
VICTORY_TEXT = "Congratulations! You've reached the end of your adventure!"
FAREWELL_TEXT = "Thanks for playing!"
INVALID_TEXT = "Invalid choice."


class SoundSink(Protocol):
    def play(self, name: str) -> None: ...

    def cleanup(self) -> None: ...


def parse_exit_choice(text: str, exit_count: int) -> int | None:
    """Map a 1-based menu entry to a 0-based exit index, or None if it is not one."""
    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    if not digits.isdecimal():
        return None
    number = int(digits)
    if 1 <= number <= exit_count:
        return number - 1
    return None


class Game:
    """Owns the session: current location, player, and the sound player it was given."""

    def __init__(
        self,
        world: World,
        start: int,
        sounds: SoundSink,
        ui: ConsoleUI | None = None,
    ) -> None:
        world.get(start)  # raises ValueError for an unknown start
        self.world = world
        self.current = start
        self.sounds = sounds
        self.ui = ui if ui is not None else ConsoleUI()
        self.player = PlayerState()

        self.state = STATE_DISPLAY
        self.end_reason: str | None = None

    @property
    def location(self) -> Location:
        return self.world.get(self.current)

    def _end(self, reason: str) -> None:
        self.state = STATE_ENDED
        self.end_reason = reason

    def _read(self, prompt: str, lower: bool = True) -> str | None:
        line = self.ui.prompt(prompt)
        if line is None:
            logger.info("Input closed in state %s; ending session", self.state)
            self._end(END_QUIT)
            return None
        line = line.strip()
        return line.lower() if lower else line

    def display_location(self) -> None:
        location = self.location
        self.ui.clear()
        self.ui.write()
        self.ui.write(f"=== {location.name} ===")
        self.ui.write(location.description)

        if location.items:
            self.ui.write()
            self.ui.write("You see:")
            for item in location.items:
                self.ui.write(f"- {item}")

        self.ui.write()
        self.ui.write("Possible exits:")
        for number, idx in enumerate(location.connections, start=1):
            self.ui.write(f"{number}. Go to {self.world.get(idx).name}")

    def pick_up_items(self) -> list[str]:
        """Move every item here into the inventory, in the location's order."""
        location = self.location
        taken = list(location.items)
        location.items.clear()
        for item in taken:
            self.player.add_item(item)
            self.ui.write(f"You picked up: {item}")
            self.sounds.play("pickup")
        return taken

    def move_to(self, exit_index: int) -> None:
        self.current = self.location.connections[exit_index]
        logger.debug("Moved to %s", self.location.name)
        self.sounds.play("move")
        self.state = STATE_DISPLAY

    def show_inventory(self) -> None:
        self.ui.write()
        self.ui.write("Inventory:")
        for line in self.player.inventory_lines():
            self.ui.write(line)

    def _step_display(self) -> None:
        self.display_location()
        if self.location.is_end:
            self.ui.write()
            self.ui.write(VICTORY_TEXT)
            self.sounds.play("victory")
            self._end(END_VICTORY)
            return
        self.state = STATE_ITEMS if self.location.items else STATE_CHOICE

    def _step_items(self) -> None:
        choice = self._read("\nWould you like to pick up any items? (y/n): ")
        if choice is None:
            return
        if choice == "y":
            self.pick_up_items()
        self.state = STATE_CHOICE

    def _step_choice(self) -> None:
        exit_count = len(self.location.connections)
        self.ui.write()
        self.ui.write("What would you like to do?")
        if exit_count:
            self.ui.write(f"1-{exit_count}. Move to a new location")
        self.ui.write("i. Check inventory")
        self.ui.write("q. Quit game")

        choice = self._read("\nEnter your choice: ")
        if choice is None:
            return
        if choice == "q":
            self.ui.write(FAREWELL_TEXT)
            self._end(END_QUIT)
            return
        if choice == "i":
            self.state = STATE_INVENTORY
            return

        exit_index = parse_exit_choice(choice, exit_count)
        if exit_index is None:
            self.ui.write(INVALID_TEXT)
            return
        self.move_to(exit_index)

    def _step_inventory(self) -> None:
        self.show_inventory()
        if self._read("\nPress Enter to continue...") is None:
            return
        self.state = STATE_CHOICE

    def run(self) -> str | None:
        handlers = {
            STATE_DISPLAY: self._step_display,
            STATE_ITEMS: self._step_items,
            STATE_CHOICE: self._step_choice,
            STATE_INVENTORY: self._step_inventory,
        }
        while self.state != STATE_ENDED:
            handlers[self.state]()
        return self.end_reason

    def start(self) -> str | None:
        """Show the banner, play until quit or victory, then release input and audio."""
        try:
            self.ui.write(WELCOME_TEXT)
            if self._read("Press Enter to begin...") is None:
                return self.end_reason
            return self.run()
        finally:
            self.ui.close()
            self.sounds.cleanup()
