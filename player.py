#!/usr/bin/env python3
"""Player state model for the adventure."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PlayerState:
    """Items carried by the player, in pickup order. Only ever grows."""

    inventory: list[str] = field(default_factory=list)

    def add_item(self, item: str) -> None:
        self.inventory.append(str(item))

    def has_item(self, item: str) -> bool:
        return item in self.inventory

    def inventory_lines(self) -> list[str]:
        if not self.inventory:
            return ["Empty"]
        return [f"- {item}" for item in self.inventory]
