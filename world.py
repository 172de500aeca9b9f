#!/usr/bin/env python3
"""Location graph for the adventure: an index-addressed registry of locations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Location:
    """One node of the map. Connections hold registry indices, not objects."""

    name: str
    description: str = ""
    is_end: bool = False
    items: list[str] = field(default_factory=list)
    connections: list[int] = field(default_factory=list)


class World:
    """Owns every location for the session. Edges are directed and never symmetrized."""

    def __init__(self) -> None:
        self.locations: list[Location] = []

    def __len__(self) -> int:
        return len(self.locations)

    def _check(self, index: int) -> int:
        if not isinstance(index, int) or index < 0 or index >= len(self.locations):
            raise ValueError(f"Unknown location index: {index!r}")
        return index

    def add_location(self, name: str, description: str = "", is_end: bool = False) -> int:
        self.locations.append(Location(name=name, description=description, is_end=is_end))
        return len(self.locations) - 1

    def connect(self, src: int, dst: int) -> None:
        self.locations[self._check(src)].connections.append(self._check(dst))

    def add_item(self, index: int, item: str) -> None:
        self.locations[self._check(index)].items.append(item)

    def get(self, index: int) -> Location:
        return self.locations[self._check(index)]

    def exits(self, index: int) -> list[int]:
        return list(self.get(index).connections)

    def find(self, name: str) -> int | None:
        for idx, location in enumerate(self.locations):
            if location.name == name:
                return idx
        return None


def build_default_world() -> tuple[World, int]:
    """Build the hardcoded four-location map and return it with the start index."""
    world = World()
    cave = world.add_location("Cave", "You're in a dimly lit cave. Water drips from the ceiling.")
    forest = world.add_location("Forest", "You're in a dense forest. Sunlight filters through the leaves.")
    ruins = world.add_location(
        "Ancient Ruins",
        "You stand before crumbling stone walls covered in mysterious symbols.",
    )
    temple = world.add_location("Temple", "You've reached a magnificent temple atop a mountain.", is_end=True)

    world.connect(cave, forest)
    world.connect(forest, cave)
    world.connect(forest, ruins)
    world.connect(ruins, forest)
    world.connect(ruins, temple)

    world.add_item(cave, "Torch")
    world.add_item(forest, "Magic Stone")
    world.add_item(ruins, "Ancient Key")

    return world, cave
