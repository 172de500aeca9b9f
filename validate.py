#!/usr/bin/env python3
"""Sanity report for the location graph: reachability, dead ends, and depth."""

from __future__ import annotations

import sys
from collections import deque

from world import World, build_default_world


def reachable(world: World, start: int) -> set[int]:
    if start < 0 or start >= len(world):
        return set()
    q = deque([start])
    seen = {start}
    while q:
        node = q.popleft()
        if world.get(node).is_end:
            continue
        for nxt in world.exits(node):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def bfs_depth(world: World, start: int) -> int:
    if start < 0 or start >= len(world):
        return 0
    q: deque[tuple[int, int]] = deque([(start, 0)])
    seen = {start}
    max_depth = 0
    while q:
        node, d = q.popleft()
        if d > max_depth:
            max_depth = d
        if world.get(node).is_end:
            continue
        for nxt in world.exits(node):
            if nxt not in seen:
                seen.add(nxt)
                q.append((nxt, d + 1))
    return max_depth


def problems(world: World, start: int) -> list[str]:
    found: list[str] = []
    reach = reachable(world, start)
    for idx, location in enumerate(world.locations):
        if idx not in reach:
            found.append(f"Unreachable location: {location.name}")
        elif not location.is_end and not location.connections:
            found.append(f"Dead end (no exits, not an ending): {location.name}")
    if not any(world.get(idx).is_end for idx in reach):
        found.append("No ending is reachable from the start location")
    return found


def summary(world: World, start: int) -> str:
    reach = reachable(world, start)
    endings = [loc.name for loc in world.locations if loc.is_end]
    total_exits = sum(len(loc.connections) for loc in world.locations)
    total_items = sum(len(loc.items) for loc in world.locations)
    issues = problems(world, start)

    lines = [
        f"Total locations: {len(world)}",
        f"Total exits: {total_exits}",
        f"Total items: {total_items}",
        f"Endings: {', '.join(endings) if endings else 'None'}",
        f"Reachable from start ({world.get(start).name}): {len(reach)}",
        f"Deepest shortest path from start: {bfs_depth(world, start)}",
        f"Problems: {'; '.join(issues) if issues else 'None'}",
    ]
    return "\n".join(lines)


def main() -> int:
    world, start = build_default_world()
    print(summary(world, start))
    return 1 if problems(world, start) else 0


if __name__ == "__main__":
    sys.exit(main())
