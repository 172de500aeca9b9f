from validate import bfs_depth, main, problems, reachable, summary
from world import World, build_default_world


def test_default_world_is_sound() -> None:
    world, start = build_default_world()
    assert reachable(world, start) == set(range(len(world)))
    assert bfs_depth(world, start) == 3
    assert problems(world, start) == []
    assert "Problems: None" in summary(world, start)


def test_reports_unreachable_dead_ends_and_missing_ending() -> None:
    world = World()
    start = world.add_location("Start")
    hole = world.add_location("Hole")
    world.add_location("Island", is_end=True)
    world.connect(start, hole)

    found = problems(world, start)
    assert "Unreachable location: Island" in found
    assert "Dead end (no exits, not an ending): Hole" in found
    assert "No ending is reachable from the start location" in found


def test_endings_are_not_traversed() -> None:
    world = World()
    start = world.add_location("Start")
    end = world.add_location("End", is_end=True)
    beyond = world.add_location("Beyond")
    world.connect(start, end)
    world.connect(end, beyond)
    assert beyond not in reachable(world, start)


def test_main_prints_report(capsys) -> None:
    assert main() == 0
    out = capsys.readouterr().out
    assert "Total locations: 4" in out
    assert "Endings: Temple" in out
