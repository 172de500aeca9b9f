import io

import pytest

from game import Game
from ui import ConsoleUI
from world import World, build_default_world


class FakeSounds:
    def __init__(self) -> None:
        self.played: list[str] = []
        self.cleanup_calls = 0

    def play(self, name: str) -> None:
        self.played.append(name)

    def cleanup(self) -> None:
        self.cleanup_calls += 1


class Session:
    def __init__(self, game: Game, sounds: FakeSounds, stdout: io.StringIO) -> None:
        self.game = game
        self.sounds = sounds
        self.stdout = stdout

    @property
    def output(self) -> str:
        return self.stdout.getvalue()


@pytest.fixture
def make_session():
    def _make(lines: list[str], world: World | None = None, start: int | None = None) -> Session:
        if world is None:
            world, default_start = build_default_world()
            start = default_start if start is None else start
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        sounds = FakeSounds()
        ui = ConsoleUI(stdin=stdin, stdout=stdout, clear_screen=False)
        return Session(Game(world, start, sounds, ui), sounds, stdout)

    return _make
