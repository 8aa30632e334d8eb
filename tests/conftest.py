import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pytest

from engine.api import FrameData, Point
from games.color_shooter.cluster import Target, TargetCluster
from games.color_shooter.palette import Palette
from games.color_shooter.world import World

SCREEN = (800, 600)


class ScriptedRng:
    """Replays a fixed list of indices, cycling when it runs out."""

    def __init__(self, *indices):
        self.indices = list(indices) or [0]
        self.calls = 0

    def integers(self, high):
        value = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        assert 0 <= value < high
        return value


def palette_of(*labels):
    """Palette whose samples come out as `labels`, in order."""
    pal = Palette(ScriptedRng(0))
    pal.rng = ScriptedRng(*[pal.labels.index(l) for l in labels])
    return pal


def frame(pointer=None, fire=False, action=False):
    return FrameData(
        timestamp=0.0,
        pointer=Point(*pointer) if pointer else None,
        fire_pressed=fire,
        action_pressed=action,
    )


def place(world, *targets, phase=0.0):
    """Swap in a hand-built cluster of (x, y, color) targets."""
    world.cluster = TargetCluster(
        speed=world.difficulty.cluster_speed,
        targets=[Target(x, y, c) for x, y, c in targets],
        phase=phase,
    )
    return world.cluster


@pytest.fixture
def world():
    w = World(SCREEN, palette_of("red"))
    w.start()
    return w
