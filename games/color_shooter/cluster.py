from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List

import numpy as np

from games.color_shooter.const import (
    BOUNCE_PHASE_JUMP, DROP_STEP, FLOOR_MARGIN, SPAWN_SPACING, SPAWN_X, SPAWN_Y,
)
from games.color_shooter.palette import Palette


@dataclass
class Target:
    x: float
    y: float
    color: str


@dataclass
class TargetCluster:
    """
    Ordered targets sharing one oscillation phase.

    Targets only ever move together: advance() shifts every x by the same
    amount and a wall bounce drops every y by DROP_STEP.
    """
    speed: float
    targets: List[Target] = field(default_factory=list)
    phase: float = 0.0

    @classmethod
    def spawn(cls, count: int, palette: Palette, speed: float) -> "TargetCluster":
        targets = [
            Target(x=SPAWN_X + i * SPAWN_SPACING, y=SPAWN_Y, color=palette.sample())
            for i in range(count)
        ]
        return cls(speed=speed, targets=targets)

    def __len__(self) -> int:
        return len(self.targets)

    @property
    def empty(self) -> bool:
        return not self.targets

    def advance(self, delta_phase: float, playfield_w: float) -> bool:
        """
        Step the oscillation; return True if the cluster hit a wall, reversed
        and dropped this frame.
        """
        assert self.targets, "advance() on an empty cluster"

        self.phase += delta_phase
        dx = math.sin(self.phase) * self.speed
        for t in self.targets:
            t.x += dx

        first, last = self.targets[0], self.targets[-1]
        if first.x <= 0 or last.x >= playfield_w:
            self.phase += BOUNCE_PHASE_JUMP
            self.drop(DROP_STEP)
            return True
        return False

    def drop(self, step: float) -> None:
        for t in self.targets:
            t.y += step

    def lowest_y(self) -> float:
        return max(t.y for t in self.targets)

    def reached_floor(self, playfield_h: float) -> bool:
        return bool(self.targets) and self.lowest_y() > playfield_h - FLOOR_MARGIN

    def positions(self) -> np.ndarray:
        """(n, 2) array of target centers, in cluster order."""
        return np.array([(t.x, t.y) for t in self.targets], dtype=float).reshape(-1, 2)

    def remove_at(self, index: int) -> Target:
        return self.targets.pop(index)
