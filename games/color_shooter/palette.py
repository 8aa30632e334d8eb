from __future__ import annotations
from typing import Dict, Optional, Protocol, Sequence, Tuple

import numpy as np

from games.color_shooter.const import COLORS


class IntSource(Protocol):
    """Anything that can draw a uniform int in [0, high), e.g. numpy.random.Generator."""

    def integers(self, high: int): ...


class Palette:
    """Fixed set of color labels with uniform random selection."""

    def __init__(self, rng: IntSource, colors: Optional[Dict[str, Tuple[int, int, int]]] = None):
        self.rng = rng
        self.rgb = dict(colors if colors is not None else COLORS)
        self.labels: Sequence[str] = tuple(self.rgb)
        if not self.labels:
            raise ValueError("palette needs at least one color")

    @classmethod
    def seeded(cls, seed: Optional[int] = None, colors=None) -> "Palette":
        return cls(np.random.default_rng(seed), colors)

    def sample(self) -> str:
        # independent of earlier draws; repeats allowed
        return self.labels[int(self.rng.integers(len(self.labels)))]

    def rgb_of(self, label: str) -> Tuple[int, int, int]:
        return self.rgb[label]
