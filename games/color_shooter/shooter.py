from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from games.color_shooter.const import MUZZLE_OFFSET, SHOOTER_START_ANGLE
from games.color_shooter.palette import Palette


@dataclass
class Projectile:
    x: float
    y: float
    dx: float   # (dx, dy) is a unit vector
    dy: float
    color: str

    def outside(self, w: float, h: float) -> bool:
        return self.x < 0 or self.x > w or self.y < 0 or self.y > h


class Shooter:
    """Fixed-position shooter: aim angle, the next-shot color and at most one projectile."""

    def __init__(self, x: float, y: float, palette: Palette):
        self.x = x
        self.y = y
        self.palette = palette
        self.angle: float = SHOOTER_START_ANGLE
        self.next_color: str = palette.sample()
        self.projectile: Optional[Projectile] = None

    def aim(self, px: float, py: float) -> None:
        self.angle = math.atan2(py - self.y, px - self.x)

    def muzzle(self) -> Tuple[float, float]:
        return (self.x + MUZZLE_OFFSET * math.cos(self.angle),
                self.y + MUZZLE_OFFSET * math.sin(self.angle))

    def fire(self) -> Optional[Projectile]:
        """Launch the next-shot color along the aim. Ignored while a shot is in flight."""
        if self.projectile is not None:
            return None
        mx, my = self.muzzle()
        self.projectile = Projectile(
            x=mx, y=my,
            dx=math.cos(self.angle), dy=math.sin(self.angle),
            color=self.next_color,
        )
        self.next_color = self.palette.sample()
        return self.projectile

    def tick(self, speed: float) -> None:
        p = self.projectile
        if p is None:
            return
        p.x += p.dx * speed
        p.y += p.dy * speed

    def discard_if_outside(self, w: float, h: float) -> bool:
        if self.projectile is not None and self.projectile.outside(w, h):
            self.projectile = None
            return True
        return False

    def clear(self) -> None:
        self.projectile = None
