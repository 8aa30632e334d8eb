from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from games.color_shooter.const import (
    DEFAULT_DIFFICULTY, DIFFICULTIES, POINTS_PER_HIT, START_LEVEL, START_LIVES,
)

logger = logging.getLogger(__name__)


class GameState(Enum):
    Menu = 1
    Playing = 2
    GameOver = 3


@dataclass(frozen=True)
class Difficulty:
    name: str
    target_radius: float
    cluster_speed: float
    projectile_speed: float

    @classmethod
    def resolve(cls, name: str | None) -> "Difficulty":
        name = (name or DEFAULT_DIFFICULTY).lower()
        if name not in DIFFICULTIES:
            raise ValueError(
                f"unknown difficulty {name!r}, expected one of {sorted(DIFFICULTIES)}")
        radius, cluster_speed, projectile_speed = DIFFICULTIES[name]
        return cls(name, radius, cluster_speed, projectile_speed)


@dataclass
class Session:
    score: int = 0
    level: int = START_LEVEL
    lives: int = START_LIVES
    state: GameState = GameState.Menu

    @property
    def running(self) -> bool:
        return self.state == GameState.Playing

    def reset(self) -> None:
        self.score = 0
        self.level = START_LEVEL
        self.lives = START_LIVES
        self.state = GameState.Playing

    def award_hit(self) -> None:
        self.score += POINTS_PER_HIT

    def lose_life(self) -> bool:
        """Take one life; return True if that ended the game."""
        self.lives = max(0, self.lives - 1)
        if self.lives <= 0:
            self.end("out of lives")
            return True
        return False

    def next_level(self) -> int:
        self.level += 1
        return self.level

    def end(self, reason: str) -> None:
        if self.state != GameState.Playing:
            return
        self.state = GameState.GameOver
        logger.info("game over (%s): score %d, level %d", reason, self.score, self.level)

    def status_line(self) -> str:
        return f"Score: {self.score} | Level: {self.level} | Lives: {self.lives}"
