from __future__ import annotations
import logging
from typing import Optional, Tuple

from engine.api import FrameData
from games.color_shooter.cluster import TargetCluster
from games.color_shooter.collision import Outcome, resolve
from games.color_shooter.const import PHASE_STEP, SHOOTER_BOTTOM_OFFSET
from games.color_shooter.palette import Palette
from games.color_shooter.session import Difficulty, GameState, Session
from games.color_shooter.shooter import Shooter

logger = logging.getLogger(__name__)


class World:
    """
    Everything one game session owns: session counters, the target cluster
    and the shooter. The frame loop is its only writer, through step().
    """

    def __init__(self, screen_size: Tuple[int, int], palette: Palette,
                 difficulty: Optional[str] = None):
        self.w, self.h = screen_size
        self.palette = palette
        self.difficulty_name = difficulty
        self.difficulty = Difficulty.resolve(difficulty)

        self.session = Session()
        self.shooter = Shooter(self.w / 2, self.h - SHOOTER_BOTTOM_OFFSET, palette)
        self.cluster = TargetCluster(speed=self.difficulty.cluster_speed)

    @property
    def state(self) -> GameState:
        return self.session.state

    # ------------- transitions -------------
    def start(self) -> None:
        """Menu/GameOver -> Playing. Restart uses the same path."""
        # difficulty is read here and fixed until the next start
        self.difficulty = Difficulty.resolve(self.difficulty_name)
        self.session.reset()
        self.shooter.clear()
        self._spawn_cluster()
        logger.info("session started (%s)", self.difficulty.name)

    def _spawn_cluster(self) -> None:
        self.cluster = TargetCluster.spawn(
            self.session.level, self.palette, self.difficulty.cluster_speed)

    def _advance_level(self) -> None:
        level = self.session.next_level()
        self.shooter.clear()
        self._spawn_cluster()
        logger.info("level %d: %d targets", level, len(self.cluster))

    # ------------- per frame -------------
    def apply_input(self, frame: FrameData) -> None:
        if frame.pointer is not None:
            self.shooter.aim(frame.pointer.x, frame.pointer.y)

        if frame.action_pressed:
            if self.session.running:
                self.fire()
            else:
                self.start()
                return
        if frame.fire_pressed and self.session.running:
            self.fire()

    def fire(self) -> None:
        shot = self.shooter.fire()
        if shot is not None:
            logger.debug("fired %s at %.2f rad", shot.color, self.shooter.angle)

    def tick(self) -> Outcome:
        """Run one simulation frame. No-op outside Playing."""
        if not self.session.running:
            return Outcome.Nothing

        if self.cluster.advance(PHASE_STEP, self.w):
            logger.debug("cluster bounced, lowest target at y=%.0f", self.cluster.lowest_y())
            if self.cluster.reached_floor(self.h):
                self.session.end("targets reached the floor")
                return Outcome.Nothing

        self.shooter.tick(self.difficulty.projectile_speed)
        outcome = resolve(self.session, self.cluster, self.shooter)
        if outcome == Outcome.Match and self.cluster.empty:
            self._advance_level()

        if self.session.running:
            self.shooter.discard_if_outside(self.w, self.h)
        return outcome

    def step(self, frame: FrameData) -> Outcome:
        self.apply_input(frame)
        return self.tick()
