from __future__ import annotations
import time
import pygame
from typing import Optional, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData, Point

FIRE_BUTTON = 1                                  # left mouse button
ACTION_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class PointerInput:
    """
    Mouse/keyboard input, collected between frames.

    Event handlers only overwrite single fields (pointer position, two pending
    flags). The frame loop calls drain() once per frame to take a FrameData
    snapshot and reset the flags, so games never see input change mid-update.
    Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self.screen_size = cfg.screen_size

        self._pointer: Optional[Tuple[float, float]] = None
        self.fire_pending = False
        self.action_pending = False

    def _to_logical(self, x: int, y: int) -> Tuple[float, float]:
        if self.mirror:
            w, _ = self.screen_size
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self._pointer = self._to_logical(*event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._pointer = self._to_logical(*event.pos)
            if event.button == FIRE_BUTTON:
                self.fire_pending = True

        elif event.type == pygame.KEYDOWN:
            if event.key in ACTION_KEYS:
                self.action_pending = True

    def drain(self, now: Optional[float] = None) -> FrameData:
        pointer = Point(*self._pointer) if self._pointer is not None else None
        frame = FrameData(
            timestamp=time.time() if now is None else now,
            pointer=pointer,
            fire_pressed=self.fire_pending,
            action_pressed=self.action_pending,
        )
        self.fire_pending = False
        self.action_pending = False
        return frame
