from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from engine.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Base interface games should implement.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the game module and its assets load."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame with the input drained since the last one."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw your game to the provided surface."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: raw pygame events, after the engine's input layer saw them."""
        ...

    def on_unload(self) -> None:
        """Optional: cleanup when the game exits."""
        ...
