from __future__ import annotations
import logging

import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.app.loader import AssetPack, load_assets
from games.color_shooter.palette import Palette
from games.color_shooter.render import draw_world, make_placeholder_background, placeholder_shooter
from games.color_shooter.world import World

logger = logging.getLogger(__name__)


class ColorShooter(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        options = manifest.get("options") or {}

        # command line wins over the manifest
        difficulty = ctx.cfg.difficulty or options.get("difficulty")
        seed = ctx.cfg.seed if ctx.cfg.seed is not None else options.get("seed")

        self.world = World(ctx.screen_size, Palette.seeded(seed), difficulty)

        self.assets = AssetPack()
        game_root = ctx.resources.get("game_root")
        if game_root is not None:
            self.assets = load_assets(game_root, manifest, placeholders={
                "shooter": placeholder_shooter,
                "background": make_placeholder_background(ctx.screen_size),
            })
        ctx.resources["assets"] = self.assets

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        # nothing runs until the assets are in, same as nothing draws
        if not self.assets.ready:
            return
        self.world.step(frame)

    def on_draw(self, surface: pygame.Surface) -> None:
        if not self.assets.ready:
            return
        draw_world(surface, self.world, self.assets)

    def on_unload(self) -> None:
        logger.debug("final score %d", self.world.session.score)


def get_game():
    return ColorShooter()
