from __future__ import annotations
import logging
import pygame

from engine.api.config import EngineConfig
from engine.app.context import Context
from engine.app.loader import GAMES_DIR, load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput

logger = logging.getLogger(__name__)

BACKGROUND = (12, 14, 18)


def run_game(game_id: str, cfg: EngineConfig):
    # load game before opening a window so a bad id fails fast
    game_root = GAMES_DIR / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", game_id))
    screen = pygame.display.set_mode(cfg.screen_size)
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not cfg.mirror else pygame.Surface(
        cfg.screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        resources={"game_root": game_root},
        screen_size=cfg.screen_size,
    )

    game.on_load(ctx, manifest)
    logger.info("loaded game %s (%dx%d @ %d fps)", game_id,
                cfg.screen_size[0], cfg.screen_size[1], cfg.fps)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                input_layer.handle_pygame_event(event)
                game.on_event(event)

            # input handlers only set flags; the game consumes them here, once
            frame_data = input_layer.drain()

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND)
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if cfg.mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
