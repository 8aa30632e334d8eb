from __future__ import annotations
import math
from typing import Tuple

import pygame

from engine.app.loader import AssetPack
from engine.render.shapes import blit_rotated, draw_disc, draw_panel, draw_text, draw_text_centered
from games.color_shooter.const import (
    BACKGROUND_BOTTOM, BACKGROUND_TOP, HUD_COLOR, HUD_FONT_SIZE, MUZZLE_OFFSET, NEXT_SHOT_LIFT,
    OVERLAY_FONT_SIZE, SHOOTER_SIZE, TITLE_FONT_SIZE,
)
from games.color_shooter.session import GameState
from games.color_shooter.world import World


# -----------------------------
# Placeholder art for missing image files
# -----------------------------

def placeholder_shooter(size: Tuple[int, int]) -> pygame.Surface:
    w, h = size if size[0] and size[1] else (SHOOTER_SIZE, SHOOTER_SIZE)
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    c = (w // 2, h // 2)
    r = min(w, h) // 2 - 2
    pygame.draw.circle(surf, (60, 170, 70), c, r)
    # mouth points along +x, i.e. angle 0
    pygame.draw.polygon(surf, (25, 90, 35), [c, (w - 2, c[1] - r // 3), (w - 2, c[1] + r // 3)])
    for ey in (c[1] - r // 2, c[1] + r // 2):
        pygame.draw.circle(surf, (250, 250, 250), (c[0] - r // 4, ey), max(2, r // 5))
        pygame.draw.circle(surf, (10, 10, 10), (c[0] - r // 5, ey), max(1, r // 10))
    return surf


def make_placeholder_background(screen_size: Tuple[int, int]):
    def build(size: Tuple[int, int]) -> pygame.Surface:
        w, h = size if size[0] and size[1] else screen_size
        surf = pygame.Surface((w, h))
        for y in range(h):
            t = y / max(1, h - 1)
            color = [int(a + (b - a) * t) for a, b in zip(BACKGROUND_TOP, BACKGROUND_BOTTOM)]
            pygame.draw.line(surf, color, (0, y), (w, y))
        return surf
    return build


# -----------------------------
# Scene
# -----------------------------

def draw_world(surface: pygame.Surface, world: World, assets: AssetPack) -> None:
    background = assets.get("background")
    if background is not None:
        if background.get_size() != surface.get_size():
            background = pygame.transform.scale(background, surface.get_size())
        surface.blit(background, (0, 0))

    if world.state != GameState.Menu:
        _draw_play_field(surface, world, assets)
        draw_text(surface, world.session.status_line(), (16, 12), HUD_COLOR, size=HUD_FONT_SIZE)

    if world.state == GameState.Menu:
        _draw_menu(surface, world)
    elif world.state == GameState.GameOver:
        _draw_game_over(surface, world)


def _draw_play_field(surface: pygame.Surface, world: World, assets: AssetPack) -> None:
    radius = world.difficulty.target_radius
    palette = world.palette
    shooter = world.shooter

    sprite = assets.get("shooter")
    if sprite is not None:
        blit_rotated(surface, sprite, (shooter.x, shooter.y), shooter.angle)

    if shooter.projectile is None:
        # upcoming shot, shown just above the muzzle
        x = shooter.x + MUZZLE_OFFSET * math.cos(shooter.angle)
        y = shooter.y + MUZZLE_OFFSET * math.sin(shooter.angle) - NEXT_SHOT_LIFT
        draw_disc(surface, palette.rgb_of(shooter.next_color), (x, y), radius)

    for t in world.cluster.targets:
        draw_disc(surface, palette.rgb_of(t.color), (t.x, t.y), radius)

    p = shooter.projectile
    if p is not None:
        draw_disc(surface, palette.rgb_of(p.color), (p.x, p.y), radius)


def _draw_menu(surface: pygame.Surface, world: World) -> None:
    cx, cy = surface.get_width() // 2, surface.get_height() // 2
    draw_panel(surface)
    draw_text_centered(surface, "Color Shooter", (cx, cy - 60), HUD_COLOR, size=TITLE_FONT_SIZE)
    draw_text_centered(surface, f"Difficulty: {world.difficulty.name}", (cx, cy),
                       HUD_COLOR, size=OVERLAY_FONT_SIZE)
    draw_text_centered(surface, "Press SPACE to start", (cx, cy + 44),
                       HUD_COLOR, size=OVERLAY_FONT_SIZE)


def _draw_game_over(surface: pygame.Surface, world: World) -> None:
    cx, cy = surface.get_width() // 2, surface.get_height() // 2
    draw_panel(surface)
    draw_text_centered(surface, "Game Over", (cx, cy - 60), HUD_COLOR, size=TITLE_FONT_SIZE)
    draw_text_centered(surface, f"Final score: {world.session.score}", (cx, cy),
                       HUD_COLOR, size=OVERLAY_FONT_SIZE)
    draw_text_centered(surface, "Press SPACE to play again", (cx, cy + 44),
                       HUD_COLOR, size=OVERLAY_FONT_SIZE)
