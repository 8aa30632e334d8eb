import math
import pygame
from typing import Dict, Tuple

_FONTS: Dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        # fonts from an earlier init are dead after pygame.quit()
        _FONTS.clear()
        pygame.font.init()
    font = _FONTS.get(size)
    if font is None:
        font = _FONTS[size] = pygame.font.SysFont(None, size)
    return font


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    surface.blit(_font(size).render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    img = _font(size).render(text, True, color)
    surface.blit(img, img.get_rect(center=center))


def draw_disc(surface: pygame.Surface, color, center: Tuple[float, float], radius: float):
    pygame.draw.circle(surface, color, (int(center[0]), int(center[1])), int(radius))


def blit_rotated(surface: pygame.Surface, image: pygame.Surface, center: Tuple[float, float], angle_rad: float):
    """Blit `image` centered on `center`, rotated clockwise by angle_rad (screen y points down)."""
    rotated = pygame.transform.rotate(image, -math.degrees(angle_rad))
    surface.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))


def draw_panel(surface: pygame.Surface, alpha: int = 170, color=(0, 0, 0)):
    """Dim the whole surface, e.g. behind a menu overlay."""
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((*color, alpha))
    surface.blit(shade, (0, 0))
