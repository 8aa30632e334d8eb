from __future__ import annotations
import importlib.util
import logging
from dataclasses import dataclass, field
from pathlib import Path
import pygame
import yaml
from typing import Callable, Dict, Any, Optional, Tuple

logger = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    spec = importlib.util.spec_from_file_location(f"games.{game_root.name}.main", main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module


# -----------------------------
# Assets
# -----------------------------

# Draws a stand-in for an image that is not on disk: f(size) -> Surface
Placeholder = Callable[[Tuple[int, int]], pygame.Surface]


@dataclass
class AssetPack:
    images: Dict[str, pygame.Surface] = field(default_factory=dict)
    expected: Tuple[str, ...] = ()

    @property
    def ready(self) -> bool:
        """True once every expected image is available."""
        return all(name in self.images for name in self.expected)

    def get(self, name: str) -> Optional[pygame.Surface]:
        return self.images.get(name)


def _load_image(path: Path) -> pygame.Surface:
    img = pygame.image.load(str(path))
    # convert only works once a display mode is set
    if pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return img


def load_assets(
    game_root: Path,
    manifest: Dict[str, Any],
    placeholders: Optional[Dict[str, Placeholder]] = None,
) -> AssetPack:
    """
    Load the images named under `assets:` in the manifest, e.g.

        assets:
          shooter: {file: frog.png, size: [80, 80]}
          background: {file: background.png}

    Paths are relative to the game folder. A missing file falls back to the
    matching placeholder (if any) and is logged as a warning.
    """
    placeholders = placeholders or {}
    entries = manifest.get("assets") or {}
    pack = AssetPack(expected=tuple(entries.keys()))

    for name, entry in entries.items():
        if isinstance(entry, str):
            entry = {"file": entry}
        size = entry.get("size")
        path = game_root / str(entry.get("file", ""))

        if path.is_file():
            img = _load_image(path)
            if size:
                img = pygame.transform.smoothscale(img, (int(size[0]), int(size[1])))
            pack.images[name] = img
            logger.debug("loaded asset %s from %s", name, path)
        elif name in placeholders:
            logger.warning("asset %s not found at %s, using placeholder", name, path)
            pack.images[name] = placeholders[name](tuple(size) if size else (0, 0))
        else:
            logger.warning("asset %s not found at %s", name, path)
    return pack
