from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    debug: bool = False
    # game overrides from the command line; None defers to the manifest
    difficulty: Optional[str] = None
    seed: Optional[int] = None


def parse_screen_size(text: str) -> Tuple[int, int]:
    """Parse 'WxH' (e.g. '800x600') into a (w, h) tuple."""
    try:
        w, h = map(int, text.lower().split("x"))
    except ValueError:
        raise ValueError(f"screen size must look like WxH, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"screen size must be positive, got {text!r}")
    return w, h
