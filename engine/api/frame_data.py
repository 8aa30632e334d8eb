from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # latest pointer position in logical screen coords, None until the mouse moves
    pointer: Optional[Point] = None
    fire_pressed: bool = False     # mouse click since the previous frame
    action_pressed: bool = False   # space/enter since the previous frame
