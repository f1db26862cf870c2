"""Value types and data structures shared by the storyboard model."""

from .color import Color
from .interval_map import IntervalMap
from .number import Number, NumberLike
from .vec2 import Vec2

__all__ = [
    "Color",
    "IntervalMap",
    "Number",
    "NumberLike",
    "Vec2",
]
