"""Build osu! storyboard scripts from Python."""

from .easing import Easing, get_easing
from .event import (
    Additive,
    Color,
    Fade,
    HFlip,
    Move,
    MoveX,
    MoveY,
    Rotate,
    Scale,
    ScaleVec,
    VFlip,
)
from .layer import Layer
from .module import Module
from .origin import Origin
from .storyboard import Storyboard
from .utils import IntervalMap, Number, Vec2
from .utils import color as colors
from .visuals import Animation, LoopType, Sprite, SpriteState

__all__ = [
    "Easing",
    "get_easing",
    "Additive",
    "Color",
    "Fade",
    "HFlip",
    "Move",
    "MoveX",
    "MoveY",
    "Rotate",
    "Scale",
    "ScaleVec",
    "VFlip",
    "Layer",
    "Module",
    "Origin",
    "Storyboard",
    "IntervalMap",
    "Number",
    "Vec2",
    "colors",
    "Animation",
    "LoopType",
    "Sprite",
    "SpriteState",
]
