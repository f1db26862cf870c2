"""Storyboard commands and their command-line serialization."""

from .base import Event
from .color import Color
from .parameter import Additive, HFlip, ParameterEvent, VFlip
from .scalar import Fade, MoveX, MoveY, Rotate, ScalarEvent, Scale
from .vector import Move, ScaleVec, VectorEvent

# Order in which a sprite writes its commands, one kind after another
EVENT_KINDS: tuple[type[Event], ...] = (
    Move,
    MoveX,
    MoveY,
    Fade,
    Rotate,
    Scale,
    ScaleVec,
    Color,
    HFlip,
    VFlip,
    Additive,
)

__all__ = [
    "Event",
    "EVENT_KINDS",
    "ScalarEvent",
    "VectorEvent",
    "ParameterEvent",
    "Move",
    "MoveX",
    "MoveY",
    "Fade",
    "Rotate",
    "Scale",
    "ScaleVec",
    "Color",
    "HFlip",
    "VFlip",
    "Additive",
]
