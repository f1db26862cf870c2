"""Storyboard visuals: sprites, animations and their sampled state."""

from .sprite import Animation, LoopType, Sprite
from .state import SpriteState

__all__ = ["Animation", "LoopType", "Sprite", "SpriteState"]
