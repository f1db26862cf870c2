"""Groups of sprites sharing a layer."""

from typing import Iterator

from .layer import Layer
from .visuals.sprite import Sprite


class Module:
    """A named-by-purpose bundle of sprites that are all drawn on one layer.

    Usage:
        stars = Module(Layer.FOREGROUND)
        stars.push(Sprite("sb/star.png"))
        storyboard.push(stars)
    """

    def __init__(self, layer: Layer = Layer.BACKGROUND):
        self.layer = layer
        self._sprites: list[Sprite] = []

    def push(self, sprite: Sprite) -> Sprite:
        """Move ``sprite`` to this module's layer and keep it, in push order."""
        sprite.set_layer(self.layer)
        self._sprites.append(sprite)
        return sprite

    def output(self) -> str:
        """Concatenated text of every sprite, in push order."""
        return "".join(sprite.to_str() for sprite in self._sprites)

    def __iter__(self) -> Iterator[Sprite]:
        return iter(self._sprites)

    def __len__(self) -> int:
        return len(self._sprites)
