"""Storyboard layers."""

from enum import Enum


class Layer(str, Enum):
    """Compositing bucket a sprite is drawn in."""

    BACKGROUND = "Background"
    FAIL = "Fail"
    PASS = "Pass"
    FOREGROUND = "Foreground"
    OVERLAY = "Overlay"

    def __str__(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position of the layer in the ``//Storyboard Layer N`` section headers."""
        return list(Layer).index(self)
