"""Sprite origins."""

from enum import Enum


class Origin(str, Enum):
    """Point of the image that sits at the sprite position."""

    TOP_LEFT = "TopLeft"
    TOP_CENTRE = "TopCentre"
    TOP_RIGHT = "TopRight"
    CENTRE_LEFT = "CentreLeft"
    CENTRE = "Centre"
    CENTRE_RIGHT = "CentreRight"
    BOTTOM_LEFT = "BottomLeft"
    BOTTOM_CENTRE = "BottomCentre"
    BOTTOM_RIGHT = "BottomRight"

    def __str__(self) -> str:
        return self.value

    @property
    def anchor(self) -> tuple[float, float]:
        """Relative ``(x, y)`` of the origin inside the image, ``(0, 0)`` being top-left."""
        column = 0.0 if "Left" in self.value else 1.0 if "Right" in self.value else 0.5
        row = 0.0 if self.value.startswith("Top") else 1.0 if self.value.startswith("Bottom") else 0.5
        return column, row
