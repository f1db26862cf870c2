"""RGB color value type."""

from dataclasses import dataclass


def _clamp_channel(value: float) -> int:
    return max(0, min(255, round(value)))


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color whose channels are saturated into ``[0, 255]``.

    Out-of-range channels are clamped rather than rejected, so
    ``Color(300, -1, 42)`` is the same color as ``Color(255, 0, 42)``.
    Fractional channels round to the nearest integer.
    """

    r: int
    g: int
    b: int

    def __init__(self, r: int, g: int, b: int):
        object.__setattr__(self, "r", _clamp_channel(r))
        object.__setattr__(self, "g", _clamp_channel(g))
        object.__setattr__(self, "b", _clamp_channel(b))

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def red(cls) -> "Color":
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0, 0, 255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
