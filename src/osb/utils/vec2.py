"""Two-dimensional vector of ``Number`` components."""

from dataclasses import dataclass

from .number import Number, NumberLike


@dataclass(frozen=True, slots=True)
class Vec2:
    """A pair of numbers, used for positions and scale vectors.

    Components keep their int/float nature, so ``Vec2(320, 240)`` renders as
    ``320,240`` while ``Vec2(1, 0.5)`` renders as ``1,0.5``.
    """

    x: Number
    y: Number

    def __init__(self, x: NumberLike = 0, y: NumberLike = 0):
        object.__setattr__(self, "x", Number.of(x))
        object.__setattr__(self, "y", Number.of(y))

    @classmethod
    def of(cls, value: "Vec2 | tuple[NumberLike, NumberLike]") -> "Vec2":
        """Build a vector from another vector or an ``(x, y)`` tuple."""
        if isinstance(value, Vec2):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"Cannot build a Vec2 from {value!r}")

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y
