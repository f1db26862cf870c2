"""Commands carrying a ``Vec2``: move and per-axis scale."""

from typing import Any

from ..utils.vec2 import Vec2
from .base import Event


class VectorEvent(Event[Vec2]):
    """Event whose value is an ``(x, y)`` pair."""

    value_type = Vec2
    arity = 2

    @classmethod
    def _build(cls, components: tuple[Any, ...]) -> Vec2:
        return Vec2(components[0], components[1])

    @classmethod
    def _coerce(cls, value: Any) -> Vec2 | None:
        if value is None:
            return None
        return Vec2.of(value)

    def _value_fields(self, value: Vec2 | None) -> list[str]:
        if value is None:
            return []
        return [str(value.x), str(value.y)]


class Move(VectorEvent):
    """Position of the sprite origin."""

    command = "M"


class ScaleVec(VectorEvent):
    """Independent horizontal and vertical scale factors."""

    command = "V"
