"""Commands carrying a single number: fade, move on one axis, rotate, scale."""

from typing import Any

from ..utils.number import Number
from .base import Event


class ScalarEvent(Event[Number]):
    """Event whose value is one ``Number``."""

    value_type = Number
    arity = 1

    @classmethod
    def _build(cls, components: tuple[Any, ...]) -> Number:
        return Number.of(components[0])

    @classmethod
    def _coerce(cls, value: Any) -> Number | None:
        if value is None:
            return None
        return Number.of(value)

    def _value_fields(self, value: Number | None) -> list[str]:
        if value is None:
            return []
        return [str(value)]


class Fade(ScalarEvent):
    """Opacity, from ``0`` (invisible) to ``1`` (opaque)."""

    command = "F"


class MoveX(ScalarEvent):
    """Horizontal position."""

    command = "MX"


class MoveY(ScalarEvent):
    """Vertical position."""

    command = "MY"


class Rotate(ScalarEvent):
    """Clockwise rotation in radians."""

    command = "R"


class Scale(ScalarEvent):
    """Uniform scale factor."""

    command = "S"
