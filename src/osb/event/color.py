"""Color tint command."""

from typing import Any

from ..utils import color as color_types
from ..utils.number import Number
from .base import Event


class Color(Event[color_types.Color]):
    """Color tint multiplied over the sprite image.

    A static color writes a single RGB triple; a dynamic one writes the start
    and end triples.
    """

    command = "C"
    value_type = color_types.Color
    arity = 3

    @classmethod
    def _build(cls, components: tuple[Any, ...]) -> color_types.Color:
        r, g, b = (Number.of(component).value for component in components)
        return color_types.Color(r, g, b)

    @classmethod
    def _coerce(cls, value: Any) -> color_types.Color | None:
        if value is None or isinstance(value, color_types.Color):
            return value
        if isinstance(value, tuple) and len(value) == 3:
            return cls._build(value)
        raise TypeError(f"Cannot build a color from {value!r}")

    def _value_fields(self, value: color_types.Color | None) -> list[str]:
        if value is None:
            return []
        return [str(value.r), str(value.g), str(value.b)]
