"""Parameter commands: flips and additive blending."""

from typing import Any, ClassVar

from .base import Event


class ParameterEvent(Event[None]):
    """Toggle applied for the duration of the event; written as ``P,...,<flag>``."""

    command = "P"
    value_type = type(None)
    arity = 0
    has_static_form = False
    parameter: ClassVar[str]

    @classmethod
    def _build(cls, components: tuple[Any, ...]) -> None:
        return None

    @classmethod
    def _coerce(cls, value: Any) -> None:
        if value is not None:
            raise TypeError(f"{cls.__name__} events carry no value")
        return None

    def _parameters(self) -> list[str]:
        return [self.parameter]

    def _value_fields(self, value: None) -> list[str]:
        return []


class HFlip(ParameterEvent):
    """Mirror the image horizontally."""

    parameter = "H"


class VFlip(ParameterEvent):
    """Mirror the image vertically."""

    parameter = "V"


class Additive(ParameterEvent):
    """Blend the image additively."""

    parameter = "A"
