"""Base class shared by every storyboard command."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from ..easing import Easing
from ..utils.number import Number

ValueT = TypeVar("ValueT")


def _is_component(value: Any) -> bool:
    return isinstance(value, (int, float, Number)) and not isinstance(value, bool)


def _check_time(value: Any, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} times must be integers in milliseconds (got {value!r})")
    return value


@dataclass(eq=False)
class Event(ABC, Generic[ValueT]):
    """One timed command applied to a sprite.

    An event is either *static* (a single timestamp and value, always written
    with linear easing and a blank end time) or *dynamic* (start and end
    times, an easing, and a value at each end). Only the depth may change
    after construction.
    """

    command: ClassVar[str]
    value_type: ClassVar[type]
    arity: ClassVar[int]
    has_static_form: ClassVar[bool] = True

    start_time: int
    end_time: int | None = None
    start_value: ValueT | None = None
    end_value: ValueT | None = None
    easing: Easing = Easing.LINEAR
    depth: int = 0
    _static: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Depth must be non-negative (got {self.depth})")
        if self.end_time is None:
            if not self.has_static_form:
                raise ValueError(f"{type(self).__name__} events require an end time")
            # Static events end where they start
            self._static = True
            self.end_time = self.start_time
        if self.arity > 0:
            missing = self.start_value is None or (not self._static and self.end_value is None)
            if missing:
                raise TypeError(f"{type(self).__name__} events need a value at each end")

    @classmethod
    def static(cls, time: int, value: Any) -> "Event[ValueT]":
        """Build an instantaneous event setting ``value`` at ``time``."""
        if not cls.has_static_form:
            raise TypeError(f"{cls.__name__} events have no static form")
        return cls(start_time=_check_time(time, cls.__name__), start_value=cls._coerce(value))

    @classmethod
    def dynamic(
        cls,
        start_time: int,
        end_time: int,
        start_value: Any = None,
        end_value: Any = None,
        easing: Easing = Easing.LINEAR,
    ) -> "Event[ValueT]":
        """Build an event interpolating from ``start_value`` to ``end_value``."""
        return cls(
            start_time=_check_time(start_time, cls.__name__),
            end_time=_check_time(end_time, cls.__name__),
            start_value=cls._coerce(start_value),
            end_value=cls._coerce(end_value),
            easing=easing,
        )

    @classmethod
    def from_args(cls, *args: Any) -> "Event[ValueT]":
        """
        Build an event from positional arguments.

        Accepted shapes, with an optional leading ``Easing`` for dynamic ones:
        ``(time, value)``, ``(time, *components)``,
        ``(start, end, start_value, end_value)`` and
        ``(start, end, *start_components, *end_components)``.

        Raises:
            TypeError: If the arguments match none of the shapes
        """
        easing = Easing.LINEAR
        explicit_easing = bool(args) and isinstance(args[0], Easing)
        if explicit_easing:
            easing, args = args[0], args[1:]

        if not explicit_easing and cls.has_static_form and len(args) >= 2:
            value = cls._value_from_parts(args[1:])
            if value is not None:
                return cls.static(args[0], value)

        if len(args) >= 2:
            values = cls._values_from_parts(args[2:])
            if values is not None:
                return cls.dynamic(args[0], args[1], values[0], values[1], easing=easing)

        raise TypeError(f"Unsupported arguments for {cls.__name__}: {args!r}")

    @property
    def is_static(self) -> bool:
        return self._static

    @property
    def time_range(self) -> tuple[int, int]:
        """``(start, end)`` of the event; both ends are equal for static events."""
        return self.start_time, self.end_time

    def set_depth(self, depth: int) -> None:
        if depth < 0:
            raise ValueError(f"Depth must be non-negative (got {depth})")
        self.depth = depth

    def to_line(self) -> str:
        """Render the event as one command line of the ``[Events]`` section."""
        if self._static:
            fields = [self.command, str(Easing.LINEAR.id), str(self.start_time), ""]
        else:
            fields = [self.command, str(self.easing.id), str(self.start_time), str(self.end_time)]
        fields.extend(self._parameters())
        return " " * self.depth + " " + ",".join(fields)

    def _parameters(self) -> list[str]:
        if self._static:
            return self._value_fields(self.start_value)
        return self._value_fields(self.start_value) + self._value_fields(self.end_value)

    @classmethod
    def _value_from_parts(cls, parts: tuple[Any, ...]) -> ValueT | None:
        if len(parts) == 1 and isinstance(parts[0], cls.value_type):
            return parts[0]
        if len(parts) == cls.arity and cls.arity > 0 and all(map(_is_component, parts)):
            return cls._build(parts)
        return None

    @classmethod
    def _values_from_parts(cls, parts: tuple[Any, ...]) -> tuple[Any, Any] | None:
        if cls.arity == 0:
            return (None, None) if not parts else None
        if len(parts) == 2 and all(isinstance(part, cls.value_type) for part in parts):
            return parts[0], parts[1]
        if len(parts) == 2 * cls.arity and all(map(_is_component, parts)):
            return cls._build(parts[: cls.arity]), cls._build(parts[cls.arity :])
        return None

    @classmethod
    @abstractmethod
    def _build(cls, components: tuple[Any, ...]) -> ValueT:
        """Assemble a value from its numeric components."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def _coerce(cls, value: Any) -> ValueT | None:
        """Normalize a user-supplied value into the event's value type."""
        raise NotImplementedError

    @abstractmethod
    def _value_fields(self, value: ValueT | None) -> list[str]:
        """Command-line fields of one endpoint value."""
        raise NotImplementedError
