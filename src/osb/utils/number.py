"""Integer/float value type used for positions, opacities, angles and scales."""

from dataclasses import dataclass
from typing import Union

import numpy as np


def _to_float32(value: float) -> float:
    return float(np.float32(value))


@dataclass(frozen=True, slots=True, eq=False)
class Number:
    """A numeric value that remembers whether it was written as an int or a float.

    Floats are single precision, as in the storyboard format: they are rounded
    to float32 on construction and after every operation. Arithmetic stays
    integral while both operands are integers and promotes to float as soon
    as one of them is a float.
    """

    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                f"Number expects an int or a float (got {type(self.value).__name__})"
            )
        if isinstance(self.value, float):
            object.__setattr__(self, "value", _to_float32(self.value))

    @classmethod
    def of(cls, value: "NumberLike") -> "Number":
        """Wrap a plain ``int``/``float``, or return an existing ``Number`` as-is."""
        if isinstance(value, Number):
            return value
        return cls(value)

    @property
    def is_int(self) -> bool:
        return isinstance(self.value, int)

    def as_float(self) -> float:
        return float(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __int__(self) -> int:
        return int(self.value)

    def __add__(self, other: "NumberLike") -> "Number":
        return Number(self.value + Number.of(other).value)

    def __sub__(self, other: "NumberLike") -> "Number":
        return Number(self.value - Number.of(other).value)

    def __neg__(self) -> "Number":
        return Number(-self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_int == other.is_int and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.is_int, self.value))

    def __str__(self) -> str:
        if isinstance(self.value, int):
            return str(self.value)
        # Shortest digits identifying the float32, always in positional notation
        return np.format_float_positional(np.float32(self.value), unique=True, trim="-")

    def __repr__(self) -> str:
        kind = "Int" if self.is_int else "Float"
        return f"Number.{kind}({self.value!r})"


NumberLike = Union[int, float, Number]
