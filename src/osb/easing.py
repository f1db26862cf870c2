"""Easing curves as defined by the osu! storyboard scripting commands.

Each member carries the numeric ID written in command lines. A few members are
different names for the same visual curve (``OUT``/``QUAD_OUT``,
``IN``/``QUAD_IN`` and the three elastic-out variants); those compare equal.
"""

import math
import sys
from enum import Enum
from functools import partial
from typing import Callable

from .utils.number import Number, NumberLike

_EPSILON = sys.float_info.epsilon
_BACK_OVERSHOOT = 1.70158

# Member name -> name of the member it is visually identical to
_ALIASES: dict[str, str] = {
    "OUT": "QUAD_OUT",
    "IN": "QUAD_IN",
    "ELASTIC_HALF_OUT": "ELASTIC_OUT",
    "ELASTIC_QUARTER_OUT": "ELASTIC_OUT",
}


class Easing(Enum):
    """Interpolation curve of a dynamic storyboard command."""

    LINEAR = 0
    OUT = 1
    IN = 2
    QUAD_IN = 3
    QUAD_OUT = 4
    QUAD_IN_OUT = 5
    CUBIC_IN = 6
    CUBIC_OUT = 7
    CUBIC_IN_OUT = 8
    QUART_IN = 9
    QUART_OUT = 10
    QUART_IN_OUT = 11
    QUINT_IN = 12
    QUINT_OUT = 13
    QUINT_IN_OUT = 14
    SINE_IN = 15
    SINE_OUT = 16
    SINE_IN_OUT = 17
    EXPO_IN = 18
    EXPO_OUT = 19
    EXPO_IN_OUT = 20
    CIRC_IN = 21
    CIRC_OUT = 22
    CIRC_IN_OUT = 23
    ELASTIC_IN = 24
    ELASTIC_OUT = 25
    ELASTIC_HALF_OUT = 26
    ELASTIC_QUARTER_OUT = 27
    ELASTIC_IN_OUT = 28
    BACK_IN = 29
    BACK_OUT = 30
    BACK_IN_OUT = 31
    BOUNCE_IN = 32
    BOUNCE_OUT = 33
    BOUNCE_IN_OUT = 34

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Easing):
            return NotImplemented
        return _canonical_name(self) == _canonical_name(other)

    def __hash__(self) -> int:
        return hash(_canonical_name(self))

    def __str__(self) -> str:
        return self.osu_name

    @property
    def id(self) -> int:
        """Numeric ID written in command lines."""
        return self.value

    @property
    def osu_name(self) -> str:
        """Name as spelled by the osu! documentation, e.g. ``QuadInOut``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def get_easing(cls, easing_id: int) -> "Easing | None":
        """
        Look up the easing matching a command-line ID.

        IDs 1/4, 2/3 and 25/26/27 resolve to the same curve.

        Returns:
            The easing, or None if the ID is outside ``0..34``

        Raises:
            TypeError: If ``easing_id`` is not an integer
        """
        if isinstance(easing_id, bool) or not isinstance(easing_id, int):
            raise TypeError(f"Easing IDs are integers (got {easing_id!r})")
        if easing_id in _PROTOCOL_ALIASES:
            return cls[_PROTOCOL_ALIASES[easing_id]]
        try:
            return cls(easing_id)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> "Easing | None":
        """Look up an easing by osu! name (``QuadOut``) or member name (``QUAD_OUT``)."""
        key = name.replace("_", "").replace("-", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member
        return None

    def calculate(self, x: float) -> float:
        """Evaluate the curve at progress ``x`` (``0`` at the start, ``1`` at the end)."""
        return _evaluate(_CURVES[self.name], x)

    def ease(
        self,
        time: int,
        start_time: int,
        end_time: int,
        start_value: NumberLike,
        end_value: NumberLike,
    ) -> float | None:
        """
        Value of a command using this easing at ``time``.

        Example: a MoveX from 100 to 200 between 0ms and 2000ms with ``OUT``
        easing is at ``Easing.OUT.ease(1000, 0, 2000, 100, 200) == 175.0``.

        Args:
            time: Timestamp to evaluate, in milliseconds
            start_time: Start of the command
            end_time: End of the command
            start_value: Value at ``start_time``
            end_value: Value at ``end_time``, not lower than ``start_value``

        Returns:
            The eased value, or None if ``time`` is outside the command or
            ``end_value < start_value``
        """
        low = Number.of(start_value).as_float()
        high = Number.of(end_value).as_float()
        if time < start_time or time > end_time or high < low:
            return None
        if end_time == start_time:
            return high
        progress = (time - start_time) / (end_time - start_time)
        return self.calculate(progress) * (high - low) + low


def _canonical_name(easing: Easing) -> str:
    return _ALIASES.get(easing.name, easing.name)


def _evaluate(curve: Callable[[float], float], x: float) -> float:
    # Snap the boundaries so transcendental curves land exactly on 0 and 1
    if x < _EPSILON:
        return 0.0
    if 1.0 - x < _EPSILON:
        return 1.0
    return curve(x)


def _reverse(curve: Callable[[float], float], x: float) -> float:
    return 1.0 - _evaluate(curve, 1.0 - x)


def _in_out(curve: Callable[[float], float], x: float) -> float:
    if x < 0.5:
        return 0.5 * _evaluate(curve, 2.0 * x)
    return 0.5 * (2.0 - _evaluate(curve, 2.0 - 2.0 * x))


def _linear(x: float) -> float:
    return x


def _quad_in(x: float) -> float:
    return x * x


def _cubic_in(x: float) -> float:
    return x * x * x


def _quart_in(x: float) -> float:
    return x * x * x * x


def _quint_in(x: float) -> float:
    return x * x * x * x * x


def _sine_in(x: float) -> float:
    return 1.0 - math.cos(x * math.pi / 2.0)


def _expo_in(x: float) -> float:
    return 2.0 ** (10.0 * (x - 1.0))


def _circ_in(x: float) -> float:
    return 1.0 - math.sqrt(1.0 - x * x)


def _elastic_out(x: float) -> float:
    return 2.0 ** (-10.0 * x) * math.sin((x - 0.075) * 2.0 * math.pi / 0.3) + 1.0


def _back_in(x: float) -> float:
    return x * x * ((_BACK_OVERSHOOT + 1.0) * x - _BACK_OVERSHOOT)


def _bounce_out(x: float) -> float:
    if x < 1.0 / 2.75:
        return 7.5625 * x * x
    if x < 2.0 / 2.75:
        x -= 1.5 / 2.75
        return 7.5625 * x * x + 0.75
    if x < 2.5 / 2.75:
        x -= 2.25 / 2.75
        return 7.5625 * x * x + 0.9375
    x -= 2.625 / 2.75
    return 7.5625 * x * x + 0.984375


_elastic_in = partial(_reverse, _elastic_out)
_bounce_in = partial(_reverse, _bounce_out)


def _family(base_in: Callable[[float], float]) -> tuple[Callable[[float], float], ...]:
    """In, Out and InOut curves derived from an In curve."""
    return base_in, partial(_reverse, base_in), partial(_in_out, base_in)


_QUAD = _family(_quad_in)
_CUBIC = _family(_cubic_in)
_QUART = _family(_quart_in)
_QUINT = _family(_quint_in)
_SINE = _family(_sine_in)
_EXPO = _family(_expo_in)
_CIRC = _family(_circ_in)
_BACK = _family(_back_in)

_CURVES: dict[str, Callable[[float], float]] = {
    "LINEAR": _linear,
    "IN": _QUAD[0],
    "OUT": _QUAD[1],
    "QUAD_IN": _QUAD[0],
    "QUAD_OUT": _QUAD[1],
    "QUAD_IN_OUT": _QUAD[2],
    "CUBIC_IN": _CUBIC[0],
    "CUBIC_OUT": _CUBIC[1],
    "CUBIC_IN_OUT": _CUBIC[2],
    "QUART_IN": _QUART[0],
    "QUART_OUT": _QUART[1],
    "QUART_IN_OUT": _QUART[2],
    "QUINT_IN": _QUINT[0],
    "QUINT_OUT": _QUINT[1],
    "QUINT_IN_OUT": _QUINT[2],
    "SINE_IN": _SINE[0],
    "SINE_OUT": _SINE[1],
    "SINE_IN_OUT": _SINE[2],
    "EXPO_IN": _EXPO[0],
    "EXPO_OUT": _EXPO[1],
    "EXPO_IN_OUT": _EXPO[2],
    "CIRC_IN": _CIRC[0],
    "CIRC_OUT": _CIRC[1],
    "CIRC_IN_OUT": _CIRC[2],
    "ELASTIC_IN": _elastic_in,
    "ELASTIC_OUT": _elastic_out,
    "ELASTIC_HALF_OUT": _elastic_out,
    "ELASTIC_QUARTER_OUT": _elastic_out,
    "ELASTIC_IN_OUT": partial(_in_out, _elastic_in),
    "BACK_IN": _BACK[0],
    "BACK_OUT": _BACK[1],
    "BACK_IN_OUT": _BACK[2],
    "BOUNCE_IN": _bounce_in,
    "BOUNCE_OUT": _bounce_out,
    "BOUNCE_IN_OUT": partial(_in_out, _bounce_in),
}

# Command-line IDs that resolve to a member other than the one they number
_PROTOCOL_ALIASES: dict[int, str] = {
    1: "QUAD_OUT",
    2: "QUAD_IN",
    26: "ELASTIC_OUT",
    27: "ELASTIC_OUT",
}


def get_easing(easing_id: int) -> Easing | None:
    """Module-level shortcut for :meth:`Easing.get_easing`."""
    return Easing.get_easing(easing_id)
