"""Sampling a sprite's visual properties at a point in time."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..event import (
    Additive,
    Color,
    Event,
    Fade,
    HFlip,
    Move,
    MoveX,
    MoveY,
    Rotate,
    Scale,
    ScaleVec,
    VFlip,
)
from ..utils import color as color_types
from ..utils.vec2 import Vec2

if TYPE_CHECKING:
    from .sprite import Sprite


@dataclass(frozen=True, slots=True)
class SpriteState:
    """Evaluated properties of a sprite at one timestamp."""

    time: int
    position: Vec2
    opacity: float = 1.0
    rotation: float = 0.0
    scale: Vec2 = Vec2(1, 1)
    color: color_types.Color = color_types.Color(255, 255, 255)
    hflip: bool = False
    vflip: bool = False
    additive: bool = False

    @property
    def visible(self) -> bool:
        return self.opacity > 0 and float(self.scale.x) != 0 and float(self.scale.y) != 0


def sample_sprite(sprite: "Sprite", time: int) -> SpriteState | None:
    """
    Evaluate every command kind of ``sprite`` at ``time``.

    Args:
        sprite: Sprite to sample
        time: Timestamp in milliseconds

    Returns:
        The sampled state, or None if the sprite has no commands or ``time``
        falls outside the span of its commands
    """
    if sprite.start_time is None or sprite.end_time is None:
        return None
    if not sprite.start_time <= time <= sprite.end_time:
        return None

    position = sprite.position
    move = _sample_kind(sprite, Move, time)
    if move is not None:
        position = move
    move_x = _sample_kind(sprite, MoveX, time)
    move_y = _sample_kind(sprite, MoveY, time)
    if move_x is not None or move_y is not None:
        position = Vec2(
            position.x if move_x is None else move_x,
            position.y if move_y is None else move_y,
        )

    opacity = _sample_kind(sprite, Fade, time)
    rotation = _sample_kind(sprite, Rotate, time)
    uniform = _sample_kind(sprite, Scale, time)
    vector = _sample_kind(sprite, ScaleVec, time)
    factor = 1.0 if uniform is None else float(uniform)
    scale = Vec2(1, 1) if vector is None else vector
    color = _sample_kind(sprite, Color, time)

    return SpriteState(
        time=time,
        position=position,
        opacity=1.0 if opacity is None else float(opacity),
        rotation=0.0 if rotation is None else float(rotation),
        scale=Vec2(float(scale.x) * factor, float(scale.y) * factor),
        color=color_types.Color.white() if color is None else color,
        hflip=_flag_active(sprite, HFlip, time),
        vflip=_flag_active(sprite, VFlip, time),
        additive=_flag_active(sprite, Additive, time),
    )


def governing_event(sprite: "Sprite", kind: type[Event], time: int) -> Event | None:
    """Pick the command of ``kind`` that decides the value at ``time``.

    That is the active command with the latest start; otherwise the command
    that finished last before ``time``; otherwise the earliest command, whose
    start value holds until it begins.
    """
    active = list(sprite.timeline(kind).get(time))
    if active:
        return max(reversed(active), key=lambda event: min(event.time_range))

    events = sprite.events(kind)
    if not events:
        return None
    finished = [event for event in events if max(event.time_range) <= time]
    if finished:
        return max(reversed(finished), key=lambda event: max(event.time_range))
    return min(events, key=lambda event: min(event.time_range))


def event_value_at(event: Event, time: int) -> Any:
    """Value a command gives its property at ``time``, holding its end values outside it."""
    if event.is_static:
        return event.start_value
    start, end = event.time_range
    if end <= start:
        return event.end_value if time >= max(start, end) else event.start_value
    if time <= start:
        return event.start_value
    if time >= end:
        return event.end_value
    progress = event.easing.calculate((time - start) / (end - start))
    return _interpolate(event.start_value, event.end_value, progress)


def _sample_kind(sprite: "Sprite", kind: type[Event], time: int) -> Any:
    event = governing_event(sprite, kind, time)
    if event is None:
        return None
    return event_value_at(event, time)


def _flag_active(sprite: "Sprite", kind: type[Event], time: int) -> bool:
    return any(True for _ in sprite.timeline(kind).get(time))


def _interpolate(start: Any, end: Any, progress: float) -> Any:
    if isinstance(start, Vec2):
        return Vec2(
            _lerp(float(start.x), float(end.x), progress),
            _lerp(float(start.y), float(end.y), progress),
        )
    if isinstance(start, color_types.Color):
        return color_types.Color(
            *(round(_lerp(a, b, progress)) for a, b in zip(start.as_tuple(), end.as_tuple()))
        )
    return _lerp(float(start), float(end), progress)


def _lerp(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress
