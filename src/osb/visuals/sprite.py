"""Sprites and animations with their per-command timelines."""

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from ..constants import DEFAULT_POSITION
from ..event import (
    EVENT_KINDS,
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
from ..layer import Layer
from ..origin import Origin
from ..utils.interval_map import IntervalMap
from ..utils.number import Number, NumberLike
from ..utils.vec2 import Vec2

if TYPE_CHECKING:
    from .state import SpriteState

EventT = TypeVar("EventT", bound=Event)


class LoopType(str, Enum):
    """Playback mode of an animation."""

    LOOP_FOREVER = "LoopForever"
    LOOP_ONCE = "LoopOnce"

    def __str__(self) -> str:
        return self.value


class Sprite:
    """A storyboard image and the commands applied to it.

    Commands are stored in one interval map per command kind, keyed by the
    time range they cover. The sprite is written as its header line followed
    by every distinct command line, kind after kind.

    Usage:
        sprite = Sprite("sb/star.png")
        sprite.fade(0, 1000, 0, 1)
        sprite.move(Easing.OUT, 0, 1000, 320, 480, 320, 240)
        sprite.scale(1000, 0.5)
    """

    def __init__(
        self,
        path: str,
        origin: "Origin | Vec2 | tuple[NumberLike, NumberLike]" = Origin.CENTRE,
        position: "Vec2 | tuple[NumberLike, NumberLike]" = DEFAULT_POSITION,
    ):
        """
        Initialize a sprite.

        Args:
            path: Image path relative to the beatmap folder
            origin: Point of the image placed at ``position``; a position given
                here instead keeps the centre origin
            position: Initial position on the 640x480 playfield

        Raises:
            TypeError: If the origin is neither an Origin nor a position, or
                if a position is given twice
        """
        if isinstance(origin, (Vec2, tuple)):
            if position is not DEFAULT_POSITION:
                raise TypeError("Sprite position given twice")
            origin, position = Origin.CENTRE, origin
        if not isinstance(origin, Origin):
            raise TypeError(f"Sprite origin must be an Origin (got {origin!r})")
        self.path = path
        self.origin = origin
        self.position = Vec2.of(position)
        self.layer = Layer.BACKGROUND
        self.current_depth = 0
        self.start_time: int | None = None
        self.end_time: int | None = None
        self._timelines: dict[type[Event], IntervalMap[int, Event]] = {
            kind: IntervalMap() for kind in EVENT_KINDS
        }

    def add_event(self, event: EventT) -> EventT:
        """
        Attach an already-built command to the sprite.

        Args:
            event: Command to attach; its depth is set to the sprite's depth

        Returns:
            The same event, for chaining
        """
        kind = self._kind_of(event)
        start, end = event.time_range
        low, high = min(start, end), max(start, end)

        self.start_time = low if self.start_time is None else min(self.start_time, low)
        self.end_time = high if self.end_time is None else max(self.end_time, high)

        event.set_depth(self.current_depth)

        # Instantaneous commands still own the millisecond they happen at
        if high == low:
            high = low + 1
        self._timelines[kind].push(low, high, event)
        return event

    def move(self, *args: Any) -> Move:
        return self.add_event(Move.from_args(*args))

    def move_x(self, *args: Any) -> MoveX:
        return self.add_event(MoveX.from_args(*args))

    def move_y(self, *args: Any) -> MoveY:
        return self.add_event(MoveY.from_args(*args))

    def fade(self, *args: Any) -> Fade:
        return self.add_event(Fade.from_args(*args))

    def rotate(self, *args: Any) -> Rotate:
        return self.add_event(Rotate.from_args(*args))

    def scale(self, *args: Any) -> Scale:
        return self.add_event(Scale.from_args(*args))

    def scale_vec(self, *args: Any) -> ScaleVec:
        return self.add_event(ScaleVec.from_args(*args))

    def color(self, *args: Any) -> Color:
        return self.add_event(Color.from_args(*args))

    def hflip(self, *args: Any) -> HFlip:
        return self.add_event(HFlip.from_args(*args))

    def vflip(self, *args: Any) -> VFlip:
        return self.add_event(VFlip.from_args(*args))

    def additive(self, *args: Any) -> Additive:
        return self.add_event(Additive.from_args(*args))

    def set_layer(self, layer: Layer) -> None:
        """Assign the layer; done by the module the sprite is pushed into."""
        self.layer = layer

    def timeline(self, kind: type[Event]) -> IntervalMap[int, Event]:
        """Interval map holding the commands of one kind."""
        return self._timelines[kind]

    def events(self, kind: type[EventT]) -> list[EventT]:
        """Distinct commands of one kind, in the order they are written.

        Commands rendering to the same line are collapsed into the first one.
        """
        distinct: dict[str, EventT] = {}
        for event in self._timelines[kind].values():
            distinct.setdefault(event.to_line(), event)
        return list(distinct.values())

    def state_at(self, time: int) -> "SpriteState | None":
        """Evaluate the sprite's visual state at ``time``; None if it is not shown."""
        from .state import sample_sprite

        return sample_sprite(self, time)

    def to_str(self) -> str:
        """Render the header line and every command line, each ending with a newline."""
        lines = [self._header()]
        for kind in EVENT_KINDS:
            lines.extend(event.to_line() for event in self.events(kind))
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.to_str()

    def _header(self) -> str:
        return (
            f'Sprite,{self.layer},{self.origin},"{self.path}",'
            f"{self.position.x},{self.position.y}"
        )

    @staticmethod
    def _kind_of(event: Event) -> type[Event]:
        for kind in EVENT_KINDS:
            if isinstance(event, kind):
                return kind
        raise TypeError(f"Unsupported event type: {type(event).__name__}")


class Animation(Sprite):
    """A sprite cycling through numbered frame images.

    Frame files are named after ``path`` with the frame index inserted before
    the extension (``sb/fire.png`` -> ``sb/fire0.png``, ``sb/fire1.png``...).
    """

    def __init__(
        self,
        path: str,
        frame_count: int,
        frame_delay: NumberLike,
        loop_type: LoopType = LoopType.LOOP_FOREVER,
        origin: "Origin | Vec2 | tuple[NumberLike, NumberLike]" = Origin.CENTRE,
        position: "Vec2 | tuple[NumberLike, NumberLike]" = DEFAULT_POSITION,
    ):
        """
        Initialize an animation.

        Args:
            path: Image path pattern relative to the beatmap folder
            frame_count: Number of frame images
            frame_delay: Milliseconds each frame stays on screen
            loop_type: Whether the frames loop forever or play once
            origin: Point of the image placed at ``position``
            position: Initial position on the 640x480 playfield
        """
        if frame_count < 1:
            raise ValueError(f"Animations need at least one frame (got {frame_count})")
        super().__init__(path, origin=origin, position=position)
        self.frame_count = frame_count
        self.frame_delay = Number.of(frame_delay)
        self.loop_type = loop_type

    def _header(self) -> str:
        header = (
            f'Animation,{self.layer},{self.origin},"{self.path}",'
            f"{self.position.x},{self.position.y},{self.frame_count},{self.frame_delay}"
        )
        if self.loop_type is LoopType.LOOP_ONCE:
            header += f",{self.loop_type}"
        return header
