"""Tests for sprite timeline assembly and serialization."""

import pytest

from osb.easing import Easing
from osb.event import Fade, Move
from osb.layer import Layer
from osb.origin import Origin
from osb.utils import Vec2
from osb.visuals import Animation, LoopType, Sprite


class TestHeader:
    def test_sprite_defaults(self):
        sprite = Sprite("sb/star.png")
        assert sprite.to_str() == 'Sprite,Background,Centre,"sb/star.png",320,240\n'

    def test_sprite_origin_and_position(self):
        sprite = Sprite("sb/bar.png", Origin.TOP_LEFT, (0, 12.5))
        sprite.set_layer(Layer.OVERLAY)
        assert sprite.to_str() == 'Sprite,Overlay,TopLeft,"sb/bar.png",0,12.5\n'

    def test_position_in_origin_slot(self):
        sprite = Sprite("sb/a.png", Vec2(100, 200))
        assert sprite.origin is Origin.CENTRE
        assert sprite.to_str() == 'Sprite,Background,Centre,"sb/a.png",100,200\n'

    def test_position_tuple_in_origin_slot(self):
        sprite = Sprite("sb/a.png", (0, 0.5))
        assert sprite.to_str() == 'Sprite,Background,Centre,"sb/a.png",0,0.5\n'

    def test_origin_must_be_an_origin(self):
        with pytest.raises(TypeError):
            Sprite("sb/a.png", "Centre")

    def test_position_given_twice(self):
        with pytest.raises(TypeError):
            Sprite("sb/a.png", Vec2(1, 2), (3, 4))

    def test_animation_position_in_origin_slot(self):
        animation = Animation("sb/fire.png", 2, 100, LoopType.LOOP_FOREVER, (10, 20))
        assert animation.to_str() == 'Animation,Background,Centre,"sb/fire.png",10,20,2,100\n'

    def test_animation_loops_forever_by_default(self):
        animation = Animation("sb/fire.png", 4, 50)
        assert animation.to_str() == 'Animation,Background,Centre,"sb/fire.png",320,240,4,50\n'

    def test_animation_loop_once(self):
        animation = Animation("sb/fire.png", 4, 62.5, LoopType.LOOP_ONCE)
        assert animation.to_str() == (
            'Animation,Background,Centre,"sb/fire.png",320,240,4,62.5,LoopOnce\n'
        )

    def test_animation_needs_frames(self):
        with pytest.raises(ValueError):
            Animation("sb/fire.png", 0, 50)


class TestTimeline:
    """Tests for event insertion and time bounds."""

    def test_no_events(self):
        sprite = Sprite("sb/star.png")
        assert sprite.start_time is None
        assert sprite.end_time is None

    def test_bounds_aggregate_over_kinds(self):
        sprite = Sprite("sb/star.png")
        sprite.fade(500, 1000, 0, 1)
        sprite.move(200, 100, 100)
        sprite.scale(800, 2000, 1, 2)

        assert sprite.start_time == 200
        assert sprite.end_time == 2000

    def test_reversed_range_bounds(self):
        sprite = Sprite("sb/star.png")
        sprite.fade(1000, 0, 1, 0)
        assert (sprite.start_time, sprite.end_time) == (0, 1000)
        assert sprite.to_str().endswith(" F,0,1000,0,1,0\n")

    def test_depth_applies_to_new_events(self):
        sprite = Sprite("sb/star.png")
        sprite.current_depth = 1
        event = sprite.fade(0, 1)
        assert event.depth == 1
        assert event.to_line() == "  F,0,0,,1"

    def test_add_event_returns_event(self):
        sprite = Sprite("sb/star.png")
        event = Fade.from_args(0, 1)
        assert sprite.add_event(event) is event
        assert sprite.events(Fade) == [event]

    def test_static_event_is_kept(self):
        sprite = Sprite("sb/star.png")
        sprite.fade(100, 0.5)
        assert list(sprite.timeline(Fade).get(100))[0].to_line() == " F,0,100,,0.5"


class TestSerialization:
    """Tests for the sprite body."""

    def test_kinds_written_in_fixed_order(self):
        sprite = Sprite("sb/star.png")
        sprite.additive(0, 1000)
        sprite.fade(0, 1000, 0, 1)
        sprite.move(Easing.OUT, 0, 1000, 0, 0, 100, 100)
        sprite.color(0, 255, 0, 0)

        assert sprite.to_str() == (
            'Sprite,Background,Centre,"sb/star.png",320,240\n'
            " M,1,0,1000,0,0,100,100\n"
            " F,0,0,1000,0,1\n"
            " C,0,0,,255,0,0\n"
            " P,0,0,1000,A\n"
        )

    def test_overlapping_events_written_once(self):
        sprite = Sprite("sb/star.png")
        sprite.fade(0, 1000, 0, 1)
        sprite.fade(500, 1500, 1, 0)

        body = sprite.to_str().splitlines()[1:]
        assert body == [" F,0,0,1000,0,1", " F,0,500,1500,1,0"]

    def test_identical_lines_collapse(self):
        sprite = Sprite("sb/star.png")
        sprite.fade(0, 1000, 0, 1)
        sprite.fade(0, 1000, 0, 1)
        assert sprite.to_str().count(" F,0,0,1000,0,1\n") == 1
        assert len(sprite.events(Fade)) == 1

    def test_order_follows_time_not_insertion(self):
        sprite = Sprite("sb/star.png")
        sprite.move(2000, 10, 10)
        sprite.move(0, 20, 20)
        assert [event.start_time for event in sprite.events(Move)] == [0, 2000]

    def test_serialization_is_repeatable(self):
        sprite = Sprite("sb/star.png")
        sprite.rotate(Easing.BACK_IN, 0, 1000, 0, 3.14)
        assert sprite.to_str() == sprite.to_str() == str(sprite)
