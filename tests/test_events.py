"""Tests for event construction and command-line serialization."""

import pytest

from osb.easing import Easing
from osb.event import Additive, Color, Fade, HFlip, Move, MoveX, Rotate, Scale, ScaleVec, VFlip
from osb.utils import Number, Vec2
from osb.utils import color as colors


class TestStaticEvents:
    """Instantaneous commands: blank end time and linear easing."""

    def test_fade(self):
        assert Fade.from_args(0, 1).to_line() == " F,0,0,,1"

    def test_float_value(self):
        assert Rotate.from_args(500, 1.5).to_line() == " R,0,500,,1.5"

    def test_move_components(self):
        assert Move.from_args(100, 320, 240).to_line() == " M,0,100,,320,240"

    def test_move_vec2(self):
        assert Move.from_args(100, Vec2(1, 2.5)).to_line() == " M,0,100,,1,2.5"

    def test_color_components(self):
        assert Color.from_args(0, 255, 128, 0).to_line() == " C,0,0,,255,128,0"

    def test_color_value(self):
        assert Color.from_args(0, colors.Color.blue()).to_line() == " C,0,0,,0,0,255"

    def test_static_form_properties(self):
        event = Scale.from_args(250, 2)
        assert event.is_static
        assert event.end_time == 250
        assert event.time_range == (250, 250)
        assert event.start_value == Number(2)


class TestDynamicEvents:
    """Commands spanning a time range."""

    def test_fade(self):
        assert Fade.from_args(0, 1000, 0, 1).to_line() == " F,0,0,1000,0,1"

    def test_leading_easing(self):
        event = Move.from_args(Easing.OUT, 0, 1000, 320, 480, 320, 240)
        assert event.to_line() == " M,1,0,1000,320,480,320,240"

    def test_alias_keeps_its_written_id(self):
        assert MoveX.from_args(Easing.QUAD_OUT, 0, 10, 0, 5).to_line() == " MX,4,0,10,0,5"

    def test_vec2_values(self):
        event = ScaleVec.from_args(0, 500, Vec2(1, 1), Vec2(0.5, 2))
        assert event.to_line() == " V,0,0,500,1,1,0.5,2"

    def test_color_components(self):
        event = Color.from_args(Easing.SINE_IN, 0, 100, 0, 0, 0, 255, 255, 255)
        assert event.to_line() == " C,15,0,100,0,0,0,255,255,255"

    def test_color_channels_round(self):
        assert Color.from_args(0, 127.9, 0.2, 255.0).to_line() == " C,0,0,,128,0,255"

    def test_color_channels_clamped(self):
        event = Color.from_args(0, 100, 300, 0, 0, -20, 0, 0)
        assert event.to_line() == " C,0,0,100,255,0,0,0,0,0"

    @pytest.mark.parametrize(
        "kind, flag",
        [(HFlip, "H"), (VFlip, "V"), (Additive, "A")],
    )
    def test_parameters(self, kind: type, flag: str) -> None:
        assert kind.from_args(0, 1000).to_line() == f" P,0,0,1000,{flag}"

    def test_depth_indents(self):
        event = Fade.from_args(0, 1)
        event.set_depth(2)
        assert event.to_line() == "   F,0,0,,1"


class TestArgumentErrors:
    def test_easing_on_static_shape(self):
        with pytest.raises(TypeError, match="Fade"):
            Fade.from_args(Easing.OUT, 0, 1)

    def test_wrong_component_count(self):
        with pytest.raises(TypeError, match="Move"):
            Move.from_args(0, 1000, 1, 2, 3)

    def test_non_integer_time(self):
        with pytest.raises(TypeError):
            Fade.from_args(0.5, 1)

    def test_parameters_have_no_static_form(self):
        with pytest.raises(TypeError):
            HFlip.static(0, None)

    def test_parameters_carry_no_values(self):
        with pytest.raises(TypeError):
            Additive.from_args(0, 1000, 1, 2)

    def test_dynamic_needs_both_values(self):
        with pytest.raises(TypeError, match="Fade"):
            Fade.dynamic(0, 1000)
        with pytest.raises(TypeError, match="Move"):
            Move.dynamic(0, 1000, Vec2(0, 0))

    def test_direct_construction_needs_a_value(self):
        with pytest.raises(TypeError):
            Fade(start_time=0)
        with pytest.raises(TypeError):
            Color(start_time=0, end_time=100, start_value=colors.Color.red())

    def test_negative_depth(self):
        event = Fade.from_args(0, 1)
        with pytest.raises(ValueError):
            event.set_depth(-1)
