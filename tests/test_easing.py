"""Tests for easing curves and ID lookup."""

import itertools

import pytest

from osb.easing import Easing, get_easing


def test_ids_are_contiguous():
    """Every member carries its own protocol ID, 0 through 34."""
    assert [easing.id for easing in Easing] == list(range(35))


ID_TABLE = [
    (0, Easing.LINEAR),
    (1, Easing.QUAD_OUT),
    (2, Easing.QUAD_IN),
    (3, Easing.QUAD_IN),
    (4, Easing.QUAD_OUT),
    (5, Easing.QUAD_IN_OUT),
    (6, Easing.CUBIC_IN),
    (7, Easing.CUBIC_OUT),
    (8, Easing.CUBIC_IN_OUT),
    (9, Easing.QUART_IN),
    (10, Easing.QUART_OUT),
    (11, Easing.QUART_IN_OUT),
    (12, Easing.QUINT_IN),
    (13, Easing.QUINT_OUT),
    (14, Easing.QUINT_IN_OUT),
    (15, Easing.SINE_IN),
    (16, Easing.SINE_OUT),
    (17, Easing.SINE_IN_OUT),
    (18, Easing.EXPO_IN),
    (19, Easing.EXPO_OUT),
    (20, Easing.EXPO_IN_OUT),
    (21, Easing.CIRC_IN),
    (22, Easing.CIRC_OUT),
    (23, Easing.CIRC_IN_OUT),
    (24, Easing.ELASTIC_IN),
    (25, Easing.ELASTIC_OUT),
    (26, Easing.ELASTIC_OUT),
    (27, Easing.ELASTIC_OUT),
    (28, Easing.ELASTIC_IN_OUT),
    (29, Easing.BACK_IN),
    (30, Easing.BACK_OUT),
    (31, Easing.BACK_IN_OUT),
    (32, Easing.BOUNCE_IN),
    (33, Easing.BOUNCE_OUT),
    (34, Easing.BOUNCE_IN_OUT),
]

# Names of members drawing the same curve
ALIAS_CLASSES = [
    {"OUT", "QUAD_OUT"},
    {"IN", "QUAD_IN"},
    {"ELASTIC_OUT", "ELASTIC_HALF_OUT", "ELASTIC_QUARTER_OUT"},
]


def test_id_table_covers_every_id():
    assert [easing_id for easing_id, _ in ID_TABLE] == list(range(35))


@pytest.mark.parametrize("easing_id, expected", ID_TABLE)
def test_get_easing(easing_id: int, expected: Easing) -> None:
    assert get_easing(easing_id) is expected


@pytest.mark.parametrize("easing_id", [-1, 35, 1000])
def test_get_easing_unknown_id(easing_id: int) -> None:
    assert Easing.get_easing(easing_id) is None


@pytest.mark.parametrize("easing_id", [True, 3.0, "3", None])
def test_get_easing_rejects_non_integers(easing_id: object) -> None:
    with pytest.raises(TypeError):
        Easing.get_easing(easing_id)  # type: ignore[arg-type]


def test_aliases_compare_equal():
    """Alternative names for the same curve are interchangeable."""
    assert Easing.OUT == Easing.QUAD_OUT
    assert Easing.IN == Easing.QUAD_IN
    assert Easing.ELASTIC_HALF_OUT == Easing.ELASTIC_OUT
    assert Easing.ELASTIC_QUARTER_OUT == Easing.ELASTIC_OUT
    assert Easing.ELASTIC_HALF_OUT == Easing.ELASTIC_QUARTER_OUT
    assert hash(Easing.OUT) == hash(Easing.QUAD_OUT)
    assert Easing.QUAD_IN != Easing.QUAD_OUT


def test_no_other_members_compare_equal():
    """Equality holds only between a member and itself or within an alias class."""
    for left, right in itertools.product(Easing, Easing):
        expected = left is right or any(
            left.name in aliases and right.name in aliases for aliases in ALIAS_CLASSES
        )
        assert (left == right) is expected, (left, right)
        if expected:
            assert hash(left) == hash(right)


def test_aliases_keep_their_own_id():
    assert Easing.OUT.id == 1
    assert Easing.QUAD_OUT.id == 4


def test_from_name():
    assert Easing.from_name("QuadInOut") is Easing.QUAD_IN_OUT
    assert Easing.from_name("bounce_out") is Easing.BOUNCE_OUT
    assert Easing.from_name("nope") is None


def test_osu_name():
    assert Easing.ELASTIC_QUARTER_OUT.osu_name == "ElasticQuarterOut"
    assert str(Easing.SINE_IN) == "SineIn"


@pytest.mark.parametrize("easing", list(Easing))
def test_curves_hit_both_ends(easing: Easing) -> None:
    """Every curve starts at 0 and ends at 1."""
    assert easing.calculate(0.0) == 0.0
    assert easing.calculate(1.0) == 1.0


class TestEase:
    """Tests for evaluating a value range along a curve."""

    @pytest.mark.parametrize(
        "easing, expected",
        [
            (Easing.LINEAR, 150.0),
            (Easing.OUT, 175.0),
            (Easing.QUAD_IN, 125.0),
            (Easing.CUBIC_OUT, 187.5),
            (Easing.QUAD_IN_OUT, 150.0),
        ],
    )
    def test_midpoint(self, easing: Easing, expected: float) -> None:
        assert easing.ease(1000, 0, 2000, 100, 200) == pytest.approx(expected)

    def test_linear_quarter(self):
        assert Easing.LINEAR.ease(250, 0, 1000, 0, 200) == pytest.approx(50.0)

    def test_back_out_overshoots(self):
        assert Easing.BACK_OUT.ease(500, 0, 1000, 0, 200) == pytest.approx(217.5395)

    def test_bounce_in(self):
        assert Easing.BOUNCE_IN.ease(500, 0, 1000, 0, 200) == pytest.approx(46.875)

    def test_elastic_in_undershoots(self):
        assert Easing.ELASTIC_IN.ease(500, 0, 1000, 0, 200) == pytest.approx(-3.125)

    def test_bounce_out_is_continuous(self):
        """The third bounce joins the second and fourth pieces without jumps."""
        for boundary in (2.0 / 2.75, 2.5 / 2.75):
            before = Easing.BOUNCE_OUT.calculate(boundary - 1e-9)
            after = Easing.BOUNCE_OUT.calculate(boundary + 1e-9)
            assert before == pytest.approx(after, abs=1e-6)

    def test_outside_time_range(self):
        assert Easing.LINEAR.ease(-1, 0, 1000, 0, 1) is None
        assert Easing.LINEAR.ease(1001, 0, 1000, 0, 1) is None

    def test_descending_values_rejected(self):
        assert Easing.LINEAR.ease(500, 0, 1000, 1, 0) is None

    def test_zero_length(self):
        assert Easing.LINEAR.ease(500, 500, 500, 0, 10) == 10.0
