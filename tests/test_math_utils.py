"""Tests for scalar math helpers."""

import logging
import math

import numpy as np
import pytest

from jaunty_extensions import math_utils
from jaunty_extensions.math_utils import (
    SQRT3,
    floor_div,
    floor_mod,
    frac,
    in_range,
    in_range01,
    layer_mask_contains,
    lerp,
    sign,
    wlerp01,
)


def test_sqrt3():
    assert SQRT3 == pytest.approx(1.7320508)


def test_lerp_clamps_t():
    assert lerp(2, 4, 0.5) == 3
    assert lerp(2, 4, -1) == 2
    assert lerp(2, 4, 2) == 4


def test_layer_mask_contains():
    mask = 0b1010
    assert layer_mask_contains(mask, 1)
    assert layer_mask_contains(mask, 3)
    assert not layer_mask_contains(mask, 0)
    assert not layer_mask_contains(mask, 2)


def test_in_range_is_half_open():
    assert in_range(1, 1, 2)
    assert not in_range(2, 1, 2)
    assert in_range01(0.0)
    assert in_range01(0.999)
    assert not in_range01(1.0)
    assert not in_range01(-0.1)


class TestWlerp01:
    def test_close_values_interpolate_directly(self):
        assert wlerp01(0.2, 0.6, 0.5) == pytest.approx(0.4)

    def test_wraps_forward_through_one(self):
        assert wlerp01(0.8, 0.2, 0.25) == pytest.approx(0.9)
        assert wlerp01(0.8, 0.1, 0.5) == pytest.approx(0.95)

    def test_wraps_backward_through_zero(self):
        assert wlerp01(0.1, 0.8, 0.5) == pytest.approx(0.95)

    def test_angle_example(self):
        revolution = 2 * math.pi
        result = wlerp01(1 / revolution, 5 / revolution, 0.5) * revolution
        assert result == pytest.approx(3 + math.pi)

    def test_out_of_range_input_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            wlerp01(1.5, 0.2, 0.5)
        assert "v1 is not in [0, 1)" in caplog.text


class TestFloorModDiv:
    def test_floor_mod_int(self):
        assert floor_mod(-1, 3) == 2
        assert floor_mod(-3, 3) == 0
        assert floor_mod(-7, 3) == 2
        assert floor_mod(7, 3) == 1
        assert isinstance(floor_mod(-1, 3), int)

    def test_floor_mod_numpy_integers_stay_integral(self):
        result = floor_mod(np.int64(-1), 3)
        assert result == 2
        assert isinstance(result, int)
        assert floor_mod(np.int32(7), np.int32(3)) == 1

    def test_floor_mod_float(self):
        assert floor_mod(-1.5, 1.0) == pytest.approx(0.5)
        assert floor_mod(5.5, 2.0) == pytest.approx(1.5)
        assert floor_mod(-0.25, 1) == pytest.approx(0.75)

    def test_floor_div(self):
        assert floor_div(-1, 3) == -1
        assert floor_div(-3, 3) == -1
        assert floor_div(-4, 3) == -2
        assert floor_div(7, 2) == 3
        assert floor_div(0, 5) == 0


def test_frac():
    assert frac(2.25) == pytest.approx(0.25)
    assert frac(-0.25) == pytest.approx(0.75)
    assert frac(3.0) == 0.0


def test_sign():
    assert sign(3) == 1
    assert sign(-0.5) == -1
    assert sign(0) == 0
    assert sign(0.0) == 0


@pytest.mark.parametrize(
    "name, args, expected",
    [
        ("div", (-1, 3), -1),
        ("mod", (-1, 3), 2),
        ("floor_to_int", (-1.5,), -2),
        ("wrap01", (1.25,), 0.25),
    ],
)
def test_deprecated_aliases_warn(name, args, expected):
    with pytest.warns(DeprecationWarning):
        assert getattr(math_utils, name)(*args) == expected
