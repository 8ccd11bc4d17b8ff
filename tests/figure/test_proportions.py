"""
Tests for the robot part sizes derived from height and width.
"""

import math

import pytest

from figure.proportions import compute_dimensions


def test_default_dimensions():
    dims = compute_dimensions()

    assert dims.height == 21.0
    assert dims.width == 12.5
    assert dims.leg_height == pytest.approx(15.9999)
    assert dims.head_radius == pytest.approx(2.9988)
    assert dims.body_height == pytest.approx(21 * 0.6667)


@pytest.mark.parametrize("height", [0.5, 1.0, 21.0, 137.25])
def test_ratios_hold_for_any_height(height):
    dims = compute_dimensions(height, 3.0)

    assert dims.leg_height == pytest.approx(height * 0.7619)
    assert dims.body_height == pytest.approx(height * 0.6667)
    assert dims.body_width == pytest.approx(dims.body_height * 0.5)
    assert dims.head_radius == pytest.approx(height * 0.1428)
    assert dims.foot_height == pytest.approx(dims.leg_height * 0.125)
    assert dims.foot_radius_top == pytest.approx(dims.foot_height / 2)
    assert dims.foot_radius_bottom == pytest.approx(dims.leg_height * 0.1875 / 2)
    assert dims.femur_length == pytest.approx(dims.leg_height * 0.75)
    assert dims.femur_radius == pytest.approx(dims.leg_height * 0.09375 * 0.5)
    assert dims.shoulder_side == pytest.approx(dims.leg_height * 0.125)
    assert dims.eye_radius == pytest.approx(dims.head_radius * 0.25)
    assert dims.eye_height == pytest.approx(dims.eye_radius / 2)


def test_dimensions_are_immutable():
    dims = compute_dimensions()
    with pytest.raises(AttributeError):
        dims.leg_height = 3.0


@pytest.mark.parametrize("height, width", [(0, 12.5), (-1, 12.5), (21, 0), (math.inf, 12.5), (math.nan, 1)])
def test_invalid_sizes_rejected(height, width):
    with pytest.raises(ValueError):
        compute_dimensions(height, width)
