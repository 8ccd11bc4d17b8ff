"""Robot part sizes derived from the overall height and width.

CRITERIA:
    Legs = 76.19% of total height
    Body = 66.67% of total height
    Head = 14.28% of total height
Every other size is relative to one of those three.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_HEIGHT = 21.0
DEFAULT_WIDTH = 12.5

LEG_RATIO = 0.7619
BODY_RATIO = 0.6667
HEAD_RATIO = 0.1428


@dataclass(frozen=True)
class RobotDimensions:
    height: float
    width: float
    leg_height: float
    body_height: float
    body_width: float
    head_radius: float
    foot_height: float
    foot_radius_top: float
    foot_radius_bottom: float
    femur_length: float
    femur_radius: float
    shoulder_side: float
    eye_radius: float
    eye_height: float

    @property
    def body_radius(self) -> float:
        return self.body_width * 0.5

    @property
    def femur_rest_y(self) -> float:
        """Femur center height above its foot when the leg is not stretched."""
        return self.femur_length / 2


def _check_positive(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Robot {name} must be a finite positive number, got {value!r}")
    return float(value)


def compute_dimensions(height: float = DEFAULT_HEIGHT, width: float = DEFAULT_WIDTH) -> RobotDimensions:
    height = _check_positive("height", height)
    width = _check_positive("width", width)

    leg_height = height * LEG_RATIO
    body_height = height * BODY_RATIO
    head_radius = height * HEAD_RATIO
    foot_height = leg_height * 0.125
    eye_radius = head_radius * 0.25  # Eye is 25% of the head

    return RobotDimensions(
        height=height,
        width=width,
        leg_height=leg_height,
        body_height=body_height,
        body_width=body_height * 0.5,
        head_radius=head_radius,
        foot_height=foot_height,
        foot_radius_top=foot_height / 2,
        foot_radius_bottom=leg_height * 0.1875 / 2,
        femur_length=leg_height * 0.75,
        femur_radius=leg_height * 0.09375 * 0.5,
        shoulder_side=leg_height * 0.125,
        eye_radius=eye_radius,
        eye_height=eye_radius / 2,
    )
