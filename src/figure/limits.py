"""Joint range limits for the robot."""
from __future__ import annotations

from dataclasses import dataclass

from core import constants


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


@dataclass(frozen=True)
class Range:
    minimum: float
    maximum: float

    def clamp(self, value: float) -> float:
        return clamp(value, self.minimum, self.maximum)

    def __contains__(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class MotionLimits:
    head_angle: Range = Range(constants.MIN_HEAD_ANGLE, constants.MAX_HEAD_ANGLE)
    body_angle: Range = Range(constants.MIN_BODY_ANGLE, constants.MAX_BODY_ANGLE)
    leg_stretch: Range = Range(constants.MIN_LEG_STRETCH, constants.MAX_LEG_STRETCH)


DEFAULT_LIMITS = MotionLimits()
