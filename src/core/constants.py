"""Read-only game constants shared across the scene and the robot."""
from __future__ import annotations

from enum import IntEnum


class CameraMode(IntEnum):
    """Which camera the scene is viewed through"""
    NORMAL_CAMERA = 0
    EYE_CAMERA = 1


class PlatformAction(IntEnum):
    MOVE_RIGHT = 1
    MOVE_LEFT = 2


# Robot energy
MAX_ENERGY = 100

# Robot joint limits (degrees for angles, factor for stretch)
MAX_HEAD_ANGLE = 80.0
MIN_HEAD_ANGLE = -80.0
MAX_BODY_ANGLE = 30.0
MIN_BODY_ANGLE = -45.0
MAX_LEG_STRETCH = 1.2  # 20% over the resting length
MIN_LEG_STRETCH = 1.0

# Radial segments used for every round robot part
PART_PRECISION = 30

MIN_DIFFICULTY = 1
