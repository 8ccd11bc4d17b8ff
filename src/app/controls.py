"""GUI-style control state driven by the keyboard."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from core.constants import MIN_DIFFICULTY, CameraMode, PlatformAction
from figure.limits import DEFAULT_LIMITS

ROTATION_STEP = 5.0
STRETCH_STEP = 0.02


@dataclass
class Controls:
    axis: bool = True
    difficulty: int = MIN_DIFFICULTY
    head_rotation: float = 0.0
    body_rotation: float = 0.0
    leg_stretch: float = 1.0
    camera_mode: CameraMode = CameraMode.NORMAL_CAMERA

    def handle_event(self, event: pygame.event.Event):
        """Update the state from a key press.

        Returns a PlatformAction when the key asks to move the platform.
        """
        if event.type != pygame.KEYDOWN:
            return None

        key = event.key
        limits = DEFAULT_LIMITS
        if key == pygame.K_a:
            self.head_rotation = limits.head_angle.clamp(self.head_rotation + ROTATION_STEP)
        elif key == pygame.K_d:
            self.head_rotation = limits.head_angle.clamp(self.head_rotation - ROTATION_STEP)
        elif key == pygame.K_w:
            self.body_rotation = limits.body_angle.clamp(self.body_rotation + ROTATION_STEP)
        elif key == pygame.K_s:
            self.body_rotation = limits.body_angle.clamp(self.body_rotation - ROTATION_STEP)
        elif key == pygame.K_q:
            self.leg_stretch = limits.leg_stretch.clamp(self.leg_stretch + STRETCH_STEP)
        elif key == pygame.K_e:
            self.leg_stretch = limits.leg_stretch.clamp(self.leg_stretch - STRETCH_STEP)
        elif key == pygame.K_x:
            self.axis = not self.axis
        elif key == pygame.K_c:
            self.camera_mode = (
                CameraMode.EYE_CAMERA
                if self.camera_mode == CameraMode.NORMAL_CAMERA
                else CameraMode.NORMAL_CAMERA
            )
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.difficulty += 1
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.difficulty = max(MIN_DIFFICULTY, self.difficulty - 1)
        elif key == pygame.K_RIGHT:
            return PlatformAction.MOVE_RIGHT
        elif key == pygame.K_LEFT:
            return PlatformAction.MOVE_LEFT
        return None
