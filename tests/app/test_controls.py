"""
Tests for the keyboard-driven control state.
"""

import pygame
import pytest

from app.controls import Controls
from core.constants import CameraMode, PlatformAction


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_defaults():
    controls = Controls()
    assert controls.axis
    assert controls.leg_stretch == 1.0
    assert controls.camera_mode == CameraMode.NORMAL_CAMERA


def test_head_rotation_stays_in_range():
    controls = Controls()
    for _ in range(100):
        controls.handle_event(key(pygame.K_a))
    assert controls.head_rotation == 80


def test_leg_stretch_stays_in_range():
    controls = Controls()
    for _ in range(100):
        controls.handle_event(key(pygame.K_q))
    assert controls.leg_stretch == pytest.approx(1.2)
    for _ in range(100):
        controls.handle_event(key(pygame.K_e))
    assert controls.leg_stretch == pytest.approx(1.0)


def test_toggles():
    controls = Controls()
    controls.handle_event(key(pygame.K_x))
    controls.handle_event(key(pygame.K_c))
    assert not controls.axis
    assert controls.camera_mode == CameraMode.EYE_CAMERA
    controls.handle_event(key(pygame.K_c))
    assert controls.camera_mode == CameraMode.NORMAL_CAMERA


def test_difficulty_never_below_one():
    controls = Controls()
    controls.handle_event(key(pygame.K_MINUS))
    assert controls.difficulty == 1
    controls.handle_event(key(pygame.K_EQUALS))
    assert controls.difficulty == 2


def test_platform_keys_return_actions():
    controls = Controls()
    assert controls.handle_event(key(pygame.K_RIGHT)) == PlatformAction.MOVE_RIGHT
    assert controls.handle_event(key(pygame.K_LEFT)) == PlatformAction.MOVE_LEFT
    assert controls.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)) is None
