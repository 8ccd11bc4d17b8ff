"""
Shared pytest configuration and fixtures.
"""

import pytest

from core.config import load_app_config
from figure.robot import Robot
from scene.textures import TextureLoader
from utils.assets import get_config_path


@pytest.fixture
def texture_loader(tmp_path):
    """Loader rooted in an empty directory, so every texture falls back to None."""
    return TextureLoader(base_dir=tmp_path)


@pytest.fixture
def robot(texture_loader):
    return Robot(texture_loader=texture_loader)


@pytest.fixture
def app_config():
    return load_app_config(get_config_path("app_config.json"))
