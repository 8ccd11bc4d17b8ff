"""Surface materials for meshes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import pygame

Color = Tuple[int, int, int]


class Side(IntEnum):
    FRONT = 0
    BACK = 1
    DOUBLE = 2


def hex_to_rgb(value: int) -> Color:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


@dataclass
class Material:
    color: int = 0xFFFFFF
    texture: Optional[pygame.Surface] = None
    side: Side = Side.FRONT

    # Unlit materials ignore the scene lights
    lit = True

    def base_color(self) -> Color:
        """Flat color used for shading; a texture contributes its average color."""
        if self.texture is not None:
            r, g, b = pygame.transform.average_color(self.texture)[:3]
            return int(r), int(g), int(b)
        return hex_to_rgb(self.color)


@dataclass
class PhongMaterial(Material):
    shininess: float = 30.0


@dataclass
class BasicMaterial(Material):
    lit = False
