"""Static environment props: the walled game field, the sky dome and the platform."""
from __future__ import annotations

import logging
import math
from typing import Optional

from core.constants import PlatformAction
from scene.geometry import BoxGeometry, PlaneGeometry, SphereGeometry
from scene.graph import Mesh, SceneNode
from scene.materials import Material, Side

logger = logging.getLogger(__name__)


class GameField:
    """Floor lying on the XZ plane, closed by four walls."""

    def __init__(
        self,
        width: float,
        depth: float,
        floor_material: Material,
        wall_thickness: float,
        wall_height: float,
        wall_material: Material,
    ) -> None:
        self.width = width
        self.depth = depth
        self.wall_thickness = wall_thickness
        self.wall_height = wall_height
        self.node = SceneNode(name="game_field")

        self.floor = Mesh(PlaneGeometry(width, depth), floor_material, name="floor")
        self.floor.rotation[0] = -math.pi / 2
        self.floor.receive_shadow = True
        self.node.add(self.floor)

        self.walls = self._create_walls(wall_material)
        self.node.add(*self.walls)

    def _create_walls(self, material: Material):
        t = self.wall_thickness
        h = self.wall_height
        outer_width = self.width + 2 * t
        specs = (
            ("north_wall", BoxGeometry(outer_width, h, t), (0.0, h / 2, -(self.depth / 2 + t / 2))),
            ("south_wall", BoxGeometry(outer_width, h, t), (0.0, h / 2, self.depth / 2 + t / 2)),
            ("west_wall", BoxGeometry(t, h, self.depth), (-(self.width / 2 + t / 2), h / 2, 0.0)),
            ("east_wall", BoxGeometry(t, h, self.depth), (self.width / 2 + t / 2, h / 2, 0.0)),
        )
        walls = []
        for name, geometry, (x, y, z) in specs:
            wall = Mesh(geometry, material, name=name)
            wall.set_position(x, y, z)
            wall.cast_shadow = True
            wall.receive_shadow = True
            walls.append(wall)
        return walls

    def contains(self, x: float, z: float, margin: float = 0.0) -> bool:
        return abs(x) <= self.width / 2 - margin and abs(z) <= self.depth / 2 - margin


class Sky:
    """Inward-facing sphere surrounding the whole scene."""

    def __init__(self, background: Material, radius: float = 800.0) -> None:
        background.side = Side.BACK
        self.node = Mesh(SphereGeometry(radius, 16, 12), background, name="sky")


class Platform:
    """Box the robot stands on; slides along X inside the field."""

    def __init__(
        self,
        material: Material,
        width: float = 40.0,
        height: float = 4.0,
        depth: float = 40.0,
        step: float = 10.0,
        limit: Optional[float] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.depth = depth
        self.step = step
        self.limit = limit
        self.node = Mesh(BoxGeometry(width, height, depth), material, name="platform")
        self.node.position[1] = height / 2
        self.node.cast_shadow = True
        self.node.receive_shadow = True

    @property
    def top(self) -> float:
        return self.node.position[1] + self.height / 2

    def move(self, action: PlatformAction) -> None:
        if action == PlatformAction.MOVE_RIGHT:
            x = self.node.position[0] + self.step
        elif action == PlatformAction.MOVE_LEFT:
            x = self.node.position[0] - self.step
        else:
            logger.warning("Ignoring unknown platform action %r", action)
            return
        if self.limit is not None:
            x = max(-self.limit, min(x, self.limit))
        self.node.position[0] = x
