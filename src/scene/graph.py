"""Retained-mode scene graph: transform nodes, meshes, lights and cameras."""
from __future__ import annotations

import math
from typing import Iterator, List, Optional, Sequence

import numpy as np

from scene.geometry import (
    Geometry,
    rotation_x_matrix,
    rotation_y_matrix,
    rotation_z_matrix,
)
from scene.materials import Material

UP = np.array([0.0, 1.0, 0.0])


def _euler_from_matrix(m: np.ndarray) -> np.ndarray:
    """Extract XYZ Euler angles from the rotation part of a matrix."""
    m13 = max(-1.0, min(1.0, m[0, 2]))
    y = math.asin(m13)
    if abs(m13) < 0.9999999:
        x = math.atan2(-m[1, 2], m[2, 2])
        z = math.atan2(-m[0, 1], m[0, 0])
    else:
        x = math.atan2(m[2, 1], m[1, 1])
        z = 0.0
    return np.array([x, y, z])


class SceneNode:
    """A node with a local transform and owned children.

    Every node has at most one parent. Adding a node that already has a
    parent moves it under the new one.
    """

    # Cameras and lights look down -Z, plain objects face +Z
    looks_down_negative_z = False

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.position = np.zeros(3)
        self.rotation = np.zeros(3)
        self.scale = np.ones(3)
        self.visible = True
        self.cast_shadow = False
        self.receive_shadow = False
        self.parent: Optional[SceneNode] = None
        self.children: List[SceneNode] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # Hierarchy

    def add(self, *nodes: "SceneNode") -> "SceneNode":
        for node in nodes:
            if node is self or node in self.ancestors():
                raise ValueError(f"Cannot add {node!r} under its own descendant {self!r}")
            if node.parent is not None:
                node.parent.remove(node)
            node.parent = self
            self.children.append(node)
        return self

    def remove(self, node: "SceneNode") -> None:
        if node in self.children:
            self.children.remove(node)
            node.parent = None

    def ancestors(self) -> List["SceneNode"]:
        result = []
        node = self.parent
        while node is not None:
            result.append(node)
            node = node.parent
        return result

    def traverse(self) -> Iterator["SceneNode"]:
        yield self
        for child in self.children:
            yield from child.traverse()

    def traverse_visible(self) -> Iterator["SceneNode"]:
        if not self.visible:
            return
        yield self
        for child in self.children:
            yield from child.traverse_visible()

    def find(self, name: str) -> Optional["SceneNode"]:
        for node in self.traverse():
            if node.name == name:
                return node
        return None

    # Transforms

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position[:] = (x, y, z)

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.scale[:] = (x, y, z)

    def rotation_matrix(self) -> np.ndarray:
        rx, ry, rz = self.rotation
        return rotation_x_matrix(rx) @ rotation_y_matrix(ry) @ rotation_z_matrix(rz)

    def translate_on_axis(self, axis: Sequence[float], distance: float) -> None:
        """Move along an axis expressed in the node's own rotated frame."""
        direction = self.rotation_matrix()[:3, :3] @ np.asarray(axis, dtype=float)
        self.position += direction * distance

    def translate_x(self, distance: float) -> None:
        self.translate_on_axis((1.0, 0.0, 0.0), distance)

    def translate_y(self, distance: float) -> None:
        self.translate_on_axis((0.0, 1.0, 0.0), distance)

    def translate_z(self, distance: float) -> None:
        self.translate_on_axis((0.0, 0.0, 1.0), distance)

    def local_matrix(self) -> np.ndarray:
        matrix = self.rotation_matrix()
        matrix[:3, :3] = matrix[:3, :3] * self.scale
        matrix[:3, 3] = self.position
        return matrix

    def world_matrix(self) -> np.ndarray:
        matrix = self.local_matrix()
        for ancestor in self.ancestors():
            matrix = ancestor.local_matrix() @ matrix
        return matrix

    def world_position(self) -> np.ndarray:
        return self.world_matrix()[:3, 3].copy()

    def look_at(self, point: Sequence[float]) -> None:
        """Rotate the node so its facing axis points at a world-space point."""
        eye = self.world_position()
        target = np.asarray(point, dtype=float)
        if self.looks_down_negative_z:
            forward = eye - target
        else:
            forward = target - eye
        norm = np.linalg.norm(forward)
        if norm < 1e-9:
            return
        z_axis = forward / norm
        x_axis = np.cross(UP, z_axis)
        if np.linalg.norm(x_axis) < 1e-9:
            # Looking straight up or down
            x_axis = np.cross(np.array([0.0, 0.0, 1.0]), z_axis)
        x_axis /= np.linalg.norm(x_axis)
        y_axis = np.cross(z_axis, x_axis)
        world_rotation = np.column_stack([x_axis, y_axis, z_axis])

        if self.parent is not None:
            parent_rotation = self.parent.world_matrix()[:3, :3]
            parent_rotation = parent_rotation / np.linalg.norm(parent_rotation, axis=0)
            world_rotation = parent_rotation.T @ world_rotation
        self.rotation = _euler_from_matrix(world_rotation)


class Mesh(SceneNode):
    def __init__(self, geometry: Geometry, material: Material, name: str = "") -> None:
        super().__init__(name=name)
        self.geometry = geometry
        self.material = material

    def world_vertices(self) -> np.ndarray:
        vertices = self.geometry.vertices
        homogeneous = np.hstack([vertices, np.ones((len(vertices), 1))])
        return (homogeneous @ self.world_matrix().T)[:, :3]


class AmbientLight(SceneNode):
    def __init__(self, color: int = 0xFFFFFF, intensity: float = 1.0, name: str = "ambient_light") -> None:
        super().__init__(name=name)
        self.color = color
        self.intensity = intensity


class SpotLight(SceneNode):
    looks_down_negative_z = True

    def __init__(
        self,
        color: int = 0xFFFFFF,
        intensity: float = 1.0,
        distance: float = 0.0,
        angle: float = math.pi / 3,
        penumbra: float = 0.0,
        name: str = "spot_light",
    ) -> None:
        super().__init__(name=name)
        self.color = color
        self.intensity = intensity
        self.distance = distance
        self.angle = angle
        self.penumbra = penumbra
        self.shadow_map_size = (512, 512)
        # Default target sits at the world origin until reassigned
        self.target = SceneNode(name=f"{name}_target")

    def direction(self) -> np.ndarray:
        """Unit vector from the light to its target, in world space."""
        delta = self.target.world_position() - self.world_position()
        norm = np.linalg.norm(delta)
        if norm < 1e-9:
            return np.array([0.0, -1.0, 0.0])
        return delta / norm

    def intensity_at(
        self,
        point: Sequence[float],
        origin: Optional[np.ndarray] = None,
        direction: Optional[np.ndarray] = None,
    ) -> float:
        """Intensity reaching a world-space point, honoring cone angle and range.

        ``origin`` and ``direction`` may be passed in when the caller already
        computed them for the current frame.
        """
        if origin is None:
            origin = self.world_position()
        if direction is None:
            direction = self.direction()
        to_point = np.asarray(point, dtype=float) - origin
        dist = np.linalg.norm(to_point)
        if dist < 1e-9:
            return self.intensity
        if self.distance > 0 and dist > self.distance:
            return 0.0
        cos_angle = float(np.dot(to_point / dist, direction))
        outer = math.cos(self.angle)
        if cos_angle < outer:
            return 0.0
        inner = math.cos(self.angle * (1.0 - self.penumbra))
        if cos_angle >= inner or inner <= outer:
            falloff = 1.0
        else:
            falloff = (cos_angle - outer) / (inner - outer)
        if self.distance > 0:
            falloff *= 1.0 - dist / self.distance
        return self.intensity * falloff


class PerspectiveCamera(SceneNode):
    looks_down_negative_z = True

    def __init__(
        self,
        fov: float = 50.0,
        aspect: float = 1.0,
        near: float = 0.1,
        far: float = 2000.0,
        name: str = "camera",
    ) -> None:
        super().__init__(name=name)
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.projection_matrix = np.identity(4)
        self.update_projection_matrix()

    def update_projection_matrix(self) -> None:
        f = 1.0 / math.tan(math.radians(self.fov) / 2)
        depth = self.near - self.far
        self.projection_matrix = np.array(
            [
                [f / self.aspect, 0.0, 0.0, 0.0],
                [0.0, f, 0.0, 0.0],
                [0.0, 0.0, (self.far + self.near) / depth, 2 * self.far * self.near / depth],
                [0.0, 0.0, -1.0, 0.0],
            ]
        )

    def view_matrix(self) -> np.ndarray:
        return np.linalg.inv(self.world_matrix())


class AxisHelper(SceneNode):
    """Three colored line segments along +X, +Y and +Z."""

    AXIS_COLORS = ((255, 0, 0), (0, 255, 0), (0, 0, 255))

    def __init__(self, size: float = 1.0, name: str = "axis") -> None:
        super().__init__(name=name)
        self.size = size

    def segments(self):
        origin = self.world_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
        for index, color in enumerate(self.AXIS_COLORS):
            tip = np.zeros(4)
            tip[index] = self.size
            tip[3] = 1.0
            yield origin[:3], (self.world_matrix() @ tip)[:3], color
