"""Primitive geometries built as numpy vertex arrays plus face index lists."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

Face = Tuple[int, ...]


def rotation_x_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


@dataclass
class Geometry:
    """Base geometry: a vertex array (N, 3) and polygon faces indexing into it."""

    vertices: np.ndarray = field(init=False, repr=False, compare=False)
    faces: List[Face] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vertices, faces = self._build()
        self.vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
        self.faces = faces

    def _build(self) -> Tuple[List[Tuple[float, float, float]], List[Face]]:
        raise NotImplementedError

    def apply_matrix(self, matrix: np.ndarray) -> "Geometry":
        """Bake a 4x4 transform into the vertices."""
        homogeneous = np.hstack([self.vertices, np.ones((len(self.vertices), 1))])
        self.vertices = (homogeneous @ np.asarray(matrix).T)[:, :3]
        return self

    def bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.vertices.min(axis=0), self.vertices.max(axis=0)


@dataclass
class CylinderGeometry(Geometry):
    """Cylinder (or truncated cone) along local Y, centered on the origin."""

    radius_top: float = 1.0
    radius_bottom: float = 1.0
    height: float = 1.0
    radial_segments: int = 8
    height_segments: int = 1

    def _build(self):
        vertices = []
        faces: List[Face] = []
        half = self.height / 2
        rings = self.height_segments + 1
        for row in range(rings):
            t = row / self.height_segments
            radius = self.radius_top + (self.radius_bottom - self.radius_top) * t
            y = half - t * self.height
            for i in range(self.radial_segments):
                theta = 2 * math.pi * i / self.radial_segments
                vertices.append((radius * math.sin(theta), y, radius * math.cos(theta)))

        n = self.radial_segments
        for row in range(self.height_segments):
            for i in range(n):
                a = row * n + i
                b = row * n + (i + 1) % n
                faces.append((a, row * n + n + i, row * n + n + (i + 1) % n, b))

        # Caps as single polygons
        faces.append(tuple(range(n)))
        last_ring = (rings - 1) * n
        faces.append(tuple(last_ring + i for i in range(n - 1, -1, -1)))
        return vertices, faces


@dataclass
class SphereGeometry(Geometry):
    radius: float = 1.0
    width_segments: int = 8
    height_segments: int = 6

    def _build(self):
        vertices = [(0.0, self.radius, 0.0)]
        faces: List[Face] = []
        w = self.width_segments
        for row in range(1, self.height_segments):
            phi = math.pi * row / self.height_segments
            y = self.radius * math.cos(phi)
            ring_radius = self.radius * math.sin(phi)
            for i in range(w):
                theta = 2 * math.pi * i / w
                vertices.append((ring_radius * math.sin(theta), y, ring_radius * math.cos(theta)))
        vertices.append((0.0, -self.radius, 0.0))
        bottom = len(vertices) - 1

        for i in range(w):
            faces.append((0, 1 + i, 1 + (i + 1) % w))
        for row in range(self.height_segments - 2):
            start = 1 + row * w
            for i in range(w):
                faces.append(
                    (start + i, start + w + i, start + w + (i + 1) % w, start + (i + 1) % w)
                )
        last = 1 + (self.height_segments - 2) * w
        for i in range(w):
            faces.append((last + i, bottom, last + (i + 1) % w))
        return vertices, faces


@dataclass
class BoxGeometry(Geometry):
    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0

    def _build(self):
        x, y, z = self.width / 2, self.height / 2, self.depth / 2
        vertices = [
            (-x, -y, -z), (x, -y, -z), (x, y, -z), (-x, y, -z),
            (-x, -y, z), (x, -y, z), (x, y, z), (-x, y, z),
        ]
        faces = [
            (0, 3, 2, 1),  # back
            (4, 5, 6, 7),  # front
            (0, 4, 7, 3),  # left
            (1, 2, 6, 5),  # right
            (3, 7, 6, 2),  # top
            (0, 1, 5, 4),  # bottom
        ]
        return vertices, faces


@dataclass
class PlaneGeometry(Geometry):
    """Rectangle in the local XY plane facing +Z."""

    width: float = 1.0
    height: float = 1.0

    def _build(self):
        x, y = self.width / 2, self.height / 2
        vertices = [(-x, -y, 0.0), (x, -y, 0.0), (x, y, 0.0), (-x, y, 0.0)]
        return vertices, [(0, 1, 2, 3)]
