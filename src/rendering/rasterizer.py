"""Draws a scene graph onto a pygame surface as flat-shaded, depth-sorted polygons."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pygame

from scene.graph import AmbientLight, AxisHelper, Mesh, PerspectiveCamera, SceneNode, SpotLight
from scene.materials import Color, Side

Point2 = Tuple[float, float]


@dataclass
class ScreenPolygon:
    depth: float
    points: List[Point2]
    color: Color


class SceneRasterizer:
    """Projects every visible mesh through a camera and paints back to front."""

    def __init__(self, outline_color: Color = (0, 0, 0), draw_outlines: bool = False) -> None:
        self.outline_color = outline_color
        self.draw_outlines = draw_outlines

    @staticmethod
    def to_clip(points: np.ndarray, camera: PerspectiveCamera) -> np.ndarray:
        view_projection = camera.projection_matrix @ camera.view_matrix()
        homogeneous = np.hstack([points, np.ones((len(points), 1))])
        return homogeneous @ view_projection.T

    @staticmethod
    def to_screen(clip: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
        width, height = size
        w = clip[:, 3]
        safe_w = np.where(np.abs(w) < 1e-9, 1e-9, w)
        ndc = clip[:, :2] / safe_w[:, None]
        screen = np.empty_like(ndc)
        screen[:, 0] = (ndc[:, 0] + 1.0) * 0.5 * width
        screen[:, 1] = (1.0 - ndc[:, 1]) * 0.5 * height
        return screen

    def project(self, points: np.ndarray, camera: PerspectiveCamera, size: Tuple[int, int]):
        """Return (screen_xy, w) for world-space points; w <= near means behind the camera."""
        clip = self.to_clip(points, camera)
        return self.to_screen(clip, size), clip[:, 3]

    @staticmethod
    def clip_near(polygon: np.ndarray, near: float) -> np.ndarray:
        """Cut a clip-space polygon down to the part in front of the near plane.

        Clip coordinates are linear in world space, so crossing points are
        interpolated directly between neighbouring corners.
        """
        kept = []
        count = len(polygon)
        for i in range(count):
            current = polygon[i]
            following = polygon[(i + 1) % count]
            current_in = current[3] >= near
            following_in = following[3] >= near
            if current_in:
                kept.append(current)
            if current_in != following_in:
                t = (near - current[3]) / (following[3] - current[3])
                kept.append(current + t * (following - current))
        return np.array(kept).reshape(-1, 4)

    def collect(self, root: SceneNode, camera: PerspectiveCamera, size: Tuple[int, int]) -> List[ScreenPolygon]:
        ambient = 0.0
        spots = []
        meshes = []
        for node in root.traverse_visible():
            if isinstance(node, AmbientLight):
                ambient += node.intensity
            elif isinstance(node, SpotLight):
                spots.append((node, node.world_position(), node.direction()))
            elif isinstance(node, Mesh):
                meshes.append(node)

        eye = camera.world_position()
        polygons: List[ScreenPolygon] = []
        for mesh in meshes:
            world = mesh.world_vertices()
            clip = self.to_clip(world, camera)
            base = mesh.material.base_color()
            for face in mesh.geometry.faces:
                index = list(face)
                w = clip[index, 3]
                if np.all(w <= camera.near):
                    continue
                corners_clip = clip[index]
                if np.any(w < camera.near):
                    corners_clip = self.clip_near(corners_clip, camera.near)
                    if len(corners_clip) < 3:
                        continue
                corners = world[index]
                center = corners.mean(axis=0)
                normal = np.cross(corners[1] - corners[0], corners[2] - corners[0])
                length = np.linalg.norm(normal)
                if length < 1e-12:
                    continue
                normal /= length
                facing = float(np.dot(normal, eye - center))
                side = mesh.material.side
                if (side == Side.FRONT and facing < 0) or (side == Side.BACK and facing > 0):
                    continue
                if facing < 0:
                    normal = -normal

                if mesh.material.lit:
                    factor = ambient
                    for spot, origin, direction in spots:
                        lambert = max(0.0, float(np.dot(normal, -direction)))
                        factor += spot.intensity_at(center, origin, direction) * lambert
                    factor = min(factor, 1.0)
                else:
                    factor = 1.0
                color = tuple(int(channel * factor) for channel in base)
                screen = self.to_screen(corners_clip, size)
                points = [(float(x), float(y)) for x, y in screen]
                depth = float(corners_clip[:, 3].mean())
                polygons.append(ScreenPolygon(depth=depth, points=points, color=color))

        polygons.sort(key=lambda polygon: polygon.depth, reverse=True)
        return polygons

    def draw(self, surface: pygame.Surface, root: SceneNode, camera: PerspectiveCamera) -> int:
        """Draw the scene and return the number of polygons painted."""
        size = surface.get_size()
        polygons = self.collect(root, camera, size)
        for polygon in polygons:
            pygame.draw.polygon(surface, polygon.color, polygon.points)
            if self.draw_outlines:
                pygame.draw.polygon(surface, self.outline_color, polygon.points, width=1)
        self._draw_axes(surface, root, camera, size)
        return len(polygons)

    def _draw_axes(self, surface, root, camera, size) -> None:
        for node in root.traverse_visible():
            if not isinstance(node, AxisHelper):
                continue
            for start, end, color in node.segments():
                screen, w = self.project(np.array([start, end]), camera, size)
                if np.any(w <= camera.near):
                    continue
                pygame.draw.line(surface, color, screen[0], screen[1], 2)
