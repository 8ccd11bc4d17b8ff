"""
Tests for the software scene rasterizer. No window is opened.
"""

import math
import unittest

import numpy as np
import pygame

from rendering.rasterizer import SceneRasterizer
from scene.geometry import BoxGeometry, PlaneGeometry
from scene.graph import AmbientLight, AxisHelper, Mesh, PerspectiveCamera, SceneNode
from scene.materials import BasicMaterial, PhongMaterial, Side


class TestSceneRasterizer(unittest.TestCase):

    def setUp(self):
        self.rasterizer = SceneRasterizer()
        self.root = SceneNode("root")
        self.camera = PerspectiveCamera(fov=45, aspect=1.0, near=0.1, far=100)
        self.camera.set_position(0, 0, 10)
        self.root.add(self.camera)
        self.size = (100, 100)

    def test_projects_center_of_view(self):
        screen, w = self.rasterizer.project(np.array([[0.0, 0.0, 0.0]]), self.camera, self.size)
        np.testing.assert_allclose(screen[0], (50, 50))
        self.assertAlmostEqual(w[0], 10.0)

    def test_only_front_faces_are_collected(self):
        self.root.add(AmbientLight(intensity=1.0))
        self.root.add(Mesh(BoxGeometry(1, 1, 1), PhongMaterial(color=0xFF0000)))

        polygons = self.rasterizer.collect(self.root, self.camera, self.size)

        self.assertEqual(len(polygons), 1)
        self.assertEqual(polygons[0].color, (255, 0, 0))

    def test_double_sided_collects_back_faces(self):
        self.root.add(Mesh(BoxGeometry(1, 1, 1), BasicMaterial(color=0x00FF00, side=Side.DOUBLE)))
        polygons = self.rasterizer.collect(self.root, self.camera, self.size)
        self.assertEqual(len(polygons), 6)

    def test_unlit_scene_is_dark(self):
        self.root.add(Mesh(BoxGeometry(1, 1, 1), PhongMaterial(color=0xFFFFFF)))
        polygons = self.rasterizer.collect(self.root, self.camera, self.size)
        self.assertEqual(polygons[0].color, (0, 0, 0))

    def test_faces_behind_camera_are_skipped(self):
        mesh = Mesh(BoxGeometry(1, 1, 1), BasicMaterial(side=Side.DOUBLE))
        mesh.set_position(0, 0, 20)
        self.root.add(mesh)
        self.assertEqual(self.rasterizer.collect(self.root, self.camera, self.size), [])

    def test_clip_near_cuts_polygon_at_plane(self):
        polygon = np.array(
            [
                [0.0, 0.0, 0.0, 1.0],
                [1.0, 0.0, 0.0, 1.0],
                [1.0, 1.0, 0.0, -1.0],
                [0.0, 1.0, 0.0, -1.0],
            ]
        )
        clipped = SceneRasterizer.clip_near(polygon, 0.5)
        np.testing.assert_allclose(
            clipped,
            [
                [0.0, 0.0, 0.0, 1.0],
                [1.0, 0.0, 0.0, 1.0],
                [1.0, 0.25, 0.0, 0.5],
                [0.0, 0.25, 0.0, 0.5],
            ],
        )

    def test_floor_under_camera_is_clipped_not_dropped(self):
        camera = PerspectiveCamera(fov=45, aspect=1.0, near=0.1, far=1000)
        camera.set_position(0, 2, 0)
        self.root.add(camera)
        floor = Mesh(PlaneGeometry(100, 100), BasicMaterial(color=0x00FF00))
        floor.rotation[0] = -math.pi / 2
        self.root.add(floor)

        polygons = self.rasterizer.collect(self.root, camera, self.size)

        self.assertEqual(len(polygons), 1)
        self.assertEqual(len(polygons[0].points), 4)
        self.assertGreaterEqual(polygons[0].depth, camera.near)
        self.assertEqual(polygons[0].color, (0, 255, 0))

    def test_far_polygons_drawn_first(self):
        near = Mesh(BoxGeometry(1, 1, 1), BasicMaterial(color=0xFF0000))
        far = Mesh(BoxGeometry(1, 1, 1), BasicMaterial(color=0x0000FF))
        far.set_position(0, 0, -5)
        self.root.add(near, far)

        polygons = self.rasterizer.collect(self.root, self.camera, self.size)

        self.assertEqual([p.color for p in polygons], [(0, 0, 255), (255, 0, 0)])

    def test_draw_paints_surface(self):
        self.root.add(AmbientLight(intensity=1.0))
        self.root.add(Mesh(BoxGeometry(1, 1, 1), PhongMaterial(color=0xFF0000)))
        hidden = AxisHelper(5)
        hidden.visible = False
        self.root.add(hidden)
        surface = pygame.Surface(self.size)

        count = self.rasterizer.draw(surface, self.root, self.camera)

        self.assertEqual(count, 1)
        self.assertEqual(tuple(surface.get_at((50, 50)))[:3], (255, 0, 0))
        self.assertEqual(tuple(surface.get_at((2, 2)))[:3], (0, 0, 0))


if __name__ == "__main__":
    unittest.main()
