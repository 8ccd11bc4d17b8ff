"""
Unit tests for scene graph nodes and their transforms.
"""

import math
import unittest

import numpy as np

from scene.geometry import BoxGeometry
from scene.graph import AxisHelper, Mesh, PerspectiveCamera, SceneNode, SpotLight
from scene.materials import PhongMaterial


class TestHierarchy(unittest.TestCase):

    def test_add_sets_parent(self):
        parent = SceneNode("parent")
        child = SceneNode("child")
        parent.add(child)
        self.assertIs(child.parent, parent)
        self.assertEqual(parent.children, [child])

    def test_add_reparents(self):
        first = SceneNode("first")
        second = SceneNode("second")
        child = SceneNode("child")
        first.add(child)
        second.add(child)
        self.assertEqual(first.children, [])
        self.assertIs(child.parent, second)

    def test_cycles_rejected(self):
        root = SceneNode("root")
        child = SceneNode("child")
        root.add(child)
        with self.assertRaises(ValueError):
            child.add(root)
        with self.assertRaises(ValueError):
            root.add(root)

    def test_remove(self):
        root = SceneNode("root")
        child = SceneNode("child")
        root.add(child)
        root.remove(child)
        self.assertIsNone(child.parent)
        self.assertEqual(root.children, [])

    def test_traverse_and_find(self):
        root = SceneNode("root")
        a, b, c = SceneNode("a"), SceneNode("b"), SceneNode("c")
        root.add(a, c)
        a.add(b)
        self.assertEqual([node.name for node in root.traverse()], ["root", "a", "b", "c"])
        self.assertIs(root.find("b"), b)
        self.assertIsNone(root.find("missing"))

    def test_traverse_visible_skips_hidden_subtrees(self):
        root = SceneNode("root")
        hidden = SceneNode("hidden")
        hidden.visible = False
        hidden.add(SceneNode("under_hidden"))
        root.add(hidden)
        self.assertEqual([node.name for node in root.traverse_visible()], ["root"])


class TestTransforms(unittest.TestCase):

    def test_world_matrix_composes_parents(self):
        parent = SceneNode()
        parent.set_position(1, 2, 3)
        parent.rotation[1] = math.pi / 2
        child = SceneNode()
        child.set_position(0, 0, 1)
        parent.add(child)

        # +Z in the parent frame points along world +X
        np.testing.assert_allclose(child.world_position(), (2, 2, 3), atol=1e-9)

    def test_scale_in_local_matrix(self):
        node = SceneNode()
        node.set_scale(1, 2, 1)
        point = node.local_matrix() @ np.array([0.0, 1.0, 0.0, 1.0])
        np.testing.assert_allclose(point[:3], (0, 2, 0))

    def test_translate_follows_rotation(self):
        node = SceneNode()
        node.rotation[2] = math.pi / 2
        node.translate_x(2)
        np.testing.assert_allclose(node.position, (0, 2, 0), atol=1e-9)

    def test_translate_z_after_turning(self):
        node = SceneNode()
        node.set_position(1, 0, 0)
        node.rotation[1] = math.pi / 2
        node.translate_z(3)
        node.translate_y(-1)
        np.testing.assert_allclose(node.position, (4, -1, 0), atol=1e-9)

    def test_object_look_at_faces_positive_z(self):
        node = SceneNode()
        node.look_at((10, 0, 0))
        np.testing.assert_allclose(node.rotation, (0, math.pi / 2, 0), atol=1e-9)

    def test_camera_look_at_uses_negative_z(self):
        camera = PerspectiveCamera()
        camera.set_position(0, 0, 10)
        camera.look_at((0, 0, 0))
        forward = -camera.world_matrix()[:3, 2]
        np.testing.assert_allclose(forward, (0, 0, -1), atol=1e-9)

    def test_look_at_inside_rotated_parent(self):
        parent = SceneNode()
        parent.rotation[1] = math.pi / 2
        camera = PerspectiveCamera()
        parent.add(camera)
        camera.look_at((0, 0, -5))
        forward = -camera.world_matrix()[:3, 2]
        np.testing.assert_allclose(forward, (0, 0, -1), atol=1e-9)

    def test_mesh_world_vertices(self):
        mesh = Mesh(BoxGeometry(2, 2, 2), PhongMaterial())
        mesh.set_position(5, 0, 0)
        vertices = mesh.world_vertices()
        np.testing.assert_allclose(vertices.min(axis=0), (4, -1, -1))
        np.testing.assert_allclose(vertices.max(axis=0), (6, 1, 1))


class TestCameraAndLights(unittest.TestCase):

    def test_projection_follows_aspect(self):
        camera = PerspectiveCamera(fov=90, aspect=2.0)
        self.assertAlmostEqual(camera.projection_matrix[0, 0], 0.5)
        camera.aspect = 1.0
        camera.update_projection_matrix()
        self.assertAlmostEqual(camera.projection_matrix[0, 0], 1.0)

    def test_spot_light_cone(self):
        light = SpotLight(intensity=2.0, angle=math.radians(30))
        light.set_position(0, 10, 0)
        # Default target sits at the origin, straight below
        self.assertAlmostEqual(light.intensity_at((0, 0, 0)), 2.0)
        self.assertEqual(light.intensity_at((100, 0, 0)), 0.0)

    def test_spot_light_range(self):
        light = SpotLight(intensity=1.0, distance=5.0)
        light.set_position(0, 10, 0)
        self.assertEqual(light.intensity_at((0, 0, 0)), 0.0)

    def test_axis_segments(self):
        axis = AxisHelper(25)
        segments = list(axis.segments())
        self.assertEqual(len(segments), 3)
        np.testing.assert_allclose(segments[1][1], (0, 25, 0))


if __name__ == "__main__":
    unittest.main()
