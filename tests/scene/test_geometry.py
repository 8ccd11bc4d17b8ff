"""
Tests for primitive geometries.
"""

import math

import numpy as np
import pytest

from scene.geometry import (
    BoxGeometry,
    CylinderGeometry,
    PlaneGeometry,
    SphereGeometry,
    rotation_x_matrix,
)


def test_cylinder_extents():
    cylinder = CylinderGeometry(1.0, 2.0, 4.0, 32)
    low, high = cylinder.bounding_box()
    assert low[1] == pytest.approx(-2.0)
    assert high[1] == pytest.approx(2.0)
    assert high[0] == pytest.approx(2.0)

    top = cylinder.vertices[cylinder.vertices[:, 1] > 0]
    np.testing.assert_allclose(np.hypot(top[:, 0], top[:, 2]), 1.0)


def test_cylinder_face_count():
    cylinder = CylinderGeometry(1, 1, 1, 8, 3)
    assert len(cylinder.vertices) == 8 * 4
    # Side quads plus the two caps
    assert len(cylinder.faces) == 8 * 3 + 2


def test_sphere_vertices_on_surface():
    sphere = SphereGeometry(3.0, 12, 8)
    np.testing.assert_allclose(np.linalg.norm(sphere.vertices, axis=1), 3.0)
    assert len(sphere.faces) == 12 * 8


def test_box_and_plane():
    box = BoxGeometry(2, 4, 6)
    low, high = box.bounding_box()
    np.testing.assert_allclose(high - low, (2, 4, 6))
    assert len(box.faces) == 6

    plane = PlaneGeometry(10, 20)
    np.testing.assert_allclose(plane.vertices[:, 2], 0.0)


def test_apply_matrix_bakes_rotation():
    cylinder = CylinderGeometry(1, 1, 2, 8)
    cylinder.apply_matrix(rotation_x_matrix(math.pi / 2))
    low, high = cylinder.bounding_box()
    # The axis now runs along Z
    assert high[2] - low[2] == pytest.approx(2.0)
    assert high[1] - low[1] == pytest.approx(2.0, abs=1e-9)


def test_outward_winding():
    box = BoxGeometry(2, 2, 2)
    for face in box.faces:
        corners = box.vertices[list(face)]
        normal = np.cross(corners[1] - corners[0], corners[2] - corners[0])
        assert np.dot(normal, corners.mean(axis=0)) > 0
