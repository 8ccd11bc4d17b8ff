"""
Robot figure
An R2D2-like robot built from primitive meshes: two feet, each carrying a
femur and a shoulder, with the single body/head/eye chain anchored on one
shoulder. Head, body and legs are the movable joints.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional, Union

import numpy as np

from core import constants
from figure.limits import DEFAULT_LIMITS, MotionLimits
from figure.proportions import DEFAULT_HEIGHT, DEFAULT_WIDTH, RobotDimensions, compute_dimensions
from figure.vitality import Vitality
from scene.geometry import BoxGeometry, CylinderGeometry, SphereGeometry, rotation_x_matrix
from scene.graph import Mesh, PerspectiveCamera, SceneNode, SpotLight
from scene.materials import Material, PhongMaterial
from scene.textures import TextureLoader

logger = logging.getLogger(__name__)

LEFT = 1
RIGHT = -1

PART_MATERIALS = ("body", "shoulder", "foot", "head", "femur")


def normalize_side(side: float) -> int:
    """Zero or positive means left, negative means right."""
    return LEFT if side >= 0 else RIGHT


class Robot:
    """
    Articulated robot figure.

    The robot owns a root scene node (``node``) and is added to a scene
    through it. Joint setters clamp their input to the robot's limits and
    are ignored once the robot is dead.
    """

    def __init__(
        self,
        height: float = DEFAULT_HEIGHT,
        width: float = DEFAULT_WIDTH,
        materials: Optional[Mapping[str, Material]] = None,
        body_side: int = LEFT,
        limits: MotionLimits = DEFAULT_LIMITS,
        texture_loader: Optional[TextureLoader] = None,
        metal_texture: Optional[str] = "img/metal.jpg",
        aspect: float = 1.0,
    ):
        """
        Args:
            height: Total robot height; every part size is derived from it
            width: Robot width
            materials: Optional per-part overrides keyed by body, shoulder,
                foot, head or femur
            body_side: Side whose shoulder carries the body (LEFT or RIGHT)
            limits: Joint ranges
            texture_loader: Loader used for the default metal texture
            metal_texture: Path of the default metal texture
            aspect: Aspect ratio of the eye camera
        """
        self.dimensions: RobotDimensions = compute_dimensions(height, width)
        self.limits = limits
        self.body_side = normalize_side(body_side)
        self.vitality = Vitality(constants.MAX_ENERGY)

        loader = texture_loader or TextureLoader()
        self.metal_texture = loader.load(metal_texture)
        self.materials: Dict[str, Material] = {
            part: PhongMaterial(texture=self.metal_texture) for part in PART_MATERIALS
        }
        if materials:
            unknown = set(materials) - set(PART_MATERIALS)
            if unknown:
                raise ValueError(f"Unknown robot parts for materials: {sorted(unknown)}")
            self.materials.update(materials)

        # Current joint state, in degrees and stretch factor
        self._head_angle = 0.0
        self._body_angle = 0.0
        self._leg_stretch = limits.leg_stretch.minimum

        self.node = SceneNode(name="robot")

        # Named joints, filled in by the part factory
        self.left_femur: Optional[Mesh] = None
        self.right_femur: Optional[Mesh] = None
        self.left_shoulder: Optional[Mesh] = None
        self.right_shoulder: Optional[Mesh] = None
        self.body: Optional[Mesh] = None
        self.head: Optional[Mesh] = None
        self.eye: Optional[Mesh] = None

        self.right_foot = self.create_foot(RIGHT)
        self.left_foot = self.create_foot(LEFT)
        self.node.add(self.right_foot, self.left_foot)

        self.body = self.create_body()
        self.shoulder(self.body_side).add(self.body)

        self._create_head_light()
        self._create_eye_camera(aspect)

    # Scene node delegation

    @property
    def position(self):
        return self.node.position

    @property
    def rotation(self):
        return self.node.rotation

    def add(self, *nodes: SceneNode) -> None:
        self.node.add(*nodes)

    # Part factory

    def create_foot(self, side: int) -> Mesh:
        """Create a foot with its femur and shoulder for one side."""
        side = normalize_side(side)
        dims = self.dimensions

        geometry = CylinderGeometry(
            dims.foot_radius_top, dims.foot_radius_bottom, dims.foot_height, constants.PART_PRECISION
        )
        foot = Mesh(geometry, self.materials["foot"], name=f"{self._side_name(side)}_foot")
        foot.position[1] = dims.foot_height / 2
        foot.position[0] = side * (dims.body_width / 2 + dims.foot_height / 2)
        foot.cast_shadow = True

        foot.add(self.create_femur(side))
        foot.add(self.create_shoulder(side))
        return foot

    def create_femur(self, side: int) -> Mesh:
        side = normalize_side(side)
        dims = self.dimensions
        geometry = CylinderGeometry(
            dims.femur_radius, dims.femur_radius, dims.femur_length, constants.PART_PRECISION
        )
        femur = Mesh(geometry, self.materials["femur"], name=f"{self._side_name(side)}_femur")
        femur.position[1] = dims.femur_rest_y
        femur.cast_shadow = True

        if side == LEFT:
            self.left_femur = femur
        else:
            self.right_femur = femur
        return femur

    def create_shoulder(self, side: int) -> Mesh:
        side = normalize_side(side)
        dims = self.dimensions
        size = dims.shoulder_side
        shoulder = Mesh(
            BoxGeometry(size, size, size),
            self.materials["shoulder"],
            name=f"{self._side_name(side)}_shoulder",
        )
        shoulder.position[1] = dims.femur_length / 2 + size / 2
        shoulder.cast_shadow = True

        if side == LEFT:
            self.left_shoulder = shoulder
        else:
            self.right_shoulder = shoulder
        return shoulder

    def create_body(self) -> Mesh:
        dims = self.dimensions
        radius = dims.body_radius
        geometry = CylinderGeometry(radius, radius, dims.body_height, constants.PART_PRECISION)
        body = Mesh(geometry, self.materials["body"], name="body")

        # Offsets are relative to the anchoring shoulder
        body.translate_x(-radius - dims.shoulder_side / 2)
        body.translate_y(-(dims.body_height / 2) + dims.head_radius / 2 + 0.25 * dims.leg_height)
        body.cast_shadow = True

        self.body = body
        body.add(self.create_head())
        return body

    def create_head(self) -> Mesh:
        dims = self.dimensions
        geometry = SphereGeometry(dims.head_radius, constants.PART_PRECISION, constants.PART_PRECISION)
        head = Mesh(geometry, self.materials["head"], name="head")
        head.cast_shadow = True
        head.position[1] = dims.body_height / 2

        head.add(self.create_eye())
        self.head = head
        return head

    def create_eye(self) -> Mesh:
        dims = self.dimensions
        geometry = CylinderGeometry(
            dims.eye_radius,
            dims.eye_radius,
            dims.eye_height,
            constants.PART_PRECISION,
            constants.PART_PRECISION,
        )
        geometry.apply_matrix(rotation_x_matrix(math.pi / 3))
        eye = Mesh(geometry, PhongMaterial(texture=self.metal_texture), name="eye")
        eye.cast_shadow = True
        eye.position[1] = dims.head_radius / 2
        eye.position[2] = dims.head_radius * 0.85
        self.eye = eye
        return eye

    def _create_head_light(self) -> None:
        height = self.dimensions.height
        self.head_light = SpotLight(0xFFFFFF, 3, 100, math.radians(30), 0.5, name="head_light")
        self.head_light.set_position(0, height + 1, 7)
        self.head_light.cast_shadow = True
        self.head_light.shadow_map_size = (2048, 2048)

        self.target = SceneNode(name="head_light_target")
        self.target.set_position(0, 0, 25)
        self.head_light.target = self.target

        self.node.add(self.head_light, self.target)

    def _create_eye_camera(self, aspect: float) -> None:
        height = self.dimensions.height
        self.eye_camera = PerspectiveCamera(45, aspect, 0.1, 1000, name="eye_camera")
        self.eye_camera.set_position(0, height - 1, 3)
        self.node.add(self.eye_camera)
        look = self.node.world_matrix() @ np.array([0.0, height - 1, 10.0, 1.0])
        self.eye_camera.look_at(look[:3])

    @staticmethod
    def _side_name(side: int) -> str:
        return "left" if side == LEFT else "right"

    def femur(self, side: int) -> Mesh:
        return self.left_femur if normalize_side(side) == LEFT else self.right_femur

    def shoulder(self, side: int) -> Mesh:
        return self.left_shoulder if normalize_side(side) == LEFT else self.right_shoulder

    # Joint setters

    def set_head_rotation(self, degrees: float) -> None:
        if self.is_dead:
            return
        angle = self.limits.head_angle.clamp(degrees)
        if angle != degrees:
            logger.debug("Head rotation %s clamped to %s", degrees, angle)
        self._head_angle = angle
        self.head.rotation[1] = math.radians(angle)

    def set_body_rotation(self, degrees: float) -> None:
        if self.is_dead:
            return
        angle = self.limits.body_angle.clamp(degrees)
        if angle != degrees:
            logger.debug("Body rotation %s clamped to %s", degrees, angle)
        self._body_angle = angle
        self.body.rotation[0] = math.radians(angle)

    def set_legs_scale(self, stretch: float) -> None:
        if self.is_dead:
            return
        applied = self.limits.leg_stretch.clamp(stretch)
        if applied != stretch:
            logger.debug("Leg stretch %s clamped to %s", stretch, applied)
        stretch = self._leg_stretch = applied

        dims = self.dimensions
        for femur in (self.right_femur, self.left_femur):
            femur.set_scale(1, stretch, 1)
            femur.position[1] = dims.femur_rest_y
        for shoulder in (self.right_shoulder, self.left_shoulder):
            shoulder.position[1] = dims.femur_length * stretch

    @property
    def head_angle(self) -> float:
        return self._head_angle

    @property
    def body_angle(self) -> float:
        return self._body_angle

    @property
    def leg_stretch(self) -> float:
        return self._leg_stretch

    # Vitality

    @property
    def energy(self) -> float:
        return self.vitality.energy

    @property
    def points(self) -> float:
        return self.vitality.points

    @property
    def is_dead(self) -> bool:
        return self.vitality.is_dead

    def apply_damage(self, amount: float) -> None:
        self.vitality.apply_damage(amount)

    def heal(self, amount: float) -> None:
        self.vitality.heal(amount)

    def add_points(self, amount: float) -> None:
        self.vitality.add_points(amount)

    def snapshot(self) -> Dict[str, Union[float, bool]]:
        return {
            "head_angle": self._head_angle,
            "body_angle": self._body_angle,
            "leg_stretch": self._leg_stretch,
            "energy": self.energy,
            "points": self.points,
            "alive": not self.is_dead,
        }
