"""
Game scene
Root of the scene graph: lights, camera, axis helper, the environment model
and the robot.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from core.config import RobotConfig, SceneConfig
from core.constants import MIN_DIFFICULTY, CameraMode, PlatformAction
from figure.robot import Robot
from scene.graph import AmbientLight, AxisHelper, PerspectiveCamera, SceneNode, SpotLight
from scene.materials import BasicMaterial, PhongMaterial
from scene.textures import TextureLoader
from world.props import GameField, Platform, Sky

logger = logging.getLogger(__name__)


class GameScene:
    """Composes the renderable scene around a single robot."""

    def __init__(
        self,
        config: SceneConfig,
        robot_config: Optional[RobotConfig] = None,
        aspect: float = 1.0,
        texture_loader: Optional[TextureLoader] = None,
    ) -> None:
        self.config = config
        self.robot_config = robot_config or RobotConfig()
        self.aspect = aspect
        self.textures = texture_loader or TextureLoader()

        self.root = SceneNode(name="scene")
        self.difficulty = MIN_DIFFICULTY
        self.camera_mode = CameraMode.NORMAL_CAMERA

        self.ambient_light: Optional[AmbientLight] = None
        self.spot_light: Optional[SpotLight] = None
        self.camera: Optional[PerspectiveCamera] = None

        self._create_lights()
        self._create_camera()
        self.axis = AxisHelper(config.axis_size)
        self.root.add(self.axis)
        self.model = self._create_model()
        self.root.add(self.model)

        self.robot: Optional[Robot] = None
        self.new_robot()
        self.set_difficulty(config.difficulty)
        logger.info("Scene built (%d nodes)", sum(1 for _ in self.root.traverse()))

    def _create_camera(self) -> None:
        cfg = self.config.camera
        self.camera = PerspectiveCamera(cfg.fov, self.aspect, cfg.near, cfg.far)
        self.camera.set_position(*cfg.position)
        self.camera.look_at(cfg.look_at)
        self.root.add(self.camera)

    def _create_lights(self) -> None:
        ambient = self.config.ambient_light
        self.ambient_light = AmbientLight(ambient.color, ambient.intensity)
        self.root.add(self.ambient_light)

        spot = self.config.spot_light
        self.spot_light = SpotLight(spot.color, spot.intensity)
        self.spot_light.set_position(*spot.position)
        self.spot_light.cast_shadow = True
        self.spot_light.shadow_map_size = (spot.shadow_map_size, spot.shadow_map_size)
        self.root.add(self.spot_light)

    def _create_model(self) -> SceneNode:
        model = SceneNode(name="model")
        cfg = self.config

        floor_texture = self.textures.load(cfg.floor_texture)
        walls_texture = self.textures.load(cfg.walls_texture)
        sky_texture = self.textures.load(cfg.sky_texture)

        self.game_field = GameField(
            cfg.field_width,
            cfg.field_depth,
            PhongMaterial(color=0x808080, texture=floor_texture),
            cfg.wall_thickness,
            cfg.wall_height,
            PhongMaterial(color=0x996644, texture=walls_texture),
        )
        self.sky = Sky(BasicMaterial(color=0x101830, texture=sky_texture), radius=cfg.camera.far * 0.8)
        platform_width = 40.0
        self.platform = Platform(
            PhongMaterial(color=0x4466AA),
            width=platform_width,
            limit=(cfg.field_width - platform_width) / 2,
        )

        model.add(self.game_field.node, self.sky.node, self.platform.node)
        return model

    def new_robot(self) -> Robot:
        """Replace the current robot, as a whole, with a fresh one."""
        if self.robot is not None:
            self.model.remove(self.robot.node)
        self.robot = Robot(
            height=self.robot_config.height,
            width=self.robot_config.width,
            texture_loader=self.textures,
            metal_texture=self.robot_config.metal_texture,
            aspect=self.aspect,
        )
        self.robot.position[0] = self.platform.node.position[0]
        self.robot.position[1] = self.platform.top
        self.model.add(self.robot.node)
        return self.robot

    def animate(self, controls) -> None:
        """Apply one frame of GUI state.

        ``controls`` provides axis, difficulty, head_rotation, body_rotation,
        leg_stretch and camera_mode.
        """
        self.axis.visible = controls.axis
        self.set_difficulty(controls.difficulty)
        self.set_camera_mode(controls.camera_mode)
        self.robot.set_head_rotation(controls.head_rotation)
        self.robot.set_body_rotation(controls.body_rotation)
        self.robot.set_legs_scale(controls.leg_stretch)

    def get_camera(self) -> PerspectiveCamera:
        if self.camera_mode == CameraMode.EYE_CAMERA:
            return self.robot.eye_camera
        return self.camera

    def set_camera_mode(self, mode: CameraMode) -> None:
        self.camera_mode = CameraMode(mode)

    def set_camera_aspect(self, aspect: float) -> None:
        self.aspect = aspect
        for camera in (self.camera, self.robot.eye_camera):
            camera.aspect = aspect
            camera.update_projection_matrix()

    def move_platform(self, action: PlatformAction) -> None:
        self.platform.move(action)
        self.robot.position[0] = self.platform.node.position[0]

    def set_difficulty(self, level: float) -> None:
        self.difficulty = max(MIN_DIFFICULTY, int(math.floor(level)))
