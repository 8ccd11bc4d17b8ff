"""Configuration models and loaders."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class WindowConfig:
    size: Tuple[int, int]
    fullscreen: bool
    title: str
    target_fps: int
    background_color: Tuple[int, int, int]

    @property
    def aspect(self) -> float:
        width, height = self.size
        return width / height


@dataclass(frozen=True)
class RobotConfig:
    height: float = 21.0
    width: float = 12.5
    metal_texture: Optional[str] = "img/metal.jpg"


@dataclass(frozen=True)
class LightConfig:
    color: int
    intensity: float
    position: Vec3 = (0.0, 0.0, 0.0)
    shadow_map_size: int = 2048


@dataclass(frozen=True)
class CameraConfig:
    fov: float
    near: float
    far: float
    position: Vec3
    look_at: Vec3


@dataclass(frozen=True)
class SceneConfig:
    field_width: float
    field_depth: float
    wall_thickness: float
    wall_height: float
    floor_texture: Optional[str]
    walls_texture: Optional[str]
    sky_texture: Optional[str]
    camera: CameraConfig
    ambient_light: LightConfig
    spot_light: LightConfig
    axis_size: float = 25.0
    difficulty: int = 1


@dataclass(frozen=True)
class AppConfig:
    window: WindowConfig
    robot: RobotConfig
    scene: SceneConfig


def _load_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text())


def _vec3(values) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _load_light(payload: Dict[str, Any]) -> LightConfig:
    return LightConfig(
        color=int(str(payload["color"]), 0),
        intensity=payload["intensity"],
        position=_vec3(payload.get("position", (0.0, 0.0, 0.0))),
        shadow_map_size=payload.get("shadow_map_size", 2048),
    )


def load_robot_config(payload: Dict[str, Any]) -> RobotConfig:
    defaults = RobotConfig()
    return RobotConfig(
        height=payload.get("height", defaults.height),
        width=payload.get("width", defaults.width),
        metal_texture=payload.get("metal_texture", defaults.metal_texture),
    )


def load_scene_config(payload: Dict[str, Any]) -> SceneConfig:
    camera = CameraConfig(
        fov=payload["camera"]["fov"],
        near=payload["camera"]["near"],
        far=payload["camera"]["far"],
        position=_vec3(payload["camera"]["position"]),
        look_at=_vec3(payload["camera"]["look_at"]),
    )

    return SceneConfig(
        field_width=payload["field"]["width"],
        field_depth=payload["field"]["depth"],
        wall_thickness=payload["field"]["wall_thickness"],
        wall_height=payload["field"]["wall_height"],
        floor_texture=payload["textures"].get("floor"),
        walls_texture=payload["textures"].get("walls"),
        sky_texture=payload["textures"].get("sky"),
        camera=camera,
        ambient_light=_load_light(payload["ambient_light"]),
        spot_light=_load_light(payload["spot_light"]),
        axis_size=payload.get("axis_size", 25.0),
        difficulty=payload.get("difficulty", 1),
    )


def load_app_config(path: Path) -> AppConfig:
    payload = _load_json(path)

    window = WindowConfig(
        size=tuple(payload["window"]["size"]),
        fullscreen=payload["window"]["fullscreen"],
        title=payload["window"]["title"],
        target_fps=payload["window"]["target_fps"],
        background_color=tuple(payload["window"]["background_color"]),
    )

    robot = load_robot_config(payload.get("robot", {}))
    scene = load_scene_config(payload["scene"])

    return AppConfig(window=window, robot=robot, scene=scene)
