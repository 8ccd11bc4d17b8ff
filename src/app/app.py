"""Top-level application orchestration."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from app.controls import Controls
from core.config import AppConfig
from rendering.renderer import Renderer
from utils.clock import FrameClock
from world.scene import GameScene

logger = logging.getLogger(__name__)

HELP_LINE = "A/D head  W/S body  Q/E legs  C camera  X axis  +/- difficulty  <-/-> platform  ESC quit"


@dataclass
class RobotArenaApp:
    app_config: AppConfig

    def __post_init__(self) -> None:
        pygame.init()
        window = self.app_config.window
        pygame.display.set_caption(window.title)

        flags = pygame.OPENGL | pygame.DOUBLEBUF
        if window.fullscreen:
            flags |= pygame.FULLSCREEN
        self.screen = pygame.display.set_mode(window.size, flags)

        self.clock = FrameClock(target_fps=window.target_fps)
        self.controls = Controls(difficulty=self.app_config.scene.difficulty)
        self.scene = GameScene(
            self.app_config.scene,
            robot_config=self.app_config.robot,
            aspect=window.aspect,
        )
        self.renderer = Renderer(window.size, background_color=window.background_color)

    def run(self) -> None:
        running = True
        while running:
            self.clock.tick()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_n:
                    self.scene.new_robot()
                action = self.controls.handle_event(event)
                if action is not None:
                    self.scene.move_platform(action)

            self.scene.animate(self.controls)

            robot = self.scene.robot
            self.renderer.hud_lines = [
                HELP_LINE,
                f"Energy: {robot.energy}   Points: {robot.points}   Difficulty: {self.scene.difficulty}   FPS: {self.clock.fps:.0f}",
                f"Head: {robot.head_angle:.0f}°  Body: {robot.body_angle:.0f}°  Legs: {robot.leg_stretch:.2f}",
            ]
            self.renderer.render(self.scene.root, self.scene.get_camera())

        self.renderer.shutdown()
        pygame.quit()
        logger.info("Application closed")
