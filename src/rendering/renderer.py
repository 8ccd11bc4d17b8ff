#!/usr/bin/env python3
"""
Renderer for the game scene
Rasterizes the scene graph into a software surface, then presents that
surface through OpenGL as a single textured quad.
"""

import ctypes
from array import array
from typing import Optional, Tuple

import pygame
from OpenGL.GL import (
    glAttachShader,
    glBindBuffer,
    glBindTexture,
    glBufferData,
    glClear,
    glClearColor,
    glCompileShader,
    glCreateProgram,
    glCreateShader,
    glDeleteBuffers,
    glDeleteProgram,
    glDeleteShader,
    glDeleteTextures,
    glDrawArrays,
    glEnableVertexAttribArray,
    glGenBuffers,
    glGenTextures,
    glGetAttribLocation,
    glGetProgramInfoLog,
    glGetProgramiv,
    glGetShaderInfoLog,
    glGetShaderiv,
    glGetUniformLocation,
    glLinkProgram,
    glShaderSource,
    glTexImage2D,
    glTexParameteri,
    glTexSubImage2D,
    glUniform1i,
    glUseProgram,
    glVertexAttribPointer,
    glViewport,
    GL_ARRAY_BUFFER,
    GL_COLOR_BUFFER_BIT,
    GL_COMPILE_STATUS,
    GL_FLOAT,
    GL_FRAGMENT_SHADER,
    GL_LINEAR,
    GL_LINK_STATUS,
    GL_RGBA,
    GL_STATIC_DRAW,
    GL_TEXTURE_2D,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_MIN_FILTER,
    GL_TRIANGLE_STRIP,
    GL_UNSIGNED_BYTE,
    GL_VERTEX_SHADER,
)

from rendering.rasterizer import SceneRasterizer
from scene.graph import PerspectiveCamera, SceneNode

VERTEX_SOURCE = """
attribute vec2 a_position;
attribute vec2 a_texcoord;
varying vec2 v_texcoord;
void main() {
    v_texcoord = a_texcoord;
    gl_Position = vec4(a_position, 0.0, 1.0);
}
"""

FRAGMENT_SOURCE = """
precision mediump float;
varying vec2 v_texcoord;
uniform sampler2D u_texture;
void main() {
    gl_FragColor = texture2D(u_texture, v_texcoord);
}
"""


class Renderer:
    """OpenGL-backed renderer that composites a software surface and presents via GL."""

    def __init__(
        self,
        screen_size: Tuple[int, int],
        background_color: Tuple[int, int, int] = (0, 0, 0),
        rasterizer: Optional[SceneRasterizer] = None,
    ):
        """Initialize the renderer.

        Args:
            screen_size: (width, height) of the display
            background_color: Fill color behind the scene
            rasterizer: Scene rasterizer drawing onto the software surface
        """
        self.screen_width, self.screen_height = screen_size
        self.background_color = background_color
        self.render_surface = pygame.Surface(screen_size)
        self.rasterizer = rasterizer or SceneRasterizer()
        self.hud_lines = []
        self._font = None
        self._program = None
        self._vbo = None
        self._texture = None
        self._position_loc = None
        self._texcoord_loc = None
        self._texture_loc = None
        self._init_gl()

    def _compile_shader(self, shader_type: int, source: str) -> int:
        shader = glCreateShader(shader_type)
        glShaderSource(shader, source)
        glCompileShader(shader)
        status = glGetShaderiv(shader, GL_COMPILE_STATUS)
        if not status:
            log = glGetShaderInfoLog(shader).decode("utf-8")
            glDeleteShader(shader)
            raise RuntimeError(f"Shader compile failed: {log}")
        return shader

    def _init_gl(self) -> None:
        glViewport(0, 0, self.screen_width, self.screen_height)
        vertex_shader = self._compile_shader(GL_VERTEX_SHADER, VERTEX_SOURCE)
        fragment_shader = self._compile_shader(GL_FRAGMENT_SHADER, FRAGMENT_SOURCE)
        program = glCreateProgram()
        glAttachShader(program, vertex_shader)
        glAttachShader(program, fragment_shader)
        glLinkProgram(program)
        status = glGetProgramiv(program, GL_LINK_STATUS)
        if not status:
            log = glGetProgramInfoLog(program).decode("utf-8")
            glDeleteProgram(program)
            raise RuntimeError(f"Program link failed: {log}")
        glDeleteShader(vertex_shader)
        glDeleteShader(fragment_shader)
        self._program = program
        self._position_loc = glGetAttribLocation(program, "a_position")
        self._texcoord_loc = glGetAttribLocation(program, "a_texcoord")
        self._texture_loc = glGetUniformLocation(program, "u_texture")

        quad_vertices = [
            -1.0, -1.0, 0.0, 0.0,
             1.0, -1.0, 1.0, 0.0,
            -1.0,  1.0, 0.0, 1.0,
             1.0,  1.0, 1.0, 1.0,
        ]
        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(
            GL_ARRAY_BUFFER,
            len(quad_vertices) * 4,
            array("f", quad_vertices).tobytes(),
            GL_STATIC_DRAW,
        )
        self._vbo = vbo

        texture = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, texture)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glTexImage2D(
            GL_TEXTURE_2D,
            0,
            GL_RGBA,
            self.screen_width,
            self.screen_height,
            0,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            None,
        )
        self._texture = texture

    def render(self, root: SceneNode, camera: PerspectiveCamera) -> None:
        """
        Draw the scene and any HUD lines, then present the frame
        This is the only method that should write to the screen
        """
        self.render_surface.fill(self.background_color)
        self.rasterizer.draw(self.render_surface, root, camera)
        self._draw_hud()
        self._present()

    def _draw_hud(self) -> None:
        if not self.hud_lines:
            return
        if self._font is None:
            self._font = pygame.font.SysFont("consolas", 18, bold=True)
        for index, line in enumerate(self.hud_lines):
            text = self._font.render(line, True, (240, 240, 240))
            self.render_surface.blit(text, (18, 12 + index * 22))

    def _present(self) -> None:
        raw = pygame.image.tostring(self.render_surface, "RGBA", True)
        glBindTexture(GL_TEXTURE_2D, self._texture)
        glTexSubImage2D(
            GL_TEXTURE_2D,
            0,
            0,
            0,
            self.screen_width,
            self.screen_height,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            raw,
        )
        glClearColor(0.0, 0.0, 0.0, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)
        glUseProgram(self._program)
        glBindBuffer(GL_ARRAY_BUFFER, self._vbo)
        glEnableVertexAttribArray(self._position_loc)
        glVertexAttribPointer(self._position_loc, 2, GL_FLOAT, False, 16, ctypes.c_void_p(0))
        glEnableVertexAttribArray(self._texcoord_loc)
        glVertexAttribPointer(self._texcoord_loc, 2, GL_FLOAT, False, 16, ctypes.c_void_p(8))
        glUniform1i(self._texture_loc, 0)
        glDrawArrays(GL_TRIANGLE_STRIP, 0, 4)
        pygame.display.flip()

    def shutdown(self) -> None:
        if self._program is not None:
            glDeleteProgram(self._program)
        if self._texture is not None:
            glDeleteTextures([self._texture])
        if self._vbo is not None:
            glDeleteBuffers(1, [self._vbo])
