"""Sample game: a movable camera over a grid of textured quads."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .application import GameApplication
from .buffer import BufferElement, BufferElementsLayout, ShaderDataType
from .camera import OrthographicCamera
from .events import Key
from .image import Image
from .layers import GameMode, Layer
from .render_api import RenderApi, Renderer, Texture2D, VertexArray
from .shader import Shader
from .transform import Transform
from .window import Window

MAX_TRANSFORMS = 10
CELL_SPACING = 0.2
CELL_SCALE = 0.6
CLEAR_COLOR = (0.2, 0.2, 0.2, 1.0)

SHADER_NAME = "standart"
TEXTURE_NAME = "water"
SHADER_PATH = Path("Assets") / "staticOpjectShader.glsl"
TEXTURE_PATH = Path("Assets") / "MinerBlue.png"

# Position (x, y, z) followed by texture coordinates (u, v) for each corner.
QUAD_VERTICES = (
    1.0, 1.0, 0.0, 1.0, 1.0,
    1.0, -1.0, 0.0, 1.0, 0.0,
    -1.0, -1.0, 0.0, 0.0, 0.0,
    -1.0, 1.0, 0.0, 0.0, 1.0,
)
QUAD_INDICES = (0, 1, 3, 1, 2, 3)

CAMERA_MOVES = {
    Key.W: (0.0, 1.0, 0.0),
    Key.A: (-1.0, 0.0, 0.0),
    Key.S: (0.0, -1.0, 0.0),
    Key.D: (1.0, 0.0, 0.0),
}
CAMERA_TURNS = {Key.Q: 5.0, Key.E: -5.0}


class SandBox(GameMode):
    """Moves the camera with W/A/S/D and turns it with Q/E."""

    def __init__(self) -> None:
        self.camera = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
        self.camera.position = (0.0, 0.0, 0.0)

    def on_begin(self) -> None:
        RenderApi.set_clear_color(CLEAR_COLOR)

    def on_begin_render_frame(self) -> None:
        user_input = Window.get().input
        delta = GameApplication.get().delta_time
        for key, direction in CAMERA_MOVES.items():
            if user_input.is_key_pressed(key):
                self.camera.position = self.camera.position + np.asarray(direction) * delta
        for key, speed in CAMERA_TURNS.items():
            if user_input.is_key_pressed(key):
                self.camera.rotation = self.camera.rotation + speed * delta

    def on_end_render_frame(self) -> None:
        RenderApi.clear()


class ColorChooseLayer(Layer):
    """Holds four editable colours."""

    def __init__(self) -> None:
        super().__init__("ColorChooseLayer")
        self.colors = [np.zeros(3) for _ in range(4)]


def create_transforms(count: int) -> list[Transform]:
    """A ``count`` by ``count`` grid of scaled transforms, row by row."""
    return [
        Transform(position=(j * CELL_SPACING, i * CELL_SPACING, 0.0), scale=CELL_SCALE)
        for i in range(count)
        for j in range(count)
    ]


class RenderCellLayer(Layer):
    """Draws a textured quad at every cell of the grid."""

    def __init__(
        self,
        camera: OrthographicCamera,
        color_choose: ColorChooseLayer,
        shader_path: Union[str, os.PathLike] = SHADER_PATH,
        texture_path: Union[str, os.PathLike] = TEXTURE_PATH,
    ) -> None:
        super().__init__("RenderTriangleLayer")
        self.camera = camera
        self.color_choose = color_choose
        self.shader_path = shader_path
        self.texture_path = texture_path
        self.transforms: list[Transform] = []
        self.vertex_array: Optional[VertexArray] = None
        self.shader: Optional[Shader] = None
        self.texture: Optional[Texture2D] = None

    def on_attach(self) -> None:
        self.transforms = create_transforms(MAX_TRANSFORMS)

        vertex_buffer = RenderApi.create_vertex_buffer(QUAD_VERTICES)
        vertex_buffer.layout = BufferElementsLayout(
            [
                BufferElement("a_Position", ShaderDataType.FLOAT3),
                BufferElement("a_TexCoord", ShaderDataType.FLOAT2),
            ]
        )
        index_buffer = RenderApi.create_index_buffer(QUAD_INDICES)

        self.vertex_array = RenderApi.create_vertex_array()
        self.vertex_array.add_vertex_buffer(vertex_buffer)
        self.vertex_array.set_index_buffer(index_buffer)

        self.shader = RenderApi.create_shader(SHADER_NAME, self.shader_path)
        self.texture = RenderApi.create_texture2d(TEXTURE_NAME, Image(self.texture_path))
        self.texture.bind()
        self.shader.set_uniform_int("u_Texture", 0)

    def on_update(self) -> None:
        if self.vertex_array is None or self.shader is None:
            raise RuntimeError("RenderCellLayer has not been attached")
        Renderer.begin_scene(self.camera)
        for transform in self.transforms:
            Renderer.submit(self.vertex_array, self.shader, transform.world_matrix)
        Renderer.end_scene()


def setup_app_settings(app: GameApplication) -> None:
    """Install the sandbox game mode and its layers into ``app``."""
    game_mode = SandBox()
    color_layer = ColorChooseLayer()
    app.set_game_mode(game_mode)
    app.add_layer(color_layer)
    app.add_layer(RenderCellLayer(game_mode.camera, color_layer))