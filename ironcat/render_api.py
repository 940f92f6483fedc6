"""Rendering back-end facade, resource library and scene renderer."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Sequence, Union

import numpy as np

from .buffer import IndexBuffer, VertexBuffer
from .camera import OrthographicCamera
from .image import Image, ImageDataFormat, ImageInternalFormat
from .shader import Shader


class SupportedRenderApiType(Enum):
    OPENGL = 0


class Texture(ABC):
    """A texture living on the GPU."""

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def bind(self, slot: int = 0) -> None: ...


class Texture2D(Texture):
    """A two-dimensional texture."""


class VertexArray(ABC):
    """Vertex buffers plus the index buffer that draws them."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...

    @property
    @abstractmethod
    def index_buffer(self) -> IndexBuffer: ...

    @abstractmethod
    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None: ...

    @abstractmethod
    def set_index_buffer(self, index_buffer: IndexBuffer) -> None: ...


class GraphicsContext(ABC):
    """The drawing context bound to a window."""

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def swap_buffer(self) -> None: ...


class RenderApi(ABC):
    """A rendering back end; the class methods forward to the installed one."""

    api_type: ClassVar[SupportedRenderApiType] = SupportedRenderApiType.OPENGL
    _instance: ClassVar[Optional["RenderApi"]] = None

    @staticmethod
    def _backend() -> "RenderApi":
        if RenderApi._instance is None:
            raise RuntimeError("RenderApi has not been initialised")
        return RenderApi._instance

    @classmethod
    def init(cls, backend: "RenderApi") -> None:
        """Install ``backend`` as the back end used by every call."""
        if not isinstance(backend, RenderApi):
            raise TypeError(f"expected a RenderApi back end, got {type(backend).__name__}")
        RenderApi._instance = backend

    @classmethod
    def used_api(cls) -> SupportedRenderApiType:
        return cls._backend().api_type

    @classmethod
    def set_clear_color(cls, color) -> None:
        cls._backend()._set_clear_color(np.asarray(color, dtype=float))

    @classmethod
    def clear(cls) -> None:
        cls._backend()._clear()

    @classmethod
    def draw_indexed(cls, vertex_array: VertexArray) -> None:
        cls._backend()._draw_indexed(vertex_array)

    @classmethod
    def convert_image_internal_format(cls, image_format: ImageInternalFormat) -> int:
        return cls._backend()._convert_image_internal_format(image_format)

    @classmethod
    def convert_image_data_format(cls, image_format: ImageDataFormat) -> int:
        return cls._backend()._convert_image_data_format(image_format)

    @classmethod
    def create_index_buffer(cls, indices: Sequence[int]) -> IndexBuffer:
        return cls._backend()._create_index_buffer(list(indices))

    @classmethod
    def create_vertex_buffer(cls, vertices: Sequence[float]) -> VertexBuffer:
        return cls._backend()._create_vertex_buffer([float(v) for v in vertices])

    @classmethod
    def create_vertex_array(cls) -> VertexArray:
        return cls._backend()._create_vertex_array()

    @classmethod
    def create_texture2d(cls, name: str, image: Image) -> Texture2D:
        """Create a texture from ``image`` and register it under ``name``."""
        texture = cls._backend()._create_texture2d(image)
        RenderApiLibrary.add_texture(name, texture)
        return texture

    @classmethod
    def create_shader(cls, name: str, file_path: Union[str, os.PathLike]) -> Shader:
        """Create a shader from ``file_path`` and register it under ``name``."""
        shader = cls._backend()._create_shader(file_path)
        RenderApiLibrary.add_shader(name, shader)
        return shader

    @abstractmethod
    def _set_clear_color(self, color: np.ndarray) -> None: ...

    @abstractmethod
    def _clear(self) -> None: ...

    @abstractmethod
    def _draw_indexed(self, vertex_array: VertexArray) -> None: ...

    @abstractmethod
    def _convert_image_internal_format(self, image_format: ImageInternalFormat) -> int: ...

    @abstractmethod
    def _convert_image_data_format(self, image_format: ImageDataFormat) -> int: ...

    @abstractmethod
    def _create_index_buffer(self, indices: list[int]) -> IndexBuffer: ...

    @abstractmethod
    def _create_vertex_buffer(self, vertices: list[float]) -> VertexBuffer: ...

    @abstractmethod
    def _create_vertex_array(self) -> VertexArray: ...

    @abstractmethod
    def _create_texture2d(self, image: Image) -> Texture2D: ...

    @abstractmethod
    def _create_shader(self, file_path: Union[str, os.PathLike]) -> Shader: ...


class RenderApiLibrary:
    """Shaders and textures registered by name."""

    _shaders: ClassVar[dict[str, Shader]] = {}
    _textures: ClassVar[dict[str, Texture2D]] = {}

    @classmethod
    def add_shader(cls, name: str, shader: Shader) -> None:
        RenderApiLibrary._shaders[name] = shader

    @classmethod
    def get_shader(cls, name: str) -> Shader:
        try:
            return RenderApiLibrary._shaders[name]
        except KeyError:
            raise KeyError(f"no shader named {name!r}") from None

    @classmethod
    def add_texture(cls, name: str, texture: Texture2D) -> None:
        RenderApiLibrary._textures[name] = texture

    @classmethod
    def get_texture(cls, name: str) -> Texture:
        try:
            return RenderApiLibrary._textures[name]
        except KeyError:
            raise KeyError(f"no texture named {name!r}") from None


@dataclass
class _SceneData:
    view_projection_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    in_scene: bool = False


class Renderer:
    """Draws vertex arrays with the camera of the current scene."""

    scene_data: ClassVar[_SceneData] = _SceneData()

    @classmethod
    def begin_scene(cls, camera: OrthographicCamera) -> None:
        Renderer.scene_data.view_projection_matrix = camera.view_projection_matrix
        Renderer.scene_data.in_scene = True

    @classmethod
    def end_scene(cls) -> None:
        """Finish the current scene; nothing is batched, so nothing is flushed."""
        Renderer.scene_data.in_scene = False

    @classmethod
    def submit(cls, vertex_array: VertexArray, shader: Shader, transform) -> None:
        """Bind ``shader``, upload the scene and object matrices, and draw."""
        shader.bind()
        if RenderApi.used_api() is SupportedRenderApiType.OPENGL:
            shader.set_uniform_mat4(
                "u_ViewProjectionMatrix", Renderer.scene_data.view_projection_matrix
            )
            shader.set_uniform_mat4("u_Transform", np.asarray(transform, dtype=float))
        vertex_array.bind()
        RenderApi.draw_indexed(vertex_array)