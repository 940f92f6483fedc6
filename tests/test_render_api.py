import numpy as np
import pytest

from ironcat.buffer import IndexBuffer
from ironcat.camera import OrthographicCamera
from ironcat.image import ImageDataFormat, ImageInternalFormat
from ironcat.render_api import (
    RenderApi,
    RenderApiLibrary,
    Renderer,
    SupportedRenderApiType,
    Texture,
    Texture2D,
    VertexArray,
)
from ironcat.shader import Shader


class FakeIndexBuffer(IndexBuffer):
    def __init__(self, indices):
        self.indices = indices

    def bind(self):
        pass

    def unbind(self):
        pass

    @property
    def count(self):
        return len(self.indices)


class FakeShader(Shader):
    def __init__(self, log, path=None):
        self.log = log
        self.path = path
        self.uniforms = {}

    def bind(self):
        self.log.append("shader.bind")

    def unbind(self):
        pass

    def set_uniform_mat4(self, name, value):
        self.log.append(f"uniform:{name}")
        self.uniforms[name] = value


class FakeTexture(Texture2D):
    def __init__(self, image):
        self.image = image

    @property
    def width(self):
        return 2

    @property
    def height(self):
        return 2

    def bind(self, slot=0):
        pass


class FakeVertexArray(VertexArray):
    def __init__(self, log):
        self.log = log
        self._index = None

    def bind(self):
        self.log.append("va.bind")

    def unbind(self):
        pass

    @property
    def index_buffer(self):
        return self._index

    def add_vertex_buffer(self, vertex_buffer):
        pass

    def set_index_buffer(self, index_buffer):
        self._index = index_buffer


FORMATS = {
    ImageInternalFormat.RGB8: 0x8051,
    ImageInternalFormat.RGBA8: 0x8058,
    ImageDataFormat.RGB: 0x1907,
    ImageDataFormat.RGBA: 0x1908,
}


class FakeBackend(RenderApi):
    def __init__(self):
        self.log = []
        self.clear_color = None

    def _set_clear_color(self, color):
        self.clear_color = color

    def _clear(self):
        self.log.append("clear")

    def _draw_indexed(self, vertex_array):
        self.log.append(f"draw:{vertex_array.index_buffer.count}")

    def _convert_image_internal_format(self, image_format):
        return FORMATS[image_format]

    def _convert_image_data_format(self, image_format):
        return FORMATS[image_format]

    def _create_index_buffer(self, indices):
        return FakeIndexBuffer(indices)

    def _create_vertex_buffer(self, vertices):
        return vertices

    def _create_vertex_array(self):
        return FakeVertexArray(self.log)

    def _create_texture2d(self, image):
        return FakeTexture(image)

    def _create_shader(self, file_path):
        return FakeShader(self.log, file_path)


@pytest.fixture
def backend():
    instance = FakeBackend()
    RenderApi.init(instance)
    return instance


def test_used_api(backend):
    assert RenderApi.used_api() is SupportedRenderApiType.OPENGL


def test_init_rejects_non_backend():
    with pytest.raises(TypeError):
        RenderApi.init(object())


def test_clear_color_and_clear_forwarded(backend):
    RenderApi.set_clear_color((0.2, 0.2, 0.2, 1))
    RenderApi.clear()
    np.testing.assert_allclose(backend.clear_color, [0.2, 0.2, 0.2, 1.0])
    assert backend.log == ["clear"]


def test_format_conversion_forwarded(backend):
    assert RenderApi.convert_image_internal_format(ImageInternalFormat.RGBA8) == FORMATS[ImageInternalFormat.RGBA8]
    assert RenderApi.convert_image_data_format(ImageDataFormat.RGB) == FORMATS[ImageDataFormat.RGB]


def test_create_index_buffer_keeps_indices(backend):
    buffer = RenderApi.create_index_buffer((0, 1, 3, 1, 2, 3))
    assert buffer.indices == [0, 1, 3, 1, 2, 3]
    assert buffer.count == 6


def test_create_shader_registers_it(backend):
    shader = RenderApi.create_shader("standart", "shader.glsl")
    assert RenderApiLibrary.get_shader("standart") is shader
    assert shader.path == "shader.glsl"


def test_create_texture_registers_it(backend):
    texture = RenderApi.create_texture2d("water", "image")
    assert RenderApiLibrary.get_texture("water") is texture


def test_library_missing_name_raises():
    with pytest.raises(KeyError):
        RenderApiLibrary.get_shader("no-such-shader")
    with pytest.raises(KeyError):
        RenderApiLibrary.get_texture("no-such-texture")


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_submit_uploads_matrices_and_draws(backend):
    camera = OrthographicCamera(-1.0, 1.0, -1.0, 1.0)
    camera.position = (1.0, 2.0, 0.0)
    shader = FakeShader(backend.log)
    vertex_array = RenderApi.create_vertex_array()
    vertex_array.set_index_buffer(RenderApi.create_index_buffer([0, 1, 2]))
    transform = np.identity(4)
    transform[0, 3] = 5.0

    Renderer.begin_scene(camera)
    Renderer.submit(vertex_array, shader, transform)
    Renderer.end_scene()

    np.testing.assert_allclose(
        shader.uniforms["u_ViewProjectionMatrix"], camera.view_projection_matrix
    )
    np.testing.assert_allclose(shader.uniforms["u_Transform"], transform)
    assert backend.log == [
        "shader.bind",
        "uniform:u_ViewProjectionMatrix",
        "uniform:u_Transform",
        "va.bind",
        "draw:3",
    ]