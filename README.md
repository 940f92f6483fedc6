# ironcat

A small 2D game engine core. It provides the pieces a game loop is built
from. The drawing itself is left to a window and render backend that you
supply.

## Modules

- `ironcat.events` defines the key, modifier, mouse button, joystick, gamepad
  button and gamepad axis codes (`Key`, `Mod`, `MouseButton`, `Joystick`,
  `GamepadButton`, `GamepadAxis`). It also defines the event classes:
  - window and application events, such as `WindowResizeEvent`,
    `WindowCloseEvent` and `AppTickEvent`;
  - key events, such as `KeyPressedEvent`, `KeyReleasedEvent` and
    `KeyTypedEvent`;
  - mouse events, such as `MouseMovedEvent`, `MouseScrolledEvent` and
    `MouseButtonPressedEvent`.

  Each event has an `EventType` and `EventCategory` flags. You can test an
  event with `Event.is_in_category`. `EventDispatcher.dispatch(event_class, func)`
  calls `func` only when the event has that class's type, and stores the
  result in `event.handled`.
- `ironcat.frametime` has two classes. `FrameTime.next_frame(now)` updates
  `delta_time`. `TimeStep(seconds)` offers `milliseconds`, `minutes`, `hours`
  and `days`.
- `ironcat.transform.Transform` holds a position, a rotation in degrees and a
  scale, plus an optional `owner`. The owner's values are added in by
  `world_position()`, `world_rotation()` and `world_scale()`. `world_matrix`
  is recomputed whenever a property changes. `local_matrix()` builds a matrix
  on demand. All vectors and matrices are numpy arrays.
- `ironcat.camera.OrthographicCamera(left, right, bottom, top)` has a
  `position` and a `rotation` in radians about the z axis. It exposes
  `projection_matrix`, `view_matrix` and `view_projection_matrix`.
- `ironcat.buffer` covers vertex data:
  - `ShaderDataType`, and `shader_data_type_size`, which raises `ValueError`
    for `NONE`;
  - `BufferElement` and `BufferElementsLayout`, which computes each element's
    `offset` and the layout's `stride`;
  - the abstract `VertexBuffer` and `IndexBuffer`.
- `ironcat.shader` works with shader sources:
  - `preprocess_shader_source` splits a source made of `#type vertex` and
    `#type fragment` sections into a dict keyed by `ShaderStage`. It raises
    `ValueError` on an unknown stage or a malformed header.
  - `read_shader_file` reads a file as text.
  - `Shader` is the abstract program interface.
- `ironcat.image.Image(path)` loads a file through Pillow and exposes its
  pixels as 8-bit RGB or RGBA bytes. Palette images are expanded first. Any
  other mode raises `ValueError`. The image also gives its `width`, `height`,
  `channels`, `internal_format` and `data_format`.
- `ironcat.log` provides `init()`, which sets up two loggers that write to
  standard output. You get them with `core_logger()` (named `GoblinEngine`)
  and `client_logger()` (named `App`). Both log at DEBUG level.
- `ironcat.layers` has three classes:
  - `Layer` has hooks (`on_attach`, `on_detach`, `on_update`,
    `on_imgui_render`, `on_event`).
  - `LayerList` keeps layers in insertion order. Its `close()`, also run when
    it is used as a context manager, detaches every layer.
  - `GameMode` has game-wide hooks.
- `ironcat.window` has three classes:
  - `WindowProps` has the defaults "IronCat Engine", 1280 × 1280.
  - `Input` is abstract.
  - `Window` is abstract. It has a current instance managed with
    `Window.set_instance`, `Window.get` and `Window.delete_instance`.
- `ironcat.render_api` has three main classes:
  - `RenderApi` is a facade. Its class methods (`set_clear_color`, `clear`,
    `draw_indexed`, `create_vertex_buffer`, `create_index_buffer`,
    `create_vertex_array`, `create_shader`, `create_texture2d`, ...) forward
    to the backend installed with `RenderApi.init(backend)`.
  - `RenderApiLibrary` keeps shaders and textures by name.
  - `Renderer` runs `begin_scene(camera)`, `submit(vertex_array, shader,
    transform)` and `end_scene()`. The shader passed to `submit` must have
    `set_uniform_mat4(name, matrix)`.

  The module also defines the abstract `Texture`, `Texture2D`, `VertexArray`
  and `GraphicsContext`.
- `ironcat.application.GameApplication` is the application singleton:
  - `GameApplication.init()` needs a current `Window`, and registers
    `on_event` as that window's event callback.
  - `run(ui_layer)` calls the game mode and every layer once per frame, until
    `stop()` is called.
  - `ui_layer` must also have `start()` and `end()` methods.
  - `on_event` passes an event to every layer and then calls the game mode's
    `on_end`.
  - `GameApplication.deinit()` detaches all layers.
- `ironcat.sandbox` is a sample game. `setup_app_settings(app)` installs these
  parts:
  - `SandBox` moves the camera with W/A/S/D and turns it with Q/E, scaled by
    the frame's delta time.
  - `ColorChooseLayer` holds four colours.
  - `RenderCellLayer` draws a textured quad on each cell of a 10 × 10 grid
    built by `create_transforms`. It loads `Assets/staticOpjectShader.glsl`
    and `Assets/MinerBlue.png` by default.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from ironcat.buffer import BufferElement, BufferElementsLayout, ShaderDataType
from ironcat.events import EventCategory, EventDispatcher, Key, KeyPressedEvent
from ironcat.frametime import FrameTime
from ironcat.shader import ShaderStage, preprocess_shader_source
from ironcat.transform import Transform

event = KeyPressedEvent(Key.W, 0)
assert event.is_in_category(EventCategory.KEYBOARD)
assert EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: True)
assert event.handled

clock = FrameTime(0.0)
clock.next_frame(0.016)
print(clock.delta_time)  # 0.016

layout = BufferElementsLayout([
    BufferElement("a_Position", ShaderDataType.FLOAT3),
    BufferElement("a_TexCoord", ShaderDataType.FLOAT2),
])
print(layout.stride, [e.offset for e in layout])  # 20 [0, 12]

stages = preprocess_shader_source(
    "#type vertex\nvoid main(){}\n#type fragment\nvoid main(){}\n"
)
print(stages[ShaderStage.VERTEX])  # "void main(){}\n"

parent = Transform(position=(1.0, 0.0, 0.0))
child = Transform(position=(0.5, 0.0, 0.0), owner=parent)
print(child.world_position())  # [1.5 0.  0. ]
```

## Running a game

A game loop needs a window and a render backend. To run one:

1. Subclass `Window` (with an `Input`) and `RenderApi`, together with the
   `VertexBuffer`, `IndexBuffer`, `VertexArray`, `Shader` and `Texture2D`
   types your backend returns.
2. Call `Window.set_instance(...)` and `RenderApi.init(...)`.
3. Call `GameApplication.init()`.
4. Set a game mode and add layers, for example with
   `ironcat.sandbox.setup_app_settings(GameApplication.get())`.
5. Call `run(ui_layer)`.

## What the package does not include

- No concrete window, input or graphics backend. `Window`, `Input`,
  `RenderApi`, `VertexArray`, `Texture` and `GraphicsContext` are abstract, so
  nothing can be drawn or shown on screen without one.
- No shader compilation. Only the source splitting is provided.
- No immediate-mode UI. `on_imgui_render` and the UI layer's `start()` and
  `end()` are hooks only, and `ColorChooseLayer` does not display its
  colours.
- No command-line program.