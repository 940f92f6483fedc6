import pytest

from ironcat.window import Input, Window, WindowProps


class FakeInput(Input):
    def __init__(self, position):
        self.position = position

    def is_key_pressed(self, key_code):
        return False

    def is_mouse_button_pressed(self, button):
        return False

    def mouse_position(self):
        return self.position


class FakeWindow(Window):
    def __init__(self):
        self.callback = None
        self._vsync = False
        self._input = FakeInput((3.5, 7.25))

    @property
    def width(self):
        return 640

    @property
    def height(self):
        return 480

    @property
    def native_window(self):
        return None

    @property
    def vsync(self):
        return self._vsync

    @property
    def input(self):
        return self._input

    def time(self):
        return 0.0

    def set_event_callback(self, callback):
        self.callback = callback

    def set_vsync(self, enabled):
        self._vsync = enabled

    def on_update(self):
        pass


@pytest.fixture(autouse=True)
def reset_window():
    yield
    Window.delete_instance()


def test_window_props_defaults():
    props = WindowProps()
    assert props.title == "IronCat Engine"
    assert (props.width, props.height) == (1280, 1280)


def test_set_instance_then_get():
    window = FakeWindow()
    Window.set_instance(window)
    assert Window.get() is window


def test_get_after_delete_raises():
    Window.set_instance(FakeWindow())
    Window.delete_instance()
    with pytest.raises(RuntimeError):
        Window.get()


def test_set_instance_rejects_non_window():
    with pytest.raises(TypeError):
        Window.set_instance(object())


def test_window_is_abstract():
    with pytest.raises(TypeError):
        Window()


def test_mouse_axes_come_from_position():
    window = FakeWindow()
    Window.set_instance(window)
    current = Window.get().input
    assert current.mouse_position_x() == 3.5
    assert current.mouse_position_y() == 7.25


def test_vsync_round_trip():
    Window.set_instance(FakeWindow())
    Window.get().set_vsync(True)
    assert Window.get().vsync is True
    Window.get().set_vsync(False)
    assert Window.get().vsync is False