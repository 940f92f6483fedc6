"""Input codes, the event hierarchy and the event dispatcher."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag
from typing import Callable, ClassVar, Optional


class Key(IntEnum):
    """Keyboard key codes."""

    UNKNOWN = -1

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    NUM_0 = 48
    NUM_1 = 49
    NUM_2 = 50
    NUM_3 = 51
    NUM_4 = 52
    NUM_5 = 53
    NUM_6 = 54
    NUM_7 = 55
    NUM_8 = 56
    NUM_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162

    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348

    LAST = 348


class Mod(IntFlag):
    """Modifier key flags."""

    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008
    CAPS_LOCK = 0x0010
    NUM_LOCK = 0x0020


class MouseButton(IntEnum):
    """Mouse button identifiers."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Joystick(IntEnum):
    """Joystick identifiers."""

    JOYSTICK_1 = 0
    JOYSTICK_2 = 1
    JOYSTICK_3 = 2
    JOYSTICK_4 = 3
    JOYSTICK_5 = 4
    JOYSTICK_6 = 5
    JOYSTICK_7 = 6
    JOYSTICK_8 = 7
    JOYSTICK_9 = 8
    JOYSTICK_10 = 9
    JOYSTICK_11 = 10
    JOYSTICK_12 = 11
    JOYSTICK_13 = 12
    JOYSTICK_14 = 13
    JOYSTICK_15 = 14
    JOYSTICK_16 = 15
    LAST = 15


class GamepadButton(IntEnum):
    """Gamepad button identifiers."""

    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_THUMB = 9
    RIGHT_THUMB = 10
    DPAD_UP = 11
    DPAD_RIGHT = 12
    DPAD_DOWN = 13
    DPAD_LEFT = 14
    LAST = 14

    CROSS = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3


class GamepadAxis(IntEnum):
    """Gamepad axis identifiers."""

    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5
    LAST = 5


class EventType(Enum):
    """Concrete kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_RELEASED = 9
    KEY_PRESSED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    """Bit flags grouping event types."""

    NONE = 0
    APP = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3


class Event:
    """Base of all events; concrete subclasses set ``event_type`` and ``name``."""

    event_type: ClassVar[Optional[EventType]] = None
    name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if type(self).event_type is None:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be created")
        self.handled = False

    def is_in_category(self, category: EventCategory) -> bool:
        """Return whether the event belongs to ``category``."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class EventDispatcher:
    """Routes an event to a handler if the event has the wanted type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type, func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; store its result as ``handled``."""
        wanted = getattr(event_class, "event_type", None)
        if wanted is None or self.event.event_type != wanted:
            return False
        self.event.handled = bool(func(self.event))
        return True


class AppEvent(Event):
    """Events raised by the window and the application."""

    category_flags = EventCategory.APP


class WindowCloseEvent(AppEvent):
    event_type = EventType.WINDOW_CLOSE
    name = "WindowClose"


class WindowResizeEvent(AppEvent):
    event_type = EventType.WINDOW_RESIZE
    name = "WindowResize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResizeEvent: width - {self.width}, height - {self.height}"


class WindowFocusEvent(AppEvent):
    event_type = EventType.WINDOW_FOCUS
    name = "WindowFocus"


class WindowLostFocusEvent(AppEvent):
    event_type = EventType.WINDOW_LOST_FOCUS
    name = "WindowLostFocus"


class WindowMovedEvent(AppEvent):
    event_type = EventType.WINDOW_MOVED
    name = "WindowMoved"

    def __init__(self, x: int, y: int) -> None:
        super().__init__()
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"WindowMovedEvent: x - {self.x}, y - {self.y}"


class AppTickEvent(AppEvent):
    event_type = EventType.APP_TICK
    name = "AppTick"


class AppUpdateEvent(AppEvent):
    event_type = EventType.APP_UPDATE
    name = "AppUpdate"


class AppRenderEvent(AppEvent):
    event_type = EventType.APP_RENDER
    name = "AppRender"


class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


class KeyTypedEvent(KeyEvent):
    event_type = EventType.KEY_TYPED
    name = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    name = "MouseMoved"
    category_flags = EventCategory.INPUT | EventCategory.MOUSE

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.x = float(x)
        self.y = float(y)

    def __str__(self) -> str:
        return f"MouseMovedEvent: {self.x:g} {self.y:g}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    name = "MouseScrolled"
    category_flags = EventCategory.INPUT | EventCategory.MOUSE

    def __init__(self, offset_x: float, offset_y: float) -> None:
        super().__init__()
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def __str__(self) -> str:
        return f"MouseScrolled: {self.offset_x:g} {self.offset_y:g}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"