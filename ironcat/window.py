"""Window settings, the input interface and the window singleton."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional

from .events import Event

EventCallback = Callable[[Event], None]


@dataclass
class WindowProps:
    """Title and size of a window to be created."""

    title: str = "IronCat Engine"
    width: int = 1280
    height: int = 1280


class Input(ABC):
    """Polling access to keyboard and mouse state."""

    @abstractmethod
    def is_key_pressed(self, key_code: int) -> bool: ...

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool: ...

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]: ...

    def mouse_position_x(self) -> float:
        return self.mouse_position()[0]

    def mouse_position_y(self) -> float:
        return self.mouse_position()[1]


class Window(ABC):
    """A platform window; one instance is current at a time."""

    _instance: ClassVar[Optional["Window"]] = None

    @classmethod
    def get(cls) -> "Window":
        """The current window; raises RuntimeError if none is set."""
        if Window._instance is None:
            raise RuntimeError("no window instance has been set")
        return Window._instance

    @classmethod
    def set_instance(cls, instance: "Window") -> None:
        if not isinstance(instance, Window):
            raise TypeError(f"expected a Window, got {type(instance).__name__}")
        Window._instance = instance

    @classmethod
    def delete_instance(cls) -> None:
        Window._instance = None

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    @abstractmethod
    def native_window(self) -> Any: ...

    @property
    @abstractmethod
    def vsync(self) -> bool: ...

    @property
    @abstractmethod
    def input(self) -> Input: ...

    @abstractmethod
    def time(self) -> float:
        """Seconds since the window system started."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None: ...

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None: ...

    @abstractmethod
    def on_update(self) -> None:
        """Poll events and present the frame."""