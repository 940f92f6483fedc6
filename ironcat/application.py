"""The application singleton that owns the layers and runs the main loop."""

from __future__ import annotations

from typing import ClassVar, Optional

from .events import Event
from .frametime import FrameTime
from .layers import GameMode, Layer, LayerList
from .window import Window


class GameApplication:
    """Runs the game mode and layers frame by frame on the current window."""

    _instance: ClassVar[Optional["GameApplication"]] = None

    def __init__(self) -> None:
        self._layers = LayerList()
        self._frame_time = FrameTime()
        self._game_mode: Optional[GameMode] = None
        self._running = True
        Window.get().set_event_callback(self.on_event)

    @classmethod
    def get(cls) -> "GameApplication":
        """The application; raises RuntimeError before ``init``."""
        if GameApplication._instance is None:
            raise RuntimeError("GameApplication has not been initialised")
        return GameApplication._instance

    @classmethod
    def init(cls) -> None:
        GameApplication._instance = GameApplication()

    @classmethod
    def deinit(cls) -> None:
        """Detach every layer and drop the application."""
        if GameApplication._instance is not None:
            GameApplication._instance._layers.close()
        GameApplication._instance = None

    @property
    def game_mode(self) -> Optional[GameMode]:
        return self._game_mode

    def set_game_mode(self, game_mode: GameMode) -> None:
        self._game_mode = game_mode

    @property
    def delta_time(self) -> float:
        """Seconds between the last two frames."""
        return self._frame_time.delta_time

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def add_layer(self, layer: Layer) -> None:
        self._layers.add(layer)
        layer.on_attach()

    def remove_layer(self, layer: Layer) -> None:
        self._layers.remove(layer)
        layer.on_detach()

    def run(self, ui_layer: Layer) -> None:
        """Run frames until ``stop`` is called.

        ``ui_layer`` is a layer that also has ``start()`` and ``end()``,
        called around the UI rendering of every frame.
        """
        game_mode = self._game_mode
        if game_mode is None:
            raise RuntimeError("no game mode has been set")
        window = Window.get()

        game_mode.on_begin()
        self.add_layer(ui_layer)

        self._frame_time = FrameTime(window.time())
        while self._running:
            game_mode.on_begin_render_frame()

            for layer in self._layers:
                layer.on_update()

            ui_layer.start()
            for layer in self._layers:
                layer.on_imgui_render()
            ui_layer.end()

            window.on_update()

            game_mode.on_end_render_frame()
            self._frame_time.next_frame(window.time())

    def stop(self) -> None:
        """Make the main loop finish after the current frame."""
        self._running = False

    def on_event(self, event: Event) -> None:
        """Pass ``event`` to every layer, then end the game mode."""
        for layer in self._layers:
            layer.on_event(event)
        if self._game_mode is not None:
            self._game_mode.on_end()