"""Layers, the ordered list that owns them, and the game mode hooks."""

from __future__ import annotations

from typing import Iterator, Optional

from .events import Event


class Layer:
    """A named slice of per-frame behaviour.

    The base hooks only keep track of the layer's state: whether it is
    attached, how many UI frames it has drawn and the last event it saw.
    """

    attached: bool = False
    ui_frames: int = 0
    last_event: Optional[Event] = None

    def __init__(self, name: str) -> None:
        self.name = name

    def on_attach(self) -> None:
        """Called when the layer is added to the application."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed or the application shuts down."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame."""

    def on_imgui_render(self) -> None:
        """Called once per frame between the UI start and end."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event the window reports."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class LayerList:
    """Layers in the order they were added."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []

    def add(self, layer: Layer) -> None:
        self._layers.append(layer)

    def remove(self, layer: Layer) -> None:
        """Remove ``layer``; raises ValueError if it is not in the list."""
        try:
            self._layers.remove(layer)
        except ValueError:
            raise ValueError(f"{layer!r} is not in the layer list") from None

    def close(self) -> None:
        """Detach every layer and empty the list."""
        layers, self._layers = self._layers, []
        for layer in layers:
            layer.on_detach()

    def __enter__(self) -> "LayerList":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(tuple(self._layers))

    def __len__(self) -> int:
        return len(self._layers)


class GameMode:
    """Game-wide hooks run by the application.

    The base hooks only track whether the game mode is running and the
    last event addressed to it.
    """

    running: bool = False
    last_event: Optional[Event] = None

    def on_begin(self) -> None:
        """Called once before the main loop starts."""
        self.running = True

    def on_end(self) -> None:
        """Called after events have been passed to the layers."""
        self.running = False

    def on_begin_render_frame(self) -> None:
        """Called at the start of every frame."""

    def on_end_render_frame(self) -> None:
        """Called at the end of every frame."""

    def on_event(self, event: Event) -> None:
        """Called for an event addressed to the game mode."""
        self.last_event = event