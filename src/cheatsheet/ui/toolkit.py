"""Interfaces the overlay controller needs from the windowing toolkit."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from cheatsheet.config import WindowSettings
from cheatsheet.core.state import Edge, KeyboardMode, Layer

# Receives a GDK key name, returns True when the key was consumed.
KeyHandler = Callable[[str], bool]


class StyleRegistry(Protocol):
    """Stylesheets registered against the default display."""

    def add_stylesheet(self, css: str, priority: int) -> None: ...


class LayerSurface(Protocol):
    """A toplevel surface that can be turned into a layer-shell surface."""

    def init_layer_shell(self) -> None: ...

    def realize(self) -> None: ...

    def is_realized(self) -> bool: ...

    def set_layer(self, layer: Layer) -> None: ...

    def set_anchor(self, edge: Edge, anchored: bool) -> None: ...

    def get_keyboard_mode(self) -> KeyboardMode: ...

    def set_keyboard_mode(self, mode: KeyboardMode) -> None: ...

    def add_key_handler(self, handler: KeyHandler) -> None: ...

    def present(self) -> None: ...


class Toolkit(Protocol):
    def style_registry(self) -> StyleRegistry: ...

    def create_surface(self, markup: str, window: WindowSettings) -> LayerSurface: ...

    def quit(self) -> None: ...
