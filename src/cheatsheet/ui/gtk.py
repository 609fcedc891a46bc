"""GTK 4 and gtk4-layer-shell bindings for the overlay controller."""

from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
gi.require_version("Pango", "1.0")

try:
    gi.require_version("Gtk4LayerShell", "1.0")
    LAYER_SHELL_AVAILABLE = True
except ValueError:
    LAYER_SHELL_AVAILABLE = False

from gi.repository import Gdk, GLib, Gtk, Pango

if LAYER_SHELL_AVAILABLE:
    from gi.repository import Gtk4LayerShell

from cheatsheet.config import WindowSettings
from cheatsheet.core.app import CheatsheetContext
from cheatsheet.core.errors import CheatsheetError, DisplayUnavailableError, SurfaceUnavailableError
from cheatsheet.core.state import Edge, KeyboardMode, Layer
from cheatsheet.logging import get_logger
from cheatsheet.ui.toolkit import KeyHandler


def _default_display() -> Gdk.Display:
    display = Gdk.Display.get_default()
    if display is None:
        raise DisplayUnavailableError("Could not connect to a display.")
    return display


class GtkStyleRegistry:
    """CSS providers added to the default display."""

    def __init__(self) -> None:
        self.logger = get_logger("ui.css")
        self._providers: list[Gtk.CssProvider] = []

    def add_stylesheet(self, css: str, priority: int) -> None:
        display = _default_display()
        provider = Gtk.CssProvider()
        provider.connect("parsing-error", self._on_parsing_error)
        provider.load_from_string(css)
        Gtk.StyleContext.add_provider_for_display(display, provider, priority)
        self._providers.append(provider)

    def _on_parsing_error(self, provider, section, error) -> None:
        location = section.get_start_location()
        self.logger.warning(f"CSS error at line {location.lines + 1}: {error.message}")


class GtkLayerSurface:
    """Application window exposed through the layer-shell surface calls."""

    def __init__(self, window: Gtk.ApplicationWindow) -> None:
        self.window = window
        self.logger = get_logger("ui.surface")

    def init_layer_shell(self) -> None:
        if not LAYER_SHELL_AVAILABLE:
            raise SurfaceUnavailableError("gtk4-layer-shell introspection data not found")
        if not Gtk4LayerShell.is_supported():
            self.logger.warning("Compositor does not support layer shell, window will be a normal toplevel")
        Gtk4LayerShell.init_for_window(self.window)

    def realize(self) -> None:
        self.window.realize()

    def is_realized(self) -> bool:
        return self.window.get_realized()

    def set_layer(self, layer: Layer) -> None:
        Gtk4LayerShell.set_layer(self.window, getattr(Gtk4LayerShell.Layer, layer.name))

    def set_anchor(self, edge: Edge, anchored: bool) -> None:
        Gtk4LayerShell.set_anchor(self.window, getattr(Gtk4LayerShell.Edge, edge.name), anchored)

    def get_keyboard_mode(self) -> KeyboardMode:
        current = Gtk4LayerShell.get_keyboard_mode(self.window)
        for mode in KeyboardMode:
            if getattr(Gtk4LayerShell.KeyboardMode, mode.name) == current:
                return mode
        self.logger.debug(f"Unmapped layer-shell keyboard mode {current!r}, treating as none")
        return KeyboardMode.NONE

    def set_keyboard_mode(self, mode: KeyboardMode) -> None:
        Gtk4LayerShell.set_keyboard_mode(self.window, getattr(Gtk4LayerShell.KeyboardMode, mode.name))

    def add_key_handler(self, handler: KeyHandler) -> None:
        def on_key_pressed(controller, keyval, keycode, state) -> bool:
            return handler(Gdk.keyval_name(keyval) or "")

        controller = Gtk.EventControllerKey()
        controller.connect("key-pressed", on_key_pressed)
        self.window.add_controller(controller)

    def present(self) -> None:
        self.window.present()


class GtkToolkit:
    def __init__(self, app: Gtk.Application) -> None:
        self.app = app
        self.logger = get_logger("ui.gtk")

    def style_registry(self) -> GtkStyleRegistry:
        return GtkStyleRegistry()

    def create_surface(self, markup: str, window: WindowSettings) -> GtkLayerSurface:
        _default_display()
        self.logger.info("Creating GTK widgets...")

        label = Gtk.Label()
        self._set_markup(label, markup)
        label.set_selectable(True)
        label.set_xalign(0.0)
        label.set_yalign(0.0)

        scrolled = Gtk.ScrolledWindow(
            child=label,
            min_content_height=window.min_height,
            min_content_width=window.min_width,
        )

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=window.spacing)
        vbox.append(scrolled)

        toplevel = Gtk.ApplicationWindow(
            application=self.app,
            title=window.title,
            default_height=window.min_height,
            default_width=window.min_width,
            child=vbox,
        )
        return GtkLayerSurface(toplevel)

    def quit(self) -> None:
        self.app.quit()

    def _set_markup(self, label: Gtk.Label, markup: str) -> None:
        try:
            Pango.parse_markup(markup, -1, "\0")
        except GLib.Error as exc:
            self.logger.warning(f"Invalid Pango markup ({exc.message}), showing raw text")
            label.set_text(markup)
            return
        label.set_markup(markup)


class CheatsheetApplication:
    """Forwards ``Gtk.Application`` lifecycle signals to the context."""

    def __init__(self, app: Gtk.Application) -> None:
        self.app = app
        self.logger = get_logger("ui.app")
        self.context: CheatsheetContext | None = None
        self.exit_code = 0

    @classmethod
    def create(cls, app_id: str) -> CheatsheetApplication:
        return cls(Gtk.Application(application_id=app_id))

    def toolkit(self) -> GtkToolkit:
        return GtkToolkit(self.app)

    def attach(self, context: CheatsheetContext) -> None:
        self.context = context
        self.app.connect("startup", self._on_startup)
        self.app.connect("activate", self._on_activate)

    def run(self) -> int:
        self.logger.info("Running GTK application...")
        # GTK must not parse our command line
        status = self.app.run(None)
        return self.exit_code or status

    def _on_startup(self, app: Gtk.Application) -> None:
        try:
            self.context.on_startup()
        except CheatsheetError as exc:
            self._fail(exc)

    def _on_activate(self, app: Gtk.Application) -> None:
        if self.exit_code:
            return
        try:
            self.context.on_activate()
        except CheatsheetError as exc:
            self._fail(exc)

    def _fail(self, exc: CheatsheetError) -> None:
        self.logger.critical(f"{type(exc).__name__}: {exc}")
        self.exit_code = 1
        self.app.quit()


def describe() -> dict[str, object]:
    info: dict[str, object] = {
        "gtk": f"{Gtk.get_major_version()}.{Gtk.get_minor_version()}.{Gtk.get_micro_version()}",
        "layer_shell": LAYER_SHELL_AVAILABLE,
    }
    if LAYER_SHELL_AVAILABLE:
        info["layer_shell_version"] = (
            f"{Gtk4LayerShell.get_major_version()}.{Gtk4LayerShell.get_minor_version()}."
            f"{Gtk4LayerShell.get_micro_version()}"
        )
    return info
