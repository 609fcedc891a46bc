"""Builds the overlay surface and drives it through the layer-shell sequence.

Stages only move forward::

    UNREALIZED -> REALIZED -> LAYER_CONFIGURED -> PRESENTED

Layer-shell properties are ignored by the compositor unless the native
surface exists, so ``configure_layer`` refuses to run on a surface that does
not report itself realized.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from cheatsheet.config import WindowSettings
from cheatsheet.core.errors import OverlayStateError, SurfaceNotRealizedError, SurfaceUnavailableError
from cheatsheet.core.events import EventBus
from cheatsheet.core.state import Edge, KeyboardMode, Layer, OverlayStage, RuntimeState
from cheatsheet.logging import get_logger
from cheatsheet.services.content import ContentLoader, LoadedContent
from cheatsheet.ui.toolkit import KeyHandler, LayerSurface, Toolkit

OVERLAY_LAYER = Layer.OVERLAY
OVERLAY_ANCHOR = Edge.RIGHT
INITIAL_KEYBOARD_MODE = KeyboardMode.EXCLUSIVE


class OverlayPresenter:
    def __init__(
        self,
        toolkit: Toolkit,
        loader: ContentLoader,
        window: WindowSettings,
        events: EventBus,
        state: RuntimeState,
    ) -> None:
        self.toolkit = toolkit
        self.loader = loader
        self.window = window
        self.events = events
        self.state = state
        self.logger = get_logger("ui.presenter")
        self._surface: LayerSurface | None = None

    @property
    def surface(self) -> LayerSurface:
        if self._surface is None:
            raise OverlayStateError("overlay surface has not been built")
        return self._surface

    @property
    def stage(self) -> OverlayStage:
        return self.state.stage

    def activate(
        self,
        content_path: Path,
        bind_input: Callable[[LayerSurface], KeyHandler],
    ) -> LayerSurface:
        """Load the content and take the overlay all the way to presented."""

        self.logger.info("=== Building UI ===")
        content = self.loader.load_content(content_path)
        self.build(content)
        self.realize()
        self.configure_layer()
        self.attach_input(bind_input(self.surface))
        self.present()
        self.logger.info("=== UI Setup Complete ===")
        return self.surface

    def build(self, content: LoadedContent) -> None:
        self._expect(OverlayStage.UNREALIZED, "build")
        if self._surface is not None:
            raise OverlayStateError("overlay surface was already built")
        self.state.content_fallback = content.is_fallback
        self._surface = self.toolkit.create_surface(content.text, self.window)
        self.logger.info("Created application window")

    def realize(self) -> None:
        self._expect(OverlayStage.UNREALIZED, "realize")
        surface = self.surface
        # gtk4-layer-shell only accepts windows that have not been realized yet
        self.logger.info("Initializing layer shell...")
        surface.init_layer_shell()
        surface.realize()
        if not surface.is_realized():
            raise SurfaceUnavailableError("window did not realize a native surface")
        self._advance(OverlayStage.REALIZED)

    def configure_layer(self) -> None:
        surface = self.surface
        if not surface.is_realized():
            raise SurfaceNotRealizedError("layer-shell properties require a realized surface")
        self._expect(OverlayStage.REALIZED, "configure_layer")

        surface.set_layer(OVERLAY_LAYER)
        self.logger.info("Set window to overlay layer")
        # No other surface receives keyboard input until the mode is toggled
        surface.set_keyboard_mode(INITIAL_KEYBOARD_MODE)
        surface.set_anchor(OVERLAY_ANCHOR, True)
        self.logger.info("Configured layer shell: exclusive keyboard mode, right-anchored")
        self._advance(OverlayStage.LAYER_CONFIGURED)

    def attach_input(self, handler: KeyHandler) -> None:
        self._expect(OverlayStage.LAYER_CONFIGURED, "attach_input")
        self.surface.add_key_handler(handler)
        self.logger.info("Added key handlers")

    def present(self) -> None:
        self._expect(OverlayStage.LAYER_CONFIGURED, "present")
        self.logger.info("Presenting window...")
        self.surface.present()
        self._advance(OverlayStage.PRESENTED)
        self.events.emit("overlay.presented", self.surface)

    def _expect(self, stage: OverlayStage, step: str) -> None:
        if self.state.stage is not stage:
            raise OverlayStateError(
                f"cannot {step} while overlay is {self.state.stage.value}, expected {stage.value}"
            )

    def _advance(self, stage: OverlayStage) -> None:
        self.logger.debug(f"Overlay stage {self.state.stage.value} -> {stage.value}")
        self.state.stage = stage
