"""Cheatsheet application composition root."""

from __future__ import annotations

from dataclasses import dataclass

from cheatsheet.config import CheatsheetSettings, LaunchConfig
from cheatsheet.core.events import EventBus
from cheatsheet.core.state import KeyboardMode, OverlayStage, RuntimeState
from cheatsheet.logging import get_logger
from cheatsheet.services.content import ContentLoader
from cheatsheet.services.keys import InputStateMachine
from cheatsheet.services.styles import StyleApplicator
from cheatsheet.ui.presenter import OverlayPresenter
from cheatsheet.ui.toolkit import LayerSurface, Toolkit


class SessionLog:
    """Reports overlay lifecycle events published on the bus."""

    def __init__(self, events: EventBus, state: RuntimeState) -> None:
        self.state = state
        self.logger = get_logger("session")
        self.history: list[str] = []
        events.subscribe("overlay.presented", self._on_presented)
        events.subscribe("keyboard.mode_changed", self._on_mode_changed)
        events.subscribe("overlay.dismissed", self._on_dismissed)

    def _on_presented(self, surface) -> None:
        self.history.append("presented")
        if self.state.content_fallback:
            self.logger.warning("Overlay presented with an error message instead of the cheatsheet")
        else:
            self.logger.info(f"Overlay presented (style applied: {self.state.style_applied})")

    def _on_mode_changed(self, mode: KeyboardMode) -> None:
        self.history.append(f"keyboard:{mode.value}")
        self.logger.info(f"Keyboard mode is now {mode.value}")

    def _on_dismissed(self, key: str) -> None:
        self.history.append("dismissed")
        self.logger.info(f"Overlay dismissed with {key}")


@dataclass(slots=True)
class CheatsheetContext:
    """Lifecycle callbacks invoked by whichever event loop hosts the overlay."""

    settings: CheatsheetSettings
    launch: LaunchConfig
    toolkit: Toolkit
    events: EventBus
    state: RuntimeState
    loader: ContentLoader
    presenter: OverlayPresenter
    session: SessionLog
    input: InputStateMachine | None = None

    def on_startup(self) -> None:
        logger = get_logger("startup")
        logger.info("=== Loading CSS ===")
        style = self.loader.load_style(self.launch.style_path)
        styles = StyleApplicator(self.toolkit.style_registry())
        self.state.style_applied = styles.apply(style)

    def on_activate(self) -> None:
        if self.state.stage is not OverlayStage.UNREALIZED:
            get_logger("activate").info("Overlay already built, presenting existing window")
            self.presenter.surface.present()
            return
        self.presenter.activate(self.launch.content_path, self._bind_input)

    def on_key_press(self, key: str) -> bool:
        if self.input is None:
            return False
        return self.input.on_key_press(key)

    def _bind_input(self, surface: LayerSurface):
        self.input = InputStateMachine(
            surface,
            self.toolkit.quit,
            self.settings.keys,
            self.events,
            self.state,
        )
        return self.on_key_press


def build_context(settings: CheatsheetSettings, launch: LaunchConfig, toolkit: Toolkit) -> CheatsheetContext:
    events = EventBus()
    state = RuntimeState()
    loader = ContentLoader()
    presenter = OverlayPresenter(toolkit, loader, settings.window, events, state)
    session = SessionLog(events, state)

    logger = get_logger("bootstrap")
    logger.info(f"Style file: {launch.style_path}")
    logger.info(f"File to load: {launch.content_path}")

    return CheatsheetContext(
        settings=settings,
        launch=launch,
        toolkit=toolkit,
        events=events,
        state=state,
        loader=loader,
        presenter=presenter,
        session=session,
    )
