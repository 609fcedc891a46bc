"""Keyboard handling for the presented overlay."""

from __future__ import annotations

from collections.abc import Callable

from cheatsheet.config import KeySettings
from cheatsheet.core.events import EventBus
from cheatsheet.core.state import KeyboardMode, RuntimeState
from cheatsheet.logging import get_logger
from cheatsheet.ui.toolkit import LayerSurface


class InputStateMachine:
    """Dismisses the overlay or toggles keyboard exclusivity on bound keys.

    The keyboard mode is read from the live surface on every toggle, so a mode
    changed elsewhere (for instance by an inspector) is never overwritten with
    a stale value.
    """

    def __init__(
        self,
        surface: LayerSurface,
        quit_app: Callable[[], None],
        settings: KeySettings,
        events: EventBus,
        state: RuntimeState,
    ) -> None:
        self.surface = surface
        self.events = events
        self.state = state
        self.logger = get_logger("keys")
        self._quit_app = quit_app
        self._actions: dict[str, str] = {b.key: b.action for b in settings.bindings}

    def on_key_press(self, key: str) -> bool:
        self.logger.debug(f"Key pressed: {key}")
        if self.state.dismissed:
            return False

        action = self._actions.get(key)
        if action == "dismiss":
            self._dismiss(key)
            return True
        if action == "toggle_keyboard_mode":
            self._toggle_keyboard_mode(key)
            return True
        return False

    def _dismiss(self, key: str) -> None:
        self.logger.info(f"{key} pressed - quitting application")
        self.state.dismissed = True
        self.events.emit("overlay.dismissed", key)
        self._quit_app()

    def _toggle_keyboard_mode(self, key: str) -> None:
        current = self.surface.get_keyboard_mode()
        if current is KeyboardMode.EXCLUSIVE:
            self.logger.info(f"{key} pressed - switching to OnDemand mode (GTK Inspector accessible)")
            new_mode = KeyboardMode.ON_DEMAND
        else:
            self.logger.info(f"{key} pressed - switching to Exclusive mode (normal operation)")
            new_mode = KeyboardMode.EXCLUSIVE
        self.surface.set_keyboard_mode(new_mode)
        self.events.emit("keyboard.mode_changed", new_mode)
