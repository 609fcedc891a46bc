"""Registers the user stylesheet with the display-wide style cascade."""

from __future__ import annotations

from cheatsheet.core.state import StylePriority
from cheatsheet.logging import get_logger
from cheatsheet.services.content import LoadedStyle
from cheatsheet.ui.toolkit import StyleRegistry


class StyleApplicator:
    def __init__(self, registry: StyleRegistry) -> None:
        self.registry = registry
        self.logger = get_logger("styles")
        self._applied = False

    def apply(self, style: LoadedStyle | None) -> bool:
        """Register ``style`` at application priority. Returns False when unstyled."""

        if self._applied:
            raise RuntimeError("stylesheet already applied for this process")
        self._applied = True

        if style is None:
            self.logger.info("No stylesheet loaded, using default toolkit appearance")
            return False

        self.registry.add_stylesheet(style.text, int(StylePriority.APPLICATION))
        self.logger.info(f"CSS provider from {style.source} added to display")
        return True
