"""Reads the cheatsheet markup and stylesheet, degrading instead of failing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from xml.sax.saxutils import escape

from cheatsheet.logging import get_logger

CONTENT_PREVIEW_CHARS = 100
STYLE_PREVIEW_CHARS = 200


@dataclass(frozen=True, slots=True)
class LoadedContent:
    text: str
    is_fallback: bool = False


@dataclass(frozen=True, slots=True)
class LoadedStyle:
    text: str
    source: Path


class ContentLoader:
    def __init__(self) -> None:
        self.logger = get_logger("content")

    def load_content(self, path: Path) -> LoadedContent:
        """Read the markup document, or an error message standing in for it."""

        self._describe(path, "File")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error(f"Failed to read file '{path}': {exc}")
            self.logger.warning("Using error message as content")
            # The message goes through the markup parser like any content
            return LoadedContent(text=f"Error loading file: {escape(str(exc))}", is_fallback=True)

        self.logger.info(f"Successfully loaded file content ({len(text.encode('utf-8'))} bytes)")
        self.logger.debug(f"File content preview: {text[:CONTENT_PREVIEW_CHARS]}")
        return LoadedContent(text=text)

    def load_style(self, path: Path) -> LoadedStyle | None:
        """Read the stylesheet; None means the overlay keeps default styling."""

        self._describe(path, "CSS file")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error(f"Failed to read CSS file '{path}': {exc}")
            self.logger.warning("Continuing without custom CSS")
            return None

        self.logger.info(f"Successfully loaded CSS file ({len(text.encode('utf-8'))} bytes)")
        self.logger.debug(f"CSS content preview: {text[:STYLE_PREVIEW_CHARS]}")
        return LoadedStyle(text=text, source=path)

    def _describe(self, path: Path, label: str) -> None:
        self.logger.info(f"{label} path: {path}")
        self.logger.debug(f"{label} path is absolute: {path.is_absolute()}")
        self.logger.info(f"{label} exists: {path.exists()}")
