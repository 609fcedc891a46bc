"""Application configuration models and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cheatsheet.utils.keys import normalize_key

APP_VERSION = "0.1.0"

DEFAULT_STYLE_PATH = Path("style.css")
DEFAULT_CONTENT_PATH = Path("cheatsheet.pango")


class AppPaths(BaseModel):
    """Resolved directories for cheatsheet runtime files."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("CHEATSHEET_HOME", Path.home() / ".cheatsheet"))
    )

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure(self) -> None:
        for path in (self.base_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class LaunchConfig(BaseModel):
    """Paths handed over by the command line. Frozen once parsed."""

    model_config = ConfigDict(frozen=True)

    style_path: Path = DEFAULT_STYLE_PATH
    content_path: Path = DEFAULT_CONTENT_PATH


class WindowSettings(BaseModel):
    title: str = "Sway Cheatsheet"
    min_width: int = Field(default=400, ge=1)
    min_height: int = Field(default=300, ge=1)
    spacing: int = Field(default=5, ge=0)


class KeyBinding(BaseModel):
    name: str
    key: str
    action: Literal["dismiss", "toggle_keyboard_mode"]

    @field_validator("key")
    @classmethod
    def _known_key(cls, value: str) -> str:
        return normalize_key(value)


class KeySettings(BaseModel):
    bindings: list[KeyBinding] = Field(
        default_factory=lambda: [
            KeyBinding(name="Dismiss", key="Escape", action="dismiss"),
            KeyBinding(
                name="Toggle Keyboard Mode",
                key="F12",
                action="toggle_keyboard_mode",
            ),
        ]
    )


class LoggingSettings(BaseModel):
    level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class CheatsheetSettings(BaseModel):
    app_name: str = "cheatsheet"
    app_id: str = "org.swaycheatsheet.Cheatsheet"
    paths: AppPaths = Field(default_factory=AppPaths)
    window: WindowSettings = Field(default_factory=WindowSettings)
    keys: KeySettings = Field(default_factory=KeySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _maybe_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def load_settings(env_path: Path | None = None) -> CheatsheetSettings:
    """Load user settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if level := os.getenv('CHEATSHEET_LOG_LEVEL'):
        overrides.setdefault('logging', {})['level'] = level.upper()

    if (width := _maybe_int(os.getenv('CHEATSHEET_MIN_WIDTH'))) is not None and width >= 1:
        overrides.setdefault('window', {})['min_width'] = width

    if (height := _maybe_int(os.getenv('CHEATSHEET_MIN_HEIGHT'))) is not None and height >= 1:
        overrides.setdefault('window', {})['min_height'] = height

    settings = CheatsheetSettings(**overrides)
    settings.paths.ensure()
    return settings
