"""Central logging configuration using loguru."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from cheatsheet.config import CheatsheetSettings

_LOGGER_CONFIGURED = False


def configure_logging(settings: CheatsheetSettings, level: str | None = None) -> None:
    """Route logs to stderr and rotating file only once."""

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    log_dir: Path = settings.paths.logs_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=level or settings.logging.level,
        colorize=True,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {extra[context]} | {message}",
    )
    logger.add(
        log_dir / "cheatsheet.log",
        level="DEBUG",
        rotation="1 week",
        retention=4,
        compression="zip",
        backtrace=True,
        diagnose=True,
    )
    logger.configure(extra={"context": "cheatsheet"})

    _LOGGER_CONFIGURED = True


def get_logger(name: str | None = None):
    return logger.bind(context=name or "cheatsheet")
