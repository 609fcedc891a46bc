import sys

from loguru import logger

from cheatsheet import logging as cheatsheet_logging
from cheatsheet.logging import configure_logging, get_logger


def test_configure_logging_writes_log_file_once(settings, monkeypatch):
    monkeypatch.setattr(cheatsheet_logging, "_LOGGER_CONFIGURED", False)
    configure_logging(settings, level="DEBUG")
    try:
        configure_logging(settings)
        get_logger("test").info("overlay ready")
        log_file = settings.paths.logs_dir / "cheatsheet.log"
        assert log_file.read_text(encoding="utf-8").count("overlay ready") == 1
    finally:
        logger.remove()
        logger.add(sys.stderr)
