"""cheatsheet GUI entrypoint."""

from __future__ import annotations

import os
import sys

from cheatsheet.config import CheatsheetSettings, LaunchConfig, load_settings
from cheatsheet.core.app import build_context
from cheatsheet.logging import configure_logging, get_logger
from cheatsheet.ui.gtk import CheatsheetApplication


def main(launch: LaunchConfig) -> int:
    settings: CheatsheetSettings = load_settings()
    configure_logging(settings)
    logger = get_logger("main")

    logger.info("=== Sway Cheatsheet Application Starting ===")
    logger.info(f"Working directory: {os.getcwd()}")
    logger.info(f"Command line args: {sys.argv}")

    gtk_app = CheatsheetApplication.create(settings.app_id)
    logger.info(f"Created GTK application with ID: {settings.app_id}")

    ctx = build_context(settings, launch, gtk_app.toolkit())
    gtk_app.attach(ctx)

    exit_code = gtk_app.run()
    logger.info(f"Application exited with code: {exit_code}")
    return exit_code
