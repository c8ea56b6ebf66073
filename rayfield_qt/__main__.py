"""
Demo launcher - opens a window with one of each widget.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from .config import Config
from .core.logging_setup import configure_logging, get_logger
from .errors import SettingsError
from .library import Library


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="rayfield-qt demo")
    parser.add_argument("--config", type=Path, help="Path to config JSON")
    parser.add_argument("--theme", choices=["dark", "light"], help="Override the configured theme")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    # Load config
    try:
        config = Config.load(args.config)
    except (FileNotFoundError, SettingsError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if args.theme:
        config.theme = args.theme

    configure_logging(
        level=logging.DEBUG if args.debug else config.logging.level,
        log_file=config.logging.file,
    )
    logger = get_logger()

    app = QApplication(sys.argv)
    library = Library(config)

    window = library.create_window(name="Rayfield Demo")
    window.create_button(
        name="Say hello",
        callback=lambda: library.notify(title="Hello", content="Button pressed"),
    )
    window.create_toggle(
        name="Enabled",
        current_value=True,
        callback=lambda value: logger.info("toggle -> %s", value),
        flag="Enabled",
    )
    window.create_slider(
        name="Volume",
        range=(0, 100),
        increment=5,
        current_value=50,
        callback=lambda value: logger.info("slider -> %s", value),
        flag="Volume",
    )
    window.disposed.connect(app.quit)

    library.notify(title="Welcome", content="Drag the title bar to move the window.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
