#!/usr/bin/env python3
"""Learn Clock -- Entry point.

Opens a window with an analog clock face, a digital readout and a short
guide to reading the hands.

Usage:
    python3 main.py                      # Default layout (or clock.yaml)
    python3 main.py --config my.yaml     # Custom layout / colours
    python3 main.py --fullscreen         # Start fullscreen
    python3 main.py --log-level DEBUG    # Verbose logging

Controls:
    Escape -- Toggle fullscreen
"""

__version__ = "1.0.0"

import argparse
import locale
import logging
import tkinter as tk


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Learn Clock -- analog clock with digital readout",
    )
    parser.add_argument(
        "--config", default="clock.yaml",
        help="Path to layout YAML config (default: clock.yaml)",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Start in fullscreen mode",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"Learn Clock {__version__}",
    )
    return parser.parse_args(argv)


def setup_logging(level_name: str) -> None:
    """Configure root logger with a consistent format."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Learn Clock v%s starting", __version__)

    # Digital readout follows the user's locale (%X)
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Locale not available, using C time format: %s", exc)

    from ui.app import ClockApp

    root = tk.Tk()
    app = ClockApp(root, config_path=args.config, fullscreen=args.fullscreen)

    try:
        root.mainloop()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        app.cleanup()
        root.destroy()
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
