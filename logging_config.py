"""Logging setup for the card game.

Everything goes to a rotating UTF-8 log file at the level from
``GameConfig.log_level``. With ``verbose`` the same records are also shown
in the terminal through rich, at INFO or at DEBUG when ``debug_mode`` is on.

Calling ``setup_logging`` again replaces the handlers it installed before.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from card_sim.config import GameConfig, get_config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 3

# handlers owned by this module, swapped out on every call
_installed: list[logging.Handler] = []


def _file_handler(config: GameConfig) -> logging.Handler:
    path = Path(config.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handler.setLevel(config.log_level.upper())
    return handler


def _console_handler(config: GameConfig, console: Console | None) -> logging.Handler:
    # markup off: card and enemy names are user data
    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    handler.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)
    return handler


def setup_logging(
    config: GameConfig | None = None,
    *,
    verbose: bool = False,
    console: Console | None = None,
) -> list[logging.Handler]:
    """Install the game's log handlers on the root logger.

    Args:
        config: source of the log level, file and debug flag
        verbose: also log to the terminal
        console: rich console shared with the UI

    Returns:
        the handlers now installed
    """
    config = config or get_config()
    root = logging.getLogger()
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    _installed.append(_file_handler(config))
    if verbose:
        _installed.append(_console_handler(config, console))
    for handler in _installed:
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    logging.getLogger(__name__).debug(
        "Logging to %s at %s (terminal: %s)", config.log_file, config.log_level, verbose
    )
    return list(_installed)
