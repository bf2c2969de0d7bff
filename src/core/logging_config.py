"""
Logging configuration for Dice Roller.

Library modules only call logging.getLogger(__name__). Applications call
setup_logging() once; with no arguments it applies LOG_LEVEL and LOG_FILE
from the environment (see src.core.config).
"""

import logging
import sys
from typing import Optional
from colorama import Fore, Back, Style, init

from src.core.config import get_config

# Initialize colorama for cross-platform color support
init(autoreset=True)

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name on console output.

    Formats a copy of the record, so handlers sharing the record
    (e.g. the plain file handler) never see color codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Back.WHITE + Style.BRIGHT,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(colored)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Logging level name; defaults to the configured LOG_LEVEL
        log_file: File to mirror output to; defaults to the configured LOG_FILE
        format_string: Format for both console and file output
        use_colors: Color level names on the console

    Returns:
        Configured root logger

    Raises:
        ValueError: If the level name is unknown
    """
    config = get_config()
    level_no = _resolve_level(level if level is not None else config.log_level)
    if log_file is None:
        log_file = config.log_file

    root = logging.getLogger()
    root.setLevel(level_no)

    # Repeated setup replaces, never stacks, handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level_no)
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    console_handler.setFormatter(formatter_class(format_string))
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format_string))
        root.addHandler(file_handler)

    root.debug(f"Logging configured (level={logging.getLevelName(level_no)}, file={log_file})")
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module (usually __name__)."""
    return logging.getLogger(name)


__all__ = ['setup_logging', 'get_logger', 'ColoredFormatter', 'DEFAULT_FORMAT']
