"""
Logging utilities for the repository builder
"""

import logging
import sys
from typing import Optional


class ColorFormatter(logging.Formatter):
    """Colorize level names like the bash tooling does"""

    COLORS = {
        'INFO': '\033[34m',      # Blue
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[41m',  # Red background
        'DEBUG': '\033[35m',     # Purple
        'SUCCESS': '\033[32m',   # Green
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        # Success messages are plain INFO records tagged via extra={'success': True}
        if getattr(record, 'success', False):
            levelname = 'SUCCESS'

        color = self.COLORS.get(levelname)
        original = record.levelname
        if color:
            record.levelname = f"{color}[{levelname}]{self.RESET}"
        else:
            record.levelname = f"[{levelname}]"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(debug_mode: bool = False, ci: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration

    Args:
        debug_mode: Log at DEBUG level instead of INFO
        ci: Running under CI; drop timestamps, the CI runner adds its own
        log_file: Optional file receiving an uncolored copy of the log
    """
    level = logging.DEBUG if debug_mode else logging.INFO

    if ci:
        fmt = ColorFormatter('%(levelname)s %(message)s')
    else:
        fmt = ColorFormatter('[%(asctime)s] %(levelname)s %(message)s', datefmt='%H:%M:%S')

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(fmt)
    handlers = [stream_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s'))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    return logging.getLogger("aur_repo_builder")


def log_success(logger: logging.Logger, message: str):
    """Log an INFO record rendered as SUCCESS"""
    logger.info(message, extra={'success': True})
