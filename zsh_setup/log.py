"""Console and log file output."""

import logging
import os
from pathlib import Path
from typing import Union

import pyfiglet
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

LOGGER_NAME = "zsh_setup"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MODE = 0o644


class NordColors:
    """Nord color palette used for console output."""

    FROST_1 = "#8FBCBB"
    FROST_2 = "#88C0D0"
    FROST_4 = "#5E81AC"
    SNOW_STORM_1 = "#D8DEE9"
    RED = "#BF616A"
    YELLOW = "#EBCB8B"
    GREEN = "#A3BE8C"


console = Console(highlight=False)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logger() -> logging.Logger:
    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    console_handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)
    return logger


def attach_log_file(log_file: Union[str, Path]) -> logging.Logger:
    """
    Create the log file with root ownership and mode 0644, then duplicate every
    record into it. Records that fail to write are reported by logging itself
    and never interrupt the run.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    log_file.touch(exist_ok=True)
    logger = get_logger()
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    try:
        os.chown(log_file, 0, 0)
    except OSError as e:
        logger.warning(f"Could not set ownership on log file {log_file}: {e}")
    try:
        os.chmod(log_file, LOG_FILE_MODE)
    except OSError as e:
        logger.warning(f"Could not set permissions on log file {log_file}: {e}")
    return logger


def close_logger() -> None:
    logger = get_logger()
    for h in logger.handlers[:]:
        h.close()
        logger.removeHandler(h)


def print_header(text: str) -> None:
    """Print an ASCII art header using pyfiglet."""
    ascii_art = pyfiglet.figlet_format(text, font="slant")
    console.print(ascii_art, style=f"bold {NordColors.FROST_2}")


def print_intro(text: str) -> None:
    console.print(Panel(text, border_style=NordColors.FROST_4, style=NordColors.SNOW_STORM_1))
