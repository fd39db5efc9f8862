# infrastructure/logging/log_setup.py
import sys

from loguru import logger

TEXT_FORMAT = "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> {message} <dim>{extra}</dim>"


def setup_console_logging(level: str = "INFO") -> None:
    # stderr keeps stdout free for command output
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=TEXT_FORMAT)
