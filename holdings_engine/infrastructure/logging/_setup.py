# holdings_engine/infrastructure/logging/_setup.py

"""Logging configuration and setup for host applications"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import exists

# Local imports
from holdings_engine.infrastructure.config import LoggingConfig


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp"""
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/holdings_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
    config: LoggingConfig | None = None,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging
        config: Logging section of the configuration; its debug flag forces
            DEBUG level and its log_file is used when log_file is not given

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    if config is not None:
        if config.debug:
            log_level = "DEBUG"
        if log_file is None:
            log_file = config.log_file

    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    # Console gets abbreviated format, file gets full details
    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        logger = getLogger(__name__)
        logger.info(f"Logging to file: {log_file}")

        return log_file

    return None
