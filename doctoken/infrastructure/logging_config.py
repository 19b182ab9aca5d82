import logging
import sys
from typing import Optional

from doctoken.config import Settings, get_settings
from doctoken.config.validation import validate_config


def configure_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for doctoken.

    Args:
        log_level: The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Clear any existing handlers
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug(f"Logging configured with level={log_level}, file={log_file}")


def configure_logging_from_settings(settings: Optional[Settings] = None) -> None:
    """
    Configure logging from LOG_LEVEL and LOG_FILE.

    Raises:
        ValueError: If either setting fails validation
    """
    settings = settings or get_settings()
    config = {"LOG_LEVEL": settings.LOG_LEVEL}
    if settings.LOG_FILE:
        config["LOG_FILE"] = settings.LOG_FILE

    errors = [
        f"{key}: {result.message}"
        for key, result in validate_config(config).items()
        if not result.is_valid
    ]
    if errors:
        raise ValueError("Invalid logging configuration: " + "; ".join(errors))

    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
