"""Logging configuration for VisionTalk."""

import logging
import sys

logger = logging.getLogger("visiontalk")


def configure_logging(level: int = logging.INFO) -> None:
    """Set up logging configuration."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear all existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(asctime)s][%(levelname)s] %(message)s'))

    root_logger.addHandler(console_handler)

    # Package loggers propagate to root; only the top-level one is pinned
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = True

    # Provider SDKs are chatty at INFO
    for logger_name in ("httpx", "httpcore", "google_genai"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str = "visiontalk") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
