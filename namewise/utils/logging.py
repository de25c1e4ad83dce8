"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
namewise package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import LOG_LEVEL_ENV_VAR


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the namewise package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger("namewise")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "namewise" or name.startswith("namewise."):
        return logging.getLogger(name)
    return logging.getLogger(f"namewise.{name}")


class NamewiseLogger:
    """
    Component-level logging helpers.

    Wraps a package logger with methods for the events the resolver and
    the platform classifier report.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_resolution_step(self, scope: str, segment: str, outcome: str) -> None:
        """
        Log a single segment lookup during path resolution.

        Args:
            scope: Name of the scope the segment was looked up in
            segment: Segment being resolved
            outcome: How the segment was resolved
        """
        self.logger.debug(f"Resolved '{segment}' in {scope}: {outcome}")

    def log_resolution_failure(self, path: str, segment: str, reason: str) -> None:
        """
        Log a failed path resolution.

        Args:
            path: Full path being resolved
            segment: Segment that failed
            reason: Reason for the failure
        """
        self.logger.debug(f"Failed to resolve '{segment}' in '{path}': {reason}")

    def log_platform_detected(self, identifier: str, family: str) -> None:
        """
        Log a successful host platform classification.

        Args:
            identifier: Raw host platform identifier
            family: Platform family tag it was classified as
        """
        self.logger.info(f"Detected platform family '{family}' from host '{identifier}'")

    def log_platform_unknown(self, identifier: str) -> None:
        """
        Log an unrecognized host platform identifier.

        Args:
            identifier: Raw host platform identifier
        """
        self.logger.warning(f"Unrecognized host platform '{identifier}'")


# Initialize logging on module import
setup_logging()
