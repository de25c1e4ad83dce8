"""
Utils package for namewise.

This module provides the shared constants, exceptions, logging,
configuration and string helpers used by the naming and host packages.
"""

# Core utilities
from .exceptions import (
    NamewiseError,
    InvalidPathError,
    ResolutionError,
    UnknownPlatformError,
)
from .constants import *

# Configuration and system utilities
from .config import (
    NamewiseConfig,
    PlatformConfig,
    NamingConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .string_utils import random_string
from .logging import setup_logging, get_logger, NamewiseLogger

__all__ = [
    # Core exceptions
    "NamewiseError",
    "InvalidPathError",
    "ResolutionError",
    "UnknownPlatformError",

    # Constants (exported via *)

    # Configuration
    "NamewiseConfig",
    "PlatformConfig",
    "NamingConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # String utilities
    "random_string",

    # Logging
    "setup_logging",
    "get_logger",
    "NamewiseLogger",
]
