"""
Host package for namewise.

Classification of host platform identifiers into platform families.
"""

from .identifier import host_identifier
from .classifier import (
    PlatformFamily,
    PlatformCache,
    classify_platform,
    get_platform_cache,
    current_platform,
    is_windows,
    is_macosx,
    is_linux,
    is_unix,
)

__all__ = [
    "host_identifier",
    "PlatformFamily",
    "PlatformCache",
    "classify_platform",
    "get_platform_cache",
    "current_platform",
    "is_windows",
    "is_macosx",
    "is_linux",
    "is_unix",
]
