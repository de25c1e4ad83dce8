"""
Host Platform Classification for namewise.

This module maps free-form host platform identifiers (``x86_64-linux-gnu``,
``i386-mingw32``, ``x86_64-apple-darwin19`` ...) onto a small closed set
of platform families, and keeps the family of the running host in a
process-wide compute-once cell.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Callable, Optional

from .identifier import host_identifier
from ..utils.config import get_config
from ..utils.constants import PLATFORM_PATTERNS
from ..utils.exceptions import UnknownPlatformError
from ..utils.logging import NamewiseLogger

_log = NamewiseLogger(__name__)


class PlatformFamily(Enum):
    """Platform families a host identifier can be classified as."""

    WINDOWS = "windows"
    MACOSX = "macosx"
    LINUX = "linux"
    UNIX = "unix"

    def __str__(self) -> str:
        return self.value


def classify_platform(identifier: str) -> PlatformFamily:
    """
    Classify a host platform identifier.

    Matching is a case-insensitive substring search over an ordered
    pattern table; the first family with a matching pattern wins.

    Args:
        identifier: Raw platform identifier, e.g. ``"x86_64-linux-gnu"``

    Returns:
        The matching PlatformFamily

    Raises:
        UnknownPlatformError: If no pattern matches
    """
    lowered = str(identifier).lower()
    for family, patterns in PLATFORM_PATTERNS:
        if any(pattern in lowered for pattern in patterns):
            return PlatformFamily(family)

    _log.log_platform_unknown(identifier)
    raise UnknownPlatformError(identifier)


class PlatformCache:
    """
    Compute-once cell holding the platform family of the running host.

    Only a successful classification is stored; after a failure the next
    ``get()`` classifies again. Concurrent first callers are serialized by
    a lock, so the identifier source is read at most once on success.
    """

    def __init__(self, source: Callable[[], str] = host_identifier):
        """
        Initialize the cache.

        Args:
            source: Callable returning the raw host platform identifier
        """
        self._source = source
        self._family: Optional[PlatformFamily] = None
        self._identifier: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def identifier(self) -> Optional[str]:
        """Identifier the cached family was derived from, if any."""
        return self._identifier

    def is_set(self) -> bool:
        return self._family is not None

    def get(self) -> PlatformFamily:
        """
        Return the cached family, classifying the host on first use.

        Raises:
            UnknownPlatformError: If the host identifier is not recognized
        """
        family = self._family
        if family is not None:
            return family

        with self._lock:
            if self._family is not None:
                return self._family

            identifier = self._source()
            family = classify_platform(identifier)
            _log.log_platform_detected(identifier, family.value)

            if get_config().platform.memoize:
                self._identifier = identifier
                self._family = family
            return family

    def reset(self) -> None:
        """Forget the cached family."""
        with self._lock:
            self._family = None
            self._identifier = None


# Global platform cache instance
_platform_cache = PlatformCache()


def get_platform_cache() -> PlatformCache:
    """Get the global platform cache instance."""
    return _platform_cache


def current_platform() -> PlatformFamily:
    """Return the platform family of the running host."""
    return _platform_cache.get()


def is_windows() -> bool:
    return current_platform() is PlatformFamily.WINDOWS


def is_macosx() -> bool:
    return current_platform() is PlatformFamily.MACOSX


def is_linux() -> bool:
    return current_platform() is PlatformFamily.LINUX


def is_unix() -> bool:
    return current_platform() is PlatformFamily.UNIX
