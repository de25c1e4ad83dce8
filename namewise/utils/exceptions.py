"""
Custom exception definitions.

This module defines the exception hierarchy for namewise errors:
malformed namespace paths, failed symbol resolution and unrecognized
host platforms.
"""

from typing import Optional


class NamewiseError(Exception):
    """
    Base exception for all namewise errors.

    Carries a human-readable message plus an optional dictionary of
    diagnostic details that is appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize namewise error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidPathError(NamewiseError):
    """
    Raised when a namespace path is rejected before resolution begins.

    Covers empty paths, root-only paths such as ``"::"`` and paths with
    an empty inner segment such as ``"A::::B"``.
    """

    def __init__(self, path: str, reason: str = ""):
        """
        Initialize invalid path error.

        Args:
            path: The offending path
            reason: Optional explanation of what is wrong with it
        """
        message = f"Invalid namespace path {path!r}"
        if reason:
            message += f": {reason}"

        super().__init__(message)
        self.path = path
        self.reason = reason


class ResolutionError(NamewiseError):
    """
    Raised when a namespace path cannot be resolved.

    This happens when a segment is not defined anywhere on the lookup
    chain, when the only definition is owned by the root scope rather
    than by the scope being searched, or when the path descends into
    something that is not a scope.
    """

    def __init__(self, path: str, segment: str, reason: str = ""):
        """
        Initialize resolution error.

        Args:
            path: Full path being resolved
            segment: Segment that failed to resolve
            reason: Optional explanation for the failure
        """
        message = f"Cannot resolve {segment!r}"
        if reason:
            message += f": {reason}"

        super().__init__(message, {'path': path, 'segment': segment})
        self.path = path
        self.segment = segment
        self.reason = reason


class UnknownPlatformError(NamewiseError):
    """Raised when a host platform identifier matches no known family."""

    def __init__(self, identifier: str):
        super().__init__(f"unknown os: {identifier!r}")
        self.identifier = identifier
