"""
Constants and Enumerations for namewise.

This module consolidates the separators, substitution patterns and the
platform pattern table, providing a single source of truth for the
naming and host classification code.
"""

from __future__ import annotations

import re
from typing import Tuple


# =============================================================================
# Namespace and Path Separators
# =============================================================================

NAMESPACE_SEPARATOR = "::"
PATH_SEPARATOR = "/"
WORD_SEPARATOR = "_"


# =============================================================================
# Case Conversion Patterns
# =============================================================================

# "HTTPServer" -> "HTTP_Server"
ACRONYM_BOUNDARY_PATTERN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# "camelCase" -> "camel_Case"
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z0-9])([A-Z])")

BOUNDARY_REPLACEMENT = r"\1_\2"

# "some/module" -> "some::Module"
PATH_SEGMENT_PATTERN = re.compile(r"/(.?)")

# "some_module" -> "SomeModule"
WORD_START_PATTERN = re.compile(r"(?:^|_)(.)", re.MULTILINE)


# =============================================================================
# Host Platform Classification
# =============================================================================

# Ordered: the first row with a matching pattern wins.
PLATFORM_PATTERNS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("windows", ("mswin", "msys", "mingw", "cygwin", "bccwin", "wince", "emc")),
    ("macosx", ("darwin", "mac os")),
    ("linux", ("linux",)),
    ("unix", ("solaris", "bsd")),
)

# sys.platform values that carry no family hint of their own
NATIVE_HOST_ALIASES = {
    "win32": "mswin32",
}

HOST_OS_ENV_VAR = "NAMEWISE_HOST_OS"
LOG_LEVEL_ENV_VAR = "NAMEWISE_LOG_LEVEL"


# =============================================================================
# Random Identifiers
# =============================================================================

DEFAULT_RANDOM_STRING_LENGTH = 8
