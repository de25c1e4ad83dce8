"""
Case conversion between namespaced PascalCase and path-style snake_case.

    underscore("Net::HTTPServer")  -> "net/http_server"
    classify("net/http_server")    -> "Net::HttpServer"

Both functions are pure. ``classify`` cannot restore acronym runs, so
``classify(underscore(s)) == s`` only holds for names without them.
"""

from __future__ import annotations

from typing import Any

from ..utils.constants import (
    ACRONYM_BOUNDARY_PATTERN,
    BOUNDARY_REPLACEMENT,
    CAMEL_BOUNDARY_PATTERN,
    NAMESPACE_SEPARATOR,
    PATH_SEGMENT_PATTERN,
    PATH_SEPARATOR,
    WORD_SEPARATOR,
    WORD_START_PATTERN,
)


def underscore(name: Any) -> str:
    """Convert ``Namespaced::CamelCase`` to ``namespaced/camel_case``."""
    word = str(name)
    word = word.replace(NAMESPACE_SEPARATOR, PATH_SEPARATOR)
    word = ACRONYM_BOUNDARY_PATTERN.sub(BOUNDARY_REPLACEMENT, word)
    word = CAMEL_BOUNDARY_PATTERN.sub(BOUNDARY_REPLACEMENT, word)
    word = word.replace("-", WORD_SEPARATOR)
    return word.lower()


def classify(name: Any) -> str:
    """Convert ``namespaced/snake_case`` (or any casing) to ``Namespaced::SnakeCase``."""
    word = underscore(name)
    word = PATH_SEGMENT_PATTERN.sub(lambda m: NAMESPACE_SEPARATOR + m.group(1).upper(), word)
    return WORD_START_PATTERN.sub(lambda m: m.group(1).upper(), word)
