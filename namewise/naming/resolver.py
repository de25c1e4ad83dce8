"""
Namespace Path Resolution for namewise.

This module resolves ``A::B::C`` paths against a hierarchy of scopes,
segment by segment, starting from a root scope. Inside a nested scope a
name resolves to the lexically nearest definition, but a name that only
exists at the root is refused: ``Net::String`` does not silently become
the root-level ``String`` just because ``Net`` has no ``String`` of its own.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .inflection import classify
from .scopes import Scope, get_symbol_table
from ..utils.constants import NAMESPACE_SEPARATOR
from ..utils.exceptions import InvalidPathError, ResolutionError
from ..utils.logging import NamewiseLogger

_log = NamewiseLogger(__name__)


def split_path(path: str) -> List[str]:
    """
    Split a namespace path into its segments.

    A leading separator (``"::Foo"``) anchors the path at the root and is
    dropped.

    Args:
        path: Namespace path such as ``"Net::HTTP"``

    Returns:
        List of non-empty segments

    Raises:
        InvalidPathError: If the path is empty, root-only or has an empty segment
    """
    if not isinstance(path, str):
        raise InvalidPathError(repr(path), "path must be a string")

    names = path.split(NAMESPACE_SEPARATOR)
    if names[0] == "":
        names = names[1:]

    if not names or names == [""]:
        raise InvalidPathError(path, "path is empty")
    if "" in names:
        raise InvalidPathError(path, "path contains an empty segment")

    return names


def _describe(scope: Scope) -> str:
    return scope.qualified_name() or "root"


def _fail(path: str, segment: str, reason: str) -> ResolutionError:
    _log.log_resolution_failure(path, segment, reason)
    return ResolutionError(path, segment, reason)


def _resolve_segment(scope: Scope, segment: str, root: Scope, path: str) -> Any:
    if scope is root:
        try:
            value = root.lookup(segment, path)
        except ResolutionError:
            raise _fail(path, segment, "not defined at root") from None
        _log.log_resolution_step("root", segment, "root member")
        return value

    try:
        candidate = scope.lookup(segment, path)
    except ResolutionError:
        raise _fail(path, segment, f"not defined in {_describe(scope)}") from None

    if scope.owns_directly(segment):
        _log.log_resolution_step(_describe(scope), segment, "own member")
        return candidate

    if not root.owns_directly(segment):
        _log.log_resolution_step(_describe(scope), segment, "inherited member")
        return candidate

    # Both the root and something on the chain may define it; only a
    # non-root owner is acceptable.
    for ancestor in scope.ancestors():
        if ancestor is root:
            break
        if ancestor.owns_directly(segment):
            _log.log_resolution_step(_describe(scope), segment, f"owned by {_describe(ancestor)}")
            return ancestor.get_own(segment)

    raise _fail(
        path, segment, f"only defined at root, not in {_describe(scope)} or its ancestors"
    )


def resolve_identifier(path: str, root: Optional[Scope] = None) -> Any:
    """
    Resolve a namespace path to the entity it names.

    Args:
        path: Namespace path such as ``"Net::HTTP::Request"`` or ``"::Request"``
        root: Scope to start from; defaults to the global symbol table

    Returns:
        The entity bound at the last segment

    Raises:
        InvalidPathError: If the path is empty or malformed
        ResolutionError: If a segment is undefined, only defined at the
            root, or the path walks into something that is not a scope
    """
    segments = split_path(path)
    if root is None:
        root = get_symbol_table()

    current: Any = root
    parent_name = "root"
    for segment in segments:
        if not isinstance(current, Scope):
            raise _fail(path, segment, f"{parent_name} is not a namespace")
        current = _resolve_segment(current, segment, root, path)
        parent_name = segment

    return current


def resolve_underscored(word: str, root: Optional[Scope] = None) -> Any:
    """Resolve ``"net/http/request"`` style names by classifying them first."""
    return resolve_identifier(classify(word), root)
