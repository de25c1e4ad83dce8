"""
Hierarchical Symbol Tables for namewise.

This module defines the scope interface the resolver queries and an
in-memory registry implementing it. A scope directly owns zero or more
named members and has at most one parent; following parents leads to a
single root scope.

Usage:
    table = SymbolTable()
    table.register("Net::HTTP::Request", Request)
    table.register("Request", LegacyRequest)

    resolve_identifier("Net::HTTP::Request", table)  # -> Request
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional

from ..utils.constants import NAMESPACE_SEPARATOR
from ..utils.exceptions import InvalidPathError, ResolutionError
from ..utils.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# Scope Interface
# =============================================================================

class Scope(ABC):
    """
    Interface of a named container of members with an ancestor chain.

    Implementations only need ``owns_directly``, ``get_own`` and
    ``parent_scope``; lookup through the ancestor chain is derived from them.
    """

    name: str = ""

    @abstractmethod
    def owns_directly(self, name: str) -> bool:
        """Return True when this scope itself defines ``name``."""

    @abstractmethod
    def get_own(self, name: str) -> Any:
        """Return the member this scope itself defines; KeyError if absent."""

    @abstractmethod
    def parent_scope(self) -> Optional["Scope"]:
        """Return the enclosing scope, or None for the root."""

    def is_root(self) -> bool:
        return self.parent_scope() is None

    def ancestors(self) -> Iterator["Scope"]:
        """Yield this scope, then each enclosing scope up to and including the root."""
        scope: Optional[Scope] = self
        while scope is not None:
            yield scope
            scope = scope.parent_scope()

    def lookup(self, name: str, path: Optional[str] = None) -> Any:
        """
        Find ``name`` in this scope or the nearest ancestor defining it.

        Args:
            name: Member name, a single path segment
            path: Full path being resolved, reported on failure; defaults to ``name``

        Raises:
            ResolutionError: If no scope on the chain defines the name
        """
        for scope in self.ancestors():
            if scope.owns_directly(name):
                return scope.get_own(name)
        raise ResolutionError(
            path or name, name, f"not defined in {self.qualified_name() or 'root'}"
        )

    def qualified_name(self) -> str:
        """Return the ``A::B`` path of this scope below the root."""
        names = [scope.name for scope in self.ancestors() if not scope.is_root()]
        return NAMESPACE_SEPARATOR.join(reversed(names))


# =============================================================================
# In-memory Registry
# =============================================================================

class Namespace(Scope):
    """A scope backed by a plain dictionary of members."""

    def __init__(self, name: str = "", parent: Optional[Namespace] = None):
        self.name = name
        self._parent = parent
        self._members: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Namespace({self.qualified_name() or '<root>'!r})"

    def owns_directly(self, name: str) -> bool:
        return name in self._members

    def get_own(self, name: str) -> Any:
        return self._members[name]

    def parent_scope(self) -> Optional[Namespace]:
        return self._parent

    def define(self, name: str, value: Any) -> Any:
        """
        Define (or redefine) a member of this namespace.

        Args:
            name: Member name, a single path segment
            value: Entity to bind

        Returns:
            The bound value
        """
        if not name or NAMESPACE_SEPARATOR in name:
            raise InvalidPathError(name, "member names must be a single segment")

        with self._lock:
            self._members[name] = value
        logger.debug(f"Defined '{name}' in {self!r}")
        return value

    def namespace(self, name: str) -> Namespace:
        """Return the child namespace ``name``, creating it if needed."""
        if not name or NAMESPACE_SEPARATOR in name:
            raise InvalidPathError(name, "member names must be a single segment")

        with self._lock:
            owned = name in self._members
            existing = self._members.get(name)
            if not owned:
                existing = Namespace(name, parent=self)
                self._members[name] = existing
        if not isinstance(existing, Namespace):
            raise ResolutionError(name, name, f"already bound to {existing!r} in {self!r}")
        if not owned:
            logger.debug(f"Defined '{name}' in {self!r}")
        return existing

    def remove(self, name: str) -> Any:
        """Remove a member; KeyError if this namespace does not own it."""
        with self._lock:
            return self._members.pop(name)

    def members(self) -> List[str]:
        """Return the names this namespace owns, in definition order."""
        with self._lock:
            return list(self._members)


class SymbolTable(Namespace):
    """Root namespace with helpers that take full ``A::B::C`` paths."""

    def __init__(self):
        super().__init__(name="")

    def __repr__(self) -> str:
        return f"SymbolTable({len(self.members())} members)"

    def register(self, path: str, value: Any) -> Any:
        """
        Bind ``value`` at ``path``, creating intermediate namespaces.

        Args:
            path: Full namespace path such as ``"Net::HTTP::Request"``
            value: Entity to bind at the last segment

        Returns:
            The bound value
        """
        from .resolver import split_path

        *parents, leaf = split_path(path)
        scope: Namespace = self
        for segment in parents:
            scope = scope.namespace(segment)
        return scope.define(leaf, value)


# Global default table
_default_table: Optional[SymbolTable] = None
_table_lock = threading.Lock()


def get_symbol_table() -> SymbolTable:
    """Get or create the process-wide default symbol table."""
    global _default_table
    with _table_lock:
        if _default_table is None:
            _default_table = SymbolTable()
        return _default_table


def set_symbol_table(table: Optional[SymbolTable]) -> None:
    """Replace the process-wide default symbol table."""
    global _default_table
    with _table_lock:
        _default_table = table
