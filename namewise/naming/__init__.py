"""
Naming package for namewise.

Case conversion between ``Namespaced::PascalCase`` and ``path/snake_case``
plus resolution of namespace paths against hierarchical symbol tables.
"""

from .inflection import underscore, classify
from .scopes import (
    Scope,
    Namespace,
    SymbolTable,
    get_symbol_table,
    set_symbol_table,
)
from .resolver import split_path, resolve_identifier, resolve_underscored

__all__ = [
    "underscore",
    "classify",
    "Scope",
    "Namespace",
    "SymbolTable",
    "get_symbol_table",
    "set_symbol_table",
    "split_path",
    "resolve_identifier",
    "resolve_underscored",
]
