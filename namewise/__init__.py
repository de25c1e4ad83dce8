"""
namewise: namespaced name inflection, resolution and host platform detection

Key Features:
- Conversion between Namespaced::PascalCase and path/snake_case
- Resolution of A::B::C paths against hierarchical symbol tables
- Host platform family detection with a process-wide cache

Usage:
    import namewise

    namewise.underscore("Net::HTTPServer")   # "net/http_server"
    namewise.classify("net/http_server")     # "Net::HttpServer"
    namewise.current_platform()              # PlatformFamily.LINUX
"""

__version__ = "0.1.0"
__author__ = "namewise Team"
__email__ = "namewise@example.com"

# Public API exports
from .naming import (
    underscore,
    classify,
    Scope,
    Namespace,
    SymbolTable,
    get_symbol_table,
    resolve_identifier,
    resolve_underscored,
)

from .host import (
    PlatformFamily,
    classify_platform,
    current_platform,
)

from .utils import (
    NamewiseError,
    InvalidPathError,
    ResolutionError,
    UnknownPlatformError,
    get_config,
    NamewiseConfig,
    random_string,
)

__all__ = [
    "underscore",
    "classify",
    "Scope",
    "Namespace",
    "SymbolTable",
    "get_symbol_table",
    "resolve_identifier",
    "resolve_underscored",
    "PlatformFamily",
    "classify_platform",
    "current_platform",
    "NamewiseError",
    "InvalidPathError",
    "ResolutionError",
    "UnknownPlatformError",
    "get_config",
    "NamewiseConfig",
    "random_string",
]
