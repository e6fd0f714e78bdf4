"""
Filesystem access and source scanning.

- **files**: read/write/copy/list primitives with per-file error reporting
- **scanner**: extraction of declared package names from source files
"""

from .scanner import (
    PACKAGE_PATTERN,
    extract_declared,
    extract_declared_from_text,
    find_namespace_in_tree,
    contains_source_files,
    iter_source_files,
    detect_existing_package,
)

__all__ = [
    "PACKAGE_PATTERN",
    "extract_declared",
    "extract_declared_from_text",
    "find_namespace_in_tree",
    "contains_source_files",
    "iter_source_files",
    "detect_existing_package",
]
