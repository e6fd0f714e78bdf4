"""
Discovery of declared package names in Java/Kotlin source trees.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..errors import FileIOError, StructuralError
from . import files

logger = logging.getLogger(__name__)

# First line starting with the package keyword; Kotlin allows no semicolon,
# Java's trailing ';' is simply not part of the match.
PACKAGE_PATTERN = re.compile(r"^package\s+([a-zA-Z][a-zA-Z0-9_.]*)", re.MULTILINE)


def has_extension(path: Path | str, extensions: Iterable[str]) -> bool:
    """True if the file name of ``path`` ends with one of ``extensions``."""
    name = Path(path).name
    return any(name.endswith(ext) for ext in extensions)


def extract_declared_from_text(text: str) -> Optional[str]:
    """
    Return the package declared in ``text``, or None.

    Examples
    --------
    >>> extract_declared_from_text("package com.acme.app\\n\\nclass Main")
    'com.acme.app'
    """
    match = PACKAGE_PATTERN.search(text)
    return match.group(1) if match else None


def extract_declared(path: Path | str) -> Optional[str]:
    """Return the package declared by the source file at ``path``, or None."""
    try:
        return extract_declared_from_text(files.read_text(path))
    except FileIOError as e:
        logger.debug("Failed to extract package from %s: %s", path, e)
        return None


def iter_source_files(root: Path | str, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield absolute paths of recognized source files under ``root``, sorted."""
    root = Path(root)
    extensions = tuple(extensions)
    for relative in files.list_recursive(root):
        if has_extension(relative, extensions):
            yield root / relative


def contains_source_files(root: Path | str, extensions: Iterable[str]) -> bool:
    """True if any recognized source file exists anywhere below ``root``."""
    try:
        return next(iter_source_files(root, extensions), None) is not None
    except StructuralError as e:
        logger.debug("Cannot scan %s: %s", root, e)
        return False


def find_namespace_in_tree(root: Path | str, extensions: Iterable[str]) -> Optional[str]:
    """
    Return the first package declared under ``root``.

    Files are visited in lexicographic order of their relative path; files
    without a declaration are skipped. Returns None when the directory is
    missing, unreadable, or contains no declaring source file.
    """
    try:
        for path in iter_source_files(root, extensions):
            declared = extract_declared(path)
            if declared:
                return declared
    except StructuralError as e:
        logger.debug("Failed to read directory %s: %s", root, e)
    return None


def detect_existing_package(
    module_dir: Path | str,
    source_dirs: Iterable[str],
    extensions: Iterable[str],
) -> Optional[str]:
    """
    Return the package declared by the module's sources.

    Source roots are tried in the given order; the first declaration found
    wins.
    """
    module_dir = Path(module_dir)
    extensions = tuple(extensions)
    for source_dir in source_dirs:
        declared = find_namespace_in_tree(module_dir / source_dir, extensions)
        if declared:
            return declared
    return None
