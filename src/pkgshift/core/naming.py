"""
Conversion between dotted package names and nested directory paths.
"""

import re

from ..errors import NamespaceError

# Java/Kotlin identifier (ASCII subset, matching what Android tooling accepts)
_SEGMENT_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SEPARATORS = re.compile(r"[/\\]")


def segments(namespace: str) -> list[str]:
    """
    Split a namespace into its segments.

    Raises
    ------
    NamespaceError
        If the namespace is empty or contains an empty segment
        (``"com..acme"``, ``".com"``) or a path separator.
    """
    if not namespace:
        raise NamespaceError("Namespace must not be empty")
    parts = namespace.split(".")
    for part in parts:
        if not part:
            raise NamespaceError(f"Empty segment in namespace '{namespace}'")
        if _SEPARATORS.search(part):
            raise NamespaceError(
                f"Segment '{part}' of namespace '{namespace}' contains a path separator"
            )
    return parts


def is_valid_segment(segment: str) -> bool:
    """True if ``segment`` can appear in a dotted package name."""
    return _SEGMENT_PATTERN.fullmatch(segment) is not None


def to_path(namespace: str) -> str:
    """
    Convert a dotted namespace to a relative directory path.

    Examples
    --------
    >>> to_path("com.acme.app")
    'com/acme/app'
    """
    return "/".join(segments(namespace))


def to_namespace(path: str) -> str:
    """
    Convert a relative directory path to a dotted namespace.

    Both ``/`` and ``\\`` are treated as separators so that paths produced
    on Windows convert the same way.

    Examples
    --------
    >>> to_namespace("com/acme/app")
    'com.acme.app'
    """
    path = str(path)
    if not path:
        raise NamespaceError("Path must not be empty")
    parts = _SEPARATORS.split(path)
    for part in parts:
        if not part:
            raise NamespaceError(f"Empty component in path '{path}'")
        if "." in part:
            raise NamespaceError(f"Component '{part}' of path '{path}' contains a dot")
    return ".".join(parts)


def escape_pattern(text: str) -> str:
    """Escape ``text`` for literal use inside a regular expression."""
    return re.escape(text)
