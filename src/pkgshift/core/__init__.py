"""
Pure helpers with no filesystem access.
"""

from .naming import (
    to_path,
    to_namespace,
    segments,
    is_valid_segment,
    escape_pattern,
)

__all__ = ["to_path", "to_namespace", "segments", "is_valid_segment", "escape_pattern"]
