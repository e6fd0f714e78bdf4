"""
Exception types raised while renaming a source tree's package.
"""

from pathlib import Path


class PkgshiftError(Exception):
    """Base class for all pkgshift errors."""


class NamespaceError(PkgshiftError, ValueError):
    """A dotted namespace or a directory path could not be converted."""


class FileIOError(PkgshiftError, OSError):
    """
    Reading, writing or copying a single file failed.

    These are recoverable: relocation and reference rewriting record them
    as warnings and carry on with the next file.
    """

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class StructuralError(PkgshiftError):
    """The source root itself could not be enumerated; nothing was moved."""
