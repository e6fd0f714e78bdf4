"""
pkgshift: rename the package of a Java/Kotlin source tree.

Moves the package directory to its new location, rewrites the package
declaration of every moved file (keeping subpackages), rewrites imports
and qualified references across the module, updates build scripts and the
manifest, and removes directories left empty.

Quick Start
-----------
Rename an Android application module:

>>> from pkgshift import rename_package
>>> report = rename_package("app", "com.foo.bar")
>>> print(report.summary())

Move a package within a single source root:

>>> from pkgshift import relocate_package
>>> result = relocate_package("app/src/main/java", "com.acme.app", "com.foo.bar")
>>> print(result.moved_count, result.warnings)

Examples
--------
>>> from pkgshift import to_path, to_namespace
>>> to_path("com.acme.app")
'com/acme/app'
>>> to_namespace("com/acme/app")
'com.acme.app'
"""

__version__ = "0.1.0"

# High-level API
from .api import (
    rename_package,
    locate_package_root,
    relocate_package,
    rewrite_project_references,
    detect_existing_package,
    RenameReport,
)

# Building blocks
from .core.naming import to_path, to_namespace
from .rewrite.descriptors import rewrite_descriptor_attribute
from .relocate.relocator import RelocationResult, RelocationTarget
from .rewrite.references import RewriteResult
from .config import RenameConfig
from .errors import PkgshiftError, NamespaceError, FileIOError, StructuralError

__all__ = [
    # Simple API - Start here!
    "rename_package",
    "relocate_package",
    "locate_package_root",
    "rewrite_project_references",
    "rewrite_descriptor_attribute",
    "detect_existing_package",

    # Result objects
    "RenameReport",
    "RelocationResult",
    "RelocationTarget",
    "RewriteResult",

    # Converters
    "to_path",
    "to_namespace",

    # Configuration
    "RenameConfig",

    # Errors
    "PkgshiftError",
    "NamespaceError",
    "FileIOError",
    "StructuralError",

    # Version
    "__version__",
]
