"""
Relocation of package subtrees: locating, moving and pruning.
"""

from .locator import locate_package_root
from .relocator import (
    RelocationTarget,
    RelocationResult,
    relocate_tree,
    relocate_package,
    effective_namespace,
    replace_declaration,
)
from .pruner import prune_empty_directories

__all__ = [
    "locate_package_root",
    "RelocationTarget",
    "RelocationResult",
    "relocate_tree",
    "relocate_package",
    "effective_namespace",
    "replace_declaration",
    "prune_empty_directories",
]
