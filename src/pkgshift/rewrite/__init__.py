"""
Rewriting of package references in sources and descriptor files.
"""

from .references import (
    RewriteResult,
    rewrite_content,
    rewrite_file,
    rewrite_project_references,
)
from .descriptors import (
    rewrite_descriptor_attribute,
    read_application_id,
    update_build_files,
    update_manifest,
    find_app_module,
)

__all__ = [
    "RewriteResult",
    "rewrite_content",
    "rewrite_file",
    "rewrite_project_references",
    "rewrite_descriptor_attribute",
    "read_application_id",
    "update_build_files",
    "update_manifest",
    "find_app_module",
]
