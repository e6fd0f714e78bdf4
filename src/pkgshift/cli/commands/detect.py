"""Detect and locate command implementations."""

import sys
from pathlib import Path
from typing import Optional

from pkgshift import detect_existing_package, locate_package_root
from pkgshift.errors import NamespaceError
from pkgshift.rewrite.descriptors import read_application_id

from .rename import load_config, resolve_module


def run_detect(module: Optional[Path], config: Optional[Path]):
    """Print the package declared by the module's sources."""
    rename_config = load_config(config)
    module_dir = resolve_module(module)

    package = detect_existing_package(module_dir, rename_config)
    if package is None:
        package = read_application_id(module_dir, rename_config.build_files)
    if package is None:
        print(f"Error: No package found in {module_dir}", file=sys.stderr)
        sys.exit(1)
    print(package)


def run_locate(old_package: str, source_root: Path, config: Optional[Path]):
    """Print the directory holding ``old_package`` under ``source_root``."""
    rename_config = load_config(config)
    try:
        anchor = locate_package_root(source_root, old_package, rename_config)
    except NamespaceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if anchor is None:
        print(f"Error: No directory for {old_package} under {source_root}", file=sys.stderr)
        sys.exit(1)
    print(anchor)
