"""Rename command implementation."""

import sys
from pathlib import Path
from typing import Optional

import yaml

from pkgshift import rename_package, RenameConfig
from pkgshift.errors import PkgshiftError
from pkgshift.rewrite.descriptors import find_app_module


def load_config(config: Optional[Path]) -> RenameConfig:
    """Load the layout config, exiting with an error message if it is invalid."""
    if config is None:
        return RenameConfig()
    try:
        return RenameConfig.from_yaml(config)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"Error: Could not load config from {config}", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        sys.exit(1)


def resolve_module(module: Optional[Path]) -> Path:
    """Use the given module directory or find the application module."""
    if module is not None:
        return module
    return find_app_module(Path.cwd())


def run_rename(
    new_package: str,
    module: Optional[Path],
    old_package: Optional[str],
    config: Optional[Path],
    output: Optional[Path],
    format: str,
    quiet: bool,
):
    """Rename the package of an application module."""
    rename_config = load_config(config)
    module_dir = resolve_module(module)

    if not module_dir.is_dir():
        print(f"Error: Module directory {module_dir} does not exist", file=sys.stderr)
        sys.exit(1)

    if not quiet:
        print(f"Renaming package in {module_dir}", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(f"New package: {new_package}", file=sys.stderr)
        if old_package:
            print(f"Old package: {old_package}", file=sys.stderr)
        print(file=sys.stderr)

    try:
        report = rename_package(
            module_dir,
            new_package,
            old_package=old_package,
            config=rename_config,
        )
    except PkgshiftError as e:
        print("Error: Package rename failed", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        sys.exit(1)

    if format == "json":
        output_text = report.to_json()
    else:
        output_text = report.summary()

    if output:
        with open(output, 'w') as f:
            f.write(output_text)
        if not quiet:
            print(f"\nReport written to {output}", file=sys.stderr)
    else:
        print(output_text)
