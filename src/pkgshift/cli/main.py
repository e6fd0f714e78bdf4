"""Main CLI application for pkgshift."""

import logging
import typer
from pathlib import Path
from typing import Optional
from enum import Enum

app = typer.Typer(
    name="pkgshift",
    help="Rename the package of a Java/Kotlin source tree",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format."""
    TEXT = "text"
    JSON = "json"


def configure_logging(verbose: bool, quiet: bool):
    """Send log records to stderr at a level chosen by the flags."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)


module_option = typer.Option(
    None,
    "--module", "-m",
    help="Application module directory (default: detected from build scripts)",
    file_okay=False,
    dir_okay=True,
)
config_option = typer.Option(
    None,
    "--config", "-c",
    help="YAML file overriding source roots, extensions and descriptor files",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


@app.command()
def rename(
    new_package: str = typer.Argument(
        ...,
        help="New package name, e.g. com.foo.bar",
    ),
    module: Optional[Path] = module_option,
    old_package: Optional[str] = typer.Option(
        None,
        "--old", "-p",
        help="Current package (default: detected from sources)",
    ),
    config: Optional[Path] = config_option,
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Report file (default: stdout)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Report format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log every step",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Rename the package of an application module.

    Moves the package directory in every source root, rewrites package
    declarations, imports and qualified references, and updates
    applicationId/namespace in build scripts and the manifest package.

    Example:
        pkgshift rename com.foo.bar --module app
        pkgshift rename com.foo.bar --old com.acme.app --format json
    """
    from .commands.rename import run_rename

    configure_logging(verbose, quiet)
    run_rename(
        new_package=new_package,
        module=module,
        old_package=old_package,
        config=config,
        output=output,
        format=format.value,
        quiet=quiet,
    )


@app.command()
def detect(
    module: Optional[Path] = module_option,
    config: Optional[Path] = config_option,
):
    """
    Print the current package of an application module.

    Example:
        pkgshift detect --module app
    """
    from .commands.detect import run_detect

    configure_logging(False, True)
    run_detect(module=module, config=config)


@app.command()
def locate(
    old_package: str = typer.Argument(
        ...,
        help="Package to look for, e.g. com.acme.app",
    ),
    source_root: Path = typer.Option(
        ...,
        "--source-root", "-s",
        help="Source root such as app/src/main/java",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = config_option,
):
    """
    Print the directory that holds a package under a source root.

    Falls back to the deepest existing parent directory containing
    sources when the full package path does not exist.

    Example:
        pkgshift locate com.acme.app -s app/src/main/java
    """
    from .commands.detect import run_locate

    configure_logging(False, True)
    run_locate(old_package=old_package, source_root=source_root, config=config)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
