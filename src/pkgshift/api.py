"""
High-level API for renaming the package of a Java/Kotlin module.

This module composes the locator, relocator, reference rewriter and
descriptor updates into single calls, with unified result objects.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List, Iterable
from pathlib import Path
import json
import logging

from .config import RenameConfig
from .core.naming import segments
from .errors import PkgshiftError
from .io.scanner import detect_existing_package as _detect_in_dirs
from .relocate.locator import locate_package_root as _locate
from .relocate.relocator import RelocationResult, relocate_package as _relocate
from .rewrite.references import RewriteResult, rewrite_project_references as _rewrite_refs
from .rewrite.descriptors import (
    rewrite_descriptor_attribute,
    read_application_id,
    update_build_files,
    update_manifest,
)

logger = logging.getLogger(__name__)


@dataclass
class RenameReport:
    """
    Result of renaming the package of a module.

    Attributes
    ----------
    module_dir : Path
        Module directory the rename was applied to
    old_package : str
        Package before the rename
    new_package : str
        Package after the rename
    relocations : Dict[str, RelocationResult]
        Relocation result per existing source root (relative to the module)
    references : RewriteResult
        Source files whose references were rewritten
    descriptors : RewriteResult
        Build scripts and manifest that were updated
    skipped : bool
        True when the module already used the new package

    Examples
    --------
    >>> from pkgshift import rename_package
    >>> report = rename_package("app", "com.foo.bar")
    >>> print(report.summary())
    >>> report.to_json("rename.json")
    """

    module_dir: Path
    old_package: str
    new_package: str
    relocations: Dict[str, RelocationResult] = field(default_factory=dict)
    references: RewriteResult = field(default_factory=RewriteResult)
    descriptors: RewriteResult = field(default_factory=RewriteResult)
    skipped: bool = False

    @property
    def moved_count(self) -> int:
        """Total files moved across all source roots."""
        return sum(r.moved_count for r in self.relocations.values())

    @property
    def warnings(self) -> List[str]:
        """Every per-file warning, in the order the steps ran."""
        collected = []
        for relocation in self.relocations.values():
            collected.extend(relocation.warnings)
        collected.extend(self.references.warnings)
        collected.extend(self.descriptors.warnings)
        return collected

    def summary(self) -> str:
        """
        Generate human-readable summary of the rename.

        Returns
        -------
        str
            Formatted multi-line summary
        """
        lines = []
        lines.append("=" * 70)
        lines.append(f"PACKAGE RENAME: {self.old_package} -> {self.new_package}")
        lines.append("=" * 70)
        lines.append("")
        lines.append(f"Module: {self.module_dir}")

        if self.skipped:
            lines.append("")
            lines.append(f"Package already set to {self.new_package}, nothing to do")
            lines.append("=" * 70)
            return "\n".join(lines)

        lines.append("")
        lines.append("SOURCE ROOTS:")
        for source_dir, relocation in self.relocations.items():
            if relocation.created:
                lines.append(f"  {source_dir}: no sources, created empty package directory")
            else:
                lines.append(f"  {source_dir}: {relocation.moved_count} file(s) moved")

        lines.append("")
        lines.append(f"References updated in {len(self.references.rewritten)} file(s)")
        for path in self.descriptors.rewritten:
            lines.append(f"Updated descriptor: {path}")

        warnings = self.warnings
        if warnings:
            lines.append("")
            lines.append(f"WARNINGS ({len(warnings)}):")
            for w in warnings:
                lines.append(f"  - {w}")

        lines.append("")
        lines.append("=" * 70)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export the report as a JSON-serializable dictionary."""
        return {
            'module_dir': str(self.module_dir),
            'old_package': self.old_package,
            'new_package': self.new_package,
            'skipped': self.skipped,
            'moved_count': self.moved_count,
            'relocations': {k: v.to_dict() for k, v in self.relocations.items()},
            'references': self.references.to_dict(),
            'descriptors': self.descriptors.to_dict(),
            'warnings': self.warnings,
        }

    def to_json(self, filepath: Optional[str] = None, indent: int = 2) -> str:
        """
        Export the report as JSON.

        Parameters
        ----------
        filepath : str, optional
            If provided, write JSON to this file
        indent : int, default=2
            Indentation level for pretty printing
        """
        json_str = json.dumps(self.to_dict(), indent=indent)

        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)

        return json_str

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"RenameReport(old='{self.old_package}', new='{self.new_package}', "
            f"moved={self.moved_count}, warnings={len(self.warnings)})"
        )


def locate_package_root(
    source_root: Path | str,
    old_namespace: str,
    config: Optional[RenameConfig] = None,
) -> Optional[Path]:
    """
    Find the directory holding ``old_namespace`` under ``source_root``.

    Returns None when no existing structure matches.
    """
    config = config or RenameConfig()
    return _locate(source_root, old_namespace, config.source_extensions)


def relocate_package(
    source_root: Path | str,
    old_namespace: str,
    new_namespace: str,
    config: Optional[RenameConfig] = None,
) -> RelocationResult:
    """
    Move a package subtree within one source root.

    Runs locate, relocate and prune. See
    :func:`pkgshift.relocate.relocate_package`.
    """
    config = config or RenameConfig()
    return _relocate(source_root, old_namespace, new_namespace, config.source_extensions)


def rewrite_project_references(
    source_dirs: Iterable[Path | str],
    old_namespace: str,
    new_namespace: str,
    config: Optional[RenameConfig] = None,
) -> RewriteResult:
    """Rewrite declarations, imports and qualified references in all sources."""
    config = config or RenameConfig()
    return _rewrite_refs(source_dirs, old_namespace, new_namespace, config.source_extensions)


def detect_existing_package(
    module_dir: Path | str,
    config: Optional[RenameConfig] = None,
) -> Optional[str]:
    """Return the package declared by the module's sources, or None."""
    config = config or RenameConfig()
    return _detect_in_dirs(module_dir, config.source_dirs, config.source_extensions)


def rename_package(
    module_dir: Path | str,
    new_package: str,
    old_package: Optional[str] = None,
    config: Optional[RenameConfig] = None,
) -> RenameReport:
    """
    Rename the package of an application module.

    For every existing source root the old package subtree is moved to the
    new package path, then references are rewritten across all source
    roots, and finally the build scripts and manifest are updated.

    Parameters
    ----------
    module_dir : Path or str
        Application module directory (the one holding ``build.gradle``)
    new_package : str
        Target package, e.g. ``"com.foo.bar"``
    old_package : str, optional
        Current package. Detected from the sources, then from the build
        scripts, if not given.
    config : RenameConfig, optional
        Layout conventions (source roots, extensions, descriptor files)

    Returns
    -------
    RenameReport

    Raises
    ------
    PkgshiftError
        If the current package cannot be determined
    NamespaceError
        If either package name is malformed
    StructuralError
        If a source root cannot be enumerated

    Examples
    --------
    >>> report = rename_package("app", "com.foo.bar")
    >>> report.moved_count
    12
    >>> report.warnings
    []
    """
    config = config or RenameConfig()
    module_dir = Path(module_dir)
    segments(new_package)

    if old_package is None:
        old_package = detect_existing_package(module_dir, config) or read_application_id(
            module_dir, config.build_files
        )
        if old_package is None:
            raise PkgshiftError(f"Could not determine the current package of {module_dir}")
        logger.info("Detected current package %s", old_package)
    segments(old_package)

    report = RenameReport(module_dir=module_dir, old_package=old_package, new_package=new_package)
    if old_package == new_package:
        logger.info("Package name already set to: %s", new_package)
        report.skipped = True
        return report

    source_roots = [module_dir / d for d in config.source_dirs if (module_dir / d).is_dir()]
    for source_root in source_roots:
        key = source_root.relative_to(module_dir).as_posix()
        report.relocations[key] = relocate_package(source_root, old_package, new_package, config)

    report.references = rewrite_project_references(source_roots, old_package, new_package, config)

    report.descriptors.merge(
        update_build_files(
            module_dir, old_package, new_package,
            build_files=config.build_files,
            attributes=config.descriptor_attributes,
        )
    )
    report.descriptors.merge(update_manifest(module_dir / config.manifest, old_package, new_package))

    logger.info(
        "Renamed %s to %s: %d file(s) moved, %d warning(s)",
        old_package, new_package, report.moved_count, len(report.warnings),
    )
    return report

