"""
Moving a package subtree and rewriting the declarations of moved files.

Relocation is file-granular and best effort: each file is written to its
new location first and the original is removed only once that write has
succeeded. A file that fails, or whose destination is already
taken by another file, is left where it was and reported in
``RelocationResult.warnings``; running the same rename again picks up
where the previous run stopped.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, Optional

from ..core.naming import is_valid_segment, segments, to_namespace, to_path
from ..errors import FileIOError, StructuralError
from ..io import files
from ..io.scanner import PACKAGE_PATTERN, has_extension
from .locator import DEFAULT_EXTENSIONS, locate_package_root
from .pruner import prune_empty_directories

logger = logging.getLogger(__name__)


@dataclass
class RelocationTarget:
    """Where a package subtree moves from and to."""

    old_root: Path
    new_root: Path
    new_namespace: str


@dataclass
class RelocationResult:
    """
    Outcome of relocating one package subtree.

    Attributes
    ----------
    moved_count : int
        Number of files written to the new root and removed from the old one
    warnings : list of str
        Per-file problems; the affected files were left in place
    old_root : Path or None
        Anchor directory the files were moved from (None if nothing existed)
    new_root : Path or None
        Directory of the new package
    skipped : bool
        True when old and new package were identical and nothing was done
    created : bool
        True when no existing structure was found and an empty directory
        was created for the new package instead
    removed_dirs : list of Path
        Directories pruned after the move
    """

    moved_count: int = 0
    warnings: list[str] = field(default_factory=list)
    old_root: Optional[Path] = None
    new_root: Optional[Path] = None
    skipped: bool = False
    created: bool = False
    removed_dirs: list[Path] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if every file was moved."""
        return not self.warnings

    def summary(self) -> str:
        lines = []
        if self.skipped:
            lines.append("Package unchanged, nothing to relocate")
        elif self.created:
            lines.append(f"No existing sources found, created {self.new_root}")
        else:
            lines.append(f"Moved {self.moved_count} file(s)")
            lines.append(f"  from: {self.old_root}")
            lines.append(f"  to:   {self.new_root}")
            if self.removed_dirs:
                lines.append(f"Removed {len(self.removed_dirs)} empty director(y/ies)")
        if self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            lines.extend(f"  - {w}" for w in self.warnings)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "moved_count": self.moved_count,
            "warnings": list(self.warnings),
            "old_root": str(self.old_root) if self.old_root else None,
            "new_root": str(self.new_root) if self.new_root else None,
            "skipped": self.skipped,
            "created": self.created,
            "removed_dirs": [str(p) for p in self.removed_dirs],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def replace_declaration(text: str, namespace: str) -> tuple[str, bool]:
    """
    Replace the first package declaration in ``text`` with ``namespace``.

    Anything following the package name on that line (a Java ``;``, a
    comment) is kept.

    Returns
    -------
    text : str
        Updated text (unchanged if there was no declaration)
    found : bool
        Whether a declaration was present
    """
    match = PACKAGE_PATTERN.search(text)
    if match is None:
        return text, False
    return text[:match.start()] + f"package {namespace}" + text[match.end():], True


def effective_namespace(
    relative_path: PurePosixPath | Path,
    new_namespace: str,
    warnings: Optional[list[str]] = None,
) -> str:
    """
    Namespace a file at ``relative_path`` (relative to the old root)
    declares once moved.

    Files directly in the old root take ``new_namespace``; files in
    subdirectories keep their subpackage suffix. Directory names that are
    not valid identifiers are kept as they are and reported in
    ``warnings``.
    """
    directory = PurePosixPath(Path(relative_path).as_posix()).parent
    if str(directory) == ".":
        return new_namespace

    invalid = [part for part in directory.parts if not is_valid_segment(part)]
    if invalid:
        # Passed through verbatim; no sanitization rule is applied
        if warnings is not None:
            warnings.append(
                f"Directory '{directory}' contains segment(s) that are not valid "
                f"package identifiers: {', '.join(invalid)}"
            )
        return new_namespace + "." + ".".join(directory.parts)
    return new_namespace + "." + to_namespace(str(directory))


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def relocate_tree(
    target: RelocationTarget,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    boundary: Optional[Path | str] = None,
) -> RelocationResult:
    """
    Move every file under ``target.old_root`` to the mirrored path under
    ``target.new_root``.

    Source files (by extension) have their package declaration rewritten
    to their effective namespace; all other files are copied unchanged.
    Afterwards the vacated directories are pruned up to ``boundary``.

    Parameters
    ----------
    target : RelocationTarget
        Old and new roots and the new package name
    extensions : iterable of str
        Recognized source file suffixes
    boundary : Path or str, optional
        Directory never pruned (the source root). Defaults to the parent
        of ``target.old_root``.

    Returns
    -------
    RelocationResult

    Raises
    ------
    StructuralError
        If the old root cannot be enumerated or the new root cannot be
        created. No file has been touched in that case.
    """
    extensions = tuple(extensions)
    old_root = Path(target.old_root)
    new_root = Path(target.new_root)
    boundary = Path(boundary) if boundary is not None else old_root.parent
    result = RelocationResult(old_root=old_root, new_root=new_root)

    entries = files.list_recursive(old_root)
    try:
        files.ensure_directory(new_root)
    except FileIOError as e:
        raise StructuralError(f"Cannot create {new_root}: {e}") from e

    # Anchor already at the new package path (drifted layout): rewrite in place
    resolved_old, resolved_new = old_root.resolve(), new_root.resolve()
    in_place = resolved_new == resolved_old

    # Files already inside the new root (new package nested in the old one)
    # stay where they are.
    if not in_place and _is_within(resolved_new, resolved_old):
        nested = resolved_new.relative_to(resolved_old)
        entries = [e for e in entries if not _is_within(e, nested)]

    warned_dirs: set[Path] = set()
    for relative in entries:
        src = old_root / relative
        dst = new_root / relative

        dir_warnings: list[str] = []
        namespace = effective_namespace(relative, target.new_namespace, dir_warnings)
        if dir_warnings and relative.parent not in warned_dirs:
            warned_dirs.add(relative.parent)
            for w in dir_warnings:
                logger.warning(w)
            result.warnings.extend(dir_warnings)

        if files.exists(dst) and not files.same_file(src, dst):
            message = f"Not moving {src}: destination exists at {dst}"
            logger.warning(message)
            result.warnings.append(message)
            continue

        try:
            if has_extension(relative, extensions):
                content, found = replace_declaration(files.read_text(src), namespace)
                if not found:
                    logger.debug("No package declaration in %s, moving unchanged", src)
                files.write_text(dst, content)
            elif not in_place:
                files.copy_file(src, dst)
        except FileIOError as e:
            message = f"Failed to move {src}: {e}"
            logger.warning(message)
            result.warnings.append(message)
            continue

        if in_place:
            result.moved_count += 1
            continue
        try:
            files.remove_file(src)
        except FileIOError as e:
            message = f"Moved {src} but could not remove the original: {e}"
            logger.warning(message)
            result.warnings.append(message)
            continue
        result.moved_count += 1

    logger.info("Moved %d file(s) from %s to %s", result.moved_count, old_root, new_root)
    result.removed_dirs = prune_empty_directories(old_root, boundary)
    return result


def relocate_package(
    source_root: Path | str,
    old_namespace: str,
    new_namespace: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> RelocationResult:
    """
    Move the package ``old_namespace`` to ``new_namespace`` under a source root.

    Locates the existing package directory (tolerating a shallower layout
    than the declared package), moves its subtree to the directory of the
    new package, rewrites declarations and prunes emptied directories
    below ``source_root``.

    Identical old and new packages are a no-op. If no existing directory
    is found, an empty directory for the new package is created.

    Examples
    --------
    >>> result = relocate_package("app/src/main/java", "com.acme.app", "com.foo.bar")
    >>> result.moved_count
    2
    """
    source_root = Path(source_root)
    segments(old_namespace)
    segments(new_namespace)

    if old_namespace == new_namespace:
        logger.info("Package already set to %s", new_namespace)
        return RelocationResult(skipped=True)

    new_root = source_root / to_path(new_namespace)
    anchor = locate_package_root(source_root, old_namespace, extensions)
    if anchor is None:
        try:
            files.ensure_directory(new_root)
        except FileIOError as e:
            raise StructuralError(f"Cannot create {new_root}: {e}") from e
        logger.info("No sources for %s under %s, created %s", old_namespace, source_root, new_root)
        return RelocationResult(new_root=new_root, created=True)

    logger.info("Relocating %s (%s) to %s", old_namespace, anchor, new_root)
    target = RelocationTarget(old_root=anchor, new_root=new_root, new_namespace=new_namespace)
    return relocate_tree(target, extensions, boundary=source_root)
