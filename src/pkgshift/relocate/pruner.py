"""
Removal of directories left empty after a relocation.
"""

import logging
from pathlib import Path

from ..errors import FileIOError
from ..io import files

logger = logging.getLogger(__name__)


def _is_within(path: Path, boundary: Path) -> bool:
    return path == boundary or boundary in path.parents


def _prune_subtree(directory: Path, removed: list[Path]) -> None:
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return
    for child in children:
        if child.is_dir() and not child.is_symlink():
            _prune_subtree(child, removed)
    try:
        empty = not any(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return
    if empty:
        files.remove_empty_directory(directory)
        removed.append(directory)


def _try_prune(directory: Path, removed: list[Path]) -> bool:
    """Prune ``directory``'s subtree; True if ``directory`` itself was removed."""
    try:
        _prune_subtree(directory, removed)
    except FileIOError as e:
        logger.warning("Could not remove %s: %s", e.path, e)
    return not files.exists(directory)


def prune_empty_directories(directory: Path | str, boundary: Path | str) -> list[Path]:
    """
    Remove empty directories in and above ``directory``.

    Subdirectories of ``directory`` are pruned first (post-order). If
    ``directory`` ends up empty it is removed, followed by each empty
    ancestor, stopping at the first non-empty one or at ``boundary``.
    ``boundary`` itself is never removed, and nothing outside it is
    touched.

    Parameters
    ----------
    directory : Path or str
        Directory vacated by a relocation
    boundary : Path or str
        Source root that bounds the upward walk

    Returns
    -------
    list of Path
        Removed directories, in removal order
    """
    directory = Path(directory).resolve()
    boundary = Path(boundary).resolve()
    removed: list[Path] = []

    if not directory.is_dir() or not _is_within(directory, boundary):
        return removed
    if directory == boundary:
        # Prune below the boundary but keep the boundary itself
        for child in sorted(directory.iterdir()):
            if child.is_dir() and not child.is_symlink():
                _try_prune(child, removed)
        return removed

    if not _try_prune(directory, removed):
        return removed

    current = directory.parent
    while current != boundary and _is_within(current, boundary):
        if any(current.iterdir()):
            break
        try:
            files.remove_empty_directory(current)
        except FileIOError as e:
            logger.warning("Could not remove %s: %s", current, e)
            break
        removed.append(current)
        current = current.parent

    for path in removed:
        logger.debug("Removed empty directory %s", path)
    return removed
