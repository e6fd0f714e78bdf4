"""
Locating the directory that holds a package on disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..core.naming import segments, to_path
from ..io import files
from ..io.scanner import contains_source_files

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".kt", ".java")


def locate_package_root(
    source_root: Path | str,
    old_namespace: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Optional[Path]:
    """
    Find the most specific existing directory for ``old_namespace``.

    The directory mirroring the full namespace is returned if it exists.
    Otherwise shorter prefixes are tried, longest first, and the first one
    that exists and holds at least one source file somewhere below it is
    returned. This tolerates trees whose layout drifted from the declared
    package (e.g. files declaring ``com.acme.app`` living in ``com/acme``).

    Parameters
    ----------
    source_root : Path or str
        Source root such as ``app/src/main/java``
    old_namespace : str
        Declared package, e.g. ``"com.acme.app"``
    extensions : iterable of str
        Recognized source file suffixes

    Returns
    -------
    Path or None
        The anchor directory, or None if no existing structure matches
    """
    source_root = Path(source_root)
    extensions = tuple(extensions)
    parts = segments(old_namespace)

    candidate = source_root / to_path(old_namespace)
    if files.is_dir(candidate):
        return candidate

    for k in range(len(parts), 0, -1):
        prefix = source_root / to_path(".".join(parts[:k]))
        if files.is_dir(prefix) and contains_source_files(prefix, extensions):
            logger.debug("Using %s as package root for %s", prefix, old_namespace)
            return prefix

    logger.debug("No existing directory for %s under %s", old_namespace, source_root)
    return None
