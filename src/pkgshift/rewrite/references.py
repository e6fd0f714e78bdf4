"""
Project-wide rewriting of references to a renamed package.

The rewrite is textual, not semantic: a qualified name such as
``com.acme.app.Foo`` is replaced wherever it appears, including inside
string literals and comments.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable

from ..core.naming import escape_pattern, segments
from ..errors import FileIOError, StructuralError
from ..io import files
from ..io.scanner import iter_source_files

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".kt", ".java")


@dataclass
class RewriteResult:
    """Files changed by a rewrite pass and the problems met on the way."""

    rewritten: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def merge(self, other: "RewriteResult") -> "RewriteResult":
        self.rewritten.extend(other.rewritten)
        self.warnings.extend(other.warnings)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rewritten": [str(p) for p in self.rewritten],
            "warnings": list(self.warnings),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _reference_pattern(old_namespace: str) -> re.Pattern:
    old = escape_pattern(old_namespace)
    return re.compile(
        # declaration of exactly the old package
        rf"^(?P<decl>package\s+){old}(?![\w.])"
        # import of the old package or anything below it
        rf"|^(?P<imp>import\s+(?:static\s+)?){old}(?!\w)"
        # qualified reference anywhere
        rf"|\b{old}(?=\.)",
        re.MULTILINE,
    )


def rewrite_content(text: str, old_namespace: str, new_namespace: str) -> str:
    """
    Replace references to ``old_namespace`` in source text.

    Three kinds of occurrence are rewritten in a single pass, so text that
    was just replaced is never matched again (which matters when the new
    package extends the old one):

    - the first ``package <old>`` declaration (exact package only)
    - line-anchored ``import <old>...`` statements
    - every qualified ``<old>.`` reference

    Examples
    --------
    >>> rewrite_content("import com.acme.app.Foo", "com.acme.app", "com.foo.bar")
    'import com.foo.bar.Foo'
    """
    if old_namespace == new_namespace:
        return text
    pattern = _reference_pattern(old_namespace)
    declaration_done = False

    def _replace(match: re.Match) -> str:
        nonlocal declaration_done
        if match.group("decl") is not None:
            if declaration_done:
                return match.group(0)
            declaration_done = True
            return match.group("decl") + new_namespace
        if match.group("imp") is not None:
            return match.group("imp") + new_namespace
        return new_namespace

    return pattern.sub(_replace, text)


def rewrite_file(path: Path | str, old_namespace: str, new_namespace: str) -> bool:
    """
    Rewrite references in one file.

    The file is written only if its content changes.

    Returns
    -------
    bool
        True if the file was rewritten

    Raises
    ------
    FileIOError
        If the file cannot be read or written
    """
    content = files.read_text(path)
    updated = rewrite_content(content, old_namespace, new_namespace)
    if updated == content:
        return False
    files.write_text(path, updated)
    logger.debug("Updated package references in %s", path)
    return True


def rewrite_project_references(
    source_dirs: Iterable[Path | str],
    old_namespace: str,
    new_namespace: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> RewriteResult:
    """
    Rewrite references to ``old_namespace`` in every source file below
    ``source_dirs``.

    Missing directories are skipped. A file that cannot be read or written
    is reported in the result's warnings and left unchanged.

    Parameters
    ----------
    source_dirs : iterable of Path or str
        Source roots (main, test, instrumentation test, ...)
    old_namespace, new_namespace : str
        Package names
    extensions : iterable of str
        Recognized source file suffixes

    Returns
    -------
    RewriteResult
    """
    result = RewriteResult()
    segments(old_namespace)
    segments(new_namespace)
    if old_namespace == new_namespace:
        return result

    extensions = tuple(extensions)
    logger.info("Updating package references from %s to %s", old_namespace, new_namespace)
    for source_dir in source_dirs:
        try:
            paths = list(iter_source_files(source_dir, extensions))
        except StructuralError as e:
            message = f"Failed to update references in {source_dir}: {e}"
            logger.warning(message)
            result.warnings.append(message)
            continue
        for path in paths:
            try:
                if rewrite_file(path, old_namespace, new_namespace):
                    result.rewritten.append(path)
            except FileIOError as e:
                message = f"Failed to update {path}: {e}"
                logger.warning(message)
                result.warnings.append(message)
    logger.info("Rewrote references in %d file(s)", len(result.rewritten))
    return result
