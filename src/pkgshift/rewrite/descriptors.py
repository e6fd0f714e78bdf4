"""
Package name updates in build scripts and the application manifest.
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Optional

from ..core.naming import escape_pattern
from ..errors import FileIOError
from ..io import files
from .references import RewriteResult

logger = logging.getLogger(__name__)

DEFAULT_BUILD_FILES = ("build.gradle", "build.gradle.kts")

_APPLICATION_ID = re.compile(r"""\bapplicationId\s*=?\s*["']([^"']+)["']""")
_NAMESPACE = re.compile(r"""\bnamespace\s*=\s*["']([^"']+)["']""")

_APPLICATION_PLUGIN_PATTERNS = [
    re.compile(r"com\.android\.application"),
    re.compile(r"""apply plugin:\s*['"]com\.android\.application['"]"""),
    re.compile(r"""id\s*['"]com\.android\.application['"]"""),
    re.compile(r"""id\s*\(\s*['"]com\.android\.application['"]\s*\)"""),
    re.compile(r"alias\s*\(\s*libs\.plugins\.android\.application\s*\)"),
    re.compile(r"id\s*\(\s*libs\.plugins\.android\.application\s*\)"),
]
_ANDROID_BLOCK = re.compile(r"android\s*\{")

_SKIP_DIRS = {"build", ".gradle", ".idea", "node_modules"}


def rewrite_descriptor_attribute(
    path: Path | str,
    attribute_key: str,
    old_literal: str,
    new_literal: str,
) -> bool:
    """
    Replace a quoted attribute value in a descriptor file.

    Only assignments of ``attribute_key`` whose quoted value equals
    ``old_literal`` exactly are changed; ``"com.acme.app2"`` is left alone
    when ``old_literal`` is ``com.acme.app``. The separator (``=``, ``:``
    or plain whitespace) and the quote style are preserved, so both
    ``applicationId "x"`` and ``applicationId = "x"`` and
    ``package="x"`` work.

    Returns
    -------
    bool
        True if the file was rewritten; False if it is missing or had no
        matching assignment

    Raises
    ------
    FileIOError
        If the file exists but cannot be read or written
    """
    path = Path(path)
    if not files.is_file(path) or old_literal == new_literal:
        return False

    pattern = re.compile(
        rf"(?<![\w:.-])(?P<head>{escape_pattern(attribute_key)}\s*[=:]?\s*)"
        rf"(?P<q>[\"']){escape_pattern(old_literal)}(?P=q)"
    )
    content = files.read_text(path)
    updated = pattern.sub(
        lambda m: f"{m.group('head')}{m.group('q')}{new_literal}{m.group('q')}",
        content,
    )
    if updated == content:
        return False
    files.write_text(path, updated)
    logger.info("Updated %s in %s", attribute_key, path)
    return True


def read_application_id(
    module_dir: Path | str,
    build_files: Iterable[str] = DEFAULT_BUILD_FILES,
) -> Optional[str]:
    """
    Read the current application id from the module's build scripts.

    Build scripts are checked in order; in each, ``applicationId`` wins
    over ``namespace``.
    """
    module_dir = Path(module_dir)
    for name in build_files:
        build_path = module_dir / name
        if not files.is_file(build_path):
            continue
        try:
            content = files.read_text(build_path)
        except FileIOError as e:
            logger.debug("Skipping %s: %s", build_path, e)
            continue
        for pattern in (_APPLICATION_ID, _NAMESPACE):
            match = pattern.search(content)
            if match:
                return match.group(1)
    return None


def update_build_files(
    module_dir: Path | str,
    old_package: str,
    new_package: str,
    build_files: Iterable[str] = DEFAULT_BUILD_FILES,
    attributes: Iterable[str] = ("applicationId", "namespace"),
) -> RewriteResult:
    """Rewrite package attributes in each existing build script of the module."""
    module_dir = Path(module_dir)
    attributes = tuple(attributes)
    result = RewriteResult()
    for name in build_files:
        build_path = module_dir / name
        try:
            changed = False
            for key in attributes:
                changed |= rewrite_descriptor_attribute(build_path, key, old_package, new_package)
        except FileIOError as e:
            message = f"Failed to update {build_path}: {e}"
            logger.warning(message)
            result.warnings.append(message)
            continue
        if changed:
            result.rewritten.append(build_path)
    return result


def update_manifest(manifest_path: Path | str, old_package: str, new_package: str) -> RewriteResult:
    """Rewrite the ``package`` attribute of the application manifest."""
    result = RewriteResult()
    try:
        if rewrite_descriptor_attribute(manifest_path, "package", old_package, new_package):
            result.rewritten.append(Path(manifest_path))
    except FileIOError as e:
        message = f"Failed to update {manifest_path}: {e}"
        logger.warning(message)
        result.warnings.append(message)
    return result


def is_application_build_script(content: str) -> bool:
    """True if a build script applies the Android application plugin."""
    has_plugin = any(p.search(content) for p in _APPLICATION_PLUGIN_PATTERNS)
    return has_plugin and _ANDROID_BLOCK.search(content) is not None


def find_app_module(project_root: Path | str = ".") -> Path:
    """
    Find the application module of a Gradle project.

    Build scripts are searched in sorted order, skipping build output and
    hidden directories; the directory of the first one applying the
    Android application plugin is returned. Falls back to
    ``project_root / "app"``.
    """
    project_root = Path(project_root)
    for dirpath, dirnames, filenames in os.walk(project_root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith(".") and d not in _SKIP_DIRS)
        for name in sorted(filenames):
            if name not in DEFAULT_BUILD_FILES:
                continue
            build_path = Path(dirpath) / name
            try:
                content = files.read_text(build_path)
            except FileIOError:
                continue
            if is_application_build_script(content):
                logger.debug("Found application module at %s", build_path.parent)
                return build_path.parent
    return project_root / "app"
