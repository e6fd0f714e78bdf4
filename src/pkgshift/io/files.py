"""
Filesystem primitives used by the scanner, relocator and rewriters.

Every write goes to a temporary sibling file first and is moved into place
with :func:`os.replace`, so a target is either its old content or the
complete new content.
"""

import os
import secrets
import shutil
from pathlib import Path

from ..errors import FileIOError, StructuralError


def exists(path: Path | str) -> bool:
    return Path(path).exists()


def is_file(path: Path | str) -> bool:
    return Path(path).is_file()


def is_dir(path: Path | str) -> bool:
    return Path(path).is_dir()


def ensure_directory(path: Path | str) -> Path:
    """Create ``path`` and its parents if missing."""
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileIOError(path, f"cannot create directory: {e}") from e
    return path


def read_text(path: Path | str) -> str:
    """Read a UTF-8 text file, keeping its line endings."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(path, f"cannot read: {e}") from e


def _atomic_replace(target: Path, fill) -> None:
    ensure_directory(target.parent)
    tmp = target.parent / f".{target.name}.{secrets.token_hex(4)}.tmp"
    try:
        # 0o666 is filtered by the process umask, like a plain open()
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    except OSError as e:
        raise FileIOError(target, f"cannot write: {e}") from e
    try:
        os.close(fd)
        if target.exists():
            shutil.copymode(target, tmp)
        fill(tmp)
        os.replace(tmp, target)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise FileIOError(target, f"cannot write: {e}") from e


def write_text(path: Path | str, text: str) -> None:
    """Write ``text`` as UTF-8, creating parent directories as needed."""
    # newline="" keeps the line endings already present in ``text``
    _atomic_replace(Path(path), lambda tmp: tmp.write_text(text, encoding="utf-8", newline=""))


def copy_file(src: Path | str, dst: Path | str) -> None:
    """Copy ``src`` to ``dst`` byte-for-byte, keeping its metadata."""
    src = Path(src)
    if not src.is_file():
        raise FileIOError(src, "cannot copy: not a file")
    _atomic_replace(Path(dst), lambda tmp: shutil.copy2(src, tmp))


def list_recursive(root: Path | str) -> list[Path]:
    """
    List every file under ``root`` as a path relative to ``root``.

    The result is sorted by its POSIX form so that traversal order does
    not depend on the platform or the filesystem.

    Returns an empty list if ``root`` does not exist.

    Raises
    ------
    StructuralError
        If ``root`` exists but cannot be walked.
    """
    root = Path(root)
    if not root.exists():
        return []
    if not root.is_dir():
        raise StructuralError(f"{root} is not a directory")

    def _fail(error: OSError):
        raise StructuralError(f"Cannot enumerate {root}: {error}") from error

    files = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_fail):
        base = Path(dirpath)
        for name in filenames:
            files.append((base / name).relative_to(root))
    return sorted(files, key=lambda p: p.as_posix())


def remove_file(path: Path | str) -> None:
    path = Path(path)
    try:
        path.unlink()
    except OSError as e:
        raise FileIOError(path, f"cannot remove: {e}") from e


def remove_empty_directory(path: Path | str) -> None:
    """Remove ``path``; fails if the directory is not empty."""
    path = Path(path)
    try:
        path.rmdir()
    except OSError as e:
        raise FileIOError(path, f"cannot remove directory: {e}") from e


def same_file(a: Path | str, b: Path | str) -> bool:
    """True if both paths exist and refer to the same file."""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False
