"""
Unit tests for filesystem primitives.
"""

import os
import stat

import pytest

from pkgshift.errors import FileIOError, StructuralError
from pkgshift.io import files


class TestReadWrite:
    """Test text and binary transfer."""

    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "a/b/C.kt"
        files.write_text(target, "package a.b\n")
        assert target.read_text() == "package a.b\n"

    def test_write_leaves_no_temporary_files(self, tmp_path):
        files.write_text(tmp_path / "A.kt", "x")
        assert [p.name for p in tmp_path.iterdir()] == ["A.kt"]

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileIOError) as excinfo:
            files.read_text(tmp_path / "missing.kt")
        assert excinfo.value.path == tmp_path / "missing.kt"

    def test_read_binary_as_text_fails(self, tmp_path):
        path = tmp_path / "bad.kt"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(FileIOError):
            files.read_text(path)

    def test_copy_byte_for_byte(self, tmp_path):
        src = tmp_path / "icon.png"
        src.write_bytes(bytes(range(256)) * 4)
        files.copy_file(src, tmp_path / "out/icon.png")
        assert (tmp_path / "out/icon.png").read_bytes() == src.read_bytes()

    def test_copy_missing(self, tmp_path):
        with pytest.raises(FileIOError):
            files.copy_file(tmp_path / "missing", tmp_path / "dst")

    def test_file_io_error_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            files.remove_file(tmp_path / "missing")


class TestListRecursive:
    """Test deterministic enumeration."""

    def test_sorted_relative_paths(self, tmp_path, make_tree):
        make_tree(tmp_path, {"b/x.kt": "", "a/z.kt": "", "a/b/y.kt": "", "top.txt": ""})
        listed = [p.as_posix() for p in files.list_recursive(tmp_path)]
        assert listed == ["a/b/y.kt", "a/z.kt", "b/x.kt", "top.txt"]

    def test_missing_root_is_empty(self, tmp_path):
        assert files.list_recursive(tmp_path / "missing") == []

    def test_file_root_is_structural_error(self, tmp_path):
        (tmp_path / "f").write_text("")
        with pytest.raises(StructuralError):
            files.list_recursive(tmp_path / "f")


class TestRemoval:
    """Test file and directory removal."""

    def test_remove_empty_directory(self, tmp_path):
        (tmp_path / "d").mkdir()
        files.remove_empty_directory(tmp_path / "d")
        assert not (tmp_path / "d").exists()

    def test_remove_non_empty_directory_fails(self, tmp_path, make_tree):
        make_tree(tmp_path, {"d/f": ""})
        with pytest.raises(FileIOError):
            files.remove_empty_directory(tmp_path / "d")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
class TestFileModes:
    """Test that atomic writes keep usual permissions."""

    def test_new_file_mode_matches_plain_open(self, tmp_path):
        reference = tmp_path / "plain.kt"
        with open(reference, "w") as f:
            f.write("x")

        files.write_text(tmp_path / "A.kt", "x")

        assert stat.S_IMODE((tmp_path / "A.kt").stat().st_mode) == stat.S_IMODE(reference.stat().st_mode)

    def test_existing_mode_preserved(self, tmp_path):
        target = tmp_path / "run.sh"
        target.write_text("old")
        target.chmod(0o755)

        files.write_text(target, "new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o755
        assert target.read_text() == "new"

    def test_same_file(self, tmp_path):
        (tmp_path / "a").write_text("")
        (tmp_path / "b").write_text("")
        assert files.same_file(tmp_path / "a", tmp_path / "a")
        assert not files.same_file(tmp_path / "a", tmp_path / "b")
        assert not files.same_file(tmp_path / "a", tmp_path / "missing")
