"""
Unit tests for empty directory pruning.
"""

from pkgshift.relocate.pruner import prune_empty_directories


class TestPruneEmptyDirectories:
    """Test post-order pruning bounded by the source root."""

    def test_removes_empty_chain_up_to_boundary(self, tmp_path):
        (tmp_path / "com/acme/app/ui").mkdir(parents=True)
        removed = prune_empty_directories(tmp_path / "com/acme/app", tmp_path)

        assert not (tmp_path / "com").exists()
        assert tmp_path.exists()
        assert len(removed) == 4

    def test_post_order(self, tmp_path):
        (tmp_path / "a/b/c").mkdir(parents=True)
        removed = prune_empty_directories(tmp_path / "a", tmp_path)
        names = [p.name for p in removed]
        assert names == ["c", "b", "a"]

    def test_stops_at_non_empty_ancestor(self, tmp_path, make_tree):
        make_tree(tmp_path, {"com/Keep.kt": "package com\n"})
        (tmp_path / "com/acme/app").mkdir(parents=True)

        prune_empty_directories(tmp_path / "com/acme/app", tmp_path)

        assert not (tmp_path / "com/acme").exists()
        assert (tmp_path / "com/Keep.kt").exists()

    def test_sibling_with_files_kept(self, tmp_path, make_tree):
        make_tree(tmp_path, {"com/acme/lib/Util.kt": "package com.acme.lib\n"})
        (tmp_path / "com/acme/app/empty").mkdir(parents=True)

        prune_empty_directories(tmp_path / "com/acme/app", tmp_path)

        assert not (tmp_path / "com/acme/app").exists()
        assert (tmp_path / "com/acme/lib/Util.kt").exists()

    def test_non_empty_directory_kept(self, tmp_path, make_tree):
        make_tree(tmp_path, {"com/acme/app/left.txt": "x"})
        (tmp_path / "com/acme/app/empty").mkdir()

        removed = prune_empty_directories(tmp_path / "com/acme/app", tmp_path)

        assert removed == [(tmp_path / "com/acme/app/empty").resolve()]
        assert (tmp_path / "com/acme/app/left.txt").exists()

    def test_boundary_never_removed(self, tmp_path):
        root = tmp_path / "java"
        (root / "empty").mkdir(parents=True)

        prune_empty_directories(root, root)

        assert root.exists()
        assert not (root / "empty").exists()

    def test_outside_boundary_untouched(self, tmp_path):
        outside = tmp_path / "elsewhere/empty"
        outside.mkdir(parents=True)

        assert prune_empty_directories(outside, tmp_path / "java") == []
        assert outside.exists()

    def test_missing_directory(self, tmp_path):
        assert prune_empty_directories(tmp_path / "missing", tmp_path) == []
