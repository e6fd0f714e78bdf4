"""
Unit tests for locating the on-disk directory of a package.
"""

from pkgshift.relocate.locator import locate_package_root


class TestLocatePackageRoot:
    """Test exact and drifted layouts."""

    def test_exact_directory(self, source_root):
        assert locate_package_root(source_root, "com.acme.app") == source_root / "com/acme/app"

    def test_exact_directory_even_without_sources(self, tmp_path):
        (tmp_path / "com/acme/app").mkdir(parents=True)
        assert locate_package_root(tmp_path, "com.acme.app") == tmp_path / "com/acme/app"

    def test_shallower_layout(self, tmp_path, make_tree):
        """Declared com.acme.app, but files live directly in com/acme."""
        make_tree(tmp_path, {"com/acme/Main.kt": "package com.acme.app\n"})
        assert locate_package_root(tmp_path, "com.acme.app") == tmp_path / "com/acme"

    def test_longest_prefix_with_sources_wins(self, tmp_path, make_tree):
        make_tree(tmp_path, {
            "com/Top.kt": "package com\n",
            "com/acme/Main.kt": "package com.acme.app\n",
        })
        assert locate_package_root(tmp_path, "com.acme.app.feature") == tmp_path / "com/acme"

    def test_prefix_without_sources_skipped(self, tmp_path, make_tree):
        make_tree(tmp_path, {
            "com/acme/readme.txt": "no sources here\n",
            "com/Main.java": "package com.acme.app;\n",
        })
        assert locate_package_root(tmp_path, "com.acme.app") == tmp_path / "com"

    def test_sources_in_unrelated_subdirectory_count(self, tmp_path, make_tree):
        """Any source file anywhere in the prefix subtree qualifies it."""
        make_tree(tmp_path, {"com/acme/other/deep/X.kt": "package com.acme.other.deep\n"})
        assert locate_package_root(tmp_path, "com.acme.app") == tmp_path / "com/acme"

    def test_custom_extensions(self, tmp_path, make_tree):
        make_tree(tmp_path, {"com/acme/Main.scala": "package com.acme.app\n"})
        assert locate_package_root(tmp_path, "com.acme.app") is None
        assert locate_package_root(tmp_path, "com.acme.app", extensions=[".scala"]) == tmp_path / "com/acme"

    def test_not_found(self, tmp_path):
        assert locate_package_root(tmp_path, "com.acme.app") is None

    def test_missing_source_root(self, tmp_path):
        assert locate_package_root(tmp_path / "missing", "com.acme.app") is None
