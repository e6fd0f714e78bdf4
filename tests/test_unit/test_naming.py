"""
Unit tests for package name <-> path conversion.
"""

import pytest

from pkgshift.core.naming import (
    to_path,
    to_namespace,
    segments,
    is_valid_segment,
    escape_pattern,
)
from pkgshift.errors import NamespaceError


class TestConversion:
    """Test to_path / to_namespace."""

    def test_to_path(self):
        assert to_path("com.acme.app") == "com/acme/app"

    def test_to_namespace(self):
        assert to_namespace("com/acme/app") == "com.acme.app"

    def test_single_segment(self):
        assert to_path("app") == "app"
        assert to_namespace("app") == "app"

    def test_backslash_separator(self):
        """Windows-style relative paths convert the same way."""
        assert to_namespace("com\\acme\\app") == "com.acme.app"

    @pytest.mark.parametrize("namespace", [
        "com.acme.app",
        "org.example",
        "a",
        "io.github.user_name.lib2",
    ])
    def test_round_trip(self, namespace):
        assert to_namespace(to_path(namespace)) == namespace
        assert to_path(to_namespace(to_path(namespace))) == to_path(namespace)

    @pytest.mark.parametrize("namespace", ["", "com..acme", ".com", "com.", "com/acme.app"])
    def test_malformed_namespace_rejected(self, namespace):
        with pytest.raises(NamespaceError):
            to_path(namespace)

    @pytest.mark.parametrize("path", ["", "com//acme", "/com", "com/", "com/v1.2"])
    def test_malformed_path_rejected(self, path):
        with pytest.raises(NamespaceError):
            to_namespace(path)

    def test_namespace_error_is_value_error(self):
        with pytest.raises(ValueError):
            segments("")


class TestHelpers:
    """Test segment validation and pattern escaping."""

    def test_segments(self):
        assert segments("com.acme.app") == ["com", "acme", "app"]

    @pytest.mark.parametrize("segment,valid", [
        ("acme", True),
        ("_internal", True),
        ("v2", True),
        ("2fast", False),
        ("my-app", False),
        ("", False),
    ])
    def test_is_valid_segment(self, segment, valid):
        assert is_valid_segment(segment) is valid

    def test_escape_pattern_dots(self):
        """Dots in a namespace must not match arbitrary characters."""
        import re
        pattern = re.compile(escape_pattern("com.acme"))
        assert pattern.fullmatch("com.acme")
        assert not pattern.fullmatch("comXacme")

    def test_escape_pattern_metacharacters(self):
        import re
        text = "a+b(c)[d]$"
        assert re.fullmatch(escape_pattern(text), text)
