"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typer.testing import CliRunner


def write_tree(root: Path, layout: dict) -> Path:
    """Create files under ``root`` from a {relative path: content} mapping."""
    for relative, content in layout.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return root


def snapshot(root: Path) -> dict:
    """Map relative POSIX path -> bytes for every file under ``root``."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()


@pytest.fixture
def source_root(tmp_path):
    """
    Source root with the com.acme.app package (Scenario A layout).

    com/acme/app/Main.kt          package com.acme.app
    com/acme/app/ui/Widget.kt     package com.acme.app.ui
    """
    root = tmp_path / "java"
    write_tree(root, {
        "com/acme/app/Main.kt": (
            "package com.acme.app\n"
            "\n"
            "import com.acme.app.ui.Widget\n"
            "\n"
            "class Main {\n"
            "    val widget = Widget()\n"
            "}\n"
        ),
        "com/acme/app/ui/Widget.kt": (
            "package com.acme.app.ui\n"
            "\n"
            "class Widget\n"
        ),
    })
    return root


@pytest.fixture
def android_module(tmp_path):
    """Minimal Android application module using com.acme.app."""
    module = tmp_path / "app"
    write_tree(module, {
        "build.gradle.kts": (
            "plugins {\n"
            "    id(\"com.android.application\")\n"
            "}\n"
            "\n"
            "android {\n"
            "    namespace = \"com.acme.app\"\n"
            "    defaultConfig {\n"
            "        applicationId = \"com.acme.app\"\n"
            "    }\n"
            "}\n"
        ),
        "src/main/AndroidManifest.xml": (
            "<manifest xmlns:android=\"http://schemas.android.com/apk/res/android\"\n"
            "    package=\"com.acme.app\">\n"
            "    <application android:name=\"com.acme.app.App\" />\n"
            "</manifest>\n"
        ),
        "src/main/java/com/acme/app/MainActivity.java": (
            "package com.acme.app;\n"
            "\n"
            "import com.acme.app.data.Repo;\n"
            "\n"
            "public class MainActivity {\n"
            "    private Repo repo = new com.acme.app.data.Repo();\n"
            "}\n"
        ),
        "src/main/java/com/acme/app/data/Repo.java": (
            "package com.acme.app.data;\n"
            "\n"
            "public class Repo {}\n"
        ),
        "src/main/java/com/acme/app/notes.txt": "keep me\n",
        "src/main/kotlin/com/acme/app/App.kt": (
            "package com.acme.app\n"
            "\n"
            "class App\n"
        ),
        "src/test/java/com/acme/app/RepoTest.java": (
            "package com.acme.app;\n"
            "\n"
            "import com.acme.app.data.Repo;\n"
            "\n"
            "public class RepoTest {}\n"
        ),
    })
    return module


@pytest.fixture
def make_tree():
    """Factory writing a {relative path: content} layout under a root."""
    return write_tree


@pytest.fixture
def take_snapshot():
    """Factory returning {relative path: bytes} for a directory tree."""
    return snapshot
