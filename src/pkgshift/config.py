"""
Project layout conventions used when renaming a package.
"""

from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict

import yaml


@dataclass
class RenameConfig:
    """
    Layout of an application module.

    Attributes
    ----------
    source_extensions : tuple of str
        File suffixes treated as source files (their package declaration
        is rewritten); every other file is copied unchanged.
    source_dirs : tuple of str
        Source roots relative to the module directory. Missing roots are
        skipped.
    build_files : tuple of str
        Build scripts, relative to the module directory, whose
        ``descriptor_attributes`` are updated.
    manifest : str
        Manifest file relative to the module directory.
    descriptor_attributes : tuple of str
        Attribute keys in build scripts holding the package name.
    """

    source_extensions: tuple[str, ...] = (".kt", ".java")
    source_dirs: tuple[str, ...] = (
        "src/main/java",
        "src/main/kotlin",
        "src/test/java",
        "src/test/kotlin",
        "src/androidTest/java",
        "src/androidTest/kotlin",
    )
    build_files: tuple[str, ...] = ("build.gradle", "build.gradle.kts")
    manifest: str = "src/main/AndroidManifest.xml"
    descriptor_attributes: tuple[str, ...] = ("applicationId", "namespace")

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "manifest":
                if not isinstance(value, str):
                    raise ValueError(f"manifest must be a string, got {value!r}")
                continue
            if isinstance(value, str):
                value = (value,)
            setattr(self, f.name, tuple(value))
        if not self.source_extensions:
            raise ValueError("source_extensions must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenameConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, filepath: Path | str) -> "RenameConfig":
        """
        Load overrides from a YAML file.

        Keys not present keep their defaults. An empty file yields the
        default configuration.

        Examples
        --------
        >>> # rename.yaml
        >>> # source_dirs: [src/main/kotlin]
        >>> config = RenameConfig.from_yaml("rename.yaml")
        """
        with open(filepath, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {filepath} must contain a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {k: list(v) if isinstance(v, tuple) else v for k, v in asdict(self).items()}
