"""Injected build configuration and project layout.

Cargo exports the package metadata to the processes it runs
(`CARGO_PKG_NAME`, `CARGO_PKG_VERSION`, `CARGO`). The values are read once
from an explicit mapping so the pipeline never touches `os.environ` itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "BuildEnv",
    "ProjectLayout",
    "CARGO_VAR",
    "PKG_NAME_VAR",
    "PKG_VERSION_VAR",
    "UNKNOWN_VERSION",
]

PKG_NAME_VAR = "CARGO_PKG_NAME"
PKG_VERSION_VAR = "CARGO_PKG_VERSION"
CARGO_VAR = "CARGO"

UNKNOWN_VERSION = "?.?.?"


@dataclass(frozen=True, slots=True)
class BuildEnv:
    """Package metadata and toolchain location.

    Attributes:
        package_name: Name of the binary under target/release (None if not injected).
        version: Package version, UNKNOWN_VERSION when not injected.
        cargo: Cargo executable used for `--build`.
    """

    package_name: str | None = None
    version: str = UNKNOWN_VERSION
    cargo: str = "cargo"

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> BuildEnv:
        """Read the build values from an environment mapping."""
        return cls(
            package_name=environ.get(PKG_NAME_VAR),
            version=environ.get(PKG_VERSION_VAR) or UNKNOWN_VERSION,
            cargo=environ.get(CARGO_VAR) or "cargo",
        )

    def build_command(self) -> list[str]:
        return [self.cargo, "build", "--release"]


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Paths of a Cargo project rooted at `root`."""

    root: Path

    MANIFEST_NAME = "Cargo.toml"
    TARGET_DIR = "target"
    PROFILE = "release"

    @property
    def manifest(self) -> Path:
        return self.root / self.MANIFEST_NAME

    @property
    def target_dir(self) -> Path:
        return self.root / self.TARGET_DIR

    @property
    def release_dir(self) -> Path:
        return self.target_dir / self.PROFILE

    def release_binary(self, file_name: str) -> Path:
        """Path of a file inside the release directory."""
        return self.release_dir / file_name
