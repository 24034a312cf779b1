"""Filesystem preconditions of the rename pipeline.

Each check runs at its own point in the sequence: the release directory only
has to exist after the optional build, and the binary path is only known once
the package name has been resolved.
"""

from __future__ import annotations

from pathlib import Path

from ..core.config import ProjectLayout
from ..core.result import Err, Ok, Result
from .rename_errors import MissingCargoToml, MissingReleaseBinary, MissingReleaseDir

__all__ = ["check_manifest", "check_release_binary", "check_release_dir"]


def check_manifest(layout: ProjectLayout) -> Result[Path, MissingCargoToml]:
    """Ok(manifest path) if Cargo.toml exists in the project root."""
    if not layout.manifest.exists():
        return Err(MissingCargoToml(dir=layout.root))
    return Ok(layout.manifest)


def check_release_dir(layout: ProjectLayout) -> Result[Path, MissingReleaseDir]:
    """Ok(release dir) if target/release exists.

    The error names the target folder, which is where the user has to look.
    """
    if not layout.release_dir.exists():
        return Err(MissingReleaseDir(dir=layout.target_dir))
    return Ok(layout.release_dir)


def check_release_binary(bin_path: Path) -> Result[Path, MissingReleaseBinary]:
    if not bin_path.exists():
        return Err(MissingReleaseBinary(bin_path=bin_path))
    return Ok(bin_path)
