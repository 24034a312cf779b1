"""Tests for relname.services.checks module."""

from __future__ import annotations

from pathlib import Path

from relname.core.config import ProjectLayout
from relname.core.result import Err, Ok
from relname.services.checks import check_manifest, check_release_binary, check_release_dir
from relname.services.rename_errors import (
    MissingCargoToml,
    MissingReleaseBinary,
    MissingReleaseDir,
)


class TestCheckManifest:
    def test_present(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text("[package]\n", encoding="utf-8")
        assert check_manifest(ProjectLayout(tmp_path)) == Ok(tmp_path / "Cargo.toml")

    def test_missing_names_the_directory(self, tmp_path: Path) -> None:
        result = check_manifest(ProjectLayout(tmp_path))
        assert result == Err(MissingCargoToml(dir=tmp_path))


class TestCheckReleaseDir:
    def test_present(self, tmp_path: Path) -> None:
        (tmp_path / "target" / "release").mkdir(parents=True)
        assert check_release_dir(ProjectLayout(tmp_path)) == Ok(tmp_path / "target" / "release")

    def test_missing_names_the_target_folder(self, tmp_path: Path) -> None:
        (tmp_path / "target" / "debug").mkdir(parents=True)
        result = check_release_dir(ProjectLayout(tmp_path))
        assert result == Err(MissingReleaseDir(dir=tmp_path / "target"))


class TestCheckReleaseBinary:
    def test_present(self, tmp_path: Path) -> None:
        binary = tmp_path / "demo"
        binary.write_bytes(b"")
        assert check_release_binary(binary) == Ok(binary)

    def test_missing(self, tmp_path: Path) -> None:
        binary = tmp_path / "demo"
        result = check_release_binary(binary)
        assert result == Err(MissingReleaseBinary(bin_path=binary))
        assert isinstance(result, Err)
        assert str(binary) in result.error.message
