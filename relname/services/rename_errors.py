from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MissingCargoToml:
    dir: Path

    @property
    def message(self) -> str:
        return f"missing Cargo.toml file in current directory: {self.dir}"


@dataclass(frozen=True, slots=True)
class MissingReleaseDir:
    dir: Path

    @property
    def message(self) -> str:
        return f"release directory not found in target folder: {self.dir}"


@dataclass(frozen=True, slots=True)
class MissingReleaseBinary:
    bin_path: Path

    @property
    def message(self) -> str:
        return f"executable binary not found in release directory: {self.bin_path}"


@dataclass(frozen=True, slots=True)
class MissingPackageName:
    var: str
    hint: str = "Run through cargo (cargo run --release -- --name <TEXT>) or export it"

    @property
    def message(self) -> str:
        return f"package name not set: {self.var}"


@dataclass(frozen=True, slots=True)
class BuildSpawnFailed:
    command: tuple[str, ...]
    reason: str

    @property
    def message(self) -> str:
        return f"could not start {' '.join(self.command)}: {self.reason}"


@dataclass(frozen=True, slots=True)
class BuildFailed:
    returncode: int

    @property
    def message(self) -> str:
        return f"cargo build failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class RenameFailed:
    src: Path
    dst: Path
    reason: str

    @property
    def message(self) -> str:
        return f"could not rename {self.src} to {self.dst}: {self.reason}"


RenameError = (
    MissingCargoToml
    | MissingReleaseDir
    | MissingReleaseBinary
    | MissingPackageName
    | BuildSpawnFailed
    | BuildFailed
    | RenameFailed
)
