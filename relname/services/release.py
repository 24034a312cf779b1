"""Release service: build, locate and rename the release binary.

Pipeline:
    Cargo.toml exists -> (--build) cargo build --release -> target/release
    exists -> binary exists -> rename to "{name}-{os}-{version}"
"""

from __future__ import annotations

from pathlib import Path

from ..core.config import PKG_NAME_VAR, BuildEnv, ProjectLayout
from ..core.options import Options
from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol, Style, escape
from ..platform.detection import Platform, os_name
from ..platform.files import atomic_rename
from ..platform.process import run_streamed
from .checks import check_manifest, check_release_binary, check_release_dir
from .rename_errors import (
    BuildFailed,
    BuildSpawnFailed,
    MissingPackageName,
    RenameError,
    RenameFailed,
)

__all__ = ["ReleaseService", "release_name"]


def release_name(name: str, os_id: str, version: str) -> str:
    """File name of the renamed binary (without executable suffix)."""
    return f"{name}-{os_id}-{version}"


class ReleaseService:
    """Runs the rename pipeline for one Cargo project."""

    def __init__(
        self,
        *,
        layout: ProjectLayout,
        platform: Platform,
        env: BuildEnv,
        console: ConsoleProtocol,
    ) -> None:
        self._layout = layout
        self._platform = platform
        self._env = env
        self._console = console

    def run(self, options: Options) -> Result[Path, RenameError]:
        """Run every step for the given options.

        Returns:
            Ok(path) with the renamed binary
            Err(RenameError) at the first failing step
        """
        manifest = check_manifest(self._layout)
        if isinstance(manifest, Err):
            return manifest

        if options.build:
            built = self.build()
            if isinstance(built, Err):
                return built

        release_dir = check_release_dir(self._layout)
        if isinstance(release_dir, Err):
            return release_dir

        return self.rename(options.name)

    def build(self) -> Result[None, RenameError]:
        """Run `cargo build --release`, forwarding its output live."""
        cmd = self._env.build_command()
        self._console.print(f"--build arg, running [bold]cargo {' '.join(cmd[1:])}[/bold]")
        self._console.print(" ".join(cmd), Style.DIM)

        result = run_streamed(
            cmd,
            cwd=self._layout.root,
            on_stdout=self._console.out,
            on_stderr=self._console.err,
            on_read_error=self._report_read_error,
        )
        if isinstance(result, Err):
            return Err(BuildSpawnFailed(command=result.error.command, reason=result.error.reason))
        if result.value != 0:
            return Err(BuildFailed(returncode=result.value))
        return Ok(None)

    def rename(self, name: str) -> Result[Path, RenameError]:
        """Rename the package binary in target/release to the release name."""
        package_name = self._env.package_name
        if not package_name:
            return Err(MissingPackageName(var=PKG_NAME_VAR))

        binary = check_release_binary(
            self._layout.release_binary(self._platform.exe_name(package_name))
        )
        if isinstance(binary, Err):
            return binary
        src = binary.value

        new_name = release_name(name, os_name(self._platform), self._env.version)
        dst = self._layout.release_binary(self._platform.exe_name(new_name))
        try:
            atomic_rename(src, dst)
        except OSError as e:
            return Err(RenameFailed(src=src, dst=dst, reason=e.strerror or str(e)))

        self._console.newline()
        self._console.success(
            f"renamed [red]{escape(str(src))}[/red] to: [bold]{escape(str(dst))}[/bold]"
        )
        return Ok(dst)

    def _report_read_error(self, stream: str, exc: Exception) -> None:
        self._console.warning(f"error reading {stream}: {exc}")

