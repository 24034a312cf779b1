"""Services: preconditions and the release rename pipeline."""

from .checks import check_manifest, check_release_binary, check_release_dir
from .release import ReleaseService, release_name
from .rename_errors import (
    BuildFailed,
    BuildSpawnFailed,
    MissingCargoToml,
    MissingPackageName,
    MissingReleaseBinary,
    MissingReleaseDir,
    RenameError,
    RenameFailed,
)

__all__ = [
    # checks
    "check_manifest",
    "check_release_binary",
    "check_release_dir",
    # release
    "ReleaseService",
    "release_name",
    # errors
    "BuildFailed",
    "BuildSpawnFailed",
    "MissingCargoToml",
    "MissingPackageName",
    "MissingReleaseBinary",
    "MissingReleaseDir",
    "RenameError",
    "RenameFailed",
]
