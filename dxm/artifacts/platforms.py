"""FXServer platforms and their archive layouts."""

import os
import tarfile
import zipfile
from enum import Enum
from pathlib import Path
from typing import BinaryIO

CFX_ARTIFACTS_FILE_API_URL = (
    "https://runtime.fivem.net/artifacts/fivem/{platform}/master/"
    "{version}-{commit}/{archive}"
)

_TAR_EXTRACT_OPTIONS = {"filter": "tar"} if hasattr(tarfile, "tar_filter") else {}


class ArtifactsPlatform(Enum):
    """The supported FXServer platforms."""

    WINDOWS = "windows"
    LINUX = "linux"

    def changelogs_name(self) -> str:
        """Name of the platform in the version changelog URL."""
        return "win32" if self is ArtifactsPlatform.WINDOWS else "linux"

    def runtime_name(self) -> str:
        """Name of the platform in the installation archive URL."""
        if self is ArtifactsPlatform.WINDOWS:
            return "build_server_windows"
        return "build_proot_linux"

    def archive_name(self) -> str:
        """File name of the installation archive."""
        return "server.zip" if self is ArtifactsPlatform.WINDOWS else "fx.tar.xz"

    def exe_name(self) -> str:
        """File name of the server executable inside an installation."""
        return "FXServer.exe" if self is ArtifactsPlatform.WINDOWS else "run.sh"

    def runtime_url(self, version: str, commit_sha: str) -> str:
        """URL of the installation archive for a version and commit."""
        return (
            CFX_ARTIFACTS_FILE_API_URL.replace("{platform}", self.runtime_name())
            .replace("{version}", version)
            .replace("{commit}", commit_sha)
            .replace("{archive}", self.archive_name())
        )

    def decompress(self, reader: BinaryIO, directory: str | os.PathLike) -> None:
        """Extract the archive read from ``reader`` into ``directory``."""
        target = Path(directory)
        if self is ArtifactsPlatform.WINDOWS:
            with zipfile.ZipFile(reader) as archive:
                archive.extractall(target)
        else:
            with tarfile.open(fileobj=reader, mode="r:xz") as archive:
                archive.extractall(target, **_TAR_EXTRACT_OPTIONS)


def default_platform() -> ArtifactsPlatform:
    """Platform of the running system."""
    return ArtifactsPlatform.WINDOWS if os.name == "nt" else ArtifactsPlatform.LINUX