"""Platforms dxm itself is released for."""

import os
import tarfile
import zipfile
from enum import Enum
from pathlib import Path
from typing import BinaryIO

_TAR_EXTRACT_OPTIONS = {"filter": "tar"} if hasattr(tarfile, "tar_filter") else {}


class UpdatePlatform(Enum):
    """The supported installation platforms."""

    WINDOWS = "windows"
    LINUX = "linux"

    def archive_name(self, tag_name: str) -> str:
        """Name of the release asset for the given tag."""
        if self is UpdatePlatform.WINDOWS:
            suffix = "windows-x64.zip"
        else:
            suffix = "linux-x64.tar.gz"
        return f"dxm-{tag_name}-{suffix}"

    def exe_path(self, base: str | os.PathLike) -> Path:
        """The binary name joined onto ``base``."""
        return Path(base) / self.exe_name()

    def exe_name(self) -> str:
        """File name of the dxm binary."""
        return "dxm.exe" if self is UpdatePlatform.WINDOWS else "dxm"

    def decompress(self, reader: BinaryIO, directory: str | os.PathLike) -> None:
        """Extract the archive read from ``reader`` into ``directory``."""
        target = Path(directory)
        if self is UpdatePlatform.WINDOWS:
            with zipfile.ZipFile(reader) as archive:
                archive.extractall(target)
        else:
            with tarfile.open(fileobj=reader, mode="r:gz") as archive:
                archive.extractall(target, **_TAR_EXTRACT_OPTIONS)


def default_update_platform() -> UpdatePlatform:
    """Platform of the running system."""
    return UpdatePlatform.WINDOWS if os.name == "nt" else UpdatePlatform.LINUX