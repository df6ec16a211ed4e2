"""Download dxm updates."""

import logging
import os
import tempfile
from pathlib import Path

import requests

from dxm.home.release import Release, download_archive
from dxm.home.update_platform import UpdatePlatform

log = logging.getLogger(__name__)


def download_temp_dir(
    client: requests.Session, release: Release, platform: UpdatePlatform
) -> tempfile.TemporaryDirectory:
    """Download an update into a new temporary directory and return it.

    The directory is removed when the returned object is cleaned up, so use it
    as a context manager.
    """
    log.debug("creating temporary update directory")
    directory = tempfile.TemporaryDirectory(prefix="dxm")
    try:
        download_dir(client, release, platform, directory.name)
    except BaseException:
        directory.cleanup()
        raise
    return directory


def download_dir(
    client: requests.Session,
    release: Release,
    platform: UpdatePlatform,
    path: str | os.PathLike,
) -> None:
    """Download an update and extract it into ``path``."""
    log.debug("creating temporary file for update archive")
    with tempfile.TemporaryFile(prefix="dxm") as archive:
        download_archive(client, release, platform, archive)
        archive.seek(0)
        log.debug("extracting update archive")
        platform.decompress(archive, Path(path))