"""Download and install FXServer artifacts."""

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

import requests

from dxm.artifacts.github import get_version_commit_sha
from dxm.artifacts.platforms import ArtifactsPlatform

log = logging.getLogger(__name__)

_CHUNK_SIZE = 1 << 16


def install(
    client: requests.Session,
    platform: ArtifactsPlatform,
    version: str,
    path: str | os.PathLike,
) -> None:
    """Download the given version and install it into ``path``."""
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryFile(suffix=platform.archive_name()) as archive:
        download(client, platform, version, archive)
        archive.seek(0)
        log.debug("extracting fxserver archive")
        platform.decompress(archive, target)


def download(
    client: requests.Session,
    platform: ArtifactsPlatform,
    version: str,
    writer: BinaryIO,
) -> None:
    """Download the archive of the given version into ``writer``."""
    commit_sha = get_version_commit_sha(client, version)
    url = platform.runtime_url(version, commit_sha)

    log.debug("downloading fxserver archive")
    with client.get(url, stream=True) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            writer.write(chunk)