"""Steps shared by several commands."""

import logging
import os

from dxm import http
from dxm.artifacts import cfx, jg
from dxm.artifacts.channel import ArtifactsChannel
from dxm.artifacts.install import install
from dxm.artifacts.platforms import default_platform
from dxm.manifest.manifest import Manifest, find_manifest

log = logging.getLogger(__name__)


def find_manifest_or_default(path: str | os.PathLike) -> Manifest:
    """Manifest found from ``path`` upward, or a default one."""
    log.debug("using manifest path %s", path)
    manifest = find_manifest(path)
    return Manifest() if manifest is None else manifest


def update_artifact(path: str | os.PathLike, manifest: Manifest) -> None:
    """Install the newest version of the manifest's channel and record it."""
    artifact = manifest.artifact
    client = http.github_client()
    platform = default_platform()

    log.info("getting versions")
    if artifact.channel is ArtifactsChannel.LATEST_JG:
        version = jg.artifacts(client).version()
    else:
        version = cfx.versions(client, platform).version(artifact.channel)

    log.info("installing artifact %s", version)
    install(client, platform, version, artifact.path(path))

    artifact.version = version
    manifest.write(path)

    log.info("successfully updated artifact")