"""The ``dxm.toml`` manifest."""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import tomli_w

from dxm.manifest.artifact import Artifact, artifact_from_dict
from dxm.manifest.server import Server, server_from_dict

log = logging.getLogger(__name__)

MANIFEST_NAME = "dxm.toml"


@dataclass
class Manifest:
    """The data dxm keeps about a server."""

    artifact: Artifact = field(default_factory=Artifact)
    server: Server = field(default_factory=Server)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """The manifest as nested tables."""
        return {"artifact": self.artifact.to_dict(), "server": self.server.to_dict()}

    def write(self, directory: str | os.PathLike) -> None:
        """Write ``dxm.toml`` into ``directory``."""
        path = Path(directory) / MANIFEST_NAME
        log.debug("writing manifest path %s", path)
        path.write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")


def manifest_from_dict(data: Mapping[str, Any]) -> Manifest:
    """Build a ``Manifest``; missing tables take their defaults."""
    artifact = data.get("artifact")
    server = data.get("server")
    return Manifest(
        artifact=Artifact() if artifact is None else artifact_from_dict(artifact),
        server=Server() if server is None else server_from_dict(server),
    )


def read_manifest(directory: str | os.PathLike) -> Manifest:
    """Read the ``dxm.toml`` file in ``directory``."""
    path = Path(directory) / MANIFEST_NAME
    log.debug("reading manifest path %s", path)
    return manifest_from_dict(tomllib.loads(path.read_text(encoding="utf-8")))


def find_manifest(directory: str | os.PathLike) -> Manifest | None:
    """Find ``dxm.toml`` in ``directory`` or its parents; ``None`` if absent."""
    start = Path(directory)
    for candidate in (start, *start.parents):
        if (candidate / MANIFEST_NAME).exists():
            log.debug("found manifest in %s", candidate)
            return read_manifest(candidate)
    return None