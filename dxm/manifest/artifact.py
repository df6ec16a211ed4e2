"""The FXServer installation entry of a manifest."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dxm.artifacts.channel import ArtifactsChannel, parse_channel
from dxm.artifacts.platforms import ArtifactsPlatform
from dxm.manifest.paths import relative_path

DEFAULT_ARTIFACT_PATH = "artifact"


@dataclass
class Artifact:
    """A dxm-managed FXServer installation."""

    install_dir: Path = field(default_factory=lambda: Path(DEFAULT_ARTIFACT_PATH))
    version: str = ""
    channel: ArtifactsChannel = ArtifactsChannel.LATEST_JG

    def set_path(
        self, manifest_path: str | os.PathLike, path: str | os.PathLike
    ) -> None:
        """Store ``path`` relative to the manifest directory."""
        self.install_dir = relative_path(manifest_path, path)

    def path(self, manifest_path: str | os.PathLike) -> Path:
        """Installation directory joined onto the manifest directory."""
        return Path(manifest_path) / self.install_dir

    def exe(
        self, manifest_path: str | os.PathLike, platform: ArtifactsPlatform
    ) -> Path:
        """Path of the server executable inside the installation."""
        return self.path(manifest_path) / platform.exe_name()

    def to_dict(self) -> dict[str, str]:
        """Table written to the manifest file."""
        return {
            "path": str(self.install_dir),
            "version": self.version,
            "channel": str(self.channel),
        }


def _required_str(data: Mapping[str, Any], name: str) -> str:
    if name not in data:
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` is not a string")
    return value


def artifact_from_dict(data: Mapping[str, Any]) -> Artifact:
    """Build an ``Artifact`` from a manifest table; all fields are required."""
    if not isinstance(data, Mapping):
        raise ValueError("artifact entry is not a table")
    path = _required_str(data, "path")
    version = _required_str(data, "version")
    channel = parse_channel(_required_str(data, "channel"))
    return Artifact(install_dir=Path(path), version=version, channel=channel)