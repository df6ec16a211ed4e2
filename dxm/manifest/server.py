"""The server data entry of a manifest."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dxm.manifest.paths import relative_path

DEFAULT_DATA_PATH = "data"


@dataclass
class Server:
    """dxm-managed server data."""

    data_dir: Path = field(default_factory=lambda: Path(DEFAULT_DATA_PATH))

    def set_data(
        self, manifest_path: str | os.PathLike, data: str | os.PathLike
    ) -> None:
        """Store the data path relative to the manifest directory."""
        self.data_dir = relative_path(manifest_path, data)

    def data(self, manifest_path: str | os.PathLike) -> Path:
        """Server data directory joined onto the manifest directory."""
        return Path(manifest_path) / self.data_dir

    def ensure_data(self, manifest_path: str | os.PathLike) -> Path:
        """Return the server data directory, creating it if needed."""
        path = self.data(manifest_path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def to_dict(self) -> dict[str, str]:
        """Table written to the manifest file."""
        return {"data": str(self.data_dir)}


def server_from_dict(data: Mapping[str, Any]) -> Server:
    """Build a ``Server`` from a manifest table; ``data`` is required."""
    if not isinstance(data, Mapping):
        raise ValueError("server entry is not a table")
    if "data" not in data:
        raise ValueError("missing field `data`")
    value = data["data"]
    if not isinstance(value, str):
        raise ValueError("field `data` is not a string")
    return Server(data_dir=Path(value))