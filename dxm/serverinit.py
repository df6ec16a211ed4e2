"""Create the files of a new FXServer data directory."""

import os
from pathlib import Path

from dxm.manifest.manifest import Manifest
from dxm.vcs import VcsOption


def create_server(path: str | os.PathLike, vcs: VcsOption) -> None:
    """Initialise server files in ``path`` using the given version control."""
    root = Path(path)
    root.mkdir(parents=True, exist_ok=True)

    Manifest().write(root)

    data = root / "data"
    (data / "resources").mkdir(parents=True, exist_ok=True)
    (data / "server.cfg").write_text("", encoding="utf-8")

    vcs.init(root)