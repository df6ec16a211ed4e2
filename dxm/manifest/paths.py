"""Path helpers for manifest entries."""

import os
from pathlib import Path


def relative_path(base: str | os.PathLike, path: str | os.PathLike) -> Path:
    """Strip ``base`` from the front of ``path``.

    For a ``/test/dir`` base and a ``/test/dir/nested`` path this returns
    ``nested``. Raises ``ValueError`` if ``path`` does not start with ``base``.
    """
    return Path(path).relative_to(Path(base))