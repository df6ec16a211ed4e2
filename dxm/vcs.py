"""Version control setup for new servers."""

import logging
import os
from enum import Enum
from pathlib import Path

log = logging.getLogger(__name__)

ROOT_GITIGNORE = """\
# FXServer
/artifact/

# txAdmin
/txData/
"""

DATA_GITIGNORE = """\
# Cache
/cache/

# KVP
/db/

# Miscellaneous
/.replxx_history
/imgui.ini
"""

_GIT_DIRECTORIES = (
    "objects/info",
    "objects/pack",
    "refs/heads",
    "refs/tags",
    "info",
    "hooks",
)


class ParseVcsOptionError(ValueError):
    """Raised when a string names no known version control system."""

    def __init__(self, option: str) -> None:
        super().__init__(f"unknown vsc option {option}")
        self.option = option


def _git_config() -> str:
    lines = [
        "[core]",
        "\trepositoryformatversion = 0",
        f"\tfilemode = {'false' if os.name == 'nt' else 'true'}",
        "\tbare = false",
        "\tlogallrefupdates = true",
    ]
    if os.name == "nt":
        lines += ["\tsymlinks = false", "\tignorecase = true"]
    return "\n".join(lines) + "\n"


def init_git_repository(path: str | os.PathLike) -> Path:
    """Create an empty git repository in ``path``, keeping an existing one."""
    git_dir = Path(path) / ".git"
    for sub in _GIT_DIRECTORIES:
        (git_dir / sub).mkdir(parents=True, exist_ok=True)

    defaults = {
        "HEAD": "ref: refs/heads/master\n",
        "config": _git_config(),
        "description": "Unnamed repository; edit this file 'description' "
        "to name the repository.\n",
    }
    for name, content in defaults.items():
        target = git_dir / name
        if not target.exists():
            target.write_text(content, encoding="utf-8")

    log.debug("initialized git repository in %s", git_dir)
    return git_dir


class VcsOption(Enum):
    """The version control systems a server may use."""

    NONE = "none"
    GIT = "git"

    def __str__(self) -> str:
        return self.value

    def init(self, path: str | os.PathLike) -> None:
        """Initialise the repository and its ignore files in ``path``."""
        if self is VcsOption.NONE:
            return
        root = Path(path)
        init_git_repository(root)
        (root / ".gitignore").write_text(ROOT_GITIGNORE, encoding="utf-8")
        (root / "data" / ".gitignore").write_text(DATA_GITIGNORE, encoding="utf-8")


def parse_vcs(value: str) -> VcsOption:
    """Parse ``git`` or ``none``."""
    try:
        return VcsOption(value)
    except ValueError:
        raise ParseVcsOptionError(value) from None