"""The dxm installation directory."""

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

import requests

from dxm.home import env_path
from dxm.home.release import Release
from dxm.home.update_platform import UpdatePlatform
from dxm.home.updater import download_temp_dir

log = logging.getLogger(__name__)

HOME_DIR = ".dxm"
HOME_ENV = "DXM_HOME"

ENV_SCRIPT = """\
#!/bin/sh
case ":${PATH}:" in
    *:"{dxm_bin}":*) ;;
    *) export PATH="{dxm_bin}:$PATH" ;;
esac
"""


def _current_exe() -> Path:
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(argv0).absolute()


def _replace_file(source: Path, target: Path) -> None:
    staged = target.with_name(target.name + ".new")
    shutil.copy2(source, staged)
    os.replace(staged, target)


@dataclass
class Home:
    """A dxm installation."""

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        log.debug("using home path: %s", self.path)

    def exists(self) -> bool:
        """Whether the installation directory exists."""
        return self.path.exists()

    def setup(self, exe_path: str | os.PathLike) -> None:
        """Create the installation and copy ``exe_path`` into its ``bin``."""
        bin_dir = self.bin_dir()

        log.debug("setting up home directories")
        self.path.mkdir(parents=True, exist_ok=True)
        bin_dir.mkdir(parents=True, exist_ok=True)

        if os.name != "nt":
            log.debug("writing env script")
            self.env_sh().write_text(
                ENV_SCRIPT.replace("{dxm_bin}", str(bin_dir)), encoding="utf-8"
            )

        if not self.is_current_exe_dxm():
            log.debug("copying executable")
            shutil.copy2(exe_path, self.dxm_exe())

    def update(
        self, client: requests.Session, release: Release, platform: UpdatePlatform
    ) -> None:
        """Download a new binary and put it into the installation."""
        with download_temp_dir(client, release, platform) as directory:
            exe = platform.exe_path(directory)
            if self.is_current_exe_dxm():
                log.debug("replacing self with updated executable")
                _replace_file(exe, self.dxm_exe())
            else:
                log.debug("copying updated executable")
                shutil.copy2(exe, self.dxm_exe())

    def uninstall(self) -> None:
        """Remove the installation."""
        if self.is_current_exe_dxm():
            log.debug("deleting self")
            self.dxm_exe().unlink(missing_ok=True)

        log.debug("deleting home directory")
        shutil.rmtree(self.path)

    def in_env_path(self) -> bool:
        """Whether the installation is on the environment ``PATH``."""
        return env_path.contains(self.bin_dir(), self.env_sh())

    def add_to_env_path(self) -> None:
        """Put the installation on the environment ``PATH``."""
        env_path.add(self.bin_dir(), self.env_sh())

    def remove_from_env_path(self) -> None:
        """Take the installation off the environment ``PATH``."""
        env_path.remove(self.bin_dir(), self.env_sh())

    def bin_dir(self) -> Path:
        """The installation's ``bin`` directory."""
        return self.path / "bin"

    def dxm_exe(self) -> Path:
        """The installation's dxm binary."""
        return self.bin_dir() / ("dxm.exe" if os.name == "nt" else "dxm")

    def env_sh(self) -> Path:
        """The script that ``.profile`` sources to extend ``PATH``."""
        return self.path / "env.sh"

    def is_current_exe_dxm(self) -> bool:
        """Whether the running program is the installation's binary."""
        return _current_exe() == self.dxm_exe().absolute()


def default_home_path() -> Path:
    """``~/.dxm``, or ``.dxm`` when there is no home directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return Path(HOME_DIR)
    if str(home) == "~":
        return Path(HOME_DIR)
    return home / HOME_DIR


def home_from_env() -> Home:
    """The installation named by ``DXM_HOME``; ``KeyError`` if it is unset."""
    value = os.environ.get(HOME_ENV)
    if value is None:
        raise KeyError(HOME_ENV)
    return Home(Path(value))


def home_from_env_or(path: str | os.PathLike) -> Home:
    """The installation named by ``DXM_HOME``, or at ``path``."""
    try:
        return home_from_env()
    except KeyError:
        return Home(Path(path))


def default_home() -> Home:
    """The installation named by ``DXM_HOME``, or at the default path."""
    return home_from_env_or(default_home_path())