"""Adding the dxm binaries to the user's ``PATH``.

On POSIX systems a line sourcing the installation's ``env.sh`` script is kept
in ``~/.profile``. On Windows the ``bin`` directory is kept in the user's
``PATH`` registry value.
"""

import os
from pathlib import Path

SOURCE_LINE = '. "{env_sh}"'

ENV_REGKEY = "Environment"
ENV_PATH = "PATH"


def _home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = None
    if home is None or str(home) == "~":
        raise FileNotFoundError("couldn't find home directory")
    return home


def profile_and_source_line(env_sh: str | os.PathLike) -> tuple[Path, str]:
    """Return the ``~/.profile`` path and the line that sources ``env_sh``."""
    profile = _home_dir() / ".profile"
    return profile, SOURCE_LINE.replace("{env_sh}", str(Path(env_sh)))


def _profile_contains(env_sh: str | os.PathLike) -> bool:
    profile, source_line = profile_and_source_line(env_sh)
    if not profile.exists():
        return False
    return source_line in profile.read_text(encoding="utf-8")


def _profile_add(env_sh: str | os.PathLike) -> None:
    profile, source_line = profile_and_source_line(env_sh)
    with profile.open("a", encoding="utf-8") as handle:
        handle.write(f"\n{source_line}\n")


def _profile_remove(env_sh: str | os.PathLike) -> None:
    profile, source_line = profile_and_source_line(env_sh)
    contents = profile.read_text(encoding="utf-8")
    profile.write_text(contents.replace(source_line, ""), encoding="utf-8")


def _read_registry_path() -> str:
    import winreg

    access = winreg.KEY_READ | winreg.KEY_SET_VALUE
    with winreg.CreateKeyEx(
        winreg.HKEY_CURRENT_USER, ENV_REGKEY, 0, access
    ) as key:
        value, _ = winreg.QueryValueEx(key, ENV_PATH)
    return value


def _write_registry_path(value: str) -> None:
    import winreg

    access = winreg.KEY_READ | winreg.KEY_SET_VALUE
    with winreg.CreateKeyEx(
        winreg.HKEY_CURRENT_USER, ENV_REGKEY, 0, access
    ) as key:
        winreg.SetValueEx(key, ENV_PATH, 0, winreg.REG_SZ, value)


def _registry_contains(bin_dir: str | os.PathLike) -> bool:
    target = Path(bin_dir)
    return any(Path(entry) == target for entry in _read_registry_path().split(";"))


def _registry_add(bin_dir: str | os.PathLike) -> None:
    current = _read_registry_path()
    _write_registry_path(f"{Path(bin_dir)};{current}")


def _registry_remove(bin_dir: str | os.PathLike) -> None:
    current = _read_registry_path()
    _write_registry_path(current.replace(f"{Path(bin_dir)};", ""))


def contains(bin_dir: str | os.PathLike, env_sh: str | os.PathLike) -> bool:
    """Whether the binaries are already on the user's ``PATH``."""
    if os.name == "nt":
        return _registry_contains(bin_dir)
    return _profile_contains(env_sh)


def add(bin_dir: str | os.PathLike, env_sh: str | os.PathLike) -> None:
    """Put the binaries on the user's ``PATH``."""
    if os.name == "nt":
        _registry_add(bin_dir)
    else:
        _profile_add(env_sh)


def remove(bin_dir: str | os.PathLike, env_sh: str | os.PathLike) -> None:
    """Take the binaries off the user's ``PATH``."""
    if os.name == "nt":
        _registry_remove(bin_dir)
    else:
        _profile_remove(env_sh)