from pathlib import Path
from unittest import mock

import pytest

from dxm.home import env_path


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_profile_and_source_line(fake_home):
    env_sh = fake_home / ".dxm" / "env.sh"
    profile, line = env_path.profile_and_source_line(env_sh)
    assert profile == fake_home / ".profile"
    assert line == f'. "{env_sh}"'


def test_missing_home_directory_raises():
    with mock.patch("pathlib.Path.home", side_effect=RuntimeError("no home")):
        with pytest.raises(FileNotFoundError):
            env_path.profile_and_source_line(Path("env.sh"))


def test_contains_false_without_profile(fake_home):
    env_sh = fake_home / ".dxm" / "env.sh"
    assert env_path.contains(fake_home / ".dxm" / "bin", env_sh) is False


def test_add_then_contains(fake_home):
    env_sh = fake_home / ".dxm" / "env.sh"
    bin_dir = fake_home / ".dxm" / "bin"
    env_path.add(bin_dir, env_sh)
    assert env_path.contains(bin_dir, env_sh) is True
    assert (fake_home / ".profile").read_text() == f'\n. "{env_sh}"\n'


def test_add_keeps_existing_profile(fake_home):
    (fake_home / ".profile").write_text("export EDITOR=vi\n")
    env_sh = fake_home / ".dxm" / "env.sh"
    env_path.add(fake_home / "bin", env_sh)
    text = (fake_home / ".profile").read_text()
    assert text.startswith("export EDITOR=vi\n")
    assert f'. "{env_sh}"' in text


def test_remove_round_trip(fake_home):
    (fake_home / ".profile").write_text("export EDITOR=vi\n")
    env_sh = fake_home / ".dxm" / "env.sh"
    bin_dir = fake_home / "bin"
    env_path.add(bin_dir, env_sh)
    env_path.remove(bin_dir, env_sh)
    assert env_path.contains(bin_dir, env_sh) is False
    assert "export EDITOR=vi" in (fake_home / ".profile").read_text()


def test_remove_without_profile_raises(fake_home):
    with pytest.raises(FileNotFoundError):
        env_path.remove(fake_home / "bin", fake_home / "env.sh")


def test_other_script_not_reported(fake_home):
    env_path.add(fake_home / "bin", fake_home / "one" / "env.sh")
    assert env_path.contains(fake_home / "bin", fake_home / "two" / "env.sh") is False