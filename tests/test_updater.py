import io
import tarfile
from pathlib import Path

import pytest
import requests
import responses

from dxm.home.release import Release, ReleaseAsset
from dxm.home.update_platform import UpdatePlatform
from dxm.home.updater import download_dir, download_temp_dir

ASSET_URL = "https://example.com/downloads/update"


def _tar_gz(files):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for name, data in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            archive.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def _release(tag="v5.0.0"):
    return Release(
        tag_name=tag,
        assets=(
            ReleaseAsset(
                name=UpdatePlatform.LINUX.archive_name(tag),
                browser_download_url=ASSET_URL,
            ),
        ),
    )


def test_download_dir_extracts(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ASSET_URL, body=_tar_gz({"dxm": b"new-binary"}))
        download_dir(requests.Session(), _release(), UpdatePlatform.LINUX, tmp_path)
    assert (tmp_path / "dxm").read_bytes() == b"new-binary"


def test_download_temp_dir_is_removed_after_use():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ASSET_URL, body=_tar_gz({"dxm": b"new-binary"}))
        directory = download_temp_dir(
            requests.Session(), _release(), UpdatePlatform.LINUX
        )
    with directory as name:
        exe = UpdatePlatform.LINUX.exe_path(name)
        assert exe.read_bytes() == b"new-binary"
        assert Path(name).name.startswith("dxm")
    assert not Path(name).exists()


def test_download_temp_dir_missing_asset_raises():
    with pytest.raises(ValueError):
        download_temp_dir(requests.Session(), _release(), UpdatePlatform.WINDOWS)