"""GitHub releases of dxm."""

import logging
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Mapping

import requests

from dxm.home.update_platform import UpdatePlatform

log = logging.getLogger(__name__)

GITHUB_LATEST_RELEASE_API_URL = (
    "https://api.github.com/repos/D4isDAVID/dxm/releases/latest"
)

_CHUNK_SIZE = 1 << 16


@dataclass(frozen=True)
class ReleaseAsset:
    """A file attached to a release."""

    name: str
    browser_download_url: str


@dataclass(frozen=True)
class Release:
    """A GitHub release."""

    tag_name: str
    assets: tuple[ReleaseAsset, ...] = field(default_factory=tuple)

    def archive_url(self, platform: UpdatePlatform) -> str | None:
        """Download URL of the update archive for ``platform``, if any."""
        archive_name = platform.archive_name(self.tag_name)
        log.debug("finding update archive url: %s", archive_name)
        return next(
            (
                asset.browser_download_url
                for asset in self.assets
                if asset.name == archive_name
            ),
            None,
        )


def _required_str(data: Mapping[str, Any], name: str) -> str:
    if not isinstance(data, Mapping) or name not in data:
        raise ValueError(f"missing field `{name}`")
    value = data[name]
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` is not a string")
    return value


def parse_release(data: Mapping[str, Any]) -> Release:
    """Build a ``Release`` from the decoded API JSON."""
    tag_name = _required_str(data, "tag_name")
    if "assets" not in data:
        raise ValueError("missing field `assets`")
    raw_assets = data["assets"]
    if not isinstance(raw_assets, list):
        raise ValueError("field `assets` is not a list")
    assets = tuple(
        ReleaseAsset(
            name=_required_str(asset, "name"),
            browser_download_url=_required_str(asset, "browser_download_url"),
        )
        for asset in raw_assets
    )
    return Release(tag_name=tag_name, assets=assets)


def latest_release(client: requests.Session) -> Release:
    """Fetch the latest release."""
    log.debug("getting latest release")
    response = client.get(GITHUB_LATEST_RELEASE_API_URL)
    response.raise_for_status()
    return parse_release(response.json())


def download_archive(
    client: requests.Session,
    release: Release,
    platform: UpdatePlatform,
    writer: BinaryIO,
) -> None:
    """Download the release's archive for ``platform`` into ``writer``."""
    url = release.archive_url(platform)
    if url is None:
        raise ValueError("couldn't find archive url")

    log.debug("downloading update archive")
    with client.get(url, stream=True) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            writer.write(chunk)