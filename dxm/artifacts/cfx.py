"""Access to the FXServer version changelog."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from dxm.artifacts.channel import ArtifactsChannel
from dxm.artifacts.platforms import ArtifactsPlatform

log = logging.getLogger(__name__)

CFX_SERVER_VERSIONS_API_URL = (
    "https://changelogs-live.fivem.net/api/changelog/versions/{platform}/server"
)

_UNEXPECTED_LATEST_JG = "received unexpected LatestJg in cfx server versions"


@dataclass(frozen=True)
class ServerVersions:
    """The FXServer version changelog; has no entry for ``LATEST_JG``."""

    critical: str
    recommended: str
    optional: str
    latest: str
    critical_txadmin: str
    recommended_txadmin: str
    optional_txadmin: str
    latest_txadmin: str

    def version(self, channel: ArtifactsChannel) -> str:
        """FXServer version for the given channel."""
        return getattr(self, self._field(channel))

    def txadmin(self, channel: ArtifactsChannel) -> str:
        """txAdmin version for the given channel."""
        return getattr(self, self._field(channel) + "_txadmin")

    def alias_display(self, channel: ArtifactsChannel) -> str:
        """One line describing the given channel."""
        return f"{self.version(channel)}\twith txAdmin v{self.txadmin(channel)}"

    @staticmethod
    def _field(channel: ArtifactsChannel) -> str:
        if channel is ArtifactsChannel.LATEST_JG:
            raise ValueError(_UNEXPECTED_LATEST_JG)
        return channel.value


def parse_versions(data: Mapping[str, Any]) -> ServerVersions:
    """Build ``ServerVersions`` from the decoded changelog JSON."""
    values = {}
    for name in ServerVersions.__dataclass_fields__:
        if name not in data:
            raise ValueError(f"missing field `{name}`")
        value = data[name]
        if not isinstance(value, str):
            raise ValueError(f"field `{name}` is not a string")
        values[name] = value
    return ServerVersions(**values)


def changelogs_url(platform: ArtifactsPlatform) -> str:
    """Changelog URL for the given platform."""
    return CFX_SERVER_VERSIONS_API_URL.replace("{platform}", platform.changelogs_name())


def versions(client: requests.Session, platform: ArtifactsPlatform) -> ServerVersions:
    """Fetch the FXServer version changelog."""
    log.debug("getting artifacts versions")
    response = client.get(changelogs_url(platform))
    response.raise_for_status()
    return parse_versions(response.json())