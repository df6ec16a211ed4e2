import pytest
import requests
import responses

from dxm.artifacts.cfx import (
    ServerVersions,
    changelogs_url,
    parse_versions,
    versions,
)
from dxm.artifacts.channel import ArtifactsChannel
from dxm.artifacts.platforms import ArtifactsPlatform

SAMPLE = {
    "critical": "100",
    "recommended": "200",
    "optional": "300",
    "latest": "400",
    "critical_txadmin": "1.0",
    "recommended_txadmin": "2.0",
    "optional_txadmin": "3.0",
    "latest_txadmin": "4.0",
}


@pytest.mark.parametrize(
    "channel",
    [
        ArtifactsChannel.CRITICAL,
        ArtifactsChannel.RECOMMENDED,
        ArtifactsChannel.OPTIONAL,
        ArtifactsChannel.LATEST,
    ],
)
def test_version_and_txadmin(channel):
    parsed = parse_versions(SAMPLE)
    assert parsed.version(channel) == SAMPLE[channel.value]
    assert parsed.txadmin(channel) == SAMPLE[channel.value + "_txadmin"]


def test_alias_display():
    parsed = parse_versions(SAMPLE)
    assert parsed.alias_display(ArtifactsChannel.LATEST) == "400\twith txAdmin v4.0"


def test_latest_jg_rejected():
    parsed = parse_versions(SAMPLE)
    with pytest.raises(ValueError):
        parsed.version(ArtifactsChannel.LATEST_JG)
    with pytest.raises(ValueError):
        parsed.txadmin(ArtifactsChannel.LATEST_JG)


def test_missing_field():
    data = dict(SAMPLE)
    del data["latest_txadmin"]
    with pytest.raises(ValueError, match="latest_txadmin"):
        parse_versions(data)


def test_non_string_field():
    data = dict(SAMPLE, latest=400)
    with pytest.raises(ValueError):
        parse_versions(data)


def test_extra_fields_ignored():
    parsed = parse_versions(dict(SAMPLE, extra="x"))
    assert parsed == ServerVersions(**SAMPLE)


def test_changelogs_url():
    assert changelogs_url(ArtifactsPlatform.LINUX) == (
        "https://changelogs-live.fivem.net/api/changelog/versions/linux/server"
    )
    assert "/win32/" in changelogs_url(ArtifactsPlatform.WINDOWS)


def test_versions_fetch():
    with responses.RequestsMock() as rsps:
        rsps.get(changelogs_url(ArtifactsPlatform.LINUX), json=SAMPLE)
        result = versions(requests.Session(), ArtifactsPlatform.LINUX)
    assert result.version(ArtifactsChannel.RECOMMENDED) == SAMPLE["recommended"]


def test_versions_http_error():
    with responses.RequestsMock() as rsps:
        rsps.get(changelogs_url(ArtifactsPlatform.WINDOWS), status=500)
        with pytest.raises(requests.HTTPError):
            versions(requests.Session(), ArtifactsPlatform.WINDOWS)