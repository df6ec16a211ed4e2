import pytest

from dxm.artifacts.channel import (
    ArtifactsChannel,
    ParseArtifactsChannelError,
    parse_channel,
)


@pytest.mark.parametrize("channel", list(ArtifactsChannel))
def test_round_trip(channel):
    assert parse_channel(str(channel)) is channel


def test_latest_jg_name():
    assert str(ArtifactsChannel.LATEST_JG) == "latest-jg"
    assert parse_channel("latest-jg") is ArtifactsChannel.LATEST_JG


def test_known_names():
    assert parse_channel("critical") is ArtifactsChannel.CRITICAL
    assert parse_channel("recommended") is ArtifactsChannel.RECOMMENDED
    assert parse_channel("optional") is ArtifactsChannel.OPTIONAL
    assert parse_channel("latest") is ArtifactsChannel.LATEST


def test_unknown_channel():
    with pytest.raises(ParseArtifactsChannelError) as info:
        parse_channel("nope")
    assert str(info.value) == "unknown artifacts channel nope"
    assert info.value.channel == "nope"


def test_parse_is_case_sensitive():
    with pytest.raises(ValueError):
        parse_channel("Latest")