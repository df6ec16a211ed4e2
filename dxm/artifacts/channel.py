"""FXServer update channels."""

from enum import Enum


class ParseArtifactsChannelError(ValueError):
    """Raised when a string names no known update channel."""

    def __init__(self, channel: str) -> None:
        super().__init__(f"unknown artifacts channel {channel}")
        self.channel = channel


class ArtifactsChannel(Enum):
    """The possible FXServer installation update channels."""

    CRITICAL = "critical"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"
    LATEST = "latest"
    LATEST_JG = "latest-jg"

    def __str__(self) -> str:
        return self.value


def parse_channel(value: str) -> ArtifactsChannel:
    """Parse a channel name such as ``latest`` or ``latest-jg``."""
    try:
        return ArtifactsChannel(value)
    except ValueError:
        raise ParseArtifactsChannelError(value) from None