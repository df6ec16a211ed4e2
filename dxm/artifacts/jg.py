"""Access to JGScripts' Artifacts DB."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import requests

log = logging.getLogger(__name__)

JGSCRIPTS_ARTIFACTS_API_URL = "https://artifacts.jgscripts.com/json"


@dataclass(frozen=True)
class Artifacts:
    """The JGScripts Artifacts DB."""

    recommended_artifact: str

    def version(self) -> str:
        """The recommended version."""
        return self.recommended_artifact

    def alias_display(self) -> str:
        """One line describing the recommended version."""
        return self.version()


def parse_artifacts(data: Mapping[str, Any]) -> Artifacts:
    """Build ``Artifacts`` from the decoded database JSON."""
    try:
        value = data["recommendedArtifact"]
    except (KeyError, TypeError):
        raise ValueError("missing field `recommendedArtifact`") from None
    if not isinstance(value, str):
        raise ValueError("field `recommendedArtifact` is not a string")
    return Artifacts(recommended_artifact=value)


def artifacts(client: requests.Session) -> Artifacts:
    """Fetch the JGScripts Artifacts DB."""
    log.debug("getting artifacts database")
    response = client.get(JGSCRIPTS_ARTIFACTS_API_URL)
    response.raise_for_status()
    return parse_artifacts(response.json())