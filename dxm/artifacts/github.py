"""Look up the git commit behind an FXServer version on GitHub."""

import logging
from typing import Any

import requests

log = logging.getLogger(__name__)

GITHUB_TAG_REF_API_URL = (
    "https://api.github.com/repos/citizenfx/fivem/git/ref/tags/v1.0.0.{version}"
)


def tag_ref_url(version: str) -> str:
    """API URL of the git tag ref for an FXServer version."""
    return GITHUB_TAG_REF_API_URL.replace("{version}", version)


def _object_field(document: Any, field: str) -> str:
    try:
        value = document["object"][field]
    except (KeyError, TypeError):
        raise ValueError(f"missing field `object.{field}`") from None
    if not isinstance(value, str):
        raise ValueError(f"field `object.{field}` is not a string")
    return value


def _get_json(client: requests.Session, url: str) -> Any:
    response = client.get(url)
    response.raise_for_status()
    return response.json()


def get_version_commit_sha(client: requests.Session, version: str) -> str:
    """Return the git commit SHA for the given FXServer version."""
    log.debug("getting github tag ref")
    tag_url = _object_field(_get_json(client, tag_ref_url(version)), "url")

    log.debug("getting github tag")
    return _object_field(_get_json(client, tag_url), "sha")