"""HTTP sessions preconfigured with the headers dxm sends."""

import requests

USER_AGENT = "dxm/0.1.1"

GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION_HEADER = "X-GitHub-Api-Version"
GITHUB_API_VERSION = "2022-11-28"


def client() -> requests.Session:
    """Return a session that identifies itself as dxm."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def github_client() -> requests.Session:
    """Return a session set up for the GitHub REST API."""
    session = client()
    session.headers["Accept"] = GITHUB_ACCEPT
    session.headers[GITHUB_API_VERSION_HEADER] = GITHUB_API_VERSION
    return session