import responses

from dxm import http


def test_client_sets_user_agent():
    session = http.client()
    assert session.headers["User-Agent"] == "dxm/0.1.1"


def test_plain_client_has_no_github_version_header():
    session = http.client()
    assert "X-GitHub-Api-Version" not in session.headers


def test_github_client_headers():
    session = http.github_client()
    assert session.headers["Accept"] == "application/vnd.github+json"
    assert session.headers["X-GitHub-Api-Version"] == "2022-11-28"
    assert session.headers["User-Agent"] == http.USER_AGENT


def test_github_client_sends_headers():
    session = http.github_client()
    with responses.RequestsMock() as rsps:
        rsps.get("https://api.example.com/thing", json={})
        response = session.get("https://api.example.com/thing")
    sent = response.request.headers
    assert sent["X-GitHub-Api-Version"] == "2022-11-28"
    assert sent["User-Agent"] == "dxm/0.1.1"
    assert sent["Accept"] == "application/vnd.github+json"