import httpx
import pytest

from app.api.deps import get_github_service
from app.core.exceptions import UpstreamError
from app.main import app
from app.services.github_service import GitHubService

REPOS = [{"name": f"repo-{i}", "created_at": f"2020-01-0{i + 1}T00:00:00Z"} for i in range(7)]


def _service(handler, **kwargs) -> GitHubService:
    return GitHubService(
        base_url="https://api.github.test", transport=httpx.MockTransport(handler), **kwargs
    )


@pytest.fixture
def use_github(client):
    def install(handler, **kwargs):
        app.dependency_overrides[get_github_service] = lambda: _service(handler, **kwargs)

    return install


def test_github_repos_query(client, use_github):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["user_agent"] = request.headers.get("user-agent")
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json=REPOS[:5])

    use_github(handler, client_id="id", client_secret="secret")

    response = client.get("/api/profile/github/octocat")

    assert response.status_code == 200
    assert [repo["name"] for repo in response.json()] == [f"repo-{i}" for i in range(5)]
    assert seen["path"] == "/users/octocat/repos"
    assert seen["params"] == {"per_page": "5", "sort": "created", "direction": "asc"}
    assert seen["user_agent"]
    assert seen["authorization"].startswith("Basic ")


def test_github_never_returns_more_than_page_size(client, use_github):
    use_github(lambda request: httpx.Response(200, json=REPOS))

    response = client.get("/api/profile/github/octocat")

    assert len(response.json()) == 5


def test_github_without_credentials_sends_no_auth(client, use_github):
    seen = {}

    def handler(request):
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json=[])

    use_github(handler, client_id="", client_secret="")

    assert client.get("/api/profile/github/octocat").json() == []
    assert seen["authorization"] is None


def test_github_unknown_user(client, use_github):
    use_github(lambda request: httpx.Response(404, json={"message": "Not Found"}))

    response = client.get("/api/profile/github/nobody-here")

    assert response.status_code == 400
    assert response.json() == {"msg": "No Github profile found"}


def test_github_network_error(client, use_github):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    use_github(handler)

    response = client.get("/api/profile/github/octocat")

    assert response.status_code == 400
    assert response.json() == {"msg": "No Github profile found"}


@pytest.mark.asyncio
async def test_service_rejects_non_list_payload():
    service = _service(lambda request: httpx.Response(200, json={"message": "weird"}))

    with pytest.raises(UpstreamError):
        await service.get_repos("octocat")


@pytest.mark.asyncio
@pytest.mark.parametrize("username", ["..", "octo/cat", "octo cat", ""])
async def test_service_rejects_usernames_that_are_not_github_logins(username):
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(200, json=[])

    with pytest.raises(UpstreamError):
        await _service(handler).get_repos(username)
    assert calls == []
