"""End-to-end: the API client driving the app in-process."""

import httpx
import pytest
from mongomock_motor import AsyncMongoMockClient

from app.client import APIClientError, DevConnectorClient
from app.db.session import get_db
from app.main import app


@pytest.fixture
def api():
    db = AsyncMongoMockClient()["devconnector_client_test"]

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield lambda: DevConnectorClient(
        base_url="http://testserver", transport=httpx.ASGITransport(app=app)
    )
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_profile_and_post_flow(api):
    async with api() as client:
        await client.register("Alice", "alice@example.com", "secret1")
        assert client.is_authenticated

        user = await client.load_user()
        assert user["name"] == "Alice"

        await client.create_profile({"status": "Developer", "skills": "python"})
        profile = await client.add_experience(
            {"title": "Engineer", "company": "Acme", "from": "2019-01-01"}
        )
        exp_id = profile["experience"][0]["_id"]
        profile = await client.delete_experience(exp_id)
        assert profile["experience"] == []

        post = await client.add_post("Hello")
        likes = await client.add_like(post["_id"])
        assert len(likes) == 1
        assert await client.remove_like(post["_id"]) == []

        comments = await client.add_comment(post["_id"], "Nice")
        assert await client.delete_comment(post["_id"], comments[0]["_id"]) == []

        messages = [alert.msg for alert in client.alerts.alerts]
        assert messages == [
            "Profile Created",
            "Experience Added",
            "Experience Removed",
            "Post Created",
            "Comment Added",
            "Comment Removed",
        ]
        assert {alert.alert_type for alert in client.alerts.alerts} == {"success"}


@pytest.mark.asyncio
async def test_errors_raise_and_post_danger_alerts(api):
    async with api() as client:
        await client.register("Alice", "alice@example.com", "secret1")

        with pytest.raises(APIClientError) as exc_info:
            await client.register("Alice", "alice@example.com", "secret1")

        assert exc_info.value.status_code == 400
        assert exc_info.value.messages == ["User already exists"]
        assert not client.is_authenticated
        assert [(a.msg, a.alert_type) for a in client.alerts.alerts] == [
            ("User already exists", "danger")
        ]


@pytest.mark.asyncio
async def test_login_then_delete_account(api):
    async with api() as client:
        await client.register("Bob", "bob@example.com", "secret1")
        client.logout()

        await client.login("bob@example.com", "secret1")
        await client.delete_account()
        assert not client.is_authenticated

        with pytest.raises(APIClientError) as exc_info:
            await client.login("bob@example.com", "secret1")
        assert exc_info.value.messages == ["Invalid credentials"]


@pytest.mark.asyncio
async def test_validation_errors_become_one_alert_each(api):
    async with api() as client:
        with pytest.raises(APIClientError):
            await client.register("", "bad", "1")

        assert len(client.alerts.alerts) == 3
