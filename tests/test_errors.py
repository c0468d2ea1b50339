from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from app.api.deps import get_post_service
from app.core.exceptions import format_validation_errors
from app.main import app


class _BrokenPostService:
    async def list_newest_first(self):
        raise RuntimeError("connection reset by peer")


def test_unexpected_failure_is_generic_500(client, alice):
    app.dependency_overrides[get_post_service] = lambda: _BrokenPostService()
    unsafe_client = TestClient(app, raise_server_exceptions=False)

    response = unsafe_client.get("/api/posts", headers=alice)

    assert response.status_code == 500
    assert response.text == "Server Error"
    assert "connection reset" not in response.text


def test_malformed_json_body(client):
    response = client.post(
        "/api/users", content="{not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["errors"]


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "API Running"
    assert client.get("/health").json()["status"] == "healthy"


def test_keyword_field_reports_its_wire_name():
    exc = RequestValidationError(
        [
            {"type": "value_error", "loc": ("body", "from_"), "msg": "Value error, From date is required"},
            {"type": "missing", "loc": ("body", "title"), "msg": "Field required"},
        ]
    )

    assert format_validation_errors(exc) == [
        {"msg": "From date is required", "param": "from", "location": "body"},
        {"msg": "Field required", "param": "title", "location": "body"},
    ]


def test_invalid_from_date_reports_from(client, alice):
    client.post("/api/profile", json={"status": "Developer", "skills": "python"}, headers=alice)

    response = client.put(
        "/api/profile/education",
        json={"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "not-a-date"},
        headers=alice,
    )

    assert response.status_code == 400
    assert [e["param"] for e in response.json()["errors"]] == ["from"]
