from datetime import timedelta

import pytest
from bson import ObjectId
from jose import jwt

from app.config import settings
from app.core.exceptions import AuthenticationError
from app.core.security import create_access_token, decode_token, get_password_hash, verify_password
from tests.conftest import auth, register


def test_password_hash_is_salted():
    first = get_password_hash("secret1")
    second = get_password_hash("secret1")

    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_verify_password_without_hash():
    assert not verify_password("secret1", None)


def test_token_round_trip_carries_user_id():
    user_id = str(ObjectId())
    token = create_access_token(user_id)

    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["user"] == {"id": user_id}
    assert decode_token(token) == user_id


def test_expired_token_is_rejected():
    token = create_access_token(str(ObjectId()), expires_delta=timedelta(seconds=-1))

    with pytest.raises(AuthenticationError) as exc_info:
        decode_token(token)
    assert exc_info.value.message == "Token is not valid"


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"user": {"id": str(ObjectId())}}, "another-secret", algorithm="HS256")

    with pytest.raises(AuthenticationError):
        decode_token(token)


def test_missing_token(client):
    response = client.get("/api/profile/me")

    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied"}


def test_invalid_token(client):
    response = client.get("/api/posts", headers=auth("not-a-token"))

    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}


def test_token_without_object_id_is_rejected(client):
    token = create_access_token("42")

    response = client.get("/api/posts", headers=auth(token))

    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}


def test_bearer_header_is_accepted(client):
    token = register(client)

    response = client.get("/api/posts", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/auth"),
        ("get", "/api/profile/me"),
        ("delete", "/api/profile"),
        ("get", "/api/posts"),
        ("get", f"/api/posts/{ObjectId()}"),
        ("put", f"/api/posts/like/{ObjectId()}"),
        ("put", f"/api/posts/unlike/{ObjectId()}"),
        ("delete", f"/api/posts/comment/{ObjectId()}/{ObjectId()}"),
    ],
)
def test_protected_routes_require_token(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
