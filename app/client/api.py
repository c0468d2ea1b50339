"""
DevConnector API client
Async wrapper over the REST surface; reports outcomes through an AlertStore
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.client.alerts import AlertStore
from app.config import settings

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"


class APIClientError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, messages: List[str]):
        super().__init__(f"{status_code}: {'; '.join(messages)}")
        self.status_code = status_code
        self.messages = messages


def _error_messages(response: httpx.Response) -> List[str]:
    try:
        body = response.json()
    except ValueError:
        return [response.text or response.reason_phrase]
    if isinstance(body, dict):
        if isinstance(body.get("errors"), list):
            return [error.get("msg", "") for error in body["errors"]]
        if body.get("msg"):
            return [body["msg"]]
    return [response.reason_phrase]


class DevConnectorClient:
    """
    One method per API endpoint.

    The token returned by ``register``/``login`` is kept and sent on every
    later request. Failed calls post one ``danger`` alert per error message
    and raise ``APIClientError``.
    """

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        alerts: Optional[AlertStore] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.alerts = alerts if alerts is not None else AlertStore()
        self.token = token
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> "DevConnectorClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.alerts.close()
        await self._http.aclose()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    async def _request(self, method: str, url: str, json: Optional[Dict[str, Any]] = None) -> Any:
        headers = {TOKEN_HEADER: self.token} if self.token else {}
        response = await self._http.request(method, url, json=json, headers=headers)
        if response.is_success:
            return response.json()

        messages = _error_messages(response)
        for message in messages:
            self.alerts.set_alert(message, "danger")
        logger.debug(f"{method} {url} failed with {response.status_code}: {messages}")
        raise APIClientError(response.status_code, messages)

    # Auth

    async def register(self, name: str, email: str, password: str) -> str:
        try:
            data = await self._request(
                "POST", "/api/users", {"name": name, "email": email, "password": password}
            )
        except APIClientError:
            self.token = None
            raise
        self.token = data["token"]
        return self.token

    async def login(self, email: str, password: str) -> str:
        try:
            data = await self._request("POST", "/api/auth", {"email": email, "password": password})
        except APIClientError:
            self.token = None
            raise
        self.token = data["token"]
        return self.token

    async def load_user(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/auth")

    def logout(self) -> None:
        self.token = None

    # Profiles

    async def get_current_profile(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/profile/me")

    async def get_profiles(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/profile")

    async def get_profile_by_id(self, user_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/api/profile/user/{user_id}")

    async def get_github_repos(self, username: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/api/profile/github/{username}")

    async def create_profile(self, form: Dict[str, Any], edit: bool = False) -> Dict[str, Any]:
        profile = await self._request("POST", "/api/profile", form)
        self.alerts.set_alert("Profile Updated" if edit else "Profile Created", "success")
        return profile

    async def add_experience(self, form: Dict[str, Any]) -> Dict[str, Any]:
        profile = await self._request("PUT", "/api/profile/experience", form)
        self.alerts.set_alert("Experience Added", "success")
        return profile

    async def add_education(self, form: Dict[str, Any]) -> Dict[str, Any]:
        profile = await self._request("PUT", "/api/profile/education", form)
        self.alerts.set_alert("Education Added", "success")
        return profile

    async def delete_experience(self, exp_id: str) -> Dict[str, Any]:
        profile = await self._request("DELETE", f"/api/profile/experience/{exp_id}")
        self.alerts.set_alert("Experience Removed", "success")
        return profile

    async def delete_education(self, edu_id: str) -> Dict[str, Any]:
        profile = await self._request("DELETE", f"/api/profile/education/{edu_id}")
        self.alerts.set_alert("Education Removed", "success")
        return profile

    async def delete_account(self) -> None:
        await self._request("DELETE", "/api/profile")
        self.token = None
        self.alerts.set_alert("Your account has been permanently deleted", "success")

    # Posts

    async def get_posts(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/posts")

    async def get_post(self, post_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/api/posts/{post_id}")

    async def add_post(self, text: str) -> Dict[str, Any]:
        post = await self._request("POST", "/api/posts", {"text": text})
        self.alerts.set_alert("Post Created", "success")
        return post

    async def delete_post(self, post_id: str) -> None:
        await self._request("DELETE", f"/api/posts/{post_id}")
        self.alerts.set_alert("Post Removed", "success")

    async def add_like(self, post_id: str) -> List[Dict[str, Any]]:
        return await self._request("PUT", f"/api/posts/like/{post_id}")

    async def remove_like(self, post_id: str) -> List[Dict[str, Any]]:
        return await self._request("PUT", f"/api/posts/unlike/{post_id}")

    async def add_comment(self, post_id: str, text: str) -> List[Dict[str, Any]]:
        comments = await self._request("POST", f"/api/posts/comment/{post_id}", {"text": text})
        self.alerts.set_alert("Comment Added", "success")
        return comments

    async def delete_comment(self, post_id: str, comment_id: str) -> List[Dict[str, Any]]:
        comments = await self._request("DELETE", f"/api/posts/comment/{post_id}/{comment_id}")
        self.alerts.set_alert("Comment Removed", "success")
        return comments
