"""GitHub repository lookup used by the profile pages."""

import re
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
import structlog

from app.config import settings
from app.core.exceptions import UpstreamError

logger = structlog.get_logger(__name__)

NO_GITHUB_PROFILE = "No Github profile found"

# GitHub logins are alphanumerics and hyphens
GITHUB_LOGIN = re.compile(r"[A-Za-z0-9-]{1,39}")


class GitHubService:
    """
    Read-only proxy to the GitHub REST API.

    Returns one page of a user's public repositories, oldest first.
    Failures are not retried.
    """

    def __init__(
        self,
        base_url: str = settings.GITHUB_API_URL,
        client_id: str = settings.GITHUB_CLIENT_ID,
        client_secret: str = settings.GITHUB_SECRET,
        per_page: int = settings.GITHUB_REPOS_PER_PAGE,
        timeout: float = settings.GITHUB_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.per_page = per_page
        self.timeout = timeout
        self.transport = transport

    def _auth(self) -> Optional[httpx.BasicAuth]:
        if self.client_id and self.client_secret:
            return httpx.BasicAuth(self.client_id, self.client_secret)
        return None

    async def get_repos(self, username: str) -> List[Dict[str, Any]]:
        params = {"per_page": self.per_page, "sort": "created", "direction": "asc"}
        headers = {"user-agent": "devconnector-api", "accept": "application/vnd.github+json"}

        if not GITHUB_LOGIN.fullmatch(username):
            logger.info("github_username_rejected", username=username)
            raise UpstreamError(NO_GITHUB_PROFILE)

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(
                    f"/users/{quote(username, safe='')}/repos", params=params, headers=headers, auth=self._auth()
                )
        except httpx.HTTPError as e:
            logger.error("github_request_failed", username=username, error=str(e))
            raise UpstreamError(NO_GITHUB_PROFILE)

        if response.status_code != 200:
            logger.info("github_profile_not_found", username=username, status=response.status_code)
            raise UpstreamError(NO_GITHUB_PROFILE)

        repos = response.json()
        if not isinstance(repos, list):
            raise UpstreamError(NO_GITHUB_PROFILE)
        return repos[: self.per_page]
