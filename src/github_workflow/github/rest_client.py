"""RestClient: the REST calls the workflow needs (issue creation)."""

from __future__ import annotations

from typing import Any

import httpx

from github_workflow.errors import GitHubApiError
from github_workflow.log import get_logger

DEFAULT_API_URL = "https://api.github.com"

logger = get_logger("rest")


class RestClient:
    """Bearer-authenticated client for the GitHub REST API.

    Args:
        token: GitHub token.
        base_url: REST API root (override for GitHub Enterprise or tests).
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=30.0,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def create_issue(
        self, owner: str, repo: str, title: str, body: str | None = None
    ) -> dict[str, Any]:
        """Create an issue and return the REST representation (number, node_id, html_url)."""
        payload: dict[str, Any] = {"title": title}
        if body:
            payload["body"] = body
        logger.debug("POST /repos/%s/%s/issues title=%r", owner, repo, title)
        try:
            response = self._client.post(f"/repos/{owner}/{repo}/issues", json=payload)
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Issue creation failed: {exc}") from exc
        if response.status_code != 201:
            raise GitHubApiError(
                f"Issue creation failed: {response.status_code} - {response.text}"
            )
        return dict(response.json())
