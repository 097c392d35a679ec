"""GraphQLClient: bearer-authenticated POSTs to the GitHub GraphQL endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from github_workflow.errors import GitHubApiError
from github_workflow.log import get_logger

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"

logger = get_logger("graphql")


class GraphQLClient:
    """Executes GraphQL queries and mutations with a fixed bearer token.

    Args:
        token: GitHub token with the project scope.
        url: GraphQL endpoint (override for GitHub Enterprise or tests).
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        token: str,
        url: str = DEFAULT_GRAPHQL_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self._client = httpx.Client(
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=30.0,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL document and return its `data` object.

        Raises:
            GitHubApiError: On a non-200 response or a payload carrying `errors`.
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        logger.debug("GraphQL request variables=%s", variables)
        try:
            response = self._client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"GraphQL request failed: {exc}") from exc

        if response.status_code != 200:
            raise GitHubApiError(
                f"GraphQL request failed: {response.status_code} - {response.text}"
            )

        data: dict[str, Any] = response.json()
        if data.get("errors"):
            messages = "; ".join(e.get("message", str(e)) for e in data["errors"])
            raise GitHubApiError(f"GraphQL errors: {messages}")

        return dict(data.get("data") or {})
