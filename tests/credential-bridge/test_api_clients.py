"""Tests for GraphQLClient and RestClient over httpx.MockTransport."""

import json

import httpx
import pytest

from github_workflow.errors import GitHubApiError
from github_workflow.github.graphql_client import GraphQLClient
from github_workflow.github.rest_client import RestClient


def _recording_transport(status_code=200, payload=None):
    """Return (transport, requests) where requests collects every httpx.Request."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(status_code, json=payload if payload is not None else {})

    return httpx.MockTransport(handler), requests


@pytest.mark.unit
class TestGraphQLClient:

    def test_posts_query_with_bearer_token(self):
        transport, requests = _recording_transport(payload={"data": {"viewer": {"login": "octo"}}})
        client = GraphQLClient("gho_abc", url="https://api.example.com/graphql", transport=transport)

        data = client.execute("query { viewer { login } }", {"first": 1})

        assert data == {"viewer": {"login": "octo"}}
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.com/graphql"
        assert request.headers["Authorization"] == "Bearer gho_abc"
        assert json.loads(request.content) == {
            "query": "query { viewer { login } }",
            "variables": {"first": 1},
        }

    def test_omits_empty_variables(self):
        transport, requests = _recording_transport(payload={"data": {}})
        GraphQLClient("t", transport=transport).execute("query { viewer { login } }")
        assert "variables" not in json.loads(requests[0].content)

    def test_non_200_raises(self):
        transport, _ = _recording_transport(status_code=401, payload={"message": "Bad credentials"})
        client = GraphQLClient("t", transport=transport)
        with pytest.raises(GitHubApiError, match="401"):
            client.execute("query { viewer { login } }")

    def test_graphql_errors_raise_with_messages(self):
        transport, _ = _recording_transport(payload={
            "data": None,
            "errors": [{"message": "Could not resolve to a ProjectV2 with the number 9."}],
        })
        client = GraphQLClient("t", transport=transport)
        with pytest.raises(GitHubApiError, match="Could not resolve to a ProjectV2"):
            client.execute("query { x }")


@pytest.mark.unit
class TestRestClient:

    def test_create_issue(self):
        issue = {"number": 42, "node_id": "I_42", "html_url": "https://github.com/o/r/issues/42"}
        transport, requests = _recording_transport(status_code=201, payload=issue)
        client = RestClient("gho_abc", base_url="https://api.example.com", transport=transport)

        result = client.create_issue("octo", "demo-repo", "Add caching")

        assert result == issue
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.com/repos/octo/demo-repo/issues"
        assert request.headers["Authorization"] == "Bearer gho_abc"
        assert json.loads(request.content) == {"title": "Add caching"}

    def test_create_issue_with_body(self):
        transport, requests = _recording_transport(status_code=201, payload={"number": 1, "node_id": "I_1"})
        RestClient("t", transport=transport).create_issue("o", "r", "Title", body="Details")
        assert json.loads(requests[0].content) == {"title": "Title", "body": "Details"}

    def test_rejected_issue_raises(self):
        transport, _ = _recording_transport(status_code=410, payload={"message": "Issues are disabled"})
        with pytest.raises(GitHubApiError, match="410"):
            RestClient("t", transport=transport).create_issue("o", "r", "Title")
