"""GitHubSession: per-invocation holder of the gh token and the API clients built from it."""

from github_workflow.config import Settings
from github_workflow.github.graphql_client import GraphQLClient
from github_workflow.github.rest_client import RestClient


class GitHubSession:
    """Fetches the token once per command and derives GraphQL and REST clients lazily.

    Nothing is persisted; the token lives only as long as the session.

    Usage:
        with GitHubSession(GhCli(), settings) as session:
            session.graphql.execute(query, variables)
    """

    def __init__(self, gh_cli, settings: Settings = None):
        self._gh_cli = gh_cli
        self._settings = settings or Settings()
        self._token = None
        self._graphql = None
        self._rest = None

    def __enter__(self) -> "GitHubSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    @property
    def token(self) -> str:
        if self._token is None:
            self._token = self._gh_cli.auth_token()
        return self._token

    @property
    def graphql(self) -> GraphQLClient:
        if self._graphql is None:
            self._graphql = GraphQLClient(self.token, url=self._settings.graphql_url)
        return self._graphql

    @property
    def rest(self) -> RestClient:
        if self._rest is None:
            self._rest = RestClient(self.token, base_url=self._settings.api_url)
        return self._rest

    def close(self) -> None:
        if self._graphql is not None:
            self._graphql.close()
            self._graphql = None
        if self._rest is not None:
            self._rest.close()
            self._rest = None
