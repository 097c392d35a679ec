"""AppContext: builds the collaborators for one command invocation.

Everything is created lazily so that a command only touches git, gh or the
network when it needs to. Tests pass an AppContext holding fakes as the
click `obj`.
"""

from github_workflow.config import ConfigFile, load_settings
from github_workflow.git.local_repository import LocalRepository
from github_workflow.github.gh_cli import PROJECT_SCOPE, GhCli
from github_workflow.github.session import GitHubSession
from github_workflow.log import setup_logging
from github_workflow.projects.projects_api import ProjectsApi
from github_workflow.projects.resolver import ProjectResolver
from github_workflow.workflow.commands import Workflow


class AppContext:

    def __init__(
        self,
        gh_cli=None,
        local_repo=None,
        projects_api=None,
        issues=None,
        settings=None,
        interactive=False,
        choose=None,
        verbose=False,
    ):
        self.gh_cli = gh_cli or GhCli()
        self.interactive = interactive
        self.verbose = verbose
        self._local_repo = local_repo
        self._projects_api = projects_api
        self._issues = issues
        self._settings = settings
        self._choose = choose
        self._session = None

    @property
    def local_repo(self):
        if self._local_repo is None:
            self._local_repo = LocalRepository.discover()
        return self._local_repo

    @property
    def settings(self):
        if self._settings is None:
            self._settings = load_settings(self.local_repo.root)
            if not self.verbose:
                setup_logging(self._settings.log_level)
        return self._settings

    @property
    def session(self) -> GitHubSession:
        if self._session is None:
            self._session = GitHubSession(self.gh_cli, self.settings)
        return self._session

    @property
    def projects_api(self):
        if self._projects_api is None:
            self._projects_api = ProjectsApi(self.session.graphql)
        return self._projects_api

    @property
    def issues(self):
        if self._issues is None:
            self._issues = self.session.rest
        return self._issues

    @property
    def config_file(self) -> ConfigFile:
        return ConfigFile(self.local_repo.root)

    def ensure_credentials(self) -> None:
        self.gh_cli.ensure_scope(PROJECT_SCOPE)

    def resolver(self) -> ProjectResolver:
        return ProjectResolver(
            self.config_file,
            self.projects_api,
            override=self.settings.project_override,
            interactive=self.interactive,
            choose=self._choose,
        )

    def workflow(self) -> Workflow:
        return Workflow(self.local_repo, self.projects_api, self.issues, self.resolver())

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
