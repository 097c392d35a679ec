"""ProjectResolver: decides which project board a command operates on.

Precedence: GITHUB_PROJECT_ID override, then PROJECT_ID in .github-variables,
then the owner's open projects (listed, or chosen interactively and persisted).
"""

from typing import Callable, List, Optional

import click

from github_workflow.config import CONFIG_FILE, PROJECT_KEY, PROJECT_OVERRIDE_ENV
from github_workflow.errors import ProjectNotConfiguredError
from github_workflow.log import get_logger
from github_workflow.projects.models import Project, ProjectRef, ProjectSummary

logger = get_logger("resolver")


def prompt_for_project(projects: List[ProjectSummary]) -> ProjectSummary:
    """Ask the user to pick one of `projects` by position."""
    for index, project in enumerate(projects, start=1):
        click.echo(f"  {index}) {project.number} {project.title}")
    choice = click.prompt(
        "Please select a project",
        type=click.IntRange(1, len(projects)),
        default=1,
    )
    return projects[choice - 1]


class ProjectResolver:
    """Resolves and loads the target project for one command invocation.

    Args:
        config_file: ConfigFile for the repository's .github-variables.
        projects_api: ProjectsApi (or FakeProjectsApi).
        override: Value of GITHUB_PROJECT_ID, if set.
        interactive: Prompt for a project instead of failing when none is configured.
        choose: Callable picking one ProjectSummary from a list; defaults to a click prompt.
    """

    def __init__(
        self,
        config_file,
        projects_api,
        override: Optional[str] = None,
        interactive: bool = False,
        choose: Optional[Callable[[List[ProjectSummary]], ProjectSummary]] = None,
    ):
        self._config_file = config_file
        self._projects_api = projects_api
        self._override = override
        self._interactive = interactive
        self._choose = choose or prompt_for_project

    def resolve(self, owner: str) -> ProjectRef:
        if self._override:
            logger.debug("Using %s=%s", PROJECT_OVERRIDE_ENV, self._override)
            return ProjectRef.parse(self._override)

        persisted = self._config_file.read_project_ref()
        if persisted is not None:
            logger.debug("Using %s from %s", persisted, self._config_file.path)
            return persisted

        return self._select_from_remote(owner)

    def load(self, owner: str) -> Project:
        """Resolve the project reference and fetch the project with its Status field."""
        return self._projects_api.get_project(owner, self.resolve(owner))

    def _select_from_remote(self, owner: str) -> ProjectRef:
        projects = self._projects_api.list_open_projects(owner)
        if not projects:
            click.echo(f"No open projects found for {owner}.")
            raise ProjectNotConfiguredError(
                "Create a project on GitHub (or run `github-workflow setup-project`), "
                f"then set {PROJECT_OVERRIDE_ENV} or add {PROJECT_KEY}=<number> to {CONFIG_FILE}."
            )

        if not self._interactive:
            click.echo(f"Open projects for {owner}:")
            for project in projects:
                click.echo(f"  {project.number} {project.title}")
            raise ProjectNotConfiguredError(
                f"No project configured. Set {PROJECT_OVERRIDE_ENV} or add "
                f"{PROJECT_KEY}=<number> to {CONFIG_FILE} (or rerun with --interactive)."
            )

        selected = self._choose(projects)
        self._config_file.write_project_ref(selected.number)
        click.echo(f"Saved {PROJECT_KEY}={selected.number} to {CONFIG_FILE}.")
        return ProjectRef(number=selected.number)
