"""Workflow: the new-idea, new-task and next-task operations.

Remote mutations and local git steps are ordered but not transactional: if
the board update succeeds and a later git step fails, the board is left as is.
"""

from typing import List, Tuple

import click

from github_workflow.errors import NoTodoTasksError, StatusFieldError, WorkflowError
from github_workflow.git.local_repository import DEFAULT_BASE_BRANCH
from github_workflow.log import get_logger
from github_workflow.projects.models import (
    BACKLOG,
    IN_PROGRESS,
    STATUS_FIELD_NAME,
    TODO,
    Project,
    ProjectItem,
    StatusField,
    StatusOption,
)
from github_workflow.projects.projects_api import DEFAULT_ITEM_LIMIT
from github_workflow.workflow.naming import branch_name_for

logger = get_logger("workflow")


def require_status_options(project: Project, *names: str) -> Tuple[StatusField, List[StatusOption]]:
    """Return the project's Status field and the named options.

    Raises StatusFieldError if the field or any of the options is missing.
    """
    status_field = project.status_field
    if status_field is None:
        raise StatusFieldError(
            f'Could not find a "{STATUS_FIELD_NAME}" field in project #{project.number}.'
        )
    options = []
    missing = []
    for name in names:
        option = status_field.option(name)
        if option is None:
            missing.append(f'"{name}"')
        else:
            options.append(option)
    if missing:
        raise StatusFieldError(
            f'Could not find {" and ".join(missing)} '
            f'{"option" if len(missing) == 1 else "options"} '
            f'in the "{STATUS_FIELD_NAME}" field of project #{project.number}.'
        )
    return status_field, options


def first_todo_item(items: List[ProjectItem]):
    """Return the first item in Todo that has content, or None."""
    for item in items:
        if item.status == TODO and item.content is not None:
            return item
    return None


class Workflow:
    """Composes the repository, board and issue collaborators into the three commands.

    Args:
        local_repo: LocalRepository (or FakeLocalRepository).
        projects_api: ProjectsApi (or FakeProjectsApi).
        issues: Object with create_issue(owner, repo, title), e.g. RestClient.
        resolver: ProjectResolver.
    """

    def __init__(self, local_repo, projects_api, issues, resolver):
        self._local_repo = local_repo
        self._projects_api = projects_api
        self._issues = issues
        self._resolver = resolver

    def new_idea(self, title: str) -> str:
        """Add a draft issue to the board and put it in Backlog. Returns the item ID."""
        info = self._local_repo.repo_info()
        project = self._resolver.load(info.owner)
        status_field, (backlog,) = require_status_options(project, BACKLOG)

        item_id = self._projects_api.add_draft_issue(project.id, title)
        click.echo(f'Created a new draft issue with title: "{title}"')

        self._projects_api.set_status(project.id, item_id, status_field.id, backlog.id)
        click.echo(f'Set status of "{title}" to "{BACKLOG}".')
        return item_id

    def new_task(self, title: str) -> int:
        """Create an issue, add it to the board and put it in Todo. Returns the issue number."""
        info = self._local_repo.repo_info()
        project = self._resolver.load(info.owner)
        status_field, (todo,) = require_status_options(project, TODO)

        issue = self._issues.create_issue(info.owner, info.repo, title)
        number = issue["number"]
        click.echo(f"Created issue #{number}")

        item_id = self._projects_api.add_item(project.id, issue["node_id"])
        self._projects_api.set_status(project.id, item_id, status_field.id, todo.id)
        click.echo(f'Added issue #{number} to "{TODO}".')
        return number

    def next_task(self, base: str = DEFAULT_BASE_BRANCH) -> str:
        """Move the first Todo item to In Progress and branch for it. Returns the branch name."""
        info = self._local_repo.repo_info()
        project = self._resolver.load(info.owner)
        status_field, (_todo, in_progress) = require_status_options(project, TODO, IN_PROGRESS)

        items = self._projects_api.list_items(project.id, first=DEFAULT_ITEM_LIMIT)
        item = first_todo_item(items)
        if item is None:
            raise NoTodoTasksError(f'No tasks found in the "{TODO}" column.')

        content = item.content
        branch_name = branch_name_for(content.title)
        if not branch_name.strip("-"):
            raise WorkflowError(f'Cannot derive a branch name from the title of {content.label}.')

        self._projects_api.set_status(project.id, item.id, status_field.id, in_progress.id)
        click.echo(f'Moved {content.label} to "{IN_PROGRESS}".')

        logger.debug("Branching %s from %s", branch_name, base)
        self._local_repo.start_branch(branch_name, base=base)
        click.echo(f'Created and switched to branch "{branch_name}" for {content.label}')

        if content.body.strip():
            click.echo("")
            click.echo(content.body)
        return branch_name
