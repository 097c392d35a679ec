"""Optional one-off board setup: create a project with the Status options the workflow uses."""

import click

from github_workflow.projects.models import (
    BACKLOG,
    DONE,
    IN_PROGRESS,
    TODO,
    Project,
    StatusOption,
)
from github_workflow.workflow.naming import default_project_title

WORKFLOW_STATUS_OPTIONS = (
    StatusOption(id="", name=TODO, color="GREEN", description="Queued for work"),
    StatusOption(id="", name=IN_PROGRESS, color="YELLOW", description="Being worked on"),
    StatusOption(id="", name=DONE, color="PURPLE", description="Finished"),
    StatusOption(id="", name=BACKLOG, color="GRAY", description="Ideas not yet scheduled"),
)


def ensure_status_options(projects_api, project: Project):
    """Make sure the project's Status field carries every workflow option.

    Creates the field when absent; otherwise appends the missing options after
    the existing ones. Returns the resulting StatusField.
    """
    status_field = project.status_field
    if status_field is None:
        return projects_api.create_status_field(project.id, WORKFLOW_STATUS_OPTIONS)
    missing = [opt for opt in WORKFLOW_STATUS_OPTIONS if status_field.option(opt.name) is None]
    if not missing:
        return status_field
    return projects_api.update_status_field(status_field.id, list(status_field.options) + missing)


def setup_project(local_repo, projects_api, config_file, title: str = "") -> Project:
    """Create a repository-linked project, prepare its Status field and persist its number."""
    info = local_repo.repo_info()
    title = title or default_project_title(info.repo)

    owner_id, repo_id = projects_api.repository_ids(info.owner, info.repo)
    project = projects_api.create_project(owner_id, repo_id, title)
    click.echo(f'Successfully created project "{title}" (#{project.number}).')

    status_field = ensure_status_options(projects_api, project)
    names = ", ".join(opt.name for opt in status_field.options)
    click.echo(f"Status options: {names}")

    config_file.write_project_ref(project.number)
    if project.url:
        click.echo(project.url)
    return project
