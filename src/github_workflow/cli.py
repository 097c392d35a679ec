"""Top-level Click group for the github-workflow CLI."""

import os

import click

from github_workflow.app_context import AppContext
from github_workflow.config import LOG_LEVEL_ENV
from github_workflow.errors import WorkflowError
from github_workflow.git.local_repository import DEFAULT_BASE_BRANCH
from github_workflow.log import get_logger, setup_logging
from github_workflow.workflow.naming import join_title
from github_workflow.workflow.setup_project import setup_project

logger = get_logger("cli")


class WorkflowGroup(click.Group):
    """Click group that reports unknown commands and errors with exit status 1."""

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            click.echo(f"Unknown command: {cmd_name}")
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
            ctx.exit(1)

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
            ctx.exit(1)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except WorkflowError as exc:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(1)
        except Exception as exc:
            logger.debug("Unexpected failure", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(1)


def _require_title(words, what):
    title = join_title(words)
    if not title:
        raise WorkflowError(f"A title is required for a new {what}.")
    return title


@click.group(cls=WorkflowGroup, invoke_without_command=True, no_args_is_help=False)
@click.option("-i", "--interactive", is_flag=True, help="Prompt for a project when none is configured.")
@click.option("-v", "--verbose", is_flag=True, help="Log gh, git and API calls to stderr.")
@click.pass_context
def main(ctx, interactive, verbose):
    """github-workflow - drive a GitHub Projects kanban board from the terminal."""
    if ctx.invoked_subcommand is None:
        click.echo("Unknown command: (none)")
        ctx.exit(1)
    setup_logging("DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV))
    if ctx.obj is None:
        ctx.obj = AppContext()
    if interactive:
        ctx.obj.interactive = True
    if verbose:
        ctx.obj.verbose = True
    ctx.call_on_close(ctx.obj.close)


@main.command("new-idea")
@click.argument("title", nargs=-1)
@click.pass_obj
def new_idea_cmd(app, title):
    """Create a draft issue in the Backlog."""
    title = _require_title(title, "idea")
    app.ensure_credentials()
    app.workflow().new_idea(title)


@main.command("new-task")
@click.argument("title", nargs=-1)
@click.pass_obj
def new_task_cmd(app, title):
    """Create an issue and add it to Todo."""
    title = _require_title(title, "task")
    app.ensure_credentials()
    app.workflow().new_task(title)


@main.command("next-task")
@click.option("--base", default=DEFAULT_BASE_BRANCH, show_default=True, help="Branch to start from.")
@click.pass_obj
def next_task_cmd(app, base):
    """Move the next Todo item to In Progress and create its branch."""
    app.ensure_credentials()
    app.workflow().next_task(base=base)


@main.command("setup-project")
@click.argument("title", nargs=-1)
@click.pass_obj
def setup_project_cmd(app, title):
    """Create a project board with Todo, In Progress, Done and Backlog statuses."""
    app.ensure_credentials()
    setup_project(app.local_repo, app.projects_api, app.config_file, join_title(title))
