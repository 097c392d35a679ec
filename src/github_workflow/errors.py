"""Exception hierarchy for the github-workflow commands."""


class WorkflowError(Exception):
    """Base exception for every error the CLI reports as `Error: <message>`."""


class NotAGitRepositoryError(WorkflowError):
    """The current directory is not inside a git working tree."""


class RemoteNotFoundError(WorkflowError):
    """The repository has no usable `origin` remote."""


class RemoteUrlError(WorkflowError):
    """The `origin` URL does not look like host[:/]owner/repo."""


class GitOperationError(WorkflowError):
    """A local git step (checkout, pull, branch) failed."""


class GhNotInstalledError(WorkflowError):
    """The `gh` executable could not be found."""


class AuthError(WorkflowError):
    """The gh session could not provide a usable token."""


class GitHubApiError(WorkflowError):
    """A GraphQL or REST call was rejected."""


class ProjectNotConfiguredError(WorkflowError):
    """No project identifier is configured and none could be chosen."""


class ProjectNotFoundError(WorkflowError):
    """The configured project does not exist or is not visible."""


class StatusFieldError(WorkflowError):
    """The board lacks the Status field or one of its required options."""


class NoTodoTasksError(WorkflowError):
    """No item with content is waiting in Todo."""
