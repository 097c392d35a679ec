"""LocalRepository: wraps GitPython Repo for root discovery, origin parsing and branching.

Provides an injectable interface for git operations so tests can use
FakeLocalRepository instead of a real working tree.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from github_workflow.errors import (
    GitOperationError,
    NotAGitRepositoryError,
    RemoteNotFoundError,
    RemoteUrlError,
)
from github_workflow.log import get_logger

DEFAULT_BASE_BRANCH = "main"

# [scheme://][user@]host(:|/)owner/repo[.git]
_REMOTE_URL = re.compile(
    r"^(?:[\w+.-]+://)?(?:[^@/]+@)?[^/:]+(?::\d+)?[:/]([\w.-]+)/([\w.-]+?)(?:\.git)?/?$"
)

logger = get_logger("git")


@dataclass(frozen=True)
class RepoInfo:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_remote_url(url: str) -> RepoInfo:
    """Extract owner and repository name from an SSH or HTTPS remote URL.

    Raises RemoteUrlError if the URL does not match host[:/]owner/repo(.git).
    """
    match = _REMOTE_URL.match(url.strip())
    if not match:
        msg = f"Could not parse repository owner and name from git remote URL: {url}"
        raise RemoteUrlError(msg)
    return RepoInfo(owner=match.group(1), repo=match.group(2))


class LocalRepository:
    """High-level git operations on the working tree containing `path`.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def discover(cls, path=".") -> "LocalRepository":
        """Open the repository enclosing `path`.

        Raises NotAGitRepositoryError when `path` is not under version control.
        """
        try:
            repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as exc:
            msg = "Not a git repository or git is not installed."
            raise NotAGitRepositoryError(msg) from exc
        if repo.working_tree_dir is None:
            msg = "Not a git repository or git is not installed."
            raise NotAGitRepositoryError(msg)
        return cls(repo)

    @property
    def root(self) -> Path:
        return Path(self._repo.working_tree_dir)

    def origin_url(self) -> str:
        try:
            url = self._repo.git.remote("get-url", "origin").strip()
        except GitCommandError as exc:
            raise RemoteNotFoundError(
                'Could not get remote URL for "origin". '
                'Make sure you have a remote named "origin".'
            ) from exc
        if not url:
            raise RemoteNotFoundError(
                'Could not get remote URL for "origin". '
                'Make sure you have a remote named "origin".'
            )
        return url

    def repo_info(self) -> RepoInfo:
        return parse_remote_url(self.origin_url())

    def current_branch(self) -> str:
        return self._repo.active_branch.name

    def start_branch(self, branch_name: str, base: str = DEFAULT_BASE_BRANCH) -> None:
        """Switch to `base`, pull it, then create and switch to `branch_name`."""
        steps = [
            (f"git checkout {base}", lambda: self._repo.git.checkout(base)),
            ("git pull", lambda: self._repo.git.pull()),
            (f"git checkout -b {branch_name}", lambda: self._repo.git.checkout("-b", branch_name)),
        ]
        for label, step in steps:
            logger.debug("Running %s in %s", label, self.root)
            try:
                step()
            except GitCommandError as exc:
                stderr = (exc.stderr or "").strip()
                msg = f"{label} failed: {stderr or exc}"
                raise GitOperationError(msg) from exc
