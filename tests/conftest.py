"""Shared fixtures for github-workflow tests."""

import os
import sys

import pytest
from git import Repo

# Ensure tests/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_gh_cli import FakeGhCli  # noqa: E402, F401
from fake_issues_api import FakeIssuesApi  # noqa: E402, F401
from fake_local_repository import FakeLocalRepository  # noqa: E402, F401
from fake_projects_api import FakeProjectsApi, board_project  # noqa: E402, F401


def init_repo(path, origin_url=None):
    """Initialize a repository on branch main with one commit."""
    repo = Repo.init(path)
    repo.config_writer().set_value("user", "email", "test@test.com").release()
    repo.config_writer().set_value("user", "name", "Test").release()
    readme = os.path.join(path, "README.md")
    with open(readme, "w") as f:
        f.write("# Test Repo\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.git.branch("-M", "main")
    if origin_url:
        repo.create_remote("origin", origin_url)
    return repo


@pytest.fixture
def git_repo(tmp_path):
    """A repository with a commit on main and a GitHub-style origin URL."""
    path = tmp_path / "work"
    path.mkdir()
    repo = init_repo(str(path), origin_url="git@github.com:octo/demo-repo.git")
    return path, repo


@pytest.fixture
def cloned_repo(tmp_path):
    """A clone of a bare 'remote' so that `git pull` works offline.

    Returns (clone_path, clone_repo, seed_repo): pushing from seed_repo to the
    bare remote simulates upstream changes.
    """
    seed_path = tmp_path / "seed"
    seed_path.mkdir()
    seed = init_repo(str(seed_path))
    bare_path = tmp_path / "remote.git"
    Repo.init(str(bare_path), bare=True)
    seed.create_remote("origin", str(bare_path))
    seed.git.push("origin", "main")
    Repo(str(bare_path)).git.symbolic_ref("HEAD", "refs/heads/main")

    clone_path = tmp_path / "clone"
    clone = Repo.clone_from(str(bare_path), str(clone_path))
    clone.config_writer().set_value("user", "email", "test@test.com").release()
    clone.config_writer().set_value("user", "name", "Test").release()
    return clone_path, clone, seed


@pytest.fixture
def clean_env(monkeypatch):
    """Unset the github-workflow variables; anything a test or .env sets is undone afterwards."""
    for name in ("GITHUB_PROJECT_ID", "GITHUB_API_URL", "GITHUB_WORKFLOW_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
