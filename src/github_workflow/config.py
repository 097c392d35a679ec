"""Settings from the environment and the repository-local `.github-variables` file."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from github_workflow.log import DEFAULT_LOG_LEVEL, get_logger
from github_workflow.projects.models import ProjectRef

CONFIG_FILE = ".github-variables"
PROJECT_KEY = "PROJECT_ID"

PROJECT_OVERRIDE_ENV = "GITHUB_PROJECT_ID"
API_URL_ENV = "GITHUB_API_URL"
LOG_LEVEL_ENV = "GITHUB_WORKFLOW_LOG_LEVEL"

DEFAULT_API_URL = "https://api.github.com"
ENTERPRISE_REST_SUFFIX = "/api/v3"

_PROJECT_LINE = re.compile(rf"^{PROJECT_KEY}=(\S+)\s*$", re.MULTILINE)

logger = get_logger("config")


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    project_override: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def graphql_url(self) -> str:
        """GraphQL endpoint for `api_url`. Enterprise `<host>/api/v3` maps to `<host>/api/graphql`."""
        base = self.api_url.rstrip("/")
        if base.endswith(ENTERPRISE_REST_SUFFIX):
            base = base[: -len("/v3")]
        return f"{base}/graphql"


def load_settings(git_root: Optional[Path] = None) -> Settings:
    """Read settings from the environment, after loading `<git_root>/.env` if present.

    Variables already set in the environment win over the `.env` file.
    """
    if git_root is not None:
        env_file = Path(git_root) / ".env"
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            logger.debug("Loaded %s", env_file)
    override = os.environ.get(PROJECT_OVERRIDE_ENV, "").strip() or None
    return Settings(
        api_url=os.environ.get(API_URL_ENV, DEFAULT_API_URL),
        project_override=override,
        log_level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
    )


class ConfigFile:
    """Reads and writes the persisted project identifier in `.github-variables`."""

    def __init__(self, git_root):
        self._path = Path(git_root) / CONFIG_FILE

    @property
    def path(self) -> Path:
        return self._path

    def read_project_ref(self) -> Optional[ProjectRef]:
        """Return the persisted ref, or None if the file or a well-formed entry is missing.

        Read errors other than a missing file propagate.
        """
        try:
            data = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        match = _PROJECT_LINE.search(data)
        if not match:
            logger.debug("No %s entry in %s", PROJECT_KEY, self._path)
            return None
        return ProjectRef.parse(match.group(1))

    def write_project_ref(self, value) -> None:
        """Persist `PROJECT_ID=<value>`, replacing an existing entry and keeping other lines."""
        try:
            lines = self._path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            lines = []
        entry = f"{PROJECT_KEY}={value}"
        kept = [line for line in lines if not line.startswith(f"{PROJECT_KEY}=")]
        kept.append(entry)
        self._path.write_text("\n".join(kept) + "\n", encoding="utf-8")
        logger.debug("Wrote %s to %s", entry, self._path)
