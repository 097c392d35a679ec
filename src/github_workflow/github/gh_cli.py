"""GhCli: wraps the `gh auth` calls that bridge the gh session to API tokens."""

import re
import subprocess
from typing import List

import click

from github_workflow.errors import AuthError, GhNotInstalledError
from github_workflow.log import get_logger, sanitize_for_log

PROJECT_SCOPE = "project"

_SCOPES_MARKER = "Token scopes:"

logger = get_logger("gh_cli")


class GhCli:
    """Runs `gh` subprocesses for auth status, token and scope refresh.

    All captured calls go through _run_gh() for consistency.
    """

    def _run_gh(self, args, capture=True):
        logger.debug("Running %s", " ".join(args))
        try:
            if capture:
                return subprocess.run(args, capture_output=True, text=True)
            return subprocess.run(args)
        except FileNotFoundError as exc:
            raise GhNotInstalledError(
                "The `gh` command-line tool is not installed or not in your PATH."
            ) from exc

    def auth_status(self) -> str:
        """Return the combined output of `gh auth status`.

        Older gh releases print the status report on stderr, newer ones on stdout.
        """
        result = self._run_gh(["gh", "auth", "status"])
        output = "\n".join(part for part in (result.stdout, result.stderr) if part)
        if result.returncode != 0 and _SCOPES_MARKER not in output:
            msg = f"`gh auth status` failed: {output.strip() or 'not logged in'}"
            raise AuthError(msg)
        return output

    def token_scopes(self) -> List[str]:
        """Parse the scope names from the `Token scopes:` line of `gh auth status`."""
        for line in self.auth_status().splitlines():
            if _SCOPES_MARKER in line:
                scopes_text = line.split(_SCOPES_MARKER, 1)[1]
                quoted = re.findall(r"'([^']*)'", scopes_text)
                if quoted:
                    return quoted
                return [s.strip() for s in scopes_text.split(",") if s.strip()]
        raise AuthError("Could not determine token scopes from `gh auth status` output.")

    def refresh_scope(self, scope: str) -> None:
        """Run `gh auth refresh -s <scope>` attached to the user's terminal."""
        result = self._run_gh(["gh", "auth", "refresh", "-s", scope], capture=False)
        if result.returncode != 0:
            msg = f"`gh auth refresh -s {scope}` exited with status {result.returncode}"
            raise AuthError(msg)

    def ensure_scope(self, scope: str = PROJECT_SCOPE) -> bool:
        """Make sure the gh token carries `scope`, refreshing interactively if needed.

        Returns True if a refresh was performed.
        """
        if scope in self.token_scopes():
            return False
        click.echo(f"The '{scope}' scope is missing from your GitHub CLI authentication.")
        click.echo("Attempting to refresh your token to add the required scope...")
        self.refresh_scope(scope)
        click.echo("Token refreshed successfully.")
        return True

    def auth_token(self) -> str:
        result = self._run_gh(["gh", "auth", "token"])
        token = (result.stdout or "").strip()
        if result.returncode != 0 or not token:
            logger.debug("gh auth token failed: %s", sanitize_for_log(result.stderr or ""))
            raise AuthError(
                "Could not get GitHub authentication token. "
                "Please make sure you are logged in with `gh auth login`."
            )
        return token
