"""Git subprocess client.

Locates the ambient repository the same way git itself does (GIT_DIR,
GIT_WORK_TREE, then the current directory and its parents) and runs plumbing
commands against it.
"""

import os
import subprocess
from pathlib import Path

import structlog

from git_dagger.config import DaggerSettings, get_settings
from git_dagger.errors import GitCommandError, RepositoryNotFoundError

logger = structlog.get_logger()


class GitClient:
    """Thin wrapper around the git executable for one repository."""

    def __init__(
        self,
        git_dir: Path,
        settings: DaggerSettings | None = None,
        cwd: Path | None = None,
    ):
        self.git_dir = git_dir
        self.settings = settings or get_settings()
        self.cwd = cwd
        self._signature: dict[str, str] | None = None
        self._logger = logger.bind(component="GitClient")

    @classmethod
    def open(
        cls,
        settings: DaggerSettings | None = None,
        cwd: Path | None = None,
    ) -> "GitClient":
        """Resolve the repository from the environment.

        Raises:
            RepositoryNotFoundError: If no repository encloses `cwd`
        """
        settings = settings or get_settings()
        command = [settings.git_executable, "rev-parse", "--absolute-git-dir"]
        try:
            result = _execute(command, cwd=cwd, timeout=settings.command_timeout)
        except GitCommandError as e:
            raise RepositoryNotFoundError(
                e.stderr or "could not find repository from the environment"
            ) from e

        git_dir = Path(result)
        logger.debug("Opened repository", git_dir=str(git_dir))
        return cls(git_dir, settings=settings, cwd=cwd)

    def run(self, *args: str, input: str | None = None, env: dict[str, str] | None = None) -> str:
        """Run a git command against this repository and return its stdout."""
        command = [self.settings.git_executable, "--git-dir", str(self.git_dir), *args]
        self._logger.debug("Running git", args=list(args))
        return _execute(
            command,
            cwd=self.cwd,
            input=input,
            env=env,
            timeout=self.settings.command_timeout,
        )

    def config_value(self, key: str) -> str | None:
        """Read a config value, or None if unset."""
        try:
            value = self.run("config", "--get", key)
        except GitCommandError as e:
            # git config exits 1 for a missing key
            if e.returncode == 1:
                return None
            raise
        return value or None

    def signature_env(self) -> dict[str, str]:
        """Author/committer identity as git environment variables.

        The repository's user.name and user.email win; the configured
        fallback identity fills in whatever is missing.
        """
        if self._signature is None:
            name = self.config_value("user.name") or self.settings.fallback_name
            email = self.config_value("user.email") or self.settings.fallback_email
            self._signature = {
                "GIT_AUTHOR_NAME": name,
                "GIT_AUTHOR_EMAIL": email,
                "GIT_COMMITTER_NAME": name,
                "GIT_COMMITTER_EMAIL": email,
            }
        return self._signature


def _execute(
    command: list[str],
    cwd: Path | None = None,
    input: str | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> str:
    """Run a command, returning stripped stdout or raising GitCommandError."""
    full_env = None
    if env:
        full_env = {**os.environ, **env}

    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            input=input if input is not None else "",
            capture_output=True,
            text=True,
            env=full_env,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitCommandError(command, None, f"executable not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise GitCommandError(command, None, f"timed out after {timeout}s") from e

    if result.returncode != 0:
        raise GitCommandError(command, result.returncode, result.stderr)
    return result.stdout.strip()
