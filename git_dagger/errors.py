"""Error types raised by git-dagger.

The command-line layer maps each error to a process exit status:
- UsageError: malformed command-line input (129, printed with usage)
- RepositoryNotFoundError / GitCommandError: environment failures (128)
"""


class DaggerError(Exception):
    """Base class for all git-dagger errors."""

    exit_code: int = 128


class UsageError(DaggerError):
    """Invalid command-line arguments."""

    exit_code = 129


class RepositoryNotFoundError(DaggerError):
    """No git repository could be resolved from the environment."""


class GitCommandError(DaggerError):
    """A git subprocess failed."""

    def __init__(self, command: list[str], returncode: int | None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = self.stderr or f"exit status {returncode}"
        super().__init__(f"'{' '.join(command)}' failed: {detail}")
