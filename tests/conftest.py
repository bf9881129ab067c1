"""Pytest configuration and shared fixtures."""

import shutil
import subprocess
from pathlib import Path
from typing import Iterable

import pytest
import structlog

from git_dagger.config import DaggerSettings
from git_dagger.git.client import GitClient


class DrawLimitExceeded(Exception):
    """Raised by a random source that has been asked for too many values."""


class ScriptedRandom:
    """Random source returning a fixed script of values.

    Once the script is used up it keeps returning `fill`; after `limit`
    draws in total it raises DrawLimitExceeded so a retry loop that never
    succeeds shows up as a test failure rather than a hang.
    """

    def __init__(self, values: Iterable[float] = (), fill: float | None = None, limit: int = 100_000):
        self.values = list(values)
        self.fill = fill
        self.limit = limit
        self.draws = 0

    def __call__(self) -> float:
        if self.draws >= self.limit:
            raise DrawLimitExceeded(f"exceeded {self.limit} draws")
        self.draws += 1
        if self.draws <= len(self.values):
            return self.values[self.draws - 1]
        if self.fill is None:
            raise DrawLimitExceeded("script exhausted")
        return self.fill


class FakeGitClient:
    """In-memory stand-in for GitClient that hands out sequential ids."""

    def __init__(self):
        self.calls: list[tuple[str, ...]] = []
        self._next = 0

    def run(self, *args: str, input: str | None = None, env: dict[str, str] | None = None) -> str:
        self.calls.append(args)
        self._next += 1
        return f"{self._next:040x}"

    def signature_env(self) -> dict[str, str]:
        return {"GIT_AUTHOR_NAME": "Fake", "GIT_AUTHOR_EMAIL": "fake@example.com"}


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_git_client() -> FakeGitClient:
    return FakeGitClient()


@pytest.fixture
def isolated_git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep git away from the user's config and any ambient repository."""
    for var in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE", "GIT_OBJECT_DIRECTORY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_DATE", "2024-01-01T00:00:00+00:00")
    monkeypatch.setenv("GIT_COMMITTER_DATE", "2024-01-01T00:00:00+00:00")


@pytest.fixture
def git_repo(tmp_path: Path, isolated_git_env) -> Path:
    """Create an empty repository with no configured identity."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q", str(repo)], check=True)
    return repo


@pytest.fixture
def git_client(git_repo: Path) -> GitClient:
    return GitClient.open(DaggerSettings(), cwd=git_repo)
