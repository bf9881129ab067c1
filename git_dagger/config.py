"""Runtime settings for git-dagger.

Values are read from environment variables prefixed with ``GIT_DAGGER_``,
e.g. ``GIT_DAGGER_DEFAULT_COUNT=100``.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class DaggerSettings(BaseSettings):
    """git-dagger settings."""

    default_count: int = Field(default=30, ge=0, description="Commits generated when --count is omitted")
    default_linearity: float = Field(default=0.0, description="Linearity used when --linearity is omitted")
    git_executable: str = "git"
    command_timeout: float = Field(default=60.0, gt=0, description="Seconds allowed per git command")

    # Identity used when the repository has no user.name / user.email
    fallback_name: str = "Git Dagger"
    fallback_email: str = "info@example.com"

    class Config:
        env_prefix = "GIT_DAGGER_"
        case_sensitive = False


@lru_cache
def get_settings() -> DaggerSettings:
    """Get the process-wide settings instance."""
    return DaggerSettings()
