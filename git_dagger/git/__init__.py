"""Git integration: repository access and commit materialization."""

from .client import GitClient
from .materializer import Materializer

__all__ = [
    "GitClient",
    "Materializer",
]
