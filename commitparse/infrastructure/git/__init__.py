"""Git primitives - the process boundary to the git CLI."""

from .runner import GitCommandError, GitCommandRunner

__all__ = [
    "GitCommandError",
    "GitCommandRunner",
]
