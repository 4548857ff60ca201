"""Runtime settings for commitparse.

Defaults are overridden by environment variables, which are in turn
overridden by command-line flags.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace

ENV_REPO = "COMMITPARSE_REPO"
ENV_GIT = "COMMITPARSE_GIT"
ENV_TIMEOUT = "COMMITPARSE_TIMEOUT"

DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class Settings:
    """Where and how git is invoked.

    Attributes:
        repo_path: Repository to run git in
        git_binary: git executable name or path
        timeout: Seconds before a git invocation is killed
    """

    repo_path: str = "."
    git_binary: str = "git"
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Settings with any COMMITPARSE_* overrides applied

        Raises:
            ValueError: If COMMITPARSE_TIMEOUT is not a positive number
        """
        env = os.environ if environ is None else environ
        settings = cls()
        if env.get(ENV_REPO):
            settings = replace(settings, repo_path=env[ENV_REPO])
        if env.get(ENV_GIT):
            settings = replace(settings, git_binary=env[ENV_GIT])
        if env.get(ENV_TIMEOUT):
            settings = replace(settings, timeout=_parse_timeout(env[ENV_TIMEOUT]))
        return settings

    def with_overrides(
        self,
        repo_path: str | None = None,
        timeout: float | None = None,
    ) -> Settings:
        """Return a copy with the given non-None values applied."""
        settings = self
        if repo_path is not None:
            settings = replace(settings, repo_path=repo_path)
        if timeout is not None:
            settings = replace(settings, timeout=_parse_timeout(str(timeout)))
        return settings


def _parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"Invalid timeout: {value}. Must be a number of seconds")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"Invalid timeout: {value}. Must be a finite number greater than zero")
    return timeout
