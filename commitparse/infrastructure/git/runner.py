"""Git command runner.

Infrastructure component that wraps subprocess calls to the git CLI. The
parsers never touch git; this is the only place a process is started.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from commitparse.config import Settings

logger = logging.getLogger(__name__)


class GitCommandError(Exception):
    """Raised when git fails to start, exits non-zero, or times out."""

    def __init__(self, cmd: list[str], reason: str):
        super().__init__(f"Git command failed: {' '.join(cmd)}\n{reason}")
        self.cmd = cmd
        self.reason = reason


@dataclass
class GitCommandRunner:
    """Runs git commands via subprocess.

    Each call is bounded by ``timeout``; on expiry the child is killed and
    reaped before GitCommandError is raised, so partial output is never
    returned. Output is decoded as UTF-8; bytes that are not valid UTF-8
    (e.g. Latin-1 file content) become U+FFFD.
    """

    repo_path: str = "."
    git_binary: str = "git"
    timeout: float = 60.0

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_settings(cls, settings: Settings) -> GitCommandRunner:
        return cls(
            repo_path=settings.repo_path,
            git_binary=settings.git_binary,
            timeout=settings.timeout,
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(self, args: list[str]) -> str:
        """Run a git command and return its standard output.

        Args:
            args: Git arguments (without the git binary itself)

        Returns:
            Captured stdout

        Raises:
            GitCommandError: If git cannot be started, exits non-zero, or
                exceeds the timeout
        """
        cmd = [self.git_binary, "--no-pager"] + args
        logger.debug("Running %s in %s", " ".join(cmd), self.repo_path)
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise GitCommandError(cmd, f"Timed out after {self.timeout}s")
        except subprocess.CalledProcessError as e:
            raise GitCommandError(cmd, (e.stderr or "").strip() or f"Exit code {e.returncode}")
        except OSError as e:
            raise GitCommandError(cmd, f"Could not start git: {e}")
        return result.stdout

    def list_commits(self, since: str, until: str) -> str:
        """Concise listing of the commits reachable from until but not since."""
        return self.run(["log", "--oneline", f"{since}..{until}"])

    def show_commit(self, commit_hash: str) -> str:
        """Full text of one commit: header, message and diffs."""
        return self.run(["show", commit_hash])
