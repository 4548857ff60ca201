"""Show command - parse one commit from the repository."""

from __future__ import annotations

import sys

from commitparse.config import Settings
from commitparse.domain.errors import ParseError
from commitparse.infrastructure.git.runner import GitCommandError, GitCommandRunner
from commitparse.infrastructure.output import format_parse_error, format_result
from commitparse.parsers.commit_parser import parse_commit


def cmd_show(commit_hash: str, settings: Settings, output_format: str = "json") -> int:
    """Parse a single commit into its diffs, hunks and lines.

    Args:
        commit_hash: Commit to inspect
        settings: Repository, git binary and timeout
        output_format: 'json', 'yaml' or 'text'

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    git = GitCommandRunner.from_settings(settings)

    try:
        raw_commit = git.show_commit(commit_hash)
    except GitCommandError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        commit = parse_commit(raw_commit)
    except ParseError as e:
        print(f"Could not parse commit {commit_hash}", file=sys.stderr)
        print(format_parse_error(e), file=sys.stderr)
        return 1

    print(format_result(commit, output_format))
    return 0
