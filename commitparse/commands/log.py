"""Log command - list the commits in a range as summaries."""

from __future__ import annotations

import sys

from commitparse.config import Settings
from commitparse.domain.errors import ParseError
from commitparse.infrastructure.git.runner import GitCommandError, GitCommandRunner
from commitparse.infrastructure.output import format_parse_error, format_result
from commitparse.parsers.commit_log_parser import parse_commit_log


def cmd_log(
    since: str,
    until: str,
    settings: Settings,
    output_format: str = "json",
) -> int:
    """List commits reachable from ``until`` but not from ``since``.

    Args:
        since: Revision the range starts after
        until: Revision the range ends at
        settings: Repository, git binary and timeout
        output_format: 'json', 'yaml' or 'text'

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    git = GitCommandRunner.from_settings(settings)

    try:
        listing = git.list_commits(since, until)
    except GitCommandError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        summaries = parse_commit_log(listing)
    except ParseError as e:
        print(format_parse_error(e), file=sys.stderr)
        return 1

    print(format_result(summaries, output_format))
    return 0
