"""Parse command.

Thin command that parses git output already captured in a file or piped on
stdin, without invoking git.
"""

from __future__ import annotations

import sys

from commitparse.domain.errors import ParseError
from commitparse.infrastructure.output import format_parse_error, format_result, read_text
from commitparse.parsers.commit_log_parser import parse_commit_log
from commitparse.parsers.commit_parser import parse_commit

KIND_COMMIT = "commit"
KIND_LOG = "log"


def cmd_parse(
    input_file: str | None = None,
    kind: str = KIND_COMMIT,
    output_format: str = "json",
) -> int:
    """Parse captured git output and print the structured result.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.
        kind: 'commit' for ``git show`` output, 'log' for ``git log --oneline``
        output_format: 'json', 'yaml' or 'text'

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    # --------------------------------------------------------
    # 1. Read input
    # --------------------------------------------------------
    try:
        text = read_text(input_file)
    except FileNotFoundError:
        print(f"Input file not found: {input_file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read input: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Parse into domain model
    # --------------------------------------------------------
    try:
        result = parse_commit_log(text) if kind == KIND_LOG else parse_commit(text)
    except ParseError as e:
        print(format_parse_error(e), file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 3. Output in requested format
    # --------------------------------------------------------
    print(format_result(result, output_format))
    return 0
