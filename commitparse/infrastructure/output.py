"""Reading raw git output and rendering parsed models.

Handles reading text from stdin or files and converting parsed commits and
listings to JSON, YAML, or human-readable text.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import yaml

from commitparse.domain.commit import Commit, CommitSummary
from commitparse.domain.errors import ParseError


# ============================================================
# Input Functions
# ============================================================


def read_text_from_stdin() -> str:
    """Read raw git output from stdin."""
    return sys.stdin.read()


def read_text_from_file(path: str | Path) -> str:
    """Read raw git output from a file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def read_text(input_file: str | None = None) -> str:
    """Read raw git output from stdin or a file.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.

    Returns:
        Raw text as a string
    """
    if input_file is None:
        return read_text_from_stdin()
    return read_text_from_file(input_file)


# ============================================================
# Output Functions
# ============================================================


def to_serializable(result: Commit | list[CommitSummary]) -> dict | list[dict]:
    """Convert a parsed commit or listing to plain dicts and lists."""
    if isinstance(result, Commit):
        return result.to_dict()
    return [summary.to_dict() for summary in result]


def format_as_json(result: Commit | list[CommitSummary]) -> str:
    return json.dumps(to_serializable(result), indent=2)


def format_as_yaml(result: Commit | list[CommitSummary]) -> str:
    return yaml.safe_dump(
        to_serializable(result),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def format_log_as_text(summaries: list[CommitSummary]) -> str:
    """Format a commit listing as aligned text."""
    if not summaries:
        return "No commits"
    width = max(len(summary.hash) for summary in summaries)
    return "\n".join(f"{summary.hash.ljust(width)}  {summary.subject}" for summary in summaries)


def format_commit_as_text(commit: Commit) -> str:
    """Format a Commit as human-readable text for debugging.

    Shows the commit header, then one block per file with its hunk ranges
    and added/removed line counts.
    """
    lines = [commit.hash, commit.author, commit.date, ""]
    lines.append(f"Files changed: {len(commit.diffs)}")
    lines.append("")

    for diff in commit.diffs:
        label = f"{diff.file_path} (new file)" if diff.is_new_file else diff.file_path
        lines.append(label)
        for hunk in diff.hunks:
            lines.append(f"  {hunk.range}  +{len(hunk.added)} -{len(hunk.removed)}")
        lines.append("")

    return "\n".join(lines).rstrip("\n")


def format_result(result: Commit | list[CommitSummary], output_format: str) -> str:
    """Render a parsed result in the requested format.

    Args:
        result: A parsed Commit or a commit listing
        output_format: 'json', 'yaml' or 'text'

    Returns:
        Rendered string
    """
    if output_format == "yaml":
        return format_as_yaml(result)
    if output_format == "text":
        if isinstance(result, Commit):
            return format_commit_as_text(result)
        return format_log_as_text(result)
    return format_as_json(result)


def format_parse_error(error: ParseError) -> str:
    """Describe a parse failure with its stage and offending line."""
    lines = [f"Parse error: {error}"]
    if error.line is not None:
        lines.append(f"  Offending line: {error.line!r}")
    return "\n".join(lines)
