"""Infrastructure components for commitparse.

This layer handles external system interactions:
- git CLI via subprocess
- Reading raw output from stdin or files
- Rendering parsed models as JSON, YAML, or text
"""

from .git import GitCommandError, GitCommandRunner
from .output import (
    format_as_json,
    format_as_yaml,
    format_commit_as_text,
    format_log_as_text,
    format_parse_error,
    format_result,
    read_text,
    read_text_from_file,
    read_text_from_stdin,
)

__all__ = [
    "GitCommandError",
    "GitCommandRunner",
    "format_as_json",
    "format_as_yaml",
    "format_commit_as_text",
    "format_log_as_text",
    "format_parse_error",
    "format_result",
    "read_text",
    "read_text_from_file",
    "read_text_from_stdin",
]
