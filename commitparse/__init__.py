"""commitparse - structured models of git history output.

Turns the text printed by ``git log --oneline`` and ``git show`` into typed
records (Commit -> Diff -> Hunk -> Line) so tools can reason about history
without re-parsing text.

Usage:
    python -m commitparse <command> [options]
    commitparse <command> [options]

Structure:
    commitparse/
    ├── __main__.py          # Entry point dispatcher
    ├── config.py            # Settings from env and flags
    ├── domain/              # Records and parse errors
    ├── parsers/             # Commit, diff, hunk and line state machines
    ├── infrastructure/      # git subprocess boundary, input and output
    └── commands/            # Thin command orchestrators
"""

from commitparse.domain import (
    Commit,
    CommitSummary,
    Diff,
    Hunk,
    IncompleteInputError,
    Line,
    LineKind,
    ParseError,
    UnrecognizedLineError,
)
from commitparse.parsers import parse_commit, parse_commit_log

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "CommitSummary",
    "Diff",
    "Hunk",
    "IncompleteInputError",
    "Line",
    "LineKind",
    "ParseError",
    "UnrecognizedLineError",
    "parse_commit",
    "parse_commit_log",
]
