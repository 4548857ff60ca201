"""Domain models for commitparse."""

from commitparse.domain.commit import (
    Commit,
    CommitSummary,
    Diff,
    Hunk,
    Line,
    LineKind,
)
from commitparse.domain.errors import (
    IncompleteInputError,
    ParseError,
    UnrecognizedLineError,
)

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
]
