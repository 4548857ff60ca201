"""Domain models for parsed commit history.

Parse-once pattern: raw git output is parsed into these records at the
boundary. Records form a strict tree (Commit -> Diff -> Hunk -> Line) and are
never mutated after construction.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_RANGE_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_HEADER_PATTERN = re.compile(r'diff --git "?a/([^"]*)"? "?b/([^"]*)"?')


# ============================================================
# Domain Models
# ============================================================


class LineKind(Enum):
    """Classification of a single hunk body line."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"

    @property
    def marker(self) -> str:
        """The one-character prefix git writes for this kind of line."""
        return _MARKERS[self]


_MARKERS = {
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
    LineKind.CONTEXT: " ",
}


@dataclass(frozen=True)
class Line:
    """A single classified line from a hunk body.

    Attributes:
        kind: Whether the line was added, removed, or is unchanged context
        text: The line payload without its marker, whitespace preserved
    """

    kind: LineKind
    text: str

    @property
    def raw(self) -> str:
        """Reconstruct the line as it appeared in the diff."""
        return f"{self.kind.marker}{self.text}"

    @property
    def is_changed(self) -> bool:
        """Check if this line represents a change (added or removed)."""
        return self.kind in (LineKind.ADDED, LineKind.REMOVED)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class Hunk:
    """One contiguous block of changes, opened by an @@ range header."""

    range: str
    lines: list[Line] = field(default_factory=list)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def old_start(self) -> int | None:
        return self._range_numbers()[0]

    @property
    def old_length(self) -> int | None:
        return self._range_numbers()[1]

    @property
    def new_start(self) -> int | None:
        return self._range_numbers()[2]

    @property
    def new_length(self) -> int | None:
        return self._range_numbers()[3]

    @property
    def added(self) -> list[Line]:
        return [line for line in self.lines if line.kind == LineKind.ADDED]

    @property
    def removed(self) -> list[Line]:
        return [line for line in self.lines if line.kind == LineKind.REMOVED]

    def to_dict(self) -> dict:
        """Convert hunk to dictionary for JSON serialization."""
        return {
            "range": self.range,
            "old_start": self.old_start,
            "old_length": self.old_length,
            "new_start": self.new_start,
            "new_length": self.new_length,
            "lines": [line.to_dict() for line in self.lines],
        }

    def _range_numbers(self) -> tuple[int | None, int | None, int | None, int | None]:
        """Parse the range header; a missing length means one line.

        An unreadable header yields None for every number.
        """
        match = _RANGE_PATTERN.match(self.range)
        if not match:
            return None, None, None, None
        old_length = int(match.group(2)) if match.group(2) is not None else 1
        new_length = int(match.group(4)) if match.group(4) is not None else 1
        return int(match.group(1)), old_length, int(match.group(3)), new_length


@dataclass(frozen=True)
class Diff:
    """The changes to one file within a commit.

    Attributes:
        header: The "diff --git a/... b/..." line
        mode: The "new file mode" line, present only for added files
        index: The "index" line, if the diff carried one
        preimage: The "--- " line naming the file before the change
        postimage: The "+++ " line naming the file after the change
        hunks: Hunks in order of appearance
    """

    header: str
    mode: str | None
    index: str | None
    preimage: str
    postimage: str
    hunks: list[Hunk] = field(default_factory=list)

    @property
    def file_path(self) -> str:
        """The target (b/) path from the header, or "" if it cannot be read."""
        match = _HEADER_PATTERN.match(self.header)
        if not match:
            return ""
        return match.group(2).strip()

    @property
    def is_new_file(self) -> bool:
        return self.mode is not None

    def to_dict(self) -> dict:
        return {
            "header": self.header,
            "file_path": self.file_path,
            "mode": self.mode,
            "index": self.index,
            "preimage": self.preimage,
            "postimage": self.postimage,
            "hunks": [hunk.to_dict() for hunk in self.hunks],
        }


@dataclass(frozen=True)
class Commit:
    """A single commit with its message and per-file diffs."""

    hash: str
    author: str
    date: str
    message: str
    diffs: list[Diff] = field(default_factory=list)

    @property
    def files(self) -> list[str]:
        """File paths touched by this commit, in diff order."""
        return [diff.file_path for diff in self.diffs]

    def to_dict(self) -> dict:
        """Convert commit to dictionary for JSON or YAML serialization."""
        return {
            "hash": self.hash,
            "author": self.author,
            "date": self.date,
            "message": self.message,
            "diffs": [diff.to_dict() for diff in self.diffs],
        }


@dataclass(frozen=True)
class CommitSummary:
    """One line of a concise commit listing: abbreviated hash and subject."""

    hash: str
    subject: str

    def to_dict(self) -> dict:
        return {"hash": self.hash, "subject": self.subject}
