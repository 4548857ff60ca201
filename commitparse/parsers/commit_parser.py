"""Commit body parser: the output of ``git show <hash>`` into a Commit.

The first three lines are the hash, author and date lines, kept verbatim.
Message lines follow until the first line starting with "diff"; from there
on the text is cut into one block per diff and each block is handed to the
diff parser.
"""

from __future__ import annotations

import logging
from enum import Enum

from commitparse.domain.commit import Commit
from commitparse.domain.errors import IncompleteInputError
from commitparse.parsers.diff_parser import parse_diff
from commitparse.parsers.lines import DIFF_HEADER_TOKEN, split_lines

logger = logging.getLogger(__name__)


class CommitStage(Enum):
    """States of the commit body parser, in order."""

    HASH = "Hash"
    AUTHOR = "Author"
    DATE = "Date"
    MESSAGE = "Message"
    DIFF = "Diff"


# Either may end a well-formed commit: a commit without diffs stops in MESSAGE
_FINAL_STAGES = (CommitStage.MESSAGE, CommitStage.DIFF)


class CommitParser:
    """State machine that turns one commit's raw text into a Commit."""

    def __init__(self):
        self.handlers = {
            CommitStage.HASH: self._on_hash,
            CommitStage.AUTHOR: self._on_author,
            CommitStage.DATE: self._on_date,
            CommitStage.MESSAGE: self._on_message_line,
            CommitStage.DIFF: self._on_diff_line,
        }
        self._reset()

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def parse(self, text: str) -> Commit:
        """Parse raw commit text.

        Args:
            text: Single-commit text (hash, author, date, message, diffs)

        Returns:
            Commit with diffs in textual order

        Raises:
            IncompleteInputError: If the hash, author or date line is missing,
                or a diff block is truncated
            UnrecognizedLineError: If a diff block has an unsupported shape
        """
        self._reset()
        for line in split_lines(text):
            self._stage = self.handlers[self._stage](line)
        self._flush_diff()

        if self._stage not in _FINAL_STAGES:
            raise IncompleteInputError(
                self._stage.value,
                "commit text needs hash, author and date lines",
            )

        diffs = [parse_diff(block) for block in self._diff_blocks]
        logger.debug("Parsed commit %r with %d diff(s)", self._hash, len(diffs))
        return Commit(
            hash=self._hash,
            author=self._author,
            date=self._date,
            message="".join(self._message),
            diffs=diffs,
        )

    # --------------------------------------------------------
    # Stage Handlers
    # --------------------------------------------------------

    def _on_hash(self, line: str) -> CommitStage:
        self._hash = line
        return CommitStage.AUTHOR

    def _on_author(self, line: str) -> CommitStage:
        self._author = line
        return CommitStage.DATE

    def _on_date(self, line: str) -> CommitStage:
        self._date = line
        return CommitStage.MESSAGE

    def _on_message_line(self, line: str) -> CommitStage:
        if line.startswith(DIFF_HEADER_TOKEN):
            self._open_diff = [line]
            return CommitStage.DIFF
        self._message.append(line + "\n")
        return CommitStage.MESSAGE

    def _on_diff_line(self, line: str) -> CommitStage:
        if line.startswith(DIFF_HEADER_TOKEN):
            self._flush_diff()
            self._open_diff = [line]
        else:
            self._open_diff.append(line)
        return CommitStage.DIFF

    # --------------------------------------------------------
    # Accumulation
    # --------------------------------------------------------

    def _flush_diff(self) -> None:
        if self._open_diff is not None:
            self._diff_blocks.append("\n".join(self._open_diff))
            self._open_diff = None

    def _reset(self) -> None:
        self._stage = CommitStage.HASH
        self._hash = ""
        self._author = ""
        self._date = ""
        self._message: list[str] = []
        self._open_diff: list[str] | None = None
        self._diff_blocks: list[str] = []


def parse_commit(text: str) -> Commit:
    """Parse one commit's raw text into a Commit."""
    return CommitParser().parse(text)
