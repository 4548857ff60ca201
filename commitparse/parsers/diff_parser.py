"""Diff parser: one file's diff block into a Diff record.

Grammar handled (ordinary text add/modify diffs)::

    diff --git a/<path> b/<path>
    [new file mode <mode>]
    [index <hash>..<hash> [<mode>]]
    --- <preimage>
    +++ <postimage>
    @@ -a,b +c,d @@ ...      (one or more hunks)
"""

from __future__ import annotations

import logging
from enum import Enum

from commitparse.domain.commit import Diff
from commitparse.domain.errors import IncompleteInputError, UnrecognizedLineError
from commitparse.parsers.hunk_parser import parse_hunk
from commitparse.parsers.lines import (
    HUNK_RANGE_TOKEN,
    INDEX_TOKEN,
    NEW_FILE_MODE_TOKEN,
    PREIMAGE_TOKEN,
    split_lines,
)

logger = logging.getLogger(__name__)


class DiffStage(Enum):
    """States of the diff parser, in order."""

    HEADER = "Header"
    MODE_OR_INDEX = "ModeOrIndex"
    INDEX = "Index"
    PREIMAGE = "Preimage"
    POSTIMAGE = "Postimage"
    HUNKS = "Hunks"


class DiffParser:
    """State machine that turns one diff block into a Diff.

    Hunk blocks are accumulated one at a time: a range marker flushes the open
    block and opens a new one, end of input flushes the last. Each block is
    then parsed by the hunk parser.
    """

    def __init__(self):
        self.handlers = {
            DiffStage.HEADER: self._on_header,
            DiffStage.MODE_OR_INDEX: self._on_mode_or_index,
            DiffStage.INDEX: self._on_index,
            DiffStage.PREIMAGE: self._on_preimage,
            DiffStage.POSTIMAGE: self._on_postimage,
            DiffStage.HUNKS: self._on_hunk_line,
        }
        self._reset()

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def parse(self, text: str) -> Diff:
        """Parse raw diff text.

        Args:
            text: Diff block starting with its "diff --git" header

        Returns:
            Diff with hunks in textual order

        Raises:
            UnrecognizedLineError: If a header line has an unsupported shape
            IncompleteInputError: If input ends before the +++ line
        """
        self._reset()
        for line in split_lines(text):
            self._stage = self.handlers[self._stage](line)
        self._flush_hunk()

        if self._stage is not DiffStage.HUNKS:
            raise IncompleteInputError(
                self._stage.value,
                f"diff ended before its postimage line: {self._header!r}",
            )

        hunks = [parse_hunk(block) for block in self._hunk_blocks]
        logger.debug("Parsed diff %r with %d hunk(s)", self._header, len(hunks))
        return Diff(
            header=self._header,
            mode=self._mode,
            index=self._index,
            preimage=self._preimage,
            postimage=self._postimage,
            hunks=hunks,
        )

    # --------------------------------------------------------
    # Stage Handlers
    # --------------------------------------------------------

    def _on_header(self, line: str) -> DiffStage:
        self._header = line
        return DiffStage.MODE_OR_INDEX

    def _on_mode_or_index(self, line: str) -> DiffStage:
        if line.startswith(NEW_FILE_MODE_TOKEN):
            self._mode = line
            return DiffStage.INDEX
        if line.startswith(INDEX_TOKEN):
            self._index = line
            return DiffStage.PREIMAGE
        if line.startswith(PREIMAGE_TOKEN):
            self._preimage = line
            return DiffStage.POSTIMAGE
        raise UnrecognizedLineError(line, DiffStage.MODE_OR_INDEX.value)

    def _on_index(self, line: str) -> DiffStage:
        self._index = line
        return DiffStage.PREIMAGE

    def _on_preimage(self, line: str) -> DiffStage:
        self._preimage = line
        return DiffStage.POSTIMAGE

    def _on_postimage(self, line: str) -> DiffStage:
        self._postimage = line
        return DiffStage.HUNKS

    def _on_hunk_line(self, line: str) -> DiffStage:
        if line.startswith(HUNK_RANGE_TOKEN):
            self._flush_hunk()
            self._open_hunk = [line]
        elif self._open_hunk is not None:
            self._open_hunk.append(line)
        elif line:
            raise UnrecognizedLineError(line, DiffStage.HUNKS.value)
        return DiffStage.HUNKS

    # --------------------------------------------------------
    # Accumulation
    # --------------------------------------------------------

    def _flush_hunk(self) -> None:
        if self._open_hunk is not None:
            self._hunk_blocks.append("\n".join(self._open_hunk))
            self._open_hunk = None

    def _reset(self) -> None:
        self._stage = DiffStage.HEADER
        self._header = ""
        self._mode: str | None = None
        self._index: str | None = None
        self._preimage = ""
        self._postimage = ""
        self._open_hunk: list[str] | None = None
        self._hunk_blocks: list[str] = []


def parse_diff(text: str) -> Diff:
    """Parse one diff block into a Diff."""
    return DiffParser().parse(text)
