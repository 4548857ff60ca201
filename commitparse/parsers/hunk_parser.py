"""Hunk parser: range header plus body lines into a Hunk record."""

from __future__ import annotations

import logging
from enum import Enum

from commitparse.domain.commit import Hunk
from commitparse.domain.errors import IncompleteInputError
from commitparse.parsers.line_classifier import classify_line
from commitparse.parsers.lines import (
    ANNOTATION_PREFIX,
    NO_NEWLINE_ANNOTATION,
    split_lines,
)

logger = logging.getLogger(__name__)


class HunkStage(Enum):
    """States of the hunk parser, in order."""

    RANGE = "Range"
    LINES = "Lines"


class HunkParser:
    """State machine that turns one hunk's raw text into a Hunk.

    The first line is the range header; every following line is retained as
    body text unless it is empty or a "\\ No newline at end of file" line.
    Any other backslash line is retained and rejected by the classifier.
    Retained lines are classified after the pass, in order.
    """

    def __init__(self):
        self.handlers = {
            HunkStage.RANGE: self._on_range,
            HunkStage.LINES: self._on_body_line,
        }
        self._reset()

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def parse(self, text: str) -> Hunk:
        """Parse raw hunk text.

        Args:
            text: Hunk text starting with its "@@ ... @@" range line

        Returns:
            Hunk with classified lines in textual order

        Raises:
            IncompleteInputError: If there is no range line
            UnrecognizedLineError: If a body line has an unknown marker
        """
        self._reset()
        for line in split_lines(text):
            self._stage = self.handlers[self._stage](line)

        if self._stage is not HunkStage.LINES or self._range is None:
            raise IncompleteInputError(self._stage.value, "hunk has no range line")

        lines = [classify_line(raw) for raw in self._retained]
        return Hunk(range=self._range, lines=lines)

    # --------------------------------------------------------
    # Stage Handlers
    # --------------------------------------------------------

    def _on_range(self, line: str) -> HunkStage:
        self._range = line
        return HunkStage.LINES

    def _on_body_line(self, line: str) -> HunkStage:
        if not line or _is_no_newline_annotation(line):
            logger.debug("Dropping hunk line %r", line)
        else:
            self._retained.append(line)
        return HunkStage.LINES

    def _reset(self) -> None:
        self._stage = HunkStage.RANGE
        self._range: str | None = None
        self._retained: list[str] = []


def _is_no_newline_annotation(line: str) -> bool:
    return line.startswith(ANNOTATION_PREFIX) and NO_NEWLINE_ANNOTATION in line


def parse_hunk(text: str) -> Hunk:
    """Parse one hunk's raw text into a Hunk."""
    return HunkParser().parse(text)
