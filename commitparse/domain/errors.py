"""Parse failures raised by the commit, diff, hunk and line parsers.

Every failure names the parser stage that rejected the input and, where one
exists, the offending raw line verbatim.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for failures while parsing version-control output."""

    def __init__(self, stage: str, message: str, line: str | None = None):
        super().__init__(message)
        self.stage = stage
        self.line = line


class UnrecognizedLineError(ParseError):
    """Raised when a line matches no prefix expected in the current stage."""

    def __init__(self, line: str, stage: str):
        super().__init__(stage, f"Unrecognized line in stage {stage}: {line!r}", line)


class IncompleteInputError(ParseError):
    """Raised when input ends before a stage that requires more lines."""

    def __init__(self, stage: str, detail: str = "", line: str | None = None):
        message = f"Input ended in stage {stage}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(stage, message, line)
        self.detail = detail
