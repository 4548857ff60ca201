"""Classify one hunk body line by its first character."""

from __future__ import annotations

from commitparse.domain.commit import Line, LineKind
from commitparse.domain.errors import UnrecognizedLineError

CLASSIFIER_STAGE = "Line"

_KINDS_BY_MARKER = {kind.marker: kind for kind in LineKind}


def classify_line(raw_line: str) -> Line:
    """Classify a retained hunk body line.

    Args:
        raw_line: Line starting with "+", "-" or a single space

    Returns:
        Line whose text is everything after the marker, verbatim

    Raises:
        UnrecognizedLineError: If the first character is not a known marker
    """
    kind = _KINDS_BY_MARKER.get(raw_line[:1])
    if kind is None:
        raise UnrecognizedLineError(raw_line, CLASSIFIER_STAGE)
    return Line(kind=kind, text=raw_line[1:])
