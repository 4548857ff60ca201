"""Line splitting and the prefix tokens shared by the parsers."""

from __future__ import annotations

DIFF_HEADER_TOKEN = "diff"
NEW_FILE_MODE_TOKEN = "new file mode"
INDEX_TOKEN = "index"
PREIMAGE_TOKEN = "--"
HUNK_RANGE_TOKEN = "@@"

# git writes "\ No newline at end of file" after the last line of a file that
# lacks a final newline
ANNOTATION_PREFIX = "\\"
NO_NEWLINE_ANNOTATION = "No newline"


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping the empty piece after a final newline.

    Only "\\n" separates lines; a carriage return stays part of the content.

    Args:
        text: Raw text

    Returns:
        Lines without their terminators
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
