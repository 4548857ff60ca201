"""Parser for concise commit listings (``git log --oneline``)."""

from __future__ import annotations

from commitparse.domain.commit import CommitSummary
from commitparse.domain.errors import IncompleteInputError
from commitparse.parsers.lines import split_lines

LISTING_STAGE = "Listing"


def parse_commit_log(text: str) -> list[CommitSummary]:
    """Split a listing into one summary per non-empty line.

    Each line is "<hash> <subject>"; the hash ends at the first space and the
    subject is everything after it, spaces included.

    Args:
        text: Listing text, one commit per line

    Returns:
        Summaries in listing order

    Raises:
        IncompleteInputError: If a non-empty line has no space
    """
    summaries: list[CommitSummary] = []
    for line in split_lines(text):
        if not line:
            continue
        commit_hash, separator, subject = line.partition(" ")
        if not separator:
            raise IncompleteInputError(LISTING_STAGE, f"no subject in {line!r}", line)
        summaries.append(CommitSummary(hash=commit_hash, subject=subject))
    return summaries
