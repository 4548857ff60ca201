"""Line-oriented state machines for git history output.

Nesting mirrors the data: the commit parser hands each diff block to the diff
parser, which hands each hunk block to the hunk parser, which classifies each
retained line. The listing parser stands alone.
"""

from commitparse.parsers.commit_log_parser import parse_commit_log
from commitparse.parsers.commit_parser import CommitParser, CommitStage, parse_commit
from commitparse.parsers.diff_parser import DiffParser, DiffStage, parse_diff
from commitparse.parsers.hunk_parser import HunkParser, HunkStage, parse_hunk
from commitparse.parsers.line_classifier import classify_line

__all__ = [
    "CommitParser",
    "CommitStage",
    "DiffParser",
    "DiffStage",
    "HunkParser",
    "HunkStage",
    "classify_line",
    "parse_commit",
    "parse_commit_log",
    "parse_diff",
    "parse_hunk",
]
