"""Tests for DiffParser.

Tests cover:
- Ordinary modification diffs (index, ---, +++)
- New file diffs with a mode line
- Diffs with neither mode nor index
- Hunk splitting on range markers
- Unsupported header shapes and truncated headers
"""

import unittest

from sample_output import MODIFIED_DIFF_LINES, NEW_FILE_DIFF_LINES

from commitparse.domain.commit import Line, LineKind
from commitparse.domain.errors import IncompleteInputError, UnrecognizedLineError
from commitparse.parsers.diff_parser import DiffParser, DiffStage, parse_diff


class TestParseModifiedDiff(unittest.TestCase):
    """Tests for parsing an ordinary modification diff."""

    def setUp(self):
        self.diff = parse_diff("\n".join(MODIFIED_DIFF_LINES))

    def test_header_fields(self):
        self.assertEqual(self.diff.header, "diff --git a/src/app.py b/src/app.py")
        self.assertEqual(self.diff.index, "index 1234567..89abcde 100644")
        self.assertEqual(self.diff.preimage, "--- a/src/app.py")
        self.assertEqual(self.diff.postimage, "+++ b/src/app.py")

    def test_mode_is_absent(self):
        self.assertIsNone(self.diff.mode)
        self.assertFalse(self.diff.is_new_file)

    def test_hunks_split_on_range_markers(self):
        self.assertEqual(len(self.diff.hunks), 2)
        self.assertEqual(self.diff.hunks[0].range, "@@ -1,3 +1,4 @@")
        self.assertEqual(self.diff.hunks[1].range, "@@ -10,2 +11,2 @@ def main():")

    def test_hunk_lines(self):
        self.assertEqual(
            self.diff.hunks[1].lines,
            [
                Line(LineKind.CONTEXT, "    run()"),
                Line(LineKind.REMOVED, "    stop()"),
                Line(LineKind.ADDED, "    halt()"),
            ],
        )

    def test_file_path(self):
        self.assertEqual(self.diff.file_path, "src/app.py")


class TestParseNewFileDiff(unittest.TestCase):
    """Tests for parsing a diff that adds a file."""

    def setUp(self):
        self.diff = parse_diff("\n".join(NEW_FILE_DIFF_LINES))

    def test_mode_and_index_are_captured(self):
        self.assertEqual(self.diff.mode, "new file mode 100644")
        self.assertEqual(self.diff.index, "index 0000000..e69de29")
        self.assertTrue(self.diff.is_new_file)

    def test_preimage_is_dev_null(self):
        self.assertEqual(self.diff.preimage, "--- /dev/null")
        self.assertEqual(self.diff.postimage, "+++ b/README.md")

    def test_no_newline_marker_is_excluded(self):
        hunk = self.diff.hunks[0]
        self.assertEqual(len(hunk.lines), 2)
        self.assertEqual(hunk.lines[-1], Line(LineKind.ADDED, "final line"))


class TestParseDiffShapes(unittest.TestCase):
    """Tests for less common but supported diff shapes."""

    def test_preimage_directly_after_header(self):
        text = "\n".join([
            "diff --git a/a.txt b/a.txt",
            "--- a/a.txt",
            "+++ b/a.txt",
            "@@ -1 +1 @@",
            "-x",
            "+y",
        ])

        diff = parse_diff(text)

        self.assertIsNone(diff.mode)
        self.assertIsNone(diff.index)
        self.assertEqual(diff.preimage, "--- a/a.txt")
        self.assertEqual(len(diff.hunks), 1)

    def test_diff_ending_after_postimage_has_no_hunks(self):
        text = "diff --git a/a b/a\nindex 1..2\n--- a/a\n+++ b/a\n"
        self.assertEqual(parse_diff(text).hunks, [])

    def test_trailing_empty_lines_are_ignored(self):
        text = "\n".join(MODIFIED_DIFF_LINES) + "\n\n"
        self.assertEqual(len(parse_diff(text).hunks), 2)

    def test_quoted_paths_with_spaces(self):
        text = '\n'.join([
            'diff --git "a/My File.txt" "b/My File.txt"',
            "index 1..2 100644",
            '--- "a/My File.txt"',
            '+++ "b/My File.txt"',
            "@@ -1 +1 @@",
            "+z",
        ])
        self.assertEqual(parse_diff(text).file_path, "My File.txt")


class TestParseDiffErrors(unittest.TestCase):
    """Tests for rejected and truncated diffs."""

    def test_unknown_line_in_mode_or_index_stage(self):
        text = "diff --git a/a b/a\nsimilarity index 90%\nrename from a\nrename to b"

        with self.assertRaises(UnrecognizedLineError) as ctx:
            parse_diff(text)

        self.assertEqual(ctx.exception.stage, "ModeOrIndex")
        self.assertEqual(ctx.exception.line, "similarity index 90%")

    def test_deleted_file_mode_is_unrecognized(self):
        text = "diff --git a/a b/a\ndeleted file mode 100644\nindex 1..0\n--- a/a\n+++ /dev/null"

        with self.assertRaises(UnrecognizedLineError) as ctx:
            parse_diff(text)

        self.assertEqual(ctx.exception.stage, "ModeOrIndex")
        self.assertEqual(ctx.exception.line, "deleted file mode 100644")

    def test_text_before_first_hunk_is_unrecognized(self):
        text = "diff --git a/a b/a\nindex 1..2\n--- a/a\n+++ b/a\nBinary junk\n@@ -1 +1 @@\n+x"

        with self.assertRaises(UnrecognizedLineError) as ctx:
            parse_diff(text)

        self.assertEqual(ctx.exception.stage, "Hunks")

    def test_missing_postimage_is_incomplete(self):
        with self.assertRaises(IncompleteInputError) as ctx:
            parse_diff("diff --git a/a b/a\nindex 1..2\n--- a/a")

        self.assertEqual(ctx.exception.stage, "Postimage")

    def test_binary_diff_is_incomplete(self):
        text = "diff --git a/img.png b/img.png\nindex 1..2 100644\nBinary files a/img.png and b/img.png differ"

        with self.assertRaises(IncompleteInputError):
            parse_diff(text)

    def test_header_only_is_incomplete(self):
        with self.assertRaises(IncompleteInputError) as ctx:
            parse_diff("diff --git a/a b/a")

        self.assertEqual(ctx.exception.stage, "ModeOrIndex")

    def test_empty_text_is_incomplete(self):
        with self.assertRaises(IncompleteInputError) as ctx:
            parse_diff("")

        self.assertEqual(ctx.exception.stage, "Header")

    def test_bad_hunk_line_propagates(self):
        text = "diff --git a/a b/a\nindex 1..2\n--- a/a\n+++ b/a\n@@ -1 +1 @@\n~oops"

        with self.assertRaises(UnrecognizedLineError) as ctx:
            parse_diff(text)

        self.assertEqual(ctx.exception.line, "~oops")


class TestDiffParser(unittest.TestCase):
    """Tests for the DiffParser state machine."""

    def test_every_stage_has_a_handler(self):
        self.assertEqual(set(DiffParser().handlers), set(DiffStage))

    def test_parsing_is_deterministic(self):
        text = "\n".join(NEW_FILE_DIFF_LINES)
        self.assertEqual(parse_diff(text), parse_diff(text))

    def test_parser_instance_is_reusable(self):
        parser = DiffParser()
        parser.parse("\n".join(NEW_FILE_DIFF_LINES))
        diff = parser.parse("\n".join(MODIFIED_DIFF_LINES))

        self.assertIsNone(diff.mode)
        self.assertEqual(len(diff.hunks), 2)


if __name__ == "__main__":
    unittest.main()
