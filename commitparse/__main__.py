#!/usr/bin/env python3
"""CLI entry point for commitparse.

Usage:
    python -m commitparse <command> [options]

Commands:
    log     List the commits in a range
    show    Parse one commit into diffs, hunks and lines
    parse   Parse captured git output from a file or stdin
"""

from __future__ import annotations

import argparse
import logging
import sys

from commitparse.commands.log import cmd_log
from commitparse.commands.parse import KIND_COMMIT, KIND_LOG, cmd_parse
from commitparse.commands.show import cmd_show
from commitparse.config import Settings

OUTPUT_FORMATS = ["json", "yaml", "text"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitparse",
        description="Parse git history output into commits, diffs, hunks and lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  log     List the commits in a range (git log --oneline SINCE..UNTIL)
  show    Parse one commit (git show HASH)
  parse   Parse captured git output from a file or stdin

Examples:
  commitparse log v1.0 main --format text
  commitparse show 1c5a7e3 --repo ../project
  git show HEAD | commitparse parse --format yaml
  commitparse parse --input-file listing.txt --kind log
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser and git activity to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )

    git_options = argparse.ArgumentParser(add_help=False)
    git_options.add_argument(
        "--repo",
        help="Path to the git repository (default: $COMMITPARSE_REPO or current directory)",
    )
    git_options.add_argument(
        "--timeout",
        type=float,
        help="Seconds before a git call is abandoned (default: $COMMITPARSE_TIMEOUT or 60)",
    )

    # log command
    parser_log = subparsers.add_parser(
        "log",
        parents=[common, git_options],
        help="List the commits in a range",
    )
    parser_log.add_argument("since", help="Revision the range starts after")
    parser_log.add_argument("until", help="Revision the range ends at")

    # show command
    parser_show = subparsers.add_parser(
        "show",
        parents=[common, git_options],
        help="Parse one commit",
    )
    parser_show.add_argument("commit_hash", help="Commit to inspect")

    # parse command
    parser_parse = subparsers.add_parser(
        "parse",
        parents=[common],
        help="Parse captured git output",
    )
    parser_parse.add_argument(
        "--input-file",
        help="Path to captured output. If not provided, reads from stdin",
    )
    parser_parse.add_argument(
        "--kind",
        choices=[KIND_COMMIT, KIND_LOG],
        default=KIND_COMMIT,
        help="'commit' for git show output, 'log' for git log --oneline (default: commit)",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        return cmd_parse(
            input_file=args.input_file,
            kind=args.kind,
            output_format=args.output_format,
        )

    try:
        settings = Settings.from_env().with_overrides(
            repo_path=args.repo,
            timeout=args.timeout,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.command == "log":
        return cmd_log(args.since, args.until, settings, output_format=args.output_format)
    return cmd_show(args.commit_hash, settings, output_format=args.output_format)


if __name__ == "__main__":
    sys.exit(main())
