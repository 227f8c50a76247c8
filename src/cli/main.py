"""Record filter CLI entry points.
This module exposes commands that filter the built-in sample records.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from cli.constraint_arguments import parse_where_arguments
from core.config import RecordFilterConfig
from core.errors import RecordFilterError
from core.logging_config import configure_logging
from query.constraint_validation import supported_constraint_fields
from query.record_filtering import filter_records
from query.record_formatting import format_records
from query.sample_records import build_sample_records


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="record-filter",
        description="Filter tagged user and admin records",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_filter_command(subparsers)
    _add_fields_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the record filter CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(RecordFilterConfig.from_env().log_level)
        if args.command == "filter":
            return _run_filter_command(args)
        if args.command == "fields":
            return _run_fields_command(args)
    except RecordFilterError as error:
        print(f"filter_error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_filter_command(args: argparse.Namespace) -> int:
    """Handle filter command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    constraint = parse_where_arguments(args.tag, args.where)
    matched = filter_records(build_sample_records(), args.tag, constraint)
    for line in format_records(matched):
        print(line)
    return 0


def _run_fields_command(args: argparse.Namespace) -> int:
    """Handle fields command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for field_name in supported_constraint_fields(args.tag):
        print(field_name)
    return 0


def _add_filter_command(subparsers: Any) -> None:
    """Register filter subcommand."""
    parser = subparsers.add_parser("filter", help="Filter sample records by tag and fields")
    parser.add_argument("--tag", required=True, help="Record variant, e.g. user or admin")
    parser.add_argument(
        "--where",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Field constraint; repeat to require several fields",
    )


def _add_fields_command(subparsers: Any) -> None:
    """Register fields subcommand."""
    parser = subparsers.add_parser("fields", help="List constraint fields for a tag")
    parser.add_argument("--tag", required=True, help="Record variant, e.g. user or admin")
