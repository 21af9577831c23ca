"""CLI entry point — ``driftscope show``."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from driftscope import __version__
from driftscope.config import Settings
from driftscope.constants import SourceKind
from driftscope.export.json_export import export_command
from driftscope.locations.file_cache import LocalFileCache
from driftscope.locations.params import params_batch
from driftscope.locations.sources import (
    IssueSource,
    LiveIssueDocument,
    ShowIssueParams,
    TaintIssue,
)
from driftscope.logging_config import setup_logging


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"driftscope {__version__}")
        return

    if args.command == "show":
        _run_show(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="driftscope",
        description=(
            "Reconcile recorded issue locations with the code on disk "
            "and print the show-all-locations payload."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser(
        "show",
        help="Build the display payload for one or more issues",
    )
    show.add_argument(
        "issue_file",
        type=str,
        help="JSON file holding an issue object or a list of them",
    )
    show.add_argument(
        "--source",
        "-s",
        choices=[k.value for k in SourceKind],
        default=SourceKind.REMOTE.value,
        help="Shape of the issues in the file (default: remote)",
    )
    show.add_argument(
        "--workspace-folder",
        "-w",
        default=None,
        help=(
            "Workspace folder URI for relative paths "
            "in remote requests"
        ),
    )
    show.add_argument(
        "--connection-id",
        "-c",
        default=None,
        help="Connection the issues came from (remote and taint)",
    )
    show.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line",
    )
    show.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def _run_show(args: argparse.Namespace) -> None:
    """Execute the show command."""
    settings = Settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    issue_path = Path(args.issue_file)
    try:
        raw = json.loads(issue_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: cannot read {issue_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    items = raw if isinstance(raw, list) else [raw]
    try:
        sources = [
            _parse_source(item, SourceKind(args.source), settings)
            for item in items
        ]
    except ValidationError as exc:
        print(f"Error: invalid {args.source} issue: {exc}", file=sys.stderr)
        sys.exit(1)

    params = params_batch(
        sources,
        cache=LocalFileCache(settings),
        connection_id=args.connection_id,
        workspace_folder_uri=args.workspace_folder,
    )
    print(export_command(params, indent=None if args.compact else 2))


def _parse_source(
    item: Any, kind: SourceKind, settings: Settings
) -> IssueSource:
    if kind == SourceKind.LIVE:
        return LiveIssueDocument.model_validate(item).to_issue(
            settings.file_encoding
        )
    if kind == SourceKind.TAINT:
        return TaintIssue.model_validate(item)
    return ShowIssueParams.model_validate(item)


if __name__ == "__main__":
    main()
