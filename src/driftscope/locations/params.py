"""Build the "show all locations" display parameter from any issue source.

Each builder takes an optional LocalFileCache. Without one a fresh cache is
created for the call; pass one in to share reads across a batch of issues.
Nothing here raises for missing files or bad ranges — those are reported
through ``exists``/``code_matches`` only.

Only the remote shape computes the root-level ``code_matches``; live and
taint issues leave it False and carry match facts on their locations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from driftscope.constants import REMOTE_SEVERITY
from driftscope.locations.file_cache import LocalFileCache
from driftscope.locations.flows import (
    flows_from_live,
    flows_from_remote,
    flows_from_taint,
)
from driftscope.locations.schemas import DisplayIssue
from driftscope.locations.sources import (
    IssueSource,
    LiveIssue,
    ShowIssueParams,
    TaintIssue,
)
from driftscope.locations.text_range import without_hash
from driftscope.locations.uris import ide_path_to_uri, join_uri

logger = logging.getLogger(__name__)

_CREATION_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def params_from_live(issue: LiveIssue) -> DisplayIssue:
    """Display parameter for an issue raised by the local analysis."""
    input_file = issue.input_file
    param = DisplayIssue(
        file_uri=input_file.uri if input_file is not None else None,
        message=issue.message,
        severity=str(issue.severity),
        rule_key=issue.rule_key,
        text_range=issue.text_range,
        flows=flows_from_live(issue.flows),
    )
    _log_built(issue.kind, param)
    return param


def params_from_show_issue(
    show_issue: ShowIssueParams,
    connection_id: str | None = None,
    cache: LocalFileCache | None = None,
    workspace_folder_uri: str | None = None,
) -> DisplayIssue:
    """Display parameter for a remote "show issue" request.

    Severity is not part of the request and is left empty. The root
    ``code_matches`` compares the request's snippet to the local code at
    the root range (whole file for the 0/0 sentinel).
    """
    cache = cache if cache is not None else LocalFileCache()
    details = show_issue.issue_details

    try:
        file_uri: str | None = ide_path_to_uri(
            details.ide_file_path, workspace_folder_uri
        )
    except ValueError as exc:
        logger.debug(
            "Cannot resolve %r: %s", details.ide_file_path, exc
        )
        file_uri = None

    local_code = cache.code_at(file_uri, details.text_range)
    code_matches = (
        local_code is not None
        and details.code_snippet is not None
        and details.code_snippet == local_code
    )

    param = DisplayIssue(
        file_uri=file_uri,
        message=details.message,
        severity=REMOTE_SEVERITY,
        rule_key=details.rule_key,
        text_range=details.text_range,
        flows=flows_from_remote(
            details.flows, cache, workspace_folder_uri
        ),
        connection_id=connection_id,
        creation_date=details.creation_date,
        code_matches=code_matches,
    )
    _log_built(show_issue.kind, param)
    return param


def params_from_taint(
    taint: TaintIssue,
    connection_id: str | None,
    cache: LocalFileCache | None = None,
) -> DisplayIssue:
    """Display parameter for a tracked taint vulnerability."""
    cache = cache if cache is not None else LocalFileCache()
    folder = taint.workspace_folder_uri
    param = DisplayIssue(
        file_uri=join_uri(folder, taint.ide_file_path),
        message=taint.message,
        severity=taint.severity,
        rule_key=taint.rule_key,
        text_range=(
            without_hash(taint.text_range)
            if taint.text_range is not None
            else None
        ),
        flows=flows_from_taint(taint.flows, cache, folder),
        connection_id=connection_id,
        creation_date=format_creation_date(taint.introduction_date),
    )
    _log_built(taint.kind, param)
    return param


def format_creation_date(value: datetime) -> str:
    """ISO-8601 in UTC to the second, ``Z`` suffix; naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(_CREATION_DATE_FORMAT)


def build_params(
    source: IssueSource,
    *,
    cache: LocalFileCache | None = None,
    connection_id: str | None = None,
    workspace_folder_uri: str | None = None,
) -> DisplayIssue:
    """Dispatch on the source shape.

    ``workspace_folder_uri`` only applies to remote requests; taint
    records carry their own.
    """
    if isinstance(source, LiveIssue):
        return params_from_live(source)
    if isinstance(source, ShowIssueParams):
        return params_from_show_issue(
            source, connection_id, cache, workspace_folder_uri
        )
    if isinstance(source, TaintIssue):
        return params_from_taint(source, connection_id, cache)
    msg = f"Unsupported issue source: {type(source).__name__}"
    raise TypeError(msg)


def params_batch(
    sources: Iterable[IssueSource],
    *,
    cache: LocalFileCache | None = None,
    connection_id: str | None = None,
    workspace_folder_uri: str | None = None,
) -> list[DisplayIssue]:
    """Build several parameters sharing one cache, in input order."""
    shared = cache if cache is not None else LocalFileCache()
    return [
        build_params(
            source,
            cache=shared,
            connection_id=connection_id,
            workspace_folder_uri=workspace_folder_uri,
        )
        for source in sources
    ]


def _log_built(kind: str, param: DisplayIssue) -> None:
    logger.debug(
        "Built %s display issue for %s: %d flow(s), %d location(s)",
        kind,
        param.rule_key,
        len(param.flows),
        param.location_count,
    )
