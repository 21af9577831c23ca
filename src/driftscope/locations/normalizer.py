"""Normalize source-specific locations into the canonical Location.

One function per source shape; drift detection happens here:

* live   — hash the current code, no comparison (``code_matches`` stays False)
* remote — compare the embedded snippet to local code, by exact equality
* taint  — compare the recorded hash to the digest of local code
"""

from __future__ import annotations

import logging

from driftscope.locations.file_cache import LocalFileCache, extract_code
from driftscope.locations.hashing import digest
from driftscope.locations.schemas import Location
from driftscope.locations.sources import (
    InputFile,
    LiveLocation,
    LocationDto,
    TaintLocation,
)
from driftscope.locations.text_range import TextRange, with_hash
from driftscope.locations.uris import ide_path_to_uri, join_uri, uri_path
from driftscope.resilience.errors import classify_read_error

logger = logging.getLogger(__name__)


def location_from_live(location: LiveLocation) -> Location:
    """Location reported by a live analysis.

    The engine has just read the file, so the location always exists. The
    range is annotated with the hash of its current code for later reuse;
    a read failure leaves the hash empty.
    """
    input_file = location.input_file
    text_range = location.text_range
    uri = input_file.uri if input_file is not None else None

    range_with_hash = None
    if text_range is not None:
        range_with_hash = with_hash(
            text_range, _live_range_hash(input_file, text_range)
        )

    return Location(
        uri=uri,
        file_path=uri_path(uri) if uri is not None else None,
        message=location.message,
        text_range=range_with_hash,
        exists=True,
    )


def _live_range_hash(
    input_file: InputFile | None, text_range: TextRange
) -> str:
    if input_file is None:
        return ""
    try:
        content = input_file.contents()
    except (OSError, UnicodeError) as exc:
        logger.debug(
            "Cannot hash %s (%s): %s",
            input_file.uri,
            classify_read_error(exc).value,
            exc,
        )
        return ""
    code = extract_code(content, text_range)
    return digest(code) if code is not None else ""


def location_from_remote(
    location: LocationDto,
    cache: LocalFileCache,
    workspace_folder_uri: str | None = None,
) -> Location:
    """Location from a remote "show issue" request (embedded snippet)."""
    snippet = location.code_snippet
    text_range = location.text_range
    uri = _remote_uri(location.ide_file_path, workspace_folder_uri)

    range_with_hash = None
    if text_range is not None:
        range_with_hash = with_hash(
            text_range, digest(snippet) if snippet is not None else ""
        )

    local_code = cache.code_at(uri, text_range)
    exists = local_code is not None
    code_matches = (
        exists
        and text_range is not None
        and snippet is not None
        and snippet == local_code
    )
    if not exists:
        logger.debug("Location not found locally: %s", uri)

    return Location(
        uri=uri,
        file_path=(
            uri if uri is not None
            else cache.settings.unresolved_file_placeholder
        ),
        message=location.message,
        text_range=range_with_hash,
        exists=exists,
        code_matches=code_matches,
    )


def _remote_uri(
    ide_file_path: str, workspace_folder_uri: str | None
) -> str | None:
    try:
        return ide_path_to_uri(ide_file_path, workspace_folder_uri)
    except ValueError as exc:
        logger.debug("Cannot resolve %r: %s", ide_file_path, exc)
        return None


def location_from_taint(
    location: TaintLocation,
    cache: LocalFileCache,
    workspace_folder_uri: str,
) -> Location:
    """Location from a taint record (workspace-relative path + hash)."""
    text_range = location.text_range
    if location.file_path is None:
        return Location(
            file_path=cache.settings.unresolved_file_placeholder,
            message=location.message,
            text_range=text_range,
        )

    uri = join_uri(workspace_folder_uri, location.file_path)
    local_code = cache.code_at(uri, text_range)
    exists = local_code is not None
    code_matches = (
        local_code is not None
        and text_range is not None
        and digest(local_code) == text_range.hash
    )
    if not exists:
        logger.debug("Taint location not found locally: %s", uri)

    return Location(
        uri=uri,
        file_path=location.file_path,
        message=location.message,
        text_range=text_range,
        exists=exists,
        code_matches=code_matches,
    )
