"""Shared constants — single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON payloads,
CLI choices) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class SourceKind(StrEnum):
    """Where an issue came from — selects the normalization path."""

    LIVE = "live"  # local analysis, direct file handle
    REMOTE = "remote"  # "show issue" request with embedded snippet
    TAINT = "taint"  # tracked vulnerability with embedded hash


# ── Text Ranges ──────────────────────────────────────────

# Start and end line both set to this mean "the whole file"
WHOLE_FILE_LINE = 0

# ── Display ──────────────────────────────────────────────

SHOW_ALL_LOCATIONS_COMMAND = "driftscope.showAllLocations"
UNRESOLVED_FILE_PLACEHOLDER = "Could not locate file"

# Severity is not supplied by the remote "show issue" source
REMOTE_SEVERITY = ""

# ── File Reading ─────────────────────────────────────────

DEFAULT_FILE_ENCODING = "utf-8"
DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
FILE_URI_SCHEME = "file"
