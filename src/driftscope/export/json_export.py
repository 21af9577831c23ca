"""JSON export — editor command envelope."""

from __future__ import annotations

import json
from typing import Any

from driftscope.constants import SHOW_ALL_LOCATIONS_COMMAND
from driftscope.locations.schemas import DisplayIssue


def export_params(param: DisplayIssue) -> dict[str, Any]:
    """Convert a DisplayIssue to a camelCase JSON-serializable dict.

    Unset optional fields (``connectionId``, ``creationDate``, null URIs
    and ranges) are omitted.
    """
    return param.model_dump(mode="json", by_alias=True, exclude_none=True)


def export_command(
    params: list[DisplayIssue] | DisplayIssue,
    indent: int | None = 2,
) -> str:
    """Export one or more parameters as a "show all locations" command."""
    items = params if isinstance(params, list) else [params]
    payload: dict[str, Any] = {
        "command": SHOW_ALL_LOCATIONS_COMMAND,
        "arguments": [export_params(p) for p in items],
    }
    return json.dumps(payload, indent=indent, ensure_ascii=False)
