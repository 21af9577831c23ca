"""Map source flows onto canonical Flows, preserving order and count."""

from __future__ import annotations

from collections.abc import Iterable

from driftscope.locations.file_cache import LocalFileCache
from driftscope.locations.normalizer import (
    location_from_live,
    location_from_remote,
    location_from_taint,
)
from driftscope.locations.schemas import Flow
from driftscope.locations.sources import FlowDto, LiveFlow, TaintFlow


def flows_from_live(flows: Iterable[LiveFlow]) -> tuple[Flow, ...]:
    return tuple(
        Flow(locations=tuple(
            location_from_live(loc) for loc in flow.locations
        ))
        for flow in flows
    )


def flows_from_remote(
    flows: Iterable[FlowDto],
    cache: LocalFileCache,
    workspace_folder_uri: str | None = None,
) -> tuple[Flow, ...]:
    return tuple(
        Flow(locations=tuple(
            location_from_remote(loc, cache, workspace_folder_uri)
            for loc in flow.locations
        ))
        for flow in flows
    )


def flows_from_taint(
    flows: Iterable[TaintFlow],
    cache: LocalFileCache,
    workspace_folder_uri: str,
) -> tuple[Flow, ...]:
    return tuple(
        Flow(locations=tuple(
            location_from_taint(loc, cache, workspace_folder_uri)
            for loc in flow.locations
        ))
        for flow in flows
    )
