"""Location reconciliation — drift detection for issue locations and flows."""

from driftscope.locations.file_cache import LocalCodeFile, LocalFileCache
from driftscope.locations.hashing import digest
from driftscope.locations.params import (
    build_params,
    params_batch,
    params_from_live,
    params_from_show_issue,
    params_from_taint,
)
from driftscope.locations.schemas import DisplayIssue, Flow, Location
from driftscope.locations.sources import (
    IssueSource,
    LiveFlow,
    LiveIssue,
    LiveLocation,
    LocalInputFile,
    ShowIssueParams,
    TaintIssue,
)
from driftscope.locations.text_range import TextRange, TextRangeWithHash

__all__ = [
    "DisplayIssue",
    "Flow",
    "IssueSource",
    "LiveFlow",
    "LiveIssue",
    "LiveLocation",
    "LocalCodeFile",
    "LocalFileCache",
    "LocalInputFile",
    "Location",
    "ShowIssueParams",
    "TaintIssue",
    "TextRange",
    "TextRangeWithHash",
    "build_params",
    "digest",
    "params_batch",
    "params_from_live",
    "params_from_show_issue",
    "params_from_taint",
]
