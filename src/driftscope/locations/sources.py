"""Input shapes — one per issue source.

* Live analysis: plain dataclasses around an ``InputFile`` handle supplied
  by the analysis engine.
* Remote "show issue" requests and taint vulnerability records: pydantic
  models parsed from camelCase JSON.

The three shapes share nothing but the output they normalize to, so there
is no common base class; ``IssueSource`` is their tagged union.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from driftscope.constants import DEFAULT_FILE_ENCODING, SourceKind
from driftscope.locations.text_range import (
    DtoModel,
    TextRange,
    TextRangeWithHash,
)

# ── Live analysis ────────────────────────────────────────


@runtime_checkable
class InputFile(Protocol):
    """A file handed over by the analysis engine."""

    @property
    def uri(self) -> str: ...

    def contents(self) -> str: ...


@dataclass(frozen=True)
class LocalInputFile:
    """InputFile backed by a path on the local disk."""

    path: Path
    encoding: str = DEFAULT_FILE_ENCODING

    @property
    def uri(self) -> str:
        return self.path.absolute().as_uri()

    def contents(self) -> str:
        return self.path.read_text(encoding=self.encoding)


@dataclass(frozen=True)
class LiveLocation:
    input_file: InputFile | None
    text_range: TextRange | None
    message: str | None = None


@dataclass(frozen=True)
class LiveFlow:
    locations: tuple[LiveLocation, ...] = ()


@dataclass(frozen=True)
class LiveIssue:
    """An issue just raised by a local analysis."""

    input_file: InputFile | None
    message: str
    severity: str
    rule_key: str
    text_range: TextRange | None = None
    flows: tuple[LiveFlow, ...] = ()

    kind: ClassVar[SourceKind] = SourceKind.LIVE


class LiveLocationDocument(DtoModel):
    """JSON form of a live location: input files are plain paths."""

    file_path: str | None = None
    text_range: TextRange | None = None
    message: str | None = None

    def to_location(self, encoding: str) -> LiveLocation:
        return LiveLocation(
            input_file=_input_file(self.file_path, encoding),
            text_range=self.text_range,
            message=self.message,
        )


class LiveFlowDocument(DtoModel):
    locations: tuple[LiveLocationDocument, ...] = ()


class LiveIssueDocument(DtoModel):
    """JSON form of a live issue, as accepted by the CLI."""

    file_path: str | None = None
    message: str
    severity: str
    rule_key: str
    text_range: TextRange | None = None
    flows: tuple[LiveFlowDocument, ...] = ()

    def to_issue(
        self, encoding: str = DEFAULT_FILE_ENCODING
    ) -> LiveIssue:
        return LiveIssue(
            input_file=_input_file(self.file_path, encoding),
            message=self.message,
            severity=self.severity,
            rule_key=self.rule_key,
            text_range=self.text_range,
            flows=tuple(
                LiveFlow(
                    locations=tuple(
                        loc.to_location(encoding)
                        for loc in flow.locations
                    )
                )
                for flow in self.flows
            ),
        )


def _input_file(
    file_path: str | None, encoding: str
) -> LocalInputFile | None:
    if file_path is None:
        return None
    return LocalInputFile(Path(file_path), encoding)


# ── Remote "show issue" request ──────────────────────────


class LocationDto(DtoModel):
    ide_file_path: str
    text_range: TextRange | None = None
    code_snippet: str | None = None
    message: str | None = None


class FlowDto(DtoModel):
    locations: tuple[LocationDto, ...] = ()


class IssueDetails(DtoModel):
    """Issue as last seen by the remote service."""

    issue_key: str | None = None
    rule_key: str
    message: str
    ide_file_path: str
    text_range: TextRange
    code_snippet: str | None = None
    creation_date: str | None = None
    is_taint: bool = False
    flows: tuple[FlowDto, ...] = ()


class ShowIssueParams(DtoModel):
    config_scope_id: str | None = None
    issue_details: IssueDetails

    kind: ClassVar[SourceKind] = SourceKind.REMOTE


# ── Taint vulnerability record ───────────────────────────


class TaintLocation(DtoModel):
    file_path: str | None = None
    text_range: TextRangeWithHash | None = None
    message: str | None = None


class TaintFlow(DtoModel):
    locations: tuple[TaintLocation, ...] = ()


class TaintIssue(DtoModel):
    """A tracked taint vulnerability, anchored by path + hash."""

    id: str | None = None
    workspace_folder_uri: str
    ide_file_path: str
    message: str
    severity: str
    rule_key: str
    text_range: TextRangeWithHash | None = None
    introduction_date: datetime
    flows: tuple[TaintFlow, ...] = ()

    kind: ClassVar[SourceKind] = SourceKind.TAINT


type IssueSource = LiveIssue | ShowIssueParams | TaintIssue
