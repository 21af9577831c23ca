"""Pydantic models for the "show all locations" display payload."""

from __future__ import annotations

from typing import Self

from pydantic import model_validator

from driftscope.locations.text_range import (
    DtoModel,
    TextRange,
    TextRangeWithHash,
)


class Location(DtoModel):
    """A single anchor in a file plus its drift facts.

    ``code_matches`` is only meaningful when ``exists`` is True.
    """

    uri: str | None = None
    file_path: str | None = None
    message: str | None = None
    text_range: TextRangeWithHash | None = None
    exists: bool = False
    code_matches: bool = False

    @model_validator(mode="after")
    def _check_flags(self) -> Self:
        if self.code_matches and not self.exists:
            raise ValueError("code_matches requires exists")
        return self


class Flow(DtoModel):
    """Ordered path through the code; order is as reported by the source."""

    locations: tuple[Location, ...] = ()


class DisplayIssue(DtoModel):
    """Root parameter of the "show all locations" command."""

    file_uri: str | None = None
    message: str
    severity: str
    rule_key: str
    text_range: TextRange | None = None
    flows: tuple[Flow, ...] = ()
    connection_id: str | None = None
    creation_date: str | None = None
    code_matches: bool = False

    @property
    def location_count(self) -> int:
        return sum(len(flow.locations) for flow in self.flows)
