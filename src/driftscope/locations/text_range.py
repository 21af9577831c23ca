"""Text range value types shared by inputs and outputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from driftscope.constants import WHOLE_FILE_LINE


class DtoModel(BaseModel):
    """Immutable model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TextRange(DtoModel):
    """1-based lines, 0-based offsets. Lines 0/0 mean the whole file."""

    start_line: int
    start_line_offset: int
    end_line: int
    end_line_offset: int


class TextRangeWithHash(TextRange):
    """A text range plus the digest of the code it anchored when recorded."""

    hash: str = ""


def is_whole_file(text_range: TextRange) -> bool:
    """Return True for the whole-file sentinel (start and end line both 0).

    A range with only one of the two lines at 0 is malformed, not whole-file.
    """
    return (
        text_range.start_line == WHOLE_FILE_LINE
        and text_range.end_line == WHOLE_FILE_LINE
    )


def with_hash(text_range: TextRange, range_hash: str) -> TextRangeWithHash:
    return TextRangeWithHash(
        start_line=text_range.start_line,
        start_line_offset=text_range.start_line_offset,
        end_line=text_range.end_line,
        end_line_offset=text_range.end_line_offset,
        hash=range_hash,
    )


def without_hash(text_range: TextRangeWithHash) -> TextRange:
    return TextRange(
        start_line=text_range.start_line,
        start_line_offset=text_range.start_line_offset,
        end_line=text_range.end_line,
        end_line_offset=text_range.end_line_offset,
    )
