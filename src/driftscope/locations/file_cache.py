"""Request-scoped cache of local file contents.

Each distinct URI is read at most once per cache instance, so a flow that
visits the same file many times costs one read. Read failures are memoized
too and never raise: callers see ``None`` and report ``exists=False``.
"""

from __future__ import annotations

import logging
import re

from driftscope.config import Settings, default_settings
from driftscope.locations.text_range import TextRange, is_whole_file
from driftscope.locations.uris import uri_to_path
from driftscope.resilience.errors import (
    FileTooLargeError,
    ReadFailure,
    classify_read_error,
    is_missing,
)

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    """Split on ``\\r\\n``, ``\\r`` or ``\\n``; a trailing break adds no line."""
    if not content:
        return []
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def extract_range(lines: list[str], text_range: TextRange) -> str | None:
    """Return the code spanned by ``text_range``, or None if out of bounds.

    Lines are 1-based. Offsets are 0-based and count UTF-16 code units, as
    editors report them. The end offset is clamped to the end line's
    length; every other violation yields None.
    """
    start = text_range.start_line
    end = text_range.end_line
    start_offset = text_range.start_line_offset
    end_offset = text_range.end_line_offset

    if start < 1 or end < start or end > len(lines):
        return None
    if start_offset < 0 or end_offset < 0:
        return None

    first = lines[start - 1]
    first_len = _utf16_len(first)
    if start_offset > first_len:
        return None
    begin = _code_point_index(first, start_offset)

    if start == end:
        stop = min(end_offset, first_len)
        if stop < start_offset:
            return None
        return first[begin:_code_point_index(first, stop)]

    last = lines[end - 1]
    middle = lines[start:end - 1]
    return "\n".join([
        first[begin:],
        *middle,
        last[:_code_point_index(last, end_offset)],
    ])


def _utf16_len(line: str) -> int:
    if line.isascii():
        return len(line)
    return len(line.encode("utf-16-le", "surrogatepass")) // 2


def _code_point_index(line: str, offset: int) -> int:
    """Map a UTF-16 offset to an index into ``line``, clamped to its end.

    An offset inside a surrogate pair lands after that character.
    """
    if line.isascii():
        return min(offset, len(line))
    units = 0
    for index, char in enumerate(line):
        if units >= offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(line)



def extract_code(content: str, text_range: TextRange) -> str | None:
    """Whole content for the 0/0 sentinel, else the range-bounded code."""
    if is_whole_file(text_range):
        return content
    return extract_range(split_lines(content), text_range)


class LocalCodeFile:
    """Content of one local file as read during a reconciliation pass."""

    def __init__(
        self,
        uri: str,
        content: str | None,
        failure: ReadFailure | None = None,
    ) -> None:
        self._uri = uri
        self._content = content
        self._failure = failure
        self._lines: list[str] | None = None

    @classmethod
    def from_uri(
        cls, uri: str, settings: Settings | None = None
    ) -> LocalCodeFile:
        """Read the file behind ``uri``; failures are recorded, not raised."""
        cfg = settings if settings is not None else default_settings()
        try:
            path = uri_to_path(uri)
            size = path.stat().st_size
            if size > cfg.max_file_size_bytes:
                raise FileTooLargeError(size, cfg.max_file_size_bytes)
            content = path.read_bytes().decode(cfg.file_encoding)
        except (OSError, UnicodeError, ValueError) as exc:
            failure = classify_read_error(exc)
            log = logger.debug if is_missing(failure) else logger.warning
            log("Cannot read %s (%s): %s", uri, failure.value, exc)
            return cls(uri, None, failure)
        return cls(uri, content)

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def failure(self) -> ReadFailure | None:
        return self._failure

    @property
    def readable(self) -> bool:
        return self._content is not None

    def content(self) -> str | None:
        return self._content

    def lines(self) -> list[str]:
        if self._lines is None:
            self._lines = split_lines(self._content or "")
        return self._lines

    def code_at(self, text_range: TextRange) -> str | None:
        """Code at ``text_range``; None when unreadable or out of bounds."""
        if self._content is None:
            return None
        if is_whole_file(text_range):
            return self._content
        return extract_range(self.lines(), text_range)


class LocalFileCache:
    """Memoizes LocalCodeFile handles by URI for one request (or batch).

    Not thread-safe: share an instance across threads only if no two of
    them use it at the same time.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = (
            settings if settings is not None else default_settings()
        )
        self._files: dict[str, LocalCodeFile] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    def get(self, uri: str) -> LocalCodeFile:
        """Return the handle for ``uri``, reading the file on first use."""
        handle = self._files.get(uri)
        if handle is None:
            handle = LocalCodeFile.from_uri(uri, self._settings)
            self._files[uri] = handle
        return handle

    def resolve(self, uri: str | None) -> LocalCodeFile | None:
        """Return a readable handle for ``uri`` or None if unresolved."""
        if uri is None:
            return None
        handle = self.get(uri)
        return handle if handle.readable else None

    def code_at(
        self, uri: str | None, text_range: TextRange | None
    ) -> str | None:
        """Code at the range, whole content when no range is recorded."""
        handle = self.resolve(uri)
        if handle is None:
            return None
        if text_range is None:
            return handle.content()
        return handle.code_at(text_range)

    def __contains__(self, uri: object) -> bool:
        return uri in self._files

    def __len__(self) -> int:
        return len(self._files)
