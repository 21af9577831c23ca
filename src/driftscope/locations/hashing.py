"""Stable digest of code snippets.

The same function is used on both sides of a comparison: by whoever records
a taint location (the hash travels with the text range) and by the
reconciliation code that re-hashes the local text. Whitespace is stripped
before hashing, so re-indented or re-wrapped code still matches.
"""

from __future__ import annotations

import hashlib
import re

# ASCII whitespace only; other Unicode spaces are part of the code
_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]")


def digest(code: str) -> str:
    """Return the hex digest of ``code`` with all whitespace removed."""
    stripped = _WHITESPACE.sub("", code)
    return hashlib.md5(
        stripped.encode("utf-8"), usedforsecurity=False
    ).hexdigest()
