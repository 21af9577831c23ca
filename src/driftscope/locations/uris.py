"""File URI helpers — joining, converting to and from local paths."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote, unquote, urlsplit
from urllib.request import url2pathname

from driftscope.constants import FILE_URI_SCHEME
from driftscope.resilience.errors import InvalidFileUriError

_LOCAL_HOSTS = frozenset({"", "localhost"})


def join_uri(folder_uri: str, relative_path: str) -> str:
    """Join a workspace-folder URI and a relative file path.

    ``join_uri("file:///ws", "src/a.py") == "file:///ws/src/a.py"``.
    Backslash separators in the relative path are normalized to ``/``
    and path characters are percent-encoded.
    """
    posix = relative_path.replace("\\", "/").lstrip("/")
    return f"{folder_uri.rstrip('/')}/{quote(posix)}"


def ide_path_to_uri(
    ide_file_path: str, workspace_folder_uri: str | None = None
) -> str:
    """Turn a path reported by a remote source into a file URI.

    Relative paths are joined to ``workspace_folder_uri`` when given,
    otherwise resolved against the current directory.
    """
    if not ide_file_path:
        raise InvalidFileUriError("Empty file path")
    path = Path(ide_file_path)
    if workspace_folder_uri is not None and not path.is_absolute():
        return join_uri(workspace_folder_uri, ide_file_path)
    return path.absolute().as_uri()


def uri_to_path(uri: str) -> Path:
    """Map a ``file:`` URI (or a bare absolute path) to a local path.

    Raises InvalidFileUriError for other schemes and remote hosts.
    """
    parts = urlsplit(uri)
    # "C:\\x" parses with a one-letter scheme
    if parts.scheme == "" or len(parts.scheme) == 1:
        path = Path(uri)
        if not path.is_absolute():
            raise InvalidFileUriError(f"Not an absolute path: {uri}")
        return path
    if parts.scheme.lower() != FILE_URI_SCHEME:
        raise InvalidFileUriError(f"Unsupported URI scheme: {uri}")
    if parts.netloc not in _LOCAL_HOSTS:
        raise InvalidFileUriError(f"Remote file URI: {uri}")
    if not parts.path:
        raise InvalidFileUriError(f"File URI without path: {uri}")
    return Path(url2pathname(parts.path))


def uri_path(uri: str) -> str:
    """Decoded path component of a URI, for display."""
    return unquote(urlsplit(uri).path)
