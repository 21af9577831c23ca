"""Tests for file URI helpers."""

from pathlib import Path

import pytest

from driftscope.locations.uris import (
    ide_path_to_uri,
    join_uri,
    uri_path,
    uri_to_path,
)
from driftscope.resilience.errors import InvalidFileUriError


class TestJoinUri:
    def test_simple_join(self) -> None:
        assert join_uri("file:///ws", "src/a.py") == "file:///ws/src/a.py"

    def test_trailing_slash_on_folder(self) -> None:
        assert join_uri("file:///ws/", "src/a.py") == "file:///ws/src/a.py"

    def test_leading_slash_on_path(self) -> None:
        assert join_uri("file:///ws", "/src/a.py") == "file:///ws/src/a.py"

    def test_backslashes_normalized(self) -> None:
        assert join_uri("file:///ws", "src\\a.py") == "file:///ws/src/a.py"

    def test_spaces_encoded(self) -> None:
        assert (
            join_uri("file:///ws", "my dir/a.py")
            == "file:///ws/my%20dir/a.py"
        )


class TestIdePathToUri:
    def test_absolute_path(self, tmp_path: Path) -> None:
        path = tmp_path / "a.py"
        assert ide_path_to_uri(str(path)) == path.as_uri()

    def test_relative_path_uses_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert ide_path_to_uri("src/a.py") == (tmp_path / "src/a.py").as_uri()

    def test_relative_path_with_workspace_folder(self) -> None:
        assert (
            ide_path_to_uri("src/a.py", "file:///ws")
            == "file:///ws/src/a.py"
        )

    def test_absolute_path_ignores_workspace_folder(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "a.py"
        assert ide_path_to_uri(str(path), "file:///ws") == path.as_uri()

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(InvalidFileUriError):
            ide_path_to_uri("")


class TestUriToPath:
    def test_file_uri(self, tmp_path: Path) -> None:
        path = tmp_path / "a b.py"
        assert uri_to_path(path.as_uri()) == path

    def test_localhost(self) -> None:
        assert uri_to_path("file://localhost/ws/a.py") == Path("/ws/a.py")

    def test_bare_absolute_path(self) -> None:
        assert uri_to_path("/ws/a.py") == Path("/ws/a.py")

    def test_relative_path_rejected(self) -> None:
        with pytest.raises(InvalidFileUriError):
            uri_to_path("src/a.py")

    def test_other_scheme_rejected(self) -> None:
        with pytest.raises(InvalidFileUriError, match="scheme"):
            uri_to_path("https://example.com/a.py")

    def test_remote_host_rejected(self) -> None:
        with pytest.raises(InvalidFileUriError, match="Remote"):
            uri_to_path("file://server/share/a.py")


class TestUriPath:
    def test_decoded_path(self) -> None:
        assert uri_path("file:///ws/my%20dir/a.py") == "/ws/my dir/a.py"
