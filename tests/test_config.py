"""Tests for Settings validators and environment loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from driftscope.config import Settings


class TestDefaults:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.log_level == "INFO"
        assert s.file_encoding == "utf-8"
        assert s.max_file_size_bytes == 10 * 1024 * 1024
        assert s.unresolved_file_placeholder == "Could not locate file"


class TestLogLevel:
    def test_normalized_to_upper(self) -> None:
        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_level_raises(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            Settings(log_level="chatty")


class TestMaxFileSize:
    def test_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Settings(max_file_size_bytes=0)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Settings(max_file_size_bytes=-1)


class TestFileEncoding:
    def test_unknown_encoding_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown file encoding"):
            Settings(file_encoding="no-such-codec")

    def test_non_utf8_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="driftscope.config"):
            s = Settings(file_encoding="latin-1")
        assert "Non UTF-8 file encoding configured" in caplog.text
        assert s.file_encoding == "latin-1"

    def test_utf8_spellings_do_not_warn(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="driftscope.config"):
            Settings(file_encoding="UTF8")
            Settings(file_encoding="utf_8")
        assert "Non UTF-8" not in caplog.text


class TestEnvironment:
    def test_prefixed_env_vars(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DRIFTSCOPE_LOG_LEVEL", "warning")
        monkeypatch.setenv("DRIFTSCOPE_MAX_FILE_SIZE_BYTES", "2048")
        monkeypatch.setenv(
            "DRIFTSCOPE_UNRESOLVED_FILE_PLACEHOLDER", "<missing>"
        )
        s = Settings()
        assert s.log_level == "WARNING"
        assert s.max_file_size_bytes == 2048
        assert s.unresolved_file_placeholder == "<missing>"

    def test_unprefixed_env_vars_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings().log_level == "INFO"

    def test_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text(
            "DRIFTSCOPE_FILE_ENCODING=utf-16\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)
        assert Settings().file_encoding == "utf-16"
