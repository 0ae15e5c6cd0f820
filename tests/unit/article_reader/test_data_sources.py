"""Tests for article_reader.data_sources module."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from article_reader.data_sources import (
    DEFAULT_USER_AGENT,
    REQUEST_TIMEOUT,
    FileDataSource,
    UrlDataSource,
)
from article_reader.errors import FetchError, FetchErrorKind

TEST_URL = "https://api.example.com/data"


class TestFileDataSource:
    def test_reads_file_content(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert FileDataSource(path).fetch() == '{"key": "value"}'

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("[]", encoding="utf-8")
        assert FileDataSource(str(path)).fetch() == "[]"

    def test_reads_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        assert FileDataSource(path).fetch() == ""

    def test_missing_file_raises_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FetchError) as exc_info:
            FileDataSource(tmp_path / "nonexistent.json").fetch()
        assert exc_info.value.kind is FetchErrorKind.NOT_FOUND
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_raises_io_failure(self, tmp_path: Path) -> None:
        with pytest.raises(FetchError) as exc_info:
            FileDataSource(tmp_path).fetch()
        assert exc_info.value.kind is FetchErrorKind.IO_FAILURE

    def test_undecodable_file_raises_io_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FetchError) as exc_info:
            FileDataSource(path).fetch()
        assert exc_info.value.kind is FetchErrorKind.IO_FAILURE


class TestUrlDataSource:
    def _source(self, **session_get) -> tuple[UrlDataSource, Mock]:
        session = Mock(spec=requests.Session)
        session.get.configure_mock(**session_get)
        return UrlDataSource(TEST_URL, session=session), session

    def test_returns_response_body(self) -> None:
        response = Mock(status_code=200, text='{"key":"value"}')
        source, session = self._source(return_value=response)

        assert source.fetch() == '{"key":"value"}'
        session.get.assert_called_once_with(
            TEST_URL,
            headers={"User-Agent": DEFAULT_USER_AGENT},
            timeout=REQUEST_TIMEOUT,
        )

    def test_custom_user_agent(self) -> None:
        session = Mock(spec=requests.Session)
        session.get.return_value = Mock(status_code=200, text="{}")
        UrlDataSource(TEST_URL, session=session, user_agent="reader-test/2.0").fetch()
        assert session.get.call_args.kwargs["headers"] == {"User-Agent": "reader-test/2.0"}

    @pytest.mark.parametrize("body", [None, ""])
    def test_absent_body_is_empty_string(self, body) -> None:
        source, _ = self._source(return_value=Mock(status_code=200, text=body))
        assert source.fetch() == ""

    def test_error_status_still_returns_body(self) -> None:
        source, _ = self._source(return_value=Mock(status_code=404, text="not found"))
        assert source.fetch() == "not found"

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.MissingSchema("no scheme"),
            requests.exceptions.InvalidSchema("ftp"),
            requests.exceptions.InvalidURL("bad host"),
        ],
    )
    def test_malformed_url_raises_invalid_url(self, error) -> None:
        source, _ = self._source(side_effect=error)
        with pytest.raises(FetchError) as exc_info:
            source.fetch()
        assert exc_info.value.kind is FetchErrorKind.INVALID_URL
        assert exc_info.value.__cause__ is error

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("slow"),
        ],
    )
    def test_transport_error_raises_network_failure(self, error) -> None:
        source, _ = self._source(side_effect=error)
        with pytest.raises(FetchError) as exc_info:
            source.fetch()
        assert exc_info.value.kind is FetchErrorKind.NETWORK_FAILURE
        assert TEST_URL in str(exc_info.value)

    def test_interrupt_raises_interrupted(self) -> None:
        source, _ = self._source(side_effect=KeyboardInterrupt())
        with pytest.raises(FetchError) as exc_info:
            source.fetch()
        assert exc_info.value.kind is FetchErrorKind.INTERRUPTED

    @patch("article_reader.data_sources.requests.get")
    def test_without_session_uses_requests_get(self, mock_get) -> None:
        mock_get.return_value = Mock(status_code=200, text="{}")

        assert UrlDataSource(TEST_URL).fetch() == "{}"
        mock_get.assert_called_once_with(
            TEST_URL,
            headers={"User-Agent": DEFAULT_USER_AGENT},
            timeout=REQUEST_TIMEOUT,
        )

    def test_no_session_is_created(self) -> None:
        assert UrlDataSource(TEST_URL).session is None

    def test_malformed_url_without_session(self) -> None:
        with pytest.raises(FetchError) as exc_info:
            UrlDataSource("not a url").fetch()
        assert exc_info.value.kind is FetchErrorKind.INVALID_URL
