"""Tests for article_reader.errors module."""

from article_reader.errors import (
    ArticleReaderError,
    ClientError,
    ConfigError,
    ConfigErrorKind,
    FetchError,
    FetchErrorKind,
    ParseError,
    ParseErrorKind,
    describe_error,
)


class TestErrors:
    def test_kinds_are_kept(self) -> None:
        assert ConfigError(ConfigErrorKind.INVALID_FORMAT, "x").kind is ConfigErrorKind.INVALID_FORMAT
        assert FetchError(FetchErrorKind.NOT_FOUND, "x").kind is FetchErrorKind.NOT_FOUND
        assert ParseError(ParseErrorKind.SOURCE_READ_FAILURE, "x").kind is ParseErrorKind.SOURCE_READ_FAILURE

    def test_hierarchy(self) -> None:
        for exc in (
            ConfigError(ConfigErrorKind.INVALID_FORMAT, "x"),
            FetchError(FetchErrorKind.NOT_FOUND, "x"),
            ParseError(ParseErrorKind.SIMPLE_PARSE_FAILURE, "x"),
            ClientError("x"),
        ):
            assert isinstance(exc, ArticleReaderError)
        assert isinstance(ConfigError(ConfigErrorKind.INVALID_FORMAT, "x"), ValueError)


class TestDescribeError:
    def test_message_only(self) -> None:
        assert describe_error(ClientError("Failed to parse articles")) == "Failed to parse articles"

    def test_includes_cause(self) -> None:
        try:
            try:
                raise ParseError(ParseErrorKind.ENVELOPE_PARSE_FAILURE, "Error parsing NewsAPI format")
            except ParseError as e:
                raise ClientError("Failed to parse articles") from e
        except ClientError as e:
            assert describe_error(e) == "Failed to parse articles: Error parsing NewsAPI format"

    def test_empty_message_uses_class_name(self) -> None:
        assert describe_error(ClientError()) == "ClientError"
