"""Exception hierarchy for article_reader."""

from __future__ import annotations

from enum import Enum


class ArticleReaderError(Exception):
    """Base class for every error raised by article_reader."""


class ConfigErrorKind(str, Enum):
    INVALID_SOURCE_TYPE = "invalid_source_type"
    INVALID_FORMAT = "invalid_format"
    UNSUPPORTED_COMBINATION = "unsupported_combination"


class FetchErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    INVALID_URL = "invalid_url"
    NETWORK_FAILURE = "network_failure"
    INTERRUPTED = "interrupted"


class ParseErrorKind(str, Enum):
    ENVELOPE_PARSE_FAILURE = "envelope_parse_failure"
    SIMPLE_PARSE_FAILURE = "simple_parse_failure"
    SOURCE_READ_FAILURE = "source_read_failure"


class ConfigError(ArticleReaderError, ValueError):
    """Invalid source type / format combination."""

    def __init__(self, kind: ConfigErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class FetchError(ArticleReaderError):
    """Raw data could not be read from a file or URL."""

    def __init__(self, kind: FetchErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ParseError(ArticleReaderError):
    """Source data could not be turned into articles."""

    def __init__(self, kind: ParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ClientError(ArticleReaderError):
    """A run failed; the underlying ParseError is chained as __cause__."""


class LoggingError(ArticleReaderError):
    """The article log file could not be opened."""


def describe_error(exc: BaseException) -> str:
    """Return the exception message followed by its cause, if it has one."""
    message = str(exc) or exc.__class__.__name__
    cause = exc.__cause__
    if cause is not None and str(cause):
        return f"{message}: {cause}"
    return message
