"""Select a data source and parser from (source type, format)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from article_reader.article_logger import ArticleLogger
from article_reader.data_sources import DataSource, FileDataSource, UrlDataSource
from article_reader.errors import ConfigError, ConfigErrorKind
from article_reader.models import Article
from article_reader.parse_articles.newsapi_parser import parse_newsapi_source
from article_reader.parse_articles.simple_parser import parse_simple_source
from article_reader.validate import is_valid

logger = logging.getLogger(__name__)


class SourceKind(str, Enum):
    FILE = "file"
    URL = "url"


class FormatKind(str, Enum):
    NEWSAPI = "newsapi"
    SIMPLE = "simple"


class ParserVariant(Enum):
    FILE_NEWSAPI = (SourceKind.FILE, FormatKind.NEWSAPI)
    FILE_SIMPLE = (SourceKind.FILE, FormatKind.SIMPLE)
    URL_NEWSAPI = (SourceKind.URL, FormatKind.NEWSAPI)

    @property
    def source_kind(self) -> SourceKind:
        return self.value[0]

    @property
    def format_kind(self) -> FormatKind:
        return self.value[1]


# (url, simple) is deliberately absent.
_VARIANTS = {variant.value: variant for variant in ParserVariant}

_PARSERS = {
    FormatKind.NEWSAPI: parse_newsapi_source,
    FormatKind.SIMPLE: parse_simple_source,
}


@dataclass(frozen=True)
class ParserSelection:
    """A parser variant bound to the data source it reads from."""
    variant: ParserVariant
    location: str
    data_source: DataSource


def _source_kind(value: str) -> SourceKind:
    try:
        return SourceKind(value.lower())
    except ValueError:
        raise ConfigError(
            ConfigErrorKind.INVALID_SOURCE_TYPE,
            f"Invalid source type: {value}. Must be either 'file' or 'url'",
        ) from None


def _format_kind(value: str) -> FormatKind:
    try:
        return FormatKind(value.lower())
    except ValueError:
        raise ConfigError(
            ConfigErrorKind.INVALID_FORMAT,
            f"Invalid format: {value}. Must be either 'newsapi' or 'simple'",
        ) from None


def _build_data_source(
    source_kind: SourceKind, location: str, user_agent: Optional[str]
) -> DataSource:
    if source_kind is SourceKind.URL:
        return UrlDataSource(location, user_agent=user_agent)
    return FileDataSource(location)


def resolve(
    source_kind: str,
    format_kind: str,
    location: str,
    user_agent: Optional[str] = None,
) -> ParserSelection:
    """Map a source type and format to a ParserSelection.

    Raises:
        ConfigError: unknown source type, unknown format, or the URL + simple
            combination.
    """
    source = _source_kind(source_kind)
    fmt = _format_kind(format_kind)

    variant = _VARIANTS.get((source, fmt))
    if variant is None:
        raise ConfigError(
            ConfigErrorKind.UNSUPPORTED_COMBINATION,
            f"{source.value} source does not support {fmt.value} format",
        )

    logger.info("Resolved %s %s -> %s", source.value, location, variant.name)
    return ParserSelection(
        variant=variant,
        location=location,
        data_source=_build_data_source(source, location, user_agent),
    )


def detect_format(location: str, article_logger: Optional[ArticleLogger] = None) -> FormatKind:
    """Guess the format from the file name or URL, defaulting to newsapi."""
    lowered = location.lower()
    if FormatKind.NEWSAPI.value in lowered:
        return FormatKind.NEWSAPI
    if FormatKind.SIMPLE.value in lowered:
        return FormatKind.SIMPLE

    message = (
        f"Could not determine format from path/url: {location}. "
        "Defaulting to NewsAPI format."
    )
    if article_logger is None or not article_logger.echo:
        logger.warning(message)
    if article_logger is not None:
        article_logger.warning(message)
    return FormatKind.NEWSAPI


def parse_selection(
    selection: ParserSelection,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool] = is_valid,
) -> list[Article]:
    """Run the selected parser over its data source."""
    parse = _PARSERS[selection.variant.format_kind]
    return parse(selection.data_source, article_logger, validator)
