"""Parser for the simple article format.

The input is either one `{title, description, publishedAt, url}` object or an
array of them. The single-object form is tried first and the array form only
if that fails to deserialize. Input that is neither, including an empty
string, raises ParseError rather than returning an empty list.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from article_reader.article_logger import ArticleLogger
from article_reader.data_sources import DataSource
from article_reader.errors import FetchError, ParseError, ParseErrorKind
from article_reader.models import Article, SimpleArticle
from article_reader.parse_articles.newsapi_parser import SKIPPED_MESSAGE
from article_reader.validate import is_valid

logger = logging.getLogger(__name__)

_SINGLE_ADAPTER = TypeAdapter(Optional[SimpleArticle])
_ARRAY_ADAPTER = TypeAdapter(Optional[list[Optional[SimpleArticle]]])


def parse_simple(
    text: str,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool] = is_valid,
) -> list[Article]:
    try:
        return _parse_single_article(text, article_logger, validator)
    except ValidationError:
        logger.debug("Input is not a single simple article, trying array format")
    return _parse_article_array(text, article_logger, validator)


def _parse_single_article(
    text: str,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool],
) -> list[Article]:
    simple_article = _SINGLE_ADAPTER.validate_json(text)
    if simple_article is None:
        article_logger.warning("Parsed article is null")
        return []

    article = simple_article.to_article()
    if not validator(article):
        article_logger.warning(SKIPPED_MESSAGE)
        return []
    return [article]


def _parse_article_array(
    text: str,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool],
) -> list[Article]:
    try:
        simple_articles = _ARRAY_ADAPTER.validate_json(text)
    except ValidationError as e:
        article_logger.error("Failed to parse article array format", e)
        raise ParseError(ParseErrorKind.SIMPLE_PARSE_FAILURE, "Error parsing article array format") from e

    if simple_articles is None:
        article_logger.warning("Parsed article array is null")
        return []

    articles = []
    for simple_article in simple_articles:
        if simple_article is None:
            continue
        article = simple_article.to_article()
        if not validator(article):
            article_logger.warning(SKIPPED_MESSAGE)
            continue
        articles.append(article)

    logger.info("Parsed %d of %d simple articles", len(articles), len(simple_articles))
    return articles


def parse_simple_source(
    source: DataSource,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool] = is_valid,
) -> list[Article]:
    """Fetch from source, then parse it as simple-format articles."""
    try:
        text = source.fetch()
    except FetchError as e:
        article_logger.error("Error reading data from source", e)
        raise ParseError(ParseErrorKind.SOURCE_READ_FAILURE, "Error reading source data") from e
    return parse_simple(text, article_logger, validator)
