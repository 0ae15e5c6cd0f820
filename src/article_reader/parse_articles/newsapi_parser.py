"""Parser for the NewsAPI envelope format."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from article_reader.article_logger import ArticleLogger
from article_reader.data_sources import DataSource
from article_reader.errors import FetchError, ParseError, ParseErrorKind
from article_reader.models import Article, NewsApiResponse
from article_reader.validate import is_valid

logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "Article is missing required fields and will be skipped."

_RESPONSE_ADAPTER = TypeAdapter(Optional[NewsApiResponse])


def parse_newsapi(
    text: str,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool] = is_valid,
) -> list[Article]:
    """Parse a NewsAPI response body into valid articles, in input order.

    A body of `null` or one without an `articles` array yields an empty list.
    Invalid articles are dropped with a warning.
    """
    try:
        response = _RESPONSE_ADAPTER.validate_json(text)
    except ValidationError as e:
        article_logger.error("Error parsing NewsAPI data", e)
        raise ParseError(ParseErrorKind.ENVELOPE_PARSE_FAILURE, "Error parsing NewsAPI format") from e

    if response is None or response.articles is None:
        article_logger.error("Failed to parse NewsAPI response - null response or articles")
        return []

    articles = []
    for raw in response.articles:
        article = raw.to_article() if raw is not None else None
        if not validator(article):
            article_logger.warning(SKIPPED_MESSAGE)
            continue
        articles.append(article)

    logger.info(
        "Parsed %d of %d NewsAPI articles (status=%s)",
        len(articles),
        len(response.articles),
        response.status,
    )
    return articles


def parse_newsapi_source(
    source: DataSource,
    article_logger: ArticleLogger,
    validator: Callable[[Optional[Article]], bool] = is_valid,
) -> list[Article]:
    """Fetch from source, then parse it as a NewsAPI response."""
    try:
        text = source.fetch()
    except FetchError as e:
        article_logger.error("Error reading data from source", e)
        raise ParseError(ParseErrorKind.ENVELOPE_PARSE_FAILURE, "Error parsing NewsAPI format") from e
    return parse_newsapi(text, article_logger, validator)
