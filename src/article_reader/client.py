"""Parse and print articles for one <source_type> <path_or_url> [format] request."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from article_reader.article_logger import ArticleLogger
from article_reader.config import get_config
from article_reader.dispatch import detect_format, parse_selection, resolve
from article_reader.errors import ClientError, ParseError
from article_reader.models import Article
from article_reader.printer import print_article
from article_reader.validate import is_valid

logger = logging.getLogger(__name__)


def run(
    args: Sequence[str],
    article_logger: ArticleLogger,
    printer: Callable[[Article], None] = print_article,
    validator: Callable[[Optional[Article]], bool] = is_valid,
    user_agent: Optional[str] = None,
) -> list[Article]:
    """Resolve a parser for args, parse the source and print each article.

    Args:
        args: source type ("file" or "url"), path or URL, optional format
            ("newsapi" or "simple"). The format is guessed from the path when
            omitted.
        article_logger: Log sink for skipped articles and failures.
        printer: Called once per valid article, in input order.
        validator: Decides which parsed articles are kept.
        user_agent: User-Agent header for URL sources. Defaults to the
            user_agent of the current config.

    Returns:
        The printed articles.

    Raises:
        ValueError: Fewer than two arguments.
        ConfigError: Unknown source type or format, or an unsupported combination.
        ClientError: The source could not be read or parsed.
    """
    if args is None or len(args) < 2:
        raise ValueError("Insufficient arguments. Required: <source_type> <path_or_url> [format]")

    source_type, location = args[0], args[1]
    fmt = args[2] if len(args) > 2 and args[2] else detect_format(location, article_logger).value

    selection = resolve(source_type, fmt, location, user_agent=user_agent or get_config().user_agent)

    try:
        articles = parse_selection(selection, article_logger, validator)
    except ParseError as e:
        raise ClientError("Failed to parse articles") from e

    logger.info("Printing %d articles from %s", len(articles), location)
    for article in articles:
        printer(article)
    return articles
