"""Required-field validation for articles."""

from __future__ import annotations

from typing import Optional

from article_reader.models import Article, Source


def _is_not_empty(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def _has_valid_source(source: Optional[Source]) -> bool:
    return source is not None and _is_not_empty(source.name)


def is_valid(article: Optional[Article]) -> bool:
    """Return True if the article has every field needed to print it.

    title, description, published_at and url must be non-blank and the
    source must have a non-blank name. source.id is not checked.
    """
    return (
        article is not None
        and _is_not_empty(article.title)
        and _is_not_empty(article.description)
        and _is_not_empty(article.published_at)
        and _is_not_empty(article.url)
        and _has_valid_source(article.source)
    )
