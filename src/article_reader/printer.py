"""Console output for articles."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from article_reader.models import Article

MISSING = "N/A"


def _or_default(value: Optional[str]) -> str:
    return value if value is not None else MISSING


def render(article: Article) -> str:
    """Format an article as title, date, url and description lines."""
    return (
        f"title: {_or_default(article.title)}\n"
        f"at: {_or_default(article.published_at)}\n"
        f"url: {_or_default(article.url)}\n"
        f"{_or_default(article.description)}\n"
    )


def print_article(article: Article, stream: Optional[TextIO] = None) -> None:
    """Write one rendered article followed by a blank line."""
    out = stream if stream is not None else sys.stdout
    out.write(render(article))
    out.write("\n")
