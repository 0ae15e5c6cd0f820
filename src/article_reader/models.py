"""Data models for article_reader.

`Article` and `Source` are the normalized records handed to the validator and
printer. The pydantic models describe the two JSON shapes read from disk or
over HTTP and convert themselves into `Article`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


@dataclass(frozen=True)
class Source:
    """Publisher an article came from."""
    id: Optional[str]
    name: Optional[str]


@dataclass(frozen=True)
class Article:
    """Normalized article record."""
    title: Optional[str]
    description: Optional[str]
    published_at: Optional[str]
    url: Optional[str]
    source: Optional[Source]
    url_to_image: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


# Simple-format documents carry no publisher, so every article gets this one.
SIMPLE_SOURCE = Source(id="", name="Simple")


def _scalar_to_str(value: Any) -> Any:
    # JSON booleans bind to string fields as "true" and "false".
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


LaxStr = Annotated[Optional[str], BeforeValidator(_scalar_to_str)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )


class RawSource(_WireModel):
    """`source` block of a NewsAPI article."""

    id: LaxStr = None
    name: LaxStr = None


class RawArticle(_WireModel):
    """One entry of the NewsAPI `articles` array."""

    title: LaxStr = None
    description: LaxStr = None
    published_at: LaxStr = Field(default=None, alias="publishedAt")
    url: LaxStr = None
    url_to_image: LaxStr = Field(default=None, alias="urlToImage")
    content: LaxStr = None
    author: LaxStr = None
    source: Optional[RawSource] = None

    def to_article(self) -> Article:
        source = None
        if self.source is not None:
            source = Source(id=self.source.id, name=self.source.name)
        return Article(
            title=self.title,
            description=self.description,
            published_at=self.published_at,
            url=self.url,
            source=source,
            url_to_image=self.url_to_image,
            content=self.content,
            author=self.author,
        )


class NewsApiResponse(_WireModel):
    """NewsAPI envelope: `{"status", "totalResults", "articles"}`."""

    status: LaxStr = None
    total_results: Optional[int] = Field(default=0, alias="totalResults")
    articles: Optional[list[Optional[RawArticle]]] = None


class SimpleArticle(_WireModel):
    """Simple-format article: title, description, publishedAt and url only."""

    title: LaxStr = None
    description: LaxStr = None
    published_at: LaxStr = Field(default=None, alias="publishedAt")
    url: LaxStr = None

    def to_article(self) -> Article:
        return Article(
            title=self.title,
            description=self.description,
            published_at=self.published_at,
            url=self.url,
            source=SIMPLE_SOURCE,
        )
