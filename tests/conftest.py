"""Shared fixtures for article_reader tests."""

from pathlib import Path

import pytest

from article_reader.article_logger import ArticleLogger
from article_reader.config import reset_config
from article_reader.models import Article, Source


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "test.log"


@pytest.fixture
def article_logger(log_path: Path):
    logger = ArticleLogger(log_path)
    yield logger
    logger.close()


@pytest.fixture
def valid_article() -> Article:
    return Article(
        title="Test Title",
        description="Test Description",
        published_at="2024-01-01",
        url="https://test.com",
        source=Source(id="test-source", name="Test Source"),
    )


@pytest.fixture
def read_log(article_logger: ArticleLogger):
    """Close the shared logger so everything is flushed, then return the log text."""

    def _read() -> str:
        article_logger.close()
        return article_logger.log_file.read_text(encoding="utf-8")

    return _read
