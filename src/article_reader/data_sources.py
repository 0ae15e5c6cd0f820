"""Raw data sources: local files and HTTP GET."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

import requests

from article_reader.errors import FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "article-reader/1.0"
REQUEST_TIMEOUT = 30

_INVALID_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.URLRequired,
)


class DataSource(Protocol):
    def fetch(self) -> str:
        """Return the full raw text, or raise FetchError."""
        ...


class FileDataSource:
    """Reads the whole of a local file as UTF-8 text."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileDataSource({str(self.path)!r})"

    def fetch(self) -> str:
        logger.info("Reading %s", self.path)
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FetchError(FetchErrorKind.NOT_FOUND, f"File not found: {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(FetchErrorKind.IO_FAILURE, f"Could not read file: {self.path}") from e


class UrlDataSource:
    """Fetches a URL with a single synchronous GET request.

    The response body is returned whatever the status code; there are no
    retries. Without a session each fetch is a plain requests.get; pass one in
    to share connections.
    """

    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ):
        self.url = url
        self.session = session
        self.headers = {"User-Agent": user_agent or DEFAULT_USER_AGENT}

    def __repr__(self) -> str:
        return f"UrlDataSource({self.url!r})"

    def fetch(self) -> str:
        logger.info("Fetching %s", self.url)
        get = self.session.get if self.session is not None else requests.get
        try:
            response = get(self.url, headers=self.headers, timeout=REQUEST_TIMEOUT)
        except _INVALID_URL_ERRORS as e:
            raise FetchError(FetchErrorKind.INVALID_URL, f"Invalid URL format: {self.url}") from e
        except requests.RequestException as e:
            raise FetchError(
                FetchErrorKind.NETWORK_FAILURE, f"Error fetching data from URL: {self.url}"
            ) from e
        except KeyboardInterrupt as e:
            raise FetchError(FetchErrorKind.INTERRUPTED, "Request interrupted") from e

        logger.debug("GET %s -> %s", self.url, response.status_code)
        return response.text or ""
