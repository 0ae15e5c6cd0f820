"""Append-only log file for skipped articles and parse failures."""

from __future__ import annotations

import logging
from pathlib import Path

from article_reader.errors import LoggingError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _one_line(text: str) -> str:
    return " | ".join(line.strip() for line in text.splitlines() if line.strip())


class ArticleLogger:
    """Writes warnings and errors about a run to a log file.

    Use it as a context manager so the file handler is closed on every exit
    path:

        with ArticleLogger("parser_errors.log") as article_logger:
            ...

    With echo=True records also propagate to the console handlers set up by
    common.cli_helpers.setup_logging.
    """

    def __init__(self, log_file: str | Path, level: int | str = logging.WARNING, echo: bool = False):
        self.log_file = Path(log_file)
        self._logger = logging.getLogger(__name__)
        self._logger.setLevel(level)
        self._logger.propagate = echo
        try:
            self._handler: logging.FileHandler | None = logging.FileHandler(
                self.log_file, mode="a", encoding="utf-8"
            )
        except OSError as e:
            raise LoggingError(f"Failed to initialize file logger with file: {self.log_file}") from e
        self._handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._logger.addHandler(self._handler)

    def __enter__(self) -> "ArticleLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def echo(self) -> bool:
        return self._logger.propagate

    @property
    def closed(self) -> bool:
        return self._handler is None

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        """Log message with the exception text, then its cause on a second line."""
        if exc is None:
            self._logger.error(message)
            return

        detail = _one_line(str(exc))
        if detail:
            self._logger.error("%s: %s", message, detail)
        else:
            self._logger.error(message)

        cause = exc.__cause__
        if cause is not None:
            cause_detail = _one_line(str(cause))
            if cause_detail:
                self._logger.error("Caused by: %s", cause_detail)

    def close(self) -> None:
        if self._handler is None:
            return
        self._handler.flush()
        self._handler.close()
        self._logger.removeHandler(self._handler)
        self._handler = None
